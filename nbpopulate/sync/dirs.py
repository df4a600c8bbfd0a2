"""Directory materialization in a content store."""

from __future__ import annotations

import logging

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.contents.errors import EntryNotFound
from nbpopulate.paths import join_path, parent_path, split_path

logger = logging.getLogger(__name__)


async def ensure_dir(contents: ContentsProvider, path: str) -> None:
    """Make sure ``path`` exists, creating missing ancestors first.

    Any existing entry at ``path`` counts, whatever its type. The contents
    API cannot create a directory under a chosen name, so each missing
    level is created as an untitled placeholder in its parent and then
    renamed into place. Create and rename failures propagate.
    """
    path = join_path(path)
    if not path:
        return
    try:
        await contents.get(path)
        return
    except EntryNotFound:
        pass

    parent = parent_path(path)
    if len(split_path(path)) > 1:
        await ensure_dir(contents, parent)
    placeholder = await contents.new_untitled(parent, type="directory")
    await contents.rename(placeholder.path, path)
    logger.debug("created directory %s", path)
