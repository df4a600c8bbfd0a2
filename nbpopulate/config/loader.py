"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PopulateConfig

_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [Path(cli_path)] if cli_path else []
    paths.append(Path("./nbpopulate.yaml"))
    paths.append(Path.home() / ".nbpopulate" / "config.yaml")
    return paths


def load_config(cli_path: str | None = None) -> PopulateConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An empty file is skipped so the next candidate (or the defaults) applies.
    """
    for path in config_search_paths(cli_path):
        if not path.exists():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        try:
            return PopulateConfig(**_expand_env_vars(raw))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return PopulateConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} and ${VAR:-default} references in strings.

    Unset variables without a default expand to "".
    """
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `nbpopulate config init`
DEFAULT_CONFIG_TEMPLATE = """\
# nbpopulate.yaml

# Bundled assets copied into the workspace on every run
local:
  assets_root: "files"

# Destination
workspace:
  root: "notebooks"
  contents_root: "."           # directory served as the content store

# Remote notebooks (GitHub contents API, single directory, no recursion)
remote:
  enabled: true
  repo: "arogozhnikov/einops"
  directory: "docs"
  ref: "main"
  extension: ".ipynb"
  api_url: "https://api.github.com"
  token_env: "GITHUB_TOKEN"    # optional, raises the API rate limit
  # timeout: 30                # seconds; unset means wait indefinitely

# Logging
log_level: "info"              # debug | info | warn | error
"""
