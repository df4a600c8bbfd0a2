"""Shared test fixtures for nbpopulate."""

import copy

import pytest

from helpers import LISTING_URL, RAW_BASE, SAMPLE_NOTEBOOK, FakeGitHub, listing_item
from nbpopulate.config.models import PopulateConfig
from nbpopulate.contents.memory import MemoryContents


@pytest.fixture
def sample_notebook():
    return copy.deepcopy(SAMPLE_NOTEBOOK)


@pytest.fixture
def memory_contents():
    return MemoryContents()


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def sample_config():
    return PopulateConfig()


@pytest.fixture
def seeded_github(fake_github, sample_notebook):
    """Remote docs/ with one notebook, a text file and a sub-directory."""
    fake_github.add(
        LISTING_URL,
        json=[
            listing_item("01_intro.ipynb"),
            listing_item("requirements.txt"),
            listing_item("resources", type="dir"),
        ],
    )
    fake_github.add(f"{RAW_BASE}/01_intro.ipynb", json=sample_notebook)
    return fake_github
