from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.collection_builder import CollectionBuilder


@pytest.fixture
def collection(tmp_path: Path) -> CollectionBuilder:
    """Provide a reusable collection builder rooted at the pytest tmp_path."""
    return CollectionBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_brudoc_logger():
    """Undo CLI logging setup so caplog sees brudoc records in every test."""
    yield
    logger = logging.getLogger("brudoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
