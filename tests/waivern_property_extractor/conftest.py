"""Shared fixtures for property extractor tests."""

import logging
from collections.abc import Callable, Generator

import pytest

from waivern_property_extractor import PropertyExtractor, SourceDocument


@pytest.fixture
def extractor() -> PropertyExtractor:
    """Extractor with the default configuration."""
    return PropertyExtractor()


@pytest.fixture
def make_document() -> Callable[[str], SourceDocument]:
    """Build an in-memory document from PHP source."""
    return SourceDocument


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None]:
    """Restore root and package logger state changed by setup_logging()."""
    root = logging.getLogger()
    package = logging.getLogger("waivern_property_extractor")
    saved = (
        root.level,
        list(root.handlers),
        package.level,
        list(package.handlers),
        package.propagate,
    )

    yield

    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    package.setLevel(saved[2])
    package.handlers[:] = saved[3]
    package.propagate = saved[4]
