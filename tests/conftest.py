from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.sdk_builder import SdkBuilder


@pytest.fixture
def sdk_builder(tmp_path: Path) -> SdkBuilder:
    """Provide a throwaway SDK workspace rooted at the pytest tmp_path."""
    return SdkBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_wfcdocs_logger() -> Iterator[None]:
    yield
    # CLI tests install handlers bound to the captured streams of that test.
    logger = logging.getLogger("wfcdocs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
