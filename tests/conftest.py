import sys
from pathlib import Path

import pytest
from loguru import logger


root = Path(__file__).resolve().parents[1]
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _reset_loguru():
    # the CLI swaps loguru sinks; restore a plain stderr sink afterwards
    yield
    logger.remove()
    logger.add(sys.stderr)
