# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: pytest setup, quiets loguru while testing
"""
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Only warnings and errors from loguru while testing"""
    logger.remove()
    handler_id = logger.add(sys.stderr, level="WARNING")
    yield
    try:
        logger.remove(handler_id)
    except ValueError:
        # The CLI replaces all sinks on its own
        pass
