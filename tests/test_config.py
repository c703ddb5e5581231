import importlib
import os
import pytest
from unittest.mock import patch

import backend.config

def reload_config(**env):
    with patch.dict(os.environ, env):
        return importlib.reload(backend.config)

@pytest.fixture(autouse=True)
def restore_config():
    yield
    importlib.reload(backend.config)

def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = importlib.reload(backend.config)
    assert config.INITIALS_FONT_FAMILY == "Arial"
    assert config.INITIALS_DEFAULT_BACKGROUND == "gray"
    assert config.INITIALS_PADDING == 20
    assert config.INITIALS_PADDING_THRESHOLD == 100
    assert config.INITIALS_FIT_FRACTION == 1.0
    assert config.INITIALS_LOG_LEVEL == "INFO"

def test_overrides():
    config = reload_config(INITIALS_PADDING="8", INITIALS_FIT_FRACTION="0.8", INITIALS_LOG_LEVEL="debug")
    assert config.INITIALS_PADDING == 8
    assert config.INITIALS_FIT_FRACTION == 0.8
    assert config.INITIALS_LOG_LEVEL == "DEBUG"

def test_invalid_integer():
    with pytest.raises(ValueError):
        reload_config(INITIALS_PADDING="lots")

def test_negative_padding():
    with pytest.raises(ValueError):
        reload_config(INITIALS_PADDING="-1")

@pytest.mark.parametrize("fraction", ["0", "1.5", "abc"])
def test_invalid_fraction(fraction):
    with pytest.raises(ValueError):
        reload_config(INITIALS_FIT_FRACTION=fraction)

@pytest.mark.parametrize("level", ["VERBOSE", "basic_format", ""])
def test_invalid_log_level(level):
    with pytest.raises(ValueError):
        reload_config(INITIALS_LOG_LEVEL=level)
