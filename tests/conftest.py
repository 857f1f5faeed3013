import pytest

from a11y_auditor.managers.config_manager import config_manager

VALID_DOCUMENT = (
    '<!DOCTYPE html>'
    '<html lang="en">'
    '<head><meta charset="utf-8"><title>Home</title></head>'
    '<body><main><h1>Welcome</h1><img src="cat.png" alt="A sleeping cat"></main></body>'
    '</html>'
)


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from, and leaves behind, the packaged settings."""
    config_manager.reset()
    yield
    config_manager.reset()


@pytest.fixture
def valid_html():
    return VALID_DOCUMENT
