"""Configure pytest environment for all tests."""

import logging

import pytest

SHIMKIT_ENV_KEYS = (
    "SHIMKIT_CONFIG",
    "SHIMKIT_LOGGING_LEVEL",
    "SHIMKIT_LOGGING_FORMAT",
    "SHIMKIT_RESOLVER_VENDOR_PREFIXES",
)


@pytest.fixture(autouse=True)
def clean_shimkit_env(monkeypatch):
    """Keep the developer's environment out of config loading."""
    for key in SHIMKIT_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_shimkit_logging():
    """Undo handlers and levels installed by configure_logging."""
    yield
    for name in ("shimkit", "shimkit.core.resolver", "shimkit.core.composition"):
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        for handler in list(logger.handlers):
            if getattr(handler, "_shimkit_handler", False):
                logger.removeHandler(handler)


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "shimkit.yaml"
        path.write_text(text)
        return str(path)

    return _write
