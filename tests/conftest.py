# tests/conftest.py
from __future__ import annotations
import logging
import pytest
import yaml

from metagate.config import Config, IPFS_GATEWAY_ENV


@pytest.fixture(autouse=True)
def no_gateway_env(monkeypatch):
    """Keep a developer's IPFS_GATEWAY out of the tests.

    setenv first so teardown also drops a value a test loaded from .env.
    """
    monkeypatch.setenv(IPFS_GATEWAY_ENV, "")
    monkeypatch.delenv(IPFS_GATEWAY_ENV)


@pytest.fixture
def tmp_config(tmp_path) -> Config:
    cfg = {
        "variables": {
            "ipfs_gateway": "https://custom-ipfs.gateway/",
        },
        "logging": {
            "level": "DEBUG",
            "file": str(tmp_path / "logs" / "metagate.log"),
            "console": False,
        },
    }
    return Config(cfg)


@pytest.fixture
def config_file(tmp_path, tmp_config):
    p = tmp_path / "config.yaml"
    p.write_text(yaml.safe_dump(tmp_config.data), encoding="utf-8")
    return p


@pytest.fixture
def restore_logging():
    """dictConfig replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
