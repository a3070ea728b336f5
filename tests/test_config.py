# tests/test_config.py
from metagate.config import Config, DEFAULT_IPFS_GATEWAY, IPFS_GATEWAY_ENV
import yaml


def test_config_load_and_access(tmp_path):
    cfg_dict = {"a": 1, "b": {"c": 2}}
    p = tmp_path / "cfg.yaml"
    p.write_text(yaml.safe_dump(cfg_dict), encoding="utf-8")

    cfg = Config.load(str(p))
    assert cfg["a"] == 1
    assert cfg["b"]["c"] == 2
    assert cfg.get("missing", "x") == "x"
    assert cfg.variables == {}


def test_config_load_empty_file(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    cfg = Config.load(str(p))
    assert cfg.data == {}
    assert cfg.ipfs_gateway == DEFAULT_IPFS_GATEWAY


def test_config_default_gateway():
    assert Config.default().ipfs_gateway == "https://ipfs.io/ipfs/"
    assert Config().ipfs_gateway == DEFAULT_IPFS_GATEWAY


def test_config_gateway_from_yaml(config_file):
    cfg = Config.load(str(config_file))
    assert cfg.ipfs_gateway == "https://custom-ipfs.gateway/"


def test_config_gateway_from_env(monkeypatch):
    monkeypatch.setenv(IPFS_GATEWAY_ENV, "https://env.gateway/ipfs/")
    assert Config().ipfs_gateway == "https://env.gateway/ipfs/"
    # explicit config wins over the environment
    assert Config.default().ipfs_gateway == DEFAULT_IPFS_GATEWAY


def test_config_gateway_empty_string_is_honoured():
    cfg = Config({"variables": {"ipfs_gateway": ""}})
    assert cfg.ipfs_gateway == ""
