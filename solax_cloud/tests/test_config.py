import pytest

from solax_cloud.config import Config, parse_brand
from solax_cloud.models.inverter import InverterBrand

CONF = """
[solax]
brand = qcells
token_id = 20220405101010123456789   # from the cloud portal
sn = SWABCDEFGH
timeout = 12.5

[logging]
console_level = WARNING
console_quiet = true
debug_modules = urllib3, solax.api
"""


def test_full_config(tmp_path):
    conf_path = tmp_path / "solax.conf"
    conf_path.write_text(CONF)
    cfg = Config.load(str(conf_path))

    assert cfg.solax.brand is InverterBrand.QCELLS
    assert cfg.solax.token_id == "20220405101010123456789"
    assert cfg.solax.sn == "SWABCDEFGH"
    assert cfg.solax.timeout == 12.5
    assert cfg.logging.console_level == "WARNING"
    assert cfg.logging.console_quiet is True
    assert cfg.logging.debug_modules == ["urllib3", "solax.api"]


def test_defaults(tmp_path):
    conf_path = tmp_path / "solax.conf"
    conf_path.write_text("[solax]\ntoken_id = T\nsn = S\n")
    cfg = Config.load(str(conf_path))

    assert cfg.solax.brand is InverterBrand.SOLAX
    assert cfg.solax.timeout == 20.0
    assert cfg.logging.console_level == "INFO"
    assert cfg.logging.debug_modules == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(str(tmp_path / "nope.conf"))


def test_missing_section(tmp_path):
    conf_path = tmp_path / "solax.conf"
    conf_path.write_text("[logging]\nconsole_level = INFO\n")
    with pytest.raises(ValueError, match=r"\[solax\]"):
        Config.load(str(conf_path))


def test_missing_serial(tmp_path):
    conf_path = tmp_path / "solax.conf"
    conf_path.write_text("[solax]\ntoken_id = T\n")
    with pytest.raises(ValueError, match="sn"):
        Config.load(str(conf_path))


def test_parse_brand():
    assert parse_brand("Solax") is InverterBrand.SOLAX
    assert parse_brand("Q-Cells") is InverterBrand.QCELLS
    assert parse_brand("1") is InverterBrand.QCELLS
    with pytest.raises(ValueError):
        parse_brand("growatt")
    with pytest.raises(ValueError):
        parse_brand("7")
