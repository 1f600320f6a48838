# tests/test_config.py
"""
测试配置加载 (dict / TOML)。
"""

import pytest

from gree_core.config import (
    GreeConfig,
    create_config_from_dict,
    load_config_from_toml,
)
from gree_core.exceptions import ConfigError

# =========================================================================
# Dict
# =========================================================================


def test_config_defaults():
    config = create_config_from_dict({})

    assert config == GreeConfig()
    assert config.client_id == "app"
    assert config.uid == 0
    assert config.strict_status is False


def test_config_happy_path():
    config = create_config_from_dict(
        {
            "client_id": "hass",
            "uid": "5",
            "strict_status": "yes",
        }
    )
    assert config.client_id == "hass"
    assert config.uid == 5
    assert config.strict_status is True


@pytest.mark.parametrize(
    "raw",
    [
        {"uid": "abc"},
        {"uid": True},
        {"strict_status": "maybe"},
        {"client_id": ""},
        {"client_id": 7},
        {"status_columns": ["Pow"]},
        {"clientid": "typo"},
    ],
)
def test_config_invalid_values(raw):
    with pytest.raises(ConfigError):
        create_config_from_dict(raw)


def test_config_not_a_table():
    with pytest.raises(ConfigError):
        create_config_from_dict(["uid", 1])  # type: ignore[arg-type]


def test_config_is_frozen():
    config = GreeConfig()
    with pytest.raises(AttributeError):
        config.uid = 1  # type: ignore[misc]


def test_config_repr():
    assert "cid='app'" in repr(GreeConfig())


# =========================================================================
# TOML
# =========================================================================


def test_load_toml_profile(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text(
        '[profile.default]\nclient_id = "app"\n\n'
        '[profile.office]\nclient_id = "office"\nstrict_status = true\n',
        encoding="utf-8",
    )
    config = load_config_from_toml(path, profile="office")
    assert config.client_id == "office"
    assert config.strict_status is True


def test_load_toml_missing_profile(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text("[profile.default]\nuid = 0\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_from_toml(path, profile="nope")


def test_load_toml_missing_default_profile_is_error(tmp_path):
    # 显式请求的预设不存在时不回退到默认配置
    path = tmp_path / "gree.toml"
    path.write_text('[gree]\nclient_id = "hass"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="profile.default"):
        load_config_from_toml(path, profile="default")


def test_load_toml_gree_section(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text('[gree]\nclient_id = "hass"\nuid = 9\n', encoding="utf-8")
    config = load_config_from_toml(path)
    assert config.client_id == "hass"
    assert config.uid == 9


def test_load_toml_without_gree_section(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text('[other]\nname = "x"\n', encoding="utf-8")
    assert load_config_from_toml(path) == GreeConfig()


def test_load_toml_unknown_key(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text('[gree]\nstatus_columns = ["Pow"]\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="status_columns"):
        load_config_from_toml(path)


def test_load_toml_not_found(tmp_path):
    with pytest.raises(ConfigError):
        load_config_from_toml(tmp_path / "missing.toml")


def test_load_toml_broken(tmp_path):
    path = tmp_path / "gree.toml"
    path.write_text("uid = = 1", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_from_toml(path)
