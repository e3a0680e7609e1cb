from __future__ import annotations

import json

import pytest

from resgen.codegen.core.config import ConfigError, ConfigManager, GeneratorConfig, load_config


def test_defaults():
    config = load_config()

    assert config.use_final is True
    assert config.package_name is None
    assert config.custom == {}


def test_overrides_win_over_file(tmp_path):
    path = tmp_path / "resgen.json"
    path.write_text(json.dumps({"use_final": False, "package_name": "com.file"}), encoding="utf-8")

    config = load_config("java", custom_config={"package_name": "com.cli"}, config_file=path)

    assert config.use_final is False
    assert config.package_name == "com.cli"


def test_unknown_keys_go_to_custom(tmp_path):
    config = load_config(custom_config={"banner": "x"})

    assert config.custom == {"banner": "x"}
    assert ConfigManager().validate_config(config) == ["Unknown configuration key: banner"]


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "absent.json")


def test_non_json_suffix(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("use_final: false", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{nope", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


def test_non_object_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=path)


def test_use_final_must_be_bool():
    with pytest.raises(ConfigError, match="use_final"):
        load_config(custom_config={"use_final": "no"})


def test_validate_flags_bad_package_name():
    warnings = ConfigManager().validate_config(GeneratorConfig(package_name="com.class.app"))

    assert warnings == ["'class' is a Java reserved word in 'com.class.app'"]


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    path = tmp_path / "saved.json"
    manager.save_config(GeneratorConfig(use_final=False, package_name="com.x", custom={"k": 1}), path)

    reloaded = manager.get_config("java", config_file=path)

    assert reloaded.use_final is False
    assert reloaded.package_name == "com.x"
    assert reloaded.custom == {"k": 1}


def test_manager_knows_only_java_defaults():
    manager = ConfigManager()

    assert manager.get_config("java") == GeneratorConfig()
    assert manager.get_config("kotlin") == GeneratorConfig()
    assert not hasattr(manager, "list_languages")
