import json

import pytest

from IntCalc import config_manager


@pytest.fixture
def config_paths(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    strings_file = tmp_path / "ui_strings.json"
    monkeypatch.setattr(config_manager, "config_json", config_file)
    monkeypatch.setattr(config_manager, "ui_strings", strings_file)
    return config_file, strings_file


def test_missing_config_falls_back_to_defaults(config_paths):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("darkmode") is False


def test_broken_json_falls_back_to_defaults(config_paths):
    config_file, _ = config_paths
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_saved_values_override_defaults(config_paths):
    config_file, _ = config_paths
    config_file.write_text(json.dumps({"darkmode": True}), encoding="utf-8")

    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["hold_repeat"] is True


def test_unknown_key_returns_zero(config_paths):
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_and_reload(config_paths):
    settings = config_manager.load_setting_value("all")
    settings["debug"] = True

    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("debug") is True


def test_save_failure_returns_empty_dict(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_descriptions(config_paths):
    _, strings_file = config_paths
    assert config_manager.load_setting_description("all") == {}

    strings_file.write_text(json.dumps({"darkmode": "Dark mode"}), encoding="utf-8")
    assert config_manager.load_setting_description("darkmode") == "Dark mode"
    assert config_manager.load_setting_description("all") == {"darkmode": "Dark mode"}


def test_shipped_files_are_in_sync():
    values = config_manager.load_setting_value("all")
    descriptions = config_manager.load_setting_description("all")
    assert set(descriptions) == set(values)


def test_settings_files_live_in_the_package():
    package_dir = config_manager.PACKAGE_DIR
    assert config_manager.config_json.parent == package_dir
    assert config_manager.ui_strings.parent == package_dir
    assert (package_dir / "MathEngine.py").exists()


def test_no_required_file_is_missing():
    assert config_manager.missing_files() == []


def test_required_files_cover_every_module():
    modules = {path.name for path in config_manager.PACKAGE_DIR.glob("*.py")}
    assert modules <= set(config_manager.REQUIRED_FILES)
    assert "error.py" in config_manager.REQUIRED_FILES


def test_missing_files_reports_absent_entries(tmp_path, monkeypatch):
    (tmp_path / "config.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(config_manager, "PACKAGE_DIR", tmp_path)
    missing = config_manager.missing_files()
    assert "config.json" not in missing
    assert "error.py" in missing
    assert "ui_strings.json" in missing
