import logging
from pathlib import Path

from propreg.core.settings import PACKAGE_DATA_DIR, Settings, load_config_file


def test_defaults_point_at_bundled_data():
    settings = Settings.from_env({})

    assert settings.data_dir == PACKAGE_DATA_DIR
    assert settings.properties_path == PACKAGE_DATA_DIR / "properties.json"
    assert settings.svg_path == PACKAGE_DATA_DIR / "svg.yaml"
    assert settings.compat_path.exists()
    assert settings.port == 8010


def test_environment_overrides(tmp_path):
    settings = Settings.from_env(
        {
            "PROPREG_DATA_DIR": str(tmp_path),
            "PROPREG_COMPAT_FILE": "/srv/bcd/data.json",
            "PROPREG_LOG_LEVEL": "debug",
            "PROPREG_PORT": "9000",
            "PROPREG_HOST": "  ",
        }
    )

    assert settings.properties_path == tmp_path / "properties.json"
    assert settings.compat_path == Path("/srv/bcd/data.json")
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000
    assert settings.host == "127.0.0.1"


def test_config_file_then_environment(tmp_path):
    config = tmp_path / "propreg.yaml"
    config.write_text("data_dir: /srv/mdn\nsyntaxes_file: css/syntaxes.json\nport: 8100\n", encoding="utf-8")

    settings = Settings.from_env({"PROPREG_CONFIG_FILE": str(config), "PROPREG_PORT": "8200"})

    assert settings.syntaxes_path == Path("/srv/mdn/css/syntaxes.json")
    assert settings.port == 8200


def test_json_config_file(tmp_path):
    config = tmp_path / "propreg.json"
    config.write_text('{"svg_file": "svg.json"}', encoding="utf-8")

    assert load_config_file(str(config)) == {"svg_file": "svg.json"}


def test_missing_config_file_is_ignored(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="propreg.settings"):
        assert load_config_file(str(tmp_path / "nope.yaml")) == {}
    assert "does not exist" in caplog.text


def test_unreadable_config_file_is_ignored(tmp_path, caplog):
    config = tmp_path / "list.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="propreg.settings"):
        assert load_config_file(str(config)) == {}
    assert "Ignoring unreadable config file" in caplog.text


def test_unknown_settings_are_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="propreg.settings"):
        settings = Settings.from_mapping({"colour": "red", "svg_file": "svg.json"})

    assert settings.svg_file == "svg.json"
    assert "colour" in caplog.text
