"""Tests for config system."""

import json
from pathlib import Path

import pytest

from tvpick.config import Config, parse_bool, parse_height


class TestConfigKeys:
    def test_keys(self):
        assert Config.keys() == [
            "inverted",
            "height",
            "highlight_style",
            "selected_style",
            "marker",
            "log_file",
        ]

    def test_every_key_is_described(self):
        for key in Config.keys():
            assert Config.describe(key)

    def test_parse_by_key_type(self):
        assert Config.parse("inverted", "on") is True
        assert Config.parse("height", "12") == 12
        assert Config.parse("marker", "*") == "*"

    def test_parse_unknown_key(self):
        with pytest.raises(KeyError):
            Config.parse("colour", "red")

    @pytest.mark.parametrize("value", ["maybe", "2"])
    def test_parse_bool_rejects_garbage(self, value):
        with pytest.raises(ValueError):
            parse_bool(value)

    @pytest.mark.parametrize("value", ["tall", "-1"])
    def test_parse_height_rejects_garbage(self, value):
        with pytest.raises(ValueError):
            parse_height(value)


class TestConfigDefaults:
    def test_defaults(self):
        config = Config(config_dir=Path("/tmp/tvpick-test-nonexistent"))
        assert config.inverted is False
        assert config.height == 0
        assert config.marker == ">"

    def test_unknown_attribute_raises(self):
        config = Config(config_dir=Path("/tmp/tvpick-test-nonexistent"))
        with pytest.raises(AttributeError):
            config.nope

    def test_config_file_path(self, tmp_path: Path):
        assert Config(config_dir=tmp_path).config_file == tmp_path / "config.json"


class TestConfigLoad:
    def test_load_from_file(self, tmp_path: Path):
        config_dir = tmp_path / "tvpick"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"inverted": True, "height": 12}))

        config = Config.load(config_dir)

        assert config.inverted is True
        assert config.height == 12

    def test_load_nonexistent_uses_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path / "nonexistent")
        assert config.highlight_style == "bold yellow"

    def test_unknown_file_keys_ignored(self, tmp_path: Path):
        (tmp_path / "config.json").write_text(json.dumps({"colour": "red", "marker": "*"}))
        config = Config.load(tmp_path)
        assert config.marker == "*"
        assert not hasattr(config, "colour")


class TestConfigEnvOverrides:
    def test_env_overrides_bool(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TVPICK_INVERTED", "yes")
        config = Config.load(tmp_path)
        assert config.inverted is True

    def test_env_overrides_int(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TVPICK_HEIGHT", "15")
        config = Config.load(tmp_path)
        assert config.height == 15

    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "config.json").write_text(json.dumps({"marker": "*"}))
        monkeypatch.setenv("TVPICK_MARKER", "→")
        config = Config.load(tmp_path)
        assert config.marker == "→"

    def test_bad_env_value_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TVPICK_HEIGHT", "tall")
        config = Config.load(tmp_path)
        assert config.height == 0


class TestConfigPersistence:
    def test_set_and_save(self, tmp_path: Path):
        config_dir = tmp_path / "tvpick"
        config = Config.load(config_dir)

        config.set("inverted", True)

        config2 = Config.load(config_dir)
        assert config2.inverted is True

    def test_set_keeps_other_file_values(self, tmp_path: Path):
        (tmp_path / "config.json").write_text(json.dumps({"marker": "*"}))
        Config.load(tmp_path).set("height", 4)

        data = json.loads((tmp_path / "config.json").read_text())
        assert data == {"marker": "*", "height": 4}

    def test_env_values_not_saved(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TVPICK_MARKER", "→")
        Config.load(tmp_path).set("height", 4)

        data = json.loads((tmp_path / "config.json").read_text())
        assert data == {"height": 4}

    def test_override_is_not_saved(self, tmp_path: Path):
        config = Config.load(tmp_path)
        config.override("height", 7)
        assert config.height == 7

        assert Config.load(tmp_path).height == 0
        assert not (tmp_path / "config.json").exists()

    def test_override_unknown_key(self, tmp_path: Path):
        with pytest.raises(KeyError):
            Config.load(tmp_path).override("colour", "red")

class TestConfigDefaultDir:
    def test_get_default_dir(self, monkeypatch):
        from tvpick.config import get_default_config_dir

        monkeypatch.delenv("TVPICK_CONFIG_DIR", raising=False)
        assert get_default_config_dir() == Path.home() / ".config" / "tvpick"

    def test_get_default_dir_respects_env_var(self, tmp_path, monkeypatch):
        from tvpick.config import get_default_config_dir

        custom_dir = tmp_path / "custom"
        monkeypatch.setenv("TVPICK_CONFIG_DIR", str(custom_dir))

        assert get_default_config_dir() == custom_dir


class TestConfigCaching:
    def test_config_load_caches_result(self, config_dir):
        from tvpick import config

        cfg1 = config.Config.load()
        cfg2 = config.Config.load()

        assert cfg1 is cfg2

    def test_config_cache_can_be_cleared(self, config_dir):
        from tvpick import config

        cfg1 = config.Config.load()
        config.clear_config_cache()
        cfg2 = config.Config.load()

        assert cfg1 is not cfg2
