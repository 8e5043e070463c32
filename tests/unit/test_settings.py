"""Tests for the settings package."""

import json
import logging

import pytest

from rapport.settings import LOG_LEVELS, Settings
from rapport.settings._settings import _atomic_write_json, _merge_with_defaults
from rapport.utils.exceptions import ConfigError


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Defaults match the built-in behaviour."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_file == "default"
        assert settings.default_health_score == 50
        assert settings.relationship_validation_enabled is True
        assert settings.strict_lookups is False
        assert settings.seed_sample_data is True

    def test_default_log_level_is_known(self):
        """The default log level is one of LOG_LEVELS."""
        assert Settings().log_level in LOG_LEVELS


class TestSettingsValidation:
    """Tests for Settings.validate()."""

    def test_valid_defaults(self):
        """Default settings validate without changes."""
        assert Settings().validate() is False

    def test_log_level_normalized(self):
        """Lower-case log levels are upper-cased and reported as changed."""
        settings = Settings(log_level="debug")
        assert settings.validate() is True
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log_level must be one of"):
            Settings(log_level="LOUD").validate()

    @pytest.mark.parametrize("score", [-101, 101, 1000])
    def test_health_out_of_range(self, score):
        """default_health_score must be within the clamp bounds."""
        with pytest.raises(ValueError, match="between -100 and 100"):
            Settings(default_health_score=score).validate()

    @pytest.mark.parametrize("score", [True, 50.5, "50"])
    def test_health_wrong_type(self, score):
        """default_health_score must be a plain integer."""
        with pytest.raises(ValueError, match="must be an integer"):
            Settings(default_health_score=score).validate()

    @pytest.mark.parametrize("field", ["layout_width", "layout_height"])
    def test_layout_must_be_positive(self, field):
        """The layout box needs a positive size."""
        with pytest.raises(ValueError, match=f"{field} must be positive"):
            Settings(**{field: 0}).validate()


class TestSettingsLoadSave:
    """Tests for load() and save()."""

    def test_load_creates_file(self, isolate_settings_file):
        """Loading with no file writes the defaults."""
        settings = Settings.load()

        assert settings == Settings()
        assert json.loads(isolate_settings_file.read_text())["default_health_score"] == 50

    def test_save_and_reload(self, isolate_settings_file):
        """Saved values survive a reload."""
        Settings(default_health_score=20, strict_lookups=True).save()

        loaded = Settings.load(use_cache=False)

        assert loaded.default_health_score == 20
        assert loaded.strict_lookups is True

    def test_save_validates(self, isolate_settings_file):
        """Invalid settings are not written."""
        with pytest.raises(ValueError):
            Settings(default_health_score=500).save()
        assert not isolate_settings_file.exists()

    def test_load_uses_cache(self):
        """Repeated loads return the cached instance."""
        assert Settings.load() is Settings.load()

    def test_clear_cache(self):
        """clear_cache forces the next load to read again."""
        first = Settings.load()
        Settings.clear_cache()
        assert Settings.load() is not first

    def test_load_merges_new_and_obsolete_keys(self, isolate_settings_file):
        """Missing keys get defaults and unknown keys are dropped."""
        isolate_settings_file.write_text(json.dumps({"strict_lookups": True, "old_key": 1}))

        settings = Settings.load()

        assert settings.strict_lookups is True
        assert settings.default_health_score == 50
        stored = json.loads(isolate_settings_file.read_text())
        assert "old_key" not in stored
        assert stored["strict_lookups"] is True

    def test_load_corrupt_file(self, isolate_settings_file, caplog):
        """Invalid JSON is backed up and replaced with defaults."""
        isolate_settings_file.write_text("{not json")

        with caplog.at_level(logging.ERROR):
            settings = Settings.load()

        assert settings == Settings()
        assert isolate_settings_file.with_suffix(".json.corrupt").exists()
        assert "Corrupted settings file" in caplog.text

    def test_load_non_object_json(self, isolate_settings_file):
        """A JSON value that is not an object is treated as corrupt."""
        isolate_settings_file.write_text("[1, 2, 3]")

        assert Settings.load() == Settings()
        assert isolate_settings_file.with_suffix(".json.corrupt").exists()

    def test_load_invalid_value(self, isolate_settings_file):
        """Out-of-range stored values raise ConfigError."""
        isolate_settings_file.write_text(json.dumps({"default_health_score": 300}))
        with pytest.raises(ConfigError, match="between -100 and 100"):
            Settings.load()

    def test_load_invalid_type(self, isolate_settings_file):
        """Values of the wrong type raise ConfigError."""
        isolate_settings_file.write_text(json.dumps({"log_level": 3}))
        with pytest.raises(ConfigError):
            Settings.load()

    def test_load_normalizes_and_rewrites(self, isolate_settings_file):
        """Normalized values are written back."""
        data = {**Settings().__dict__, "log_level": "warning"}
        isolate_settings_file.write_text(json.dumps(data))

        assert Settings.load().log_level == "WARNING"
        assert json.loads(isolate_settings_file.read_text())["log_level"] == "WARNING"


class TestHelpers:
    """Tests for module-level helpers."""

    def test_merge_with_defaults_unchanged(self):
        """A complete dict is left alone."""
        data = dict(Settings().__dict__)
        assert _merge_with_defaults(data, Settings) is False

    def test_atomic_write_json(self, tmp_path):
        """JSON is written and parent directories are created."""
        target = tmp_path / "nested" / "out.json"
        _atomic_write_json(target, {"a": 1})
        assert json.loads(target.read_text()) == {"a": 1}
        assert list(target.parent.glob("*.tmp")) == []
