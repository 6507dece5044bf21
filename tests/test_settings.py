"""
Tests for SemtreeSettings configuration.
"""

import pytest

from semtree.exceptions import ErrorLevel
from semtree.settings import SemtreeSettings


class TestSemtreeSettings:
    """Test settings defaults and constructors."""

    def test_default_values(self):
        """Defaults match the library's standard diagnostics."""
        settings = SemtreeSettings()

        assert settings.max_diagnostic_length == 200
        assert settings.error_level is ErrorLevel.DEVELOPER
        assert settings.reject_unknown_kinds is True

    def test_from_dict_partial_override(self):
        """Only given keys override defaults."""
        settings = SemtreeSettings.from_dict({"max_diagnostic_length": 80})

        assert settings.max_diagnostic_length == 80
        assert settings.error_level is ErrorLevel.DEVELOPER

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys are dropped silently."""
        settings = SemtreeSettings.from_dict({"colour": "blue"})
        assert settings == SemtreeSettings()

    def test_error_level_from_string(self):
        """error_level accepts its string value in any case."""
        assert SemtreeSettings.from_dict({"error_level": "USER"}).error_level is (
            ErrorLevel.USER
        )

    def test_invalid_error_level(self):
        """Unknown error levels are rejected."""
        with pytest.raises(ValueError):
            SemtreeSettings(error_level="verbose")

    def test_too_small_diagnostic_length(self):
        """The limit must leave room for an ellipsis."""
        with pytest.raises(ValueError):
            SemtreeSettings(max_diagnostic_length=3)

    def test_from_yaml(self, tmp_path):
        """Settings load from a YAML file."""
        config_file = tmp_path / "semtree.yaml"
        config_file.write_text(
            "max_diagnostic_length: 120\nerror_level: user\nreject_unknown_kinds: false\n"
        )

        settings = SemtreeSettings.from_yaml(config_file)

        assert settings.max_diagnostic_length == 120
        assert settings.error_level is ErrorLevel.USER
        assert settings.reject_unknown_kinds is False

    def test_from_empty_yaml(self, tmp_path):
        """An empty YAML file yields defaults."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert SemtreeSettings.from_yaml(str(config_file)) == SemtreeSettings()
