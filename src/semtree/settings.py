"""
Diagnostic and validation settings for semtree.

This module provides configuration for how strictly semantic trees are
validated and how much detail validation errors carry.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from semtree.exceptions.core import DEFAULT_MAX_DIAGNOSTIC_LENGTH, ErrorLevel


@dataclass
class SemtreeSettings:
    """Configuration for validation and error reporting.

    Can be created from dict, YAML, or Path with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        settings = SemtreeSettings()

        # Partial override from dict
        settings = SemtreeSettings.from_dict({"error_level": "user"})

        # From YAML file
        settings = SemtreeSettings.from_yaml("semtree.yaml")
    """

    # Longest rendering of a node included in an error message
    max_diagnostic_length: int = DEFAULT_MAX_DIAGNOSTIC_LENGTH

    # USER hides raw DOM node renderings from validation errors
    error_level: ErrorLevel = ErrorLevel.DEVELOPER

    # When False, Contains constraints only check the kinds they list
    reject_unknown_kinds: bool = True

    def __post_init__(self):
        if isinstance(self.error_level, str):
            self.error_level = ErrorLevel(self.error_level.lower())
        if self.max_diagnostic_length < 4:
            raise ValueError(
                f"max_diagnostic_length must be at least 4, got {self.max_diagnostic_length}"
            )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> SemtreeSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            SemtreeSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> SemtreeSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            SemtreeSettings instance with YAML overrides

        Example YAML:
            max_diagnostic_length: 120
            error_level: user
            reject_unknown_kinds: false
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
