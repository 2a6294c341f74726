"""Configuration constants and settings for convy."""

import json
import os
from dataclasses import dataclass, field

__version__ = "0.1.0"

BASE_TYPES = frozenset({
    "feat", "fix", "build", "chore", "ci", "docs", "style", "refactor", "perf", "test"
})

CONFIG_FILENAME = ".convy.json"


class ConfigError(ValueError):
    """Raised when a configuration document cannot be turned into a Config."""


@dataclass(frozen=True)
class Config:
    """
    Validation settings for one project.

    Read-only once built; a single instance can be shared between calls.
    """

    additional_types: frozenset = field(default_factory=frozenset)
    require_breaking_change_footer: bool = True

    def __post_init__(self):
        # Accept any iterable of strings and store it as a frozenset.
        object.__setattr__(self, "additional_types", frozenset(self.additional_types))

    def allowed_types(self):
        """Return the type vocabulary: built-in types plus project types."""
        return BASE_TYPES | self.additional_types

    @classmethod
    def from_dict(cls, data):
        """Create a Config from a deserialized document, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError("Config document must be an object")

        extra = data.get("additional_types")
        if extra is None:
            extra = []
        if not isinstance(extra, list) or not all(isinstance(t, str) for t in extra):
            raise ConfigError("additional_types must be a list of strings")

        require = data.get("require_breaking_change_footer", True)
        if require is None:
            require = True
        if not isinstance(require, bool):
            raise ConfigError("require_breaking_change_footer must be a boolean")

        return cls(additional_types=frozenset(extra), require_breaking_change_footer=require)


def load_config(path=None):
    """
    Load configuration from a JSON file.

    With an explicit path the file must exist. Without one, CONFIG_FILENAME in the
    current directory is used when present; otherwise defaults are returned.
    """
    if path is None:
        if not os.path.isfile(CONFIG_FILENAME):
            return Config()
        path = CONFIG_FILENAME
    elif not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    return Config.from_dict(data)
