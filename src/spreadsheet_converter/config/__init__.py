"""Typed, validated configuration for spreadsheet imports.

Values come from environment variables and an optional JSON settings file,
with fail-fast reading and type casting.
"""

from ._casters import Choices, cast_flag
from ._reader import config
from ._repository import (
    SETTINGS_FILE_ENV,
    ConfigRepository,
    EnvConfigRepository,
    FakeConfigRepository,
)
from ._settings import ENV_PREFIX, ImportSettings
from ._testing import override_config
from ._types import ConfigError, UndefinedValueError

__all__ = [
    # Core
    "config",
    "ConfigError",
    "UndefinedValueError",
    "Choices",
    "cast_flag",
    # Typed settings
    "ImportSettings",
    "ENV_PREFIX",
    # Sources
    "ConfigRepository",
    "EnvConfigRepository",
    "SETTINGS_FILE_ENV",
    # Testing
    "override_config",
    "FakeConfigRepository",
]
