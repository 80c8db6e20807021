"""Typed import settings.

Each field resolves from ``SPREADSHEET_CONVERTER_<FIELD>`` in the environment,
then the same field name in the settings file, then its default::

    settings = ImportSettings.load()
    settings.skip_blank_rows     # SPREADSHEET_CONVERTER_SKIP_BLANK_ROWS / "skip_blank_rows"
"""

from __future__ import annotations

from typing import Any, Callable, Literal, get_args

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ._casters import Choices, level_name
from ._reader import config
from ._repository import ConfigRepository
from ._types import ConfigError, UndefinedValueError

ENV_PREFIX = "SPREADSHEET_CONVERTER"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

_CASTS: dict[str, Callable[[Any], Any] | type] = {
    "skip_blank_rows": bool,
    "strict_types": bool,
    "log_level": Choices(get_args(LogLevel), normalize=level_name),
}


class ImportSettings(BaseModel):
    """Behaviour switches for spreadsheet imports.

    Attributes:
        skip_blank_rows: Skip data rows without any populated cell instead of
            producing default-valued records.
        strict_types: Validate cell values in pydantic strict mode, so e.g.
            numeric text is not coerced into a float field.
        log_level: Level applied by the command line to package logging.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_blank_rows: bool = True
    strict_types: bool = False
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return level_name(value) if isinstance(value, str) else value

    @classmethod
    def load(cls, repo: ConfigRepository | None = None) -> "ImportSettings":
        """Resolve every field from the config sources and validate.

        Fields found nowhere fall back to their defaults.

        Raises:
            ConfigError: A value cannot be read as its field's type, or the
                settings file is unreadable.
        """
        raw_data: dict[str, Any] = {}
        for field_name in cls.model_fields:
            try:
                raw_data[field_name] = config(
                    field_name,
                    cast=_CASTS.get(field_name),
                    env=f"{ENV_PREFIX}_{field_name}".upper(),
                    repo=repo,
                )
            except UndefinedValueError:
                continue
        try:
            return cls.model_validate(raw_data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid import settings: {exc}") from exc
