"""Config source protocol, the environment/file implementation and a fake for tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from ._types import ConfigError

SETTINGS_FILE_ENV = "SPREADSHEET_CONVERTER_SETTINGS_FILE"

_SETTINGS_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


@runtime_checkable
class ConfigRepository(Protocol):
    """Abstraction over where config values come from.

    ``get_env`` reads environment variables, ``get_setting`` reads the
    settings file. Both return ``None`` for unknown keys.
    """

    def get_env(self, key: str) -> str | None:
        ...

    def get_setting(self, key: str) -> Any:
        ...


class EnvConfigRepository:
    """Reads ``os.environ`` and an optional JSON settings file.

    The settings file defaults to the path in ``SPREADSHEET_CONVERTER_SETTINGS_FILE``
    and is parsed on first use.
    """

    def __init__(
        self,
        settings_file: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        if settings_file is None:
            settings_file = self._environ.get(SETTINGS_FILE_ENV) or None
        self.settings_file = Path(settings_file) if settings_file else None
        self._settings: dict[str, Any] | None = None

    def get_env(self, key: str) -> str | None:
        return self._environ.get(key)

    def get_setting(self, key: str) -> Any:
        return self._load_settings().get(key)

    def _load_settings(self) -> dict[str, Any]:
        if self._settings is None:
            if self.settings_file is None:
                self._settings = {}
            else:
                try:
                    self._settings = _SETTINGS_ADAPTER.validate_json(
                        self.settings_file.read_bytes()
                    )
                except OSError as exc:
                    raise ConfigError(
                        f"Cannot read settings file '{self.settings_file}': {exc}"
                    ) from exc
                except ValidationError as exc:
                    raise ConfigError(
                        f"Settings file '{self.settings_file}' must hold a JSON object"
                    ) from exc
        return self._settings


class FakeConfigRepository:
    """Dict-backed config repository for tests.

    >>> repo = FakeConfigRepository(env={"SPREADSHEET_CONVERTER_STRICT_TYPES": "1"})
    >>> repo.get_env("SPREADSHEET_CONVERTER_STRICT_TYPES")
    '1'
    """

    def __init__(
        self,
        env: dict[str, str] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        self._env: dict[str, str] = dict(env or {})
        self._settings: dict[str, Any] = dict(settings or {})

    # -- Protocol methods ---------------------------------------------------

    def get_env(self, key: str) -> str | None:
        return self._env.get(key)

    def get_setting(self, key: str) -> Any:
        return self._settings.get(key)

    # -- Mutation helpers for test setup ------------------------------------

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value
