"""The ``config()`` reader and the module-level active repository.

A key resolves from, in order: the environment variable named by ``env=``,
the settings file (dot-paths walk nested objects), the default. A key found
nowhere raises ``UndefinedValueError``.
"""

from __future__ import annotations

from typing import Any, Callable

from ._casters import cast_flag
from ._repository import ConfigRepository, EnvConfigRepository
from ._types import UNDEFINED, ConfigError, UndefinedValueError, _Undefined

_active_repository: ConfigRepository | None = None


def set_repository(repo: ConfigRepository | None) -> None:
    """Install ``repo`` as the source for calls that pass no ``repo=``."""
    global _active_repository
    _active_repository = repo


def get_repository() -> ConfigRepository | None:
    return _active_repository


def _auto_repository() -> ConfigRepository:
    global _active_repository
    if _active_repository is None:
        _active_repository = EnvConfigRepository()
    return _active_repository


def _setting(repo: ConfigRepository, key: str) -> Any:
    value = repo.get_setting(key)
    if value is not None:
        return value

    head, dot, rest = key.partition(".")
    if not dot:
        return UNDEFINED
    node: Any = repo.get_setting(head)
    for segment in rest.split("."):
        if not isinstance(node, dict) or segment not in node:
            return UNDEFINED
        node = node[segment]
    return node


def _apply(cast: Callable[[Any], Any] | type | None, key: str, raw: Any) -> Any:
    if cast is None:
        return raw
    caster = cast_flag if cast is bool else cast
    try:
        return caster(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid value for '{key}': {exc}") from exc


def config(
    key: str,
    *,
    default: Any = UNDEFINED,
    cast: Callable[[Any], Any] | type | None = None,
    env: str | None = None,
    repo: ConfigRepository | None = None,
) -> Any:
    """Read one configuration value.

    Args:
        key: Settings-file key; ``"import.strict_types"`` walks nested objects.
        default: Returned unchanged, without ``cast``, when the key is unset.
        cast: Applied to values found in the environment or settings file.
            ``bool`` reads words like ``"yes"``/``"0"``.
        env: Environment variable checked before the settings file.
        repo: Source to read; defaults to the active repository.

    Raises:
        UndefinedValueError: The key is unset and no default is given.
        ConfigError: ``cast`` rejected the raw value.
    """
    source = repo or _auto_repository()

    if env is not None:
        raw = source.get_env(env)
        if raw is not None:
            return _apply(cast, env, raw)

    raw = _setting(source, key)
    if not isinstance(raw, _Undefined):
        return _apply(cast, key, raw)

    if not isinstance(default, _Undefined):
        return default
    raise UndefinedValueError(key)
