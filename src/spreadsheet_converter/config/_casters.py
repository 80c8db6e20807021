"""Casters turning raw environment or settings-file values into typed values.

A caster is any callable taking the raw value. It raises ``ValueError`` when
the value cannot be read; ``config()`` reports that as a ``ConfigError``.
"""

from __future__ import annotations

from typing import Any, Callable, Collection

_FLAG_WORDS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def cast_flag(value: Any) -> bool:
    """Read an on/off switch such as ``"yes"``, ``"0"`` or a JSON boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _FLAG_WORDS:
            return _FLAG_WORDS[word]
    raise ValueError(f"{value!r} is not an on/off value")


def level_name(value: Any) -> str:
    return str(value).strip().upper()


class Choices:
    """Accept only one of a fixed set of values.

    >>> Choices(["DEBUG", "INFO"], normalize=level_name)("info")
    'INFO'
    """

    def __init__(
        self,
        choices: Collection[Any],
        normalize: Callable[[Any], Any] = str,
    ) -> None:
        self.choices = tuple(choices)
        self.normalize = normalize

    def __call__(self, value: Any) -> Any:
        normalized = self.normalize(value)
        if normalized not in self.choices:
            allowed = ", ".join(str(choice) for choice in self.choices)
            raise ValueError(f"{value!r} is not one of {allowed}")
        return normalized
