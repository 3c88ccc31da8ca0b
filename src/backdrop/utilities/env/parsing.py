"""Readers for ``BACKDROP_*`` environment variables.

Every reader returns its default when the variable is unset and raises
``ValueError`` naming the variable when the value cannot be used.
"""

import math
import os
from typing import Callable, TypeVar

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}

NumberT = TypeVar("NumberT", int, float)


def _env_value(env_var: str) -> str | None:
    value = os.environ.get(env_var)
    return None if value is None else value.strip()


def _parse(env_var: str, value: str, cast: Callable[[str], NumberT], kind: str) -> NumberT:
    try:
        return cast(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}") from exc


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    value = _env_value(env_var)
    if value is None:
        return default
    return value.lower() in TRUE_FLAG_VALUES


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    """Return ``env_var`` as an int, or ``None`` so callers can tell unset from zero."""

    value = _env_value(env_var)
    if value is None:
        return None
    parsed = _parse(env_var, value, int, "an integer")
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    parsed = _env_optional_int(env_var, minimum=minimum)
    return default if parsed is None else parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    greater_than: float | None = None,
) -> float:
    """Return ``env_var`` as a finite float.

    ``minimum`` is inclusive and ``greater_than`` is exclusive; scale factors
    use the latter since zero would collapse the viewport.
    """

    value = _env_value(env_var)
    if value is None:
        return default
    parsed = _parse(env_var, value, float, "a float")
    if not math.isfinite(parsed):
        raise ValueError(f"{env_var} must be a finite number")
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    if greater_than is not None and parsed <= greater_than:
        raise ValueError(f"{env_var} must be greater than {greater_than}")
    return parsed
