"""
config.py — Runtime Configuration
==================================
Defaults for freshly built sessions plus the server knobs.

Every field can be overridden from the environment:

    SORTVIS_ARRAY_SIZE      default bar count per sub-session
    SORTVIS_MAX_ARRAY_SIZE  largest bar count a request may ask for
    SORTVIS_SPEED           default animation speed (driver units, > 0)
    SORTVIS_THEME           "dark" | "light"
    SORTVIS_VIEW_MODE       "single" | "compare"
    SORTVIS_DEFAULT_ALGORITHM    catalog identifier for the primary slot
    SORTVIS_SECONDARY_ALGORITHM  catalog identifier for the secondary slot
    SORTVIS_LOG_LEVEL       DEBUG / INFO / WARNING …
    SORTVIS_HOST, SORTVIS_PORT, SORTVIS_DEBUG

Bad values raise InvalidField at startup rather than leaking into sessions.
"""

import math
import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional

from shared.errors import InvalidField


THEMES     = ("dark", "light")
VIEW_MODES = ("single", "compare")

_ENV_PREFIX = "SORTVIS_"


@dataclass
class Config:
    array_size:      int   = 50
    max_array_size:  int   = 200
    min_bar_value:   int   = 5          # random bars are drawn from [min, max]
    max_bar_value:   int   = 100
    speed:           float = 50.0
    theme:           str   = "dark"
    view_mode:       str   = "single"
    default_algorithm:   str = "bubble"
    secondary_algorithm: str = "quick"
    log_level:       str   = "INFO"
    host:            str   = "0.0.0.0"
    port:            int   = 5000
    debug:           bool  = False

    def __post_init__(self):
        self.check()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def check(self) -> None:
        if self.array_size <= 0:
            raise InvalidField(f"array_size must be positive, got {self.array_size}", "array_size")
        if self.max_array_size < self.array_size:
            raise InvalidField(
                f"max_array_size ({self.max_array_size}) is below array_size ({self.array_size})",
                "max_array_size",
            )
        if self.min_bar_value > self.max_bar_value:
            raise InvalidField("min_bar_value is above max_bar_value", "min_bar_value")
        if not math.isfinite(self.speed) or self.speed <= 0:
            raise InvalidField(f"speed must be a positive finite number, got {self.speed}", "speed")
        if self.theme not in THEMES:
            raise InvalidField(f"theme must be one of {THEMES}, got {self.theme!r}", "theme")
        if self.view_mode not in VIEW_MODES:
            raise InvalidField(f"view_mode must be one of {VIEW_MODES}, got {self.view_mode!r}", "view_mode")

        from algorithms import is_known_algorithm

        for name in ("default_algorithm", "secondary_algorithm"):
            value = getattr(self, name)
            if not is_known_algorithm(value):
                raise InvalidField(f"{name} {value!r} is not a catalog identifier", name)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from SORTVIS_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            kwargs[f.name] = _coerce(f.name, raw, _CASTS.get(f.type, str))
        return cls(**kwargs)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


# keyed by both forms: f.type is a string under postponed annotations
_CASTS: Dict[Any, Callable[[str], Any]] = {
    int:   int,
    float: float,
    bool:  _parse_bool,
    str:   str,
    "int":   int,
    "float": float,
    "bool":  _parse_bool,
    "str":   str,
}


def _coerce(name: str, raw: str, cast: Callable[[str], Any]) -> Any:
    try:
        return cast(raw)
    except ValueError as exc:
        raise InvalidField(f"{_ENV_PREFIX}{name.upper()}={raw!r}: {exc}", name) from exc
