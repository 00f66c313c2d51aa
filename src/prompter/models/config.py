"""
Prompt configuration

Fully enumerated options with explicit defaults. Values are validated on
construction so a bad option fails before any surface is touched.
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from prompter.models.errors import ConfigurationError


@dataclass(frozen=True)
class PromptConfig:
    """
    Immutable per-instance configuration.

    Attributes:
        interval: Pause (ms) after a string is fully revealed, before the next cycle
        duration: Time (ms) to reveal one content string
        cursor: Marker rendered at the reveal boundary
        loop: Cycle the content sequence indefinitely
        delimiter: Splits ambient/text content into multiple strings
        fps: Caps the requested frame cadence
        autoplay: Play automatically whenever visible
        start_prompt_class: Tag applied to the surface while revealing
        end_prompt_class: Tag applied to the surface once a reveal finishes
    """

    interval: float = 0
    duration: float = 500
    cursor: Optional[str] = None
    loop: bool = False
    delimiter: Optional[str] = None
    fps: Optional[float] = None
    autoplay: bool = True
    start_prompt_class: Optional[str] = None
    end_prompt_class: Optional[str] = None

    def __post_init__(self):
        _require_number("interval", self.interval)
        if self.interval < 0:
            raise ConfigurationError("interval", "must be >= 0", self.interval)

        _require_number("duration", self.duration)
        if self.duration <= 0:
            raise ConfigurationError("duration", "must be > 0", self.duration)

        if self.fps is not None:
            _require_number("fps", self.fps)
            if self.fps <= 0:
                raise ConfigurationError("fps", "must be > 0", self.fps)

        for name in ("cursor", "delimiter", "start_prompt_class", "end_prompt_class"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigurationError(name, "must be a string", value)
            if value == "":
                raise ConfigurationError(name, "must not be empty", value)

        for name in ("loop", "autoplay"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(name, "must be a bool", getattr(self, name))

    @classmethod
    def option_names(cls):
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> "PromptConfig":
        """
        Build config from a mapping of option names.

        Raises:
            ConfigurationError: unknown option or invalid value
        """
        options = dict(options or {})
        known = set(cls.option_names())
        for key in options:
            if key not in known:
                raise ConfigurationError(str(key), "unknown option", options[key])
        return cls(**options)

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "PromptConfig":
        """Return a copy with overrides applied (validated like from_dict)."""
        if not overrides:
            return self
        known = set(self.option_names())
        for key in overrides:
            if key not in known:
                raise ConfigurationError(str(key), "unknown option", overrides[key])
        return replace(self, **dict(overrides))

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.option_names()}


def _require_number(name: str, value: Any) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(name, "must be a number", value)
    if not math.isfinite(value):
        raise ConfigurationError(name, "must be finite", value)
