from __future__ import annotations
from enum import Enum
from typing import Any


class Reason(str, Enum):
    CHANNEL_RANGE = "channel_range"
    ALPHA_RANGE = "alpha_range"
    PERCENT_RANGE = "percent_range"
    UNSUPPORTED = "unsupported"
    SYNTAX = "syntax"
    UNKNOWN_FORMAT = "unknown_format"


class MalformedColor(ValueError):
    """
    Raised whenever a color cannot be built, parsed or rendered.

    Every failure of the package goes through this single type. ``reason``
    tells the causes apart and ``value`` holds the offending input.
    """

    def __init__(self, message: str, reason: Reason, value: Any = None, channel: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.value = value
        self.channel = channel

    @classmethod
    def channel_out_of_range(cls, value: Any, channel: str) -> MalformedColor:
        return cls(
            f"The color channel {channel} value {value} is out of the supported range.",
            Reason.CHANNEL_RANGE, value, channel,
        )

    @classmethod
    def alpha_out_of_range(cls, value: Any) -> MalformedColor:
        return cls(
            f"The color alpha channel value {value} is out of the supported range.",
            Reason.ALPHA_RANGE, value, "alpha",
        )

    @classmethod
    def percent_out_of_range(cls, value: Any) -> MalformedColor:
        return cls(
            f"The percent value {value} is out of the supported range.",
            Reason.PERCENT_RANGE, value, "percent",
        )

    @classmethod
    def unsupported(cls, text: str) -> MalformedColor:
        return cls(f"Unsupported color string `{text}`.", Reason.UNSUPPORTED, text)

    @classmethod
    def syntax_error(cls, text: str, model: str) -> MalformedColor:
        return cls(f"Syntax error for {model} color `{text}`.", Reason.SYNTAX, text)

    @classmethod
    def unknown_format(cls, fmt: Any) -> MalformedColor:
        return cls(f"Unknown format `{fmt}`.", Reason.UNKNOWN_FORMAT, fmt)
