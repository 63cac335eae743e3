"""
Logger Configuration.

Settings are supplied programmatically; bugie reads no environment variables
and no configuration files.
"""

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from .formatters import DEFAULT_MESSAGE_CAPACITY


class ColorMode(str, Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


class LoggerSettings(BaseModel):
    """Rendering and emission options of a Logger."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    message_capacity: int = Field(
        default=DEFAULT_MESSAGE_CAPACITY,
        ge=2,
        description="Working buffer size in bytes, terminator included",
    )
    color: ColorMode = Field(
        default=ColorMode.ALWAYS,
        description="always: unconditional ANSI codes; auto: only on terminals; never: plain text",
    )
    suppress_none: bool = Field(
        default=False,
        description="Drop records whose level is NONE instead of rendering them as UNKNOWN",
    )

    def use_color(self, isatty: Callable[[], bool]) -> bool:
        """Decide on ANSI codes; ``isatty`` is only consulted in AUTO mode."""
        if self.color is ColorMode.ALWAYS:
            return True
        if self.color is ColorMode.NEVER:
            return False
        return isatty()
