"""
Startup configuration for the sequential thinking server.
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

# Environment variable that suppresses thought rendering and logging
DISABLE_THOUGHT_LOGGING_ENV = "DISABLE_THOUGHT_LOGGING"


@dataclass(frozen=True)
class ServerConfig:
    """
    Process-wide settings, read once at startup and passed explicitly.

    Attributes:
        disable_thought_logging: Skip rendering and logging of each thought
        colorize: Emit ANSI colours in rendered thoughts
    """
    disable_thought_logging: bool = False
    colorize: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 stream: Optional[TextIO] = None) -> "ServerConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
            stream: Diagnostic stream; colours are enabled when it is a TTY.
                Defaults to sys.stderr.

        Returns:
            The resulting ServerConfig
        """
        environ = os.environ if environ is None else environ
        stream = sys.stderr if stream is None else stream

        raw = environ.get(DISABLE_THOUGHT_LOGGING_ENV) or ""
        isatty = getattr(stream, "isatty", None)
        return cls(
            disable_thought_logging=raw.strip().lower() == "true",
            colorize=bool(isatty and isatty()),
        )
