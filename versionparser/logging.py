# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging interface for versionparser.

Library modules report what they are doing through a small logger protocol
instead of printing directly, so the parser stays silent unless the caller
(usually the CLI) asks for output.

Messages carry a short subsystem prefix (PARSER, CONFIG, COMPARE) and one
of two levels:
- Verbose: config loading and comparison verdicts
- Debug: parser strategy tracing (debug mode implies verbose)

Example:
    Configure global logger:
        ```python
        from versionparser.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        ```

    Use in library code:
        ```python
        from versionparser.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("CONFIG", "Loaded 3 tag definitions")
        logger.debug("PARSER", "Strategy 'tag-only' matched 'beta2'")
        ```

Note:
    The default global logger is silent, so parsing never prints anything
    unless a logger has been configured explicitly.
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Anything with prefixed verbose and debug output."""

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Subsystem, "CONFIG" or "COMPARE".
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Subsystem, "PARSER" for the detector.
            message: Log message.
        """
        ...


class DefaultLogger:
    """Prints ``[PREFIX] message`` lines to stdout.

    Args:
        verbose: Print verbose messages.
        debug: Print debug messages too (implies verbose).

    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Parsing is silent until a caller installs another logger.
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Stdout logger for the CLI flags ``--verbose`` and ``--debug``."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Get the global logger instance used by the parser modules."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects every parse that runs afterwards. Tests that install a
        printing logger should restore a SilentLogger when they are done.
    """
    global _global_logger
    _global_logger = logger
