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

"""Logging interface for linuxver.

The library modules report what they do through a small logger protocol
instead of printing directly. The global logger is silent, so importing
and using linuxver prints nothing until the host application installs a
logger of its own.

Output levels:
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)

Example:
    Trace why tag names are rejected:
        ```python
        from linuxver import version_tags
        from linuxver.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        version_tags(["v6.1", "v6.1-rc", "next-20240101"])
        # [VERSION] Rejected 'v6.1-rc': not a kernel version tag
        # [TAGS] Skipping non-version tag: 'v6.1-rc'
        # ...
        ```

    Use with dependency injection:

        def my_function(logger=None):
            if logger is None:
                logger = get_global_logger()
            logger.verbose("TAGS", "Processing...")
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "TAGS").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "VERSION").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Logger that prints to stdout, honouring verbose and debug flags."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
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


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a stdout logger with the given verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A logger instance configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger used by linuxver modules (silent by default)."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects every linuxver function. Call it once at application
        startup; the reference is read on every call, never mutated.
    """
    global _global_logger
    _global_logger = logger
