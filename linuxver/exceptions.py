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

"""Exception hierarchy for linuxver.

Plain parsing never raises: ``parse()`` returns None for a string that is
not a kernel version tag, because probing arbitrary tag names is the normal
case. Exceptions are reserved for misuse:

- InvalidVersionError: A field outside its 8-bit range, or a missing value
  handed to a comparison.
- VersionParseError: Strict parsing (``LinuxVersion.from_string``) was asked
  to parse something that is not a version tag.

Both inherit from LinuxVerError and from ValueError, so callers can catch
either the library base class or the builtin.

Example:
    Catching strict parse failures:
        ```python
        from linuxver import LinuxVersion
        from linuxver.exceptions import VersionParseError

        try:
            v = LinuxVersion.from_string("next-20240101")
        except VersionParseError as e:
            print(f"Not a version tag: {e.text}")
        ```
"""

from __future__ import annotations

__all__ = [
    "LinuxVerError",
    "InvalidVersionError",
    "VersionParseError",
]


class LinuxVerError(Exception):
    """Base exception for all linuxver errors."""

    pass


class InvalidVersionError(LinuxVerError, ValueError):
    """Raised when a version value is missing or malformed.

    This exception is raised when:

    - A LinuxVersion field is not an int or lies outside [0, 255]
    - None (typically a failed ``parse()``) or a foreign object is passed
      to ``equals``, ``comes_before`` or ``comes_after``

    Example:
        Comparing against a failed parse:
            ```python
            from linuxver import comes_before, parse

            v = parse("v6.1")
            other = parse("not-a-tag")  # None
            comes_before(v, other)  # raises InvalidVersionError
            ```
    """

    pass


class VersionParseError(LinuxVerError, ValueError):
    """Raised by strict parsing when the text is not a kernel version tag.

    Attributes:
        text: The rejected input.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"not a kernel version tag: {text!r}")
