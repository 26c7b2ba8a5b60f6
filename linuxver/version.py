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

"""Upstream Linux kernel version values.

This module is format-only: it does NOT read repositories or run git.
It parses tag names such as ``v2.6.32-rc3`` into a small immutable value,
renders them back, and orders them the way the kernel releases them
(every -rcN comes before the final release it leads up to).

Grammar accepted by ``parse()``:

    v<major:1-2 digits>.<minor>[.<rel>][-rc<rc>]

plus the literal ``Unversioned``, which maps to NO_VERSION.

Field encoding:
    Each field is stored in 8 bits. ``rel == 0`` and ``rc == 0`` mean the
    component is absent; ``major == 255`` marks NO_VERSION and
    ``major == 0`` the empty ZERO_VERSION. Numeric captures wider than
    8 bits wrap (``v1.999`` parses with ``minor == 231``). Captures of
    2**63 or more first saturate at 2**63 - 1, so they always give 255.

Example:
    ```python
    from linuxver.version import comes_before, parse

    rc = parse("v6.1-rc8")
    final = parse("v6.1")
    comes_before(rc, final)  # True
    str(final)  # "v6.1"
    parse("next-20240101")  # None
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from linuxver.exceptions import InvalidVersionError, VersionParseError
from linuxver.logging import get_global_logger

__all__ = [
    "LinuxVersion",
    "NO_VERSION",
    "ZERO_VERSION",
    "UNVERSIONED",
    "parse",
    "render",
    "equals",
    "comes_before",
    "comes_after",
]

UNVERSIONED = "Unversioned"

_FIELD_MAX = 0xFF
# Captures beyond the signed 64-bit range saturate here before the 8-bit wrap.
_CAPTURE_MAX = 2**63 - 1
_CAPTURE_MAX_DIGITS = len(str(_CAPTURE_MAX))
_UNVERSIONED_MAJOR = 255

# Matched with fullmatch(), so no trailing newline slips through as with "$".
_VERSION_RE = re.compile(r"v([0-9]{1,2})[.]([0-9]+)(?:[.]([0-9]+))?(?:-rc([0-9]+))?")


@dataclass(frozen=True)
class LinuxVersion:
    """An upstream Linux kernel version.

    Attributes:
        major: Major version number. 255 means "no version" (NO_VERSION):
            commits after the newest version tag when HEAD itself is not
            tagged.
        minor: Minor version number.
        rel: Release number (only used by v2.6 kernels); 0 when absent.
        rc: Release candidate number; 0 for the final release.

    Equality is field-wise. ``<`` and ``>`` follow kernel release order,
    see ``comes_before()`` and ``comes_after()``.
    """

    major: int = 0
    minor: int = 0
    rel: int = 0
    rc: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "rel", "rc"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidVersionError(
                    f"{name} must be an int, got {type(value).__name__}"
                )
            if not 0 <= value <= _FIELD_MAX:
                raise InvalidVersionError(
                    f"{name} must be in [0, {_FIELD_MAX}], got {value}"
                )

    @classmethod
    def from_string(cls, text: str) -> LinuxVersion:
        """Parse a version tag, raising instead of returning None.

        Args:
            text: Tag name such as "v5.10.0-rc2" or "Unversioned".

        Returns:
            The parsed version.

        Raises:
            VersionParseError: If text is not a kernel version tag.
        """
        version = parse(text)
        if version is None:
            raise VersionParseError(text)
        return version

    @property
    def is_unversioned(self) -> bool:
        return self.major == _UNVERSIONED_MAJOR

    @property
    def is_zero(self) -> bool:
        return self.major == 0

    @property
    def is_release_candidate(self) -> bool:
        return self.rc > 0

    @property
    def release(self) -> int | None:
        """Release number, or None when the version has no release part."""
        return self.rel or None

    @property
    def candidate(self) -> int | None:
        """Release candidate number, or None for a final release."""
        return self.rc or None

    def equals(self, other: LinuxVersion) -> bool:
        return equals(self, other)

    def comes_before(self, other: LinuxVersion) -> bool:
        return comes_before(self, other)

    def comes_after(self, other: LinuxVersion) -> bool:
        return comes_after(self, other)

    def __str__(self) -> str:
        return render(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LinuxVersion):
            return NotImplemented
        return comes_before(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LinuxVersion):
            return NotImplemented
        return comes_after(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LinuxVersion):
            return NotImplemented
        return comes_before(self, other) or equals(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LinuxVersion):
            return NotImplemented
        return comes_after(self, other) or equals(self, other)


NO_VERSION = LinuxVersion(_UNVERSIONED_MAJOR, 0, 0, 0)
ZERO_VERSION = LinuxVersion()


def _field(capture: str | None) -> int:
    """Convert a numeric capture to the 8-bit field value (absent -> 0).

    The value saturates at 2**63 - 1 before wrapping, so an oversized
    capture yields 255 and never reaches int() with thousands of digits.
    """
    if not capture:
        return 0
    digits = capture.lstrip("0")
    if len(digits) > _CAPTURE_MAX_DIGITS:
        return _CAPTURE_MAX & _FIELD_MAX
    return min(int(digits or "0"), _CAPTURE_MAX) & _FIELD_MAX


def parse(text: str) -> LinuxVersion | None:
    """Parse an upstream kernel version tag.

    Args:
        text: Candidate tag name, e.g. "v4.19.0-rc1".

    Returns:
        The parsed version, NO_VERSION for "Unversioned", or None if text
        is not a version tag. Failure is an ordinary outcome, not an error.

    Note:
        The grammar is permissive, so a few accepted tags do not survive a
        render round trip: "v0.5" parses to a major-0 value that renders
        as "", and "v1.0.0" or "v1.0-rc0" render back as "v1.0".
    """
    if text == UNVERSIONED:
        return NO_VERSION

    m = _VERSION_RE.fullmatch(text)
    if m is None:
        get_global_logger().debug(
            "VERSION", f"Rejected {text!r}: not a kernel version tag"
        )
        return None

    major, minor, rel, rc = m.groups()
    return LinuxVersion(_field(major), _field(minor), _field(rel), _field(rc))


def render(v: LinuxVersion) -> str:
    """Render a version in canonical tag form (inverse of parse)."""
    if v.major == 0:
        return ""
    if v.major == _UNVERSIONED_MAJOR:
        return UNVERSIONED
    s = f"v{v.major}.{v.minor}"
    if v.rel > 0:
        s = f"{s}.{v.rel}"
    if v.rc > 0:
        s = f"{s}-rc{v.rc}"
    return s


def _require(v1: object, v2: object) -> None:
    for v in (v1, v2):
        if not isinstance(v, LinuxVersion):
            raise InvalidVersionError(
                f"expected a LinuxVersion, got {v!r}; check parse() for None"
            )


def equals(v1: LinuxVersion, v2: LinuxVersion) -> bool:
    """Return True if all four fields of v1 and v2 are equal.

    Raises:
        InvalidVersionError: If either argument is not a LinuxVersion.
    """
    _require(v1, v2)
    return (
        v1.major == v2.major
        and v1.minor == v2.minor
        and v1.rel == v2.rel
        and v1.rc == v2.rc
    )


def comes_before(v1: LinuxVersion, v2: LinuxVersion) -> bool:
    """Return True if v1 is older than v2.

    Compares (major, minor, rel) first. On a tie, a release candidate is
    older than the final release and a lower rc is older than a higher one.

    Raises:
        InvalidVersionError: If either argument is not a LinuxVersion.
    """
    _require(v1, v2)
    for a, b in ((v1.major, v2.major), (v1.minor, v2.minor), (v1.rel, v2.rel)):
        if a < b:
            return True
        if a > b:
            return False

    if v2.rc == 0:
        return v1.rc != 0
    if v1.rc == 0:
        return False
    return v1.rc < v2.rc


def comes_after(v1: LinuxVersion, v2: LinuxVersion) -> bool:
    """Return True if v1 is newer than v2.

    Mirror of comes_before(): a final release is newer than any of its
    release candidates and a higher rc is newer than a lower one.

    Raises:
        InvalidVersionError: If either argument is not a LinuxVersion.
    """
    _require(v1, v2)
    for a, b in ((v1.major, v2.major), (v1.minor, v2.minor), (v1.rel, v2.rel)):
        if a > b:
            return True
        if a < b:
            return False

    if v1.rc == 0:
        return v2.rc != 0
    if v2.rc == 0:
        return False
    return v1.rc > v2.rc
