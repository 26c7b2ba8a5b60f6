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

"""Helpers for probing lists of tag names.

A kernel tree carries many tags that are not release tags (``next-*``,
stable-queue markers, vendor tags). These helpers sift version tags out of
an arbitrary list of names and order them.
"""

from __future__ import annotations

from collections.abc import Iterable

from linuxver.logging import get_global_logger
from linuxver.version import LinuxVersion, comes_after, parse

__all__ = [
    "version_key",
    "version_tags",
    "sort_versions",
    "newest",
    "is_newer",
]

# Sorts after every real rc number, so a final release follows its -rcN.
_FINAL_RC_RANK = 256


def version_key(v: LinuxVersion) -> tuple[int, int, int, int]:
    """Compute a sort key that orders versions like comes_before()."""
    return (v.major, v.minor, v.rel, v.rc or _FINAL_RC_RANK)


def version_tags(tags: Iterable[str]) -> list[LinuxVersion]:
    """Parse tag names, dropping those that are not version tags.

    Args:
        tags: Tag names in any order.

    Returns:
        Parsed versions in input order.
    """
    logger = get_global_logger()
    versions: list[LinuxVersion] = []
    for tag in tags:
        v = parse(tag)
        if v is None:
            logger.verbose("TAGS", f"Skipping non-version tag: {tag!r}")
            continue
        versions.append(v)
    logger.debug("TAGS", f"Found {len(versions)} version tag(s)")
    return versions


def sort_versions(tags: Iterable[str], reverse: bool = False) -> list[LinuxVersion]:
    """Return the version tags among tags, oldest first.

    Args:
        tags: Tag names in any order.
        reverse: If True, return newest first.
    """
    return sorted(version_tags(tags), key=version_key, reverse=reverse)


def newest(tags: Iterable[str]) -> LinuxVersion | None:
    """Return the newest version tag, or None if no tag is a version."""
    versions = version_tags(tags)
    if not versions:
        return None
    return max(versions, key=version_key)


def _coerce(v: LinuxVersion | str) -> LinuxVersion:
    if isinstance(v, str):
        return LinuxVersion.from_string(v)
    return v


def is_newer(
    candidate: LinuxVersion | str,
    current: LinuxVersion | str | None,
) -> bool:
    """Decide if candidate should be considered newer than current.

    Args:
        candidate: Version or tag name to test.
        current: Version or tag name currently in use, or None if there is
            none yet (any candidate is then newer).

    Returns:
        True iff candidate comes after current.

    Raises:
        VersionParseError: If a tag name is not a kernel version tag.
        InvalidVersionError: If an argument is neither a str nor a
            LinuxVersion.
    """
    logger = get_global_logger()
    new = _coerce(candidate)
    if current is None:
        logger.verbose("TAGS", f"No current version. Treat {str(new)!r} as newer")
        return True

    cur = _coerce(current)
    result = comes_after(new, cur)
    logger.verbose(
        "TAGS",
        f"{str(new)!r} is {'newer' if result else 'not newer'} than {str(cur)!r}",
    )
    return result

