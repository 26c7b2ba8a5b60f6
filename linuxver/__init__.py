"""
linuxver - upstream Linux kernel version tags

Parses, renders and orders version tags following the kernel's tagging
convention (``vMAJOR.MINOR[.REL][-rcN]``), plus the ``Unversioned``
sentinel used for commits that precede no version tag.

Quick Start
-----------
    >>> from linuxver import parse, comes_before
    >>> comes_before(parse("v5.4-rc7"), parse("v5.4"))
    True
    >>> str(parse("v2.6.32-rc3"))
    'v2.6.32-rc3'
    >>> parse("next-20240101") is None
    True

Package Structure
-----------------
version : module
    LinuxVersion value type, parse/render and the comparison predicates.
tags : module
    Sorting and filtering of arbitrary tag-name lists.
exceptions : module
    LinuxVerError hierarchy.
logging : module
    Pluggable logger, silent by default.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Parse and order upstream Linux kernel version tags"

from linuxver.exceptions import (
    InvalidVersionError,
    LinuxVerError,
    VersionParseError,
)
from linuxver.tags import is_newer, newest, sort_versions, version_key, version_tags
from linuxver.version import (
    NO_VERSION,
    UNVERSIONED,
    ZERO_VERSION,
    LinuxVersion,
    comes_after,
    comes_before,
    equals,
    parse,
    render,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "LinuxVersion",
    "NO_VERSION",
    "ZERO_VERSION",
    "UNVERSIONED",
    "parse",
    "render",
    "equals",
    "comes_before",
    "comes_after",
    "version_key",
    "version_tags",
    "sort_versions",
    "newest",
    "is_newer",
    "LinuxVerError",
    "InvalidVersionError",
    "VersionParseError",
]
