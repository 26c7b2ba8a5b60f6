"""
Pytest configuration and shared fixtures for linuxver tests.

This module provides reusable fixtures, parametrizes tests over the
reference tables in fixtures/versions.yaml, and keeps the global logger
isolated between tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from linuxver.logging import SilentLogger, set_global_logger

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load_version_tables() -> dict[str, Any]:
    with (FIXTURES_DIR / "versions.yaml").open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def pytest_generate_tests(metafunc):
    """
    Parametrize tests over the reference tables in versions.yaml.

    Tests request rows by argument name:
      parse_case: (text, fields-or-None) from the parse table
      accepted_tag: text of every parse-table entry that is a version tag
      compare_case: (v1, op, v2, expected) from the compare table
    """
    wanted = {"parse_case", "accepted_tag", "compare_case"}
    if not wanted.intersection(metafunc.fixturenames):
        return

    tables = _load_version_tables()
    parse_cases = sorted(tables["parse"].items())
    if "parse_case" in metafunc.fixturenames:
        metafunc.parametrize(
            "parse_case", parse_cases, ids=[repr(text) for text, _ in parse_cases]
        )
    if "accepted_tag" in metafunc.fixturenames:
        metafunc.parametrize(
            "accepted_tag",
            [text for text, fields in parse_cases if fields is not None],
        )
    if "compare_case" in metafunc.fixturenames:
        rows = [tuple(row) for row in tables["compare"]]
        metafunc.parametrize(
            "compare_case", rows, ids=[f"{a} {op} {b}" for a, op, b, _ in rows]
        )


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def version_tables() -> dict[str, Any]:
    """Provide the reference parse and compare tables."""
    return _load_version_tables()


@pytest.fixture
def kernel_tags() -> list[str]:
    """
    Provide a realistic, unordered list of tag names from a kernel tree.

    Mixes version tags with tags that are not versions.
    """
    return [
        "v5.4",
        "next-20240101",
        "v5.4-rc7",
        "v5.3.18",
        "v5.4-rc1",
        "stable-queue",
        "v5.3",
        "v5.4-rc10",
        "v2.6.39",
    ]


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())
