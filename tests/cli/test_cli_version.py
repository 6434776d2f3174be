# topmark:header:start
#
#   project      : BulletList
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `bulletlist version`."""

from __future__ import annotations

import json

import pytest

from bulletlist.constants import BULLETLIST_VERSION
from bulletlist.utils.version import pep440_to_semver
from tests.cli.conftest import assert_SUCCESS, output_lines, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_plain() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert output_lines(result) == [BULLETLIST_VERSION]


def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    lines = output_lines(result)
    assert lines[0] == "BulletList version (pep440):"
    assert lines[1].strip() == BULLETLIST_VERSION


def test_version_json_semver() -> None:
    try:
        expected = pep440_to_semver(BULLETLIST_VERSION)
    except ValueError:
        expected = BULLETLIST_VERSION
    result = run_cli(["version", "--semver", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": expected, "format": "semver"}


def test_version_json_pep440() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": BULLETLIST_VERSION, "format": "pep440"}
