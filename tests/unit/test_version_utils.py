# topmark:header:start
#
#   project      : BulletList
#   file         : test_version_utils.py
#   file_relpath : tests/unit/test_version_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for PEP 440 to SemVer conversion."""

from __future__ import annotations

import pytest

from bulletlist.utils.version import pep440_to_semver
from tests.conftest import parametrize


@parametrize(
    "pep440, semver",
    [
        ("1.2.3", "1.2.3"),
        ("1.0.0a1", "1.0.0-alpha.1"),
        ("1.0.0b2", "1.0.0-beta.2"),
        ("1.0.0rc1", "1.0.0-rc.1"),
        ("1.0.0.dev3", "1.0.0-dev.3"),
        ("1.0.0rc1.dev3", "1.0.0-rc.1.dev.3"),
        ("0.1.0+g1234.dirty", "0.1.0+g1234.dirty"),
    ],
)
def test_pep440_to_semver(pep440: str, semver: str) -> None:
    assert pep440_to_semver(pep440) == semver


@parametrize("bad", ["1.0", "1.0.0.post1", "v1.0.0", "01.0.0", ""])
def test_pep440_to_semver_rejects(bad: str) -> None:
    with pytest.raises(ValueError):
        pep440_to_semver(bad)
