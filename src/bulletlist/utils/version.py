# topmark:header:start
#
#   project      : BulletList
#   file         : version.py
#   file_relpath : src/bulletlist/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version utilities for BulletList."""

import re

# Recognize the subset of PEP 440 we publish:
#   X.Y.Z, X.Y.ZaN, X.Y.ZbN, X.Y.ZrcN, X.Y.Z.devN, optional +local
# .postN is rejected (no SemVer equivalent).
_PEP440_RE: re.Pattern[str] = re.compile(
    r"""
    ^
    (?P<major>0|[1-9]\d*)\.
    (?P<minor>0|[1-9]\d*)\.
    (?P<patch>0|[1-9]\d*)
    (?:(?P<pre_label>a|b|rc)(?P<pre_num>\d+))?
    (?:\.post(?P<post>\d+))?
    (?:\.dev(?P<dev>\d+))?
    (?:\+(?P<local>[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*))?
    $
    """,
    re.VERBOSE,
)

_PRE_LABELS: dict[str, str] = {"a": "alpha", "b": "beta", "rc": "rc"}


def pep440_to_semver(pep440_version: str) -> str:
    """Convert a PEP 440 version to SemVer.

    ``1.2.0rc1`` becomes ``1.2.0-rc.1``, ``1.2.0.dev3`` becomes ``1.2.0-dev.3``
    and a ``+local`` segment is kept as build metadata.

    Args:
        pep440_version (str): The version in PEP 440 format.

    Returns:
        str: The version in SemVer format.

    Raises:
        ValueError: If the version is not recognized or is a post release.
    """
    m = _PEP440_RE.match(pep440_version)
    if not m:
        raise ValueError(f"Not a recognized PEP 440 version: {pep440_version!r}")
    if m.group("post") is not None:
        raise ValueError(f"Post-releases are not valid SemVer: {pep440_version!r}")

    out = f"{m.group('major')}.{m.group('minor')}.{m.group('patch')}"
    if m.group("pre_label"):
        out += f"-{_PRE_LABELS[m.group('pre_label')]}.{m.group('pre_num')}"
    if m.group("dev"):
        out += f"{'.' if m.group('pre_label') else '-'}dev.{m.group('dev')}"
    if m.group("local"):
        out += f"+{m.group('local')}"
    return out
