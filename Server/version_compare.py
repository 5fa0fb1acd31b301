"""
Version Check Service - Version Comparison

This module parses loosely formatted version strings into integer components
and compares them. Parsing is lenient: any segment that does not start with
digits counts as 0, so the functions never raise on malformed input.
"""

import re
from typing import Tuple

# Separators between version components ("1.2.3-4+5")
_SEPARATOR_PATTERN = re.compile(r"[.\-+]")

# Leading ASCII digits of a segment, e.g. "3rc1" -> "3"
_LEADING_INTEGER_PATTERN = re.compile(r"^\s*([0-9]+)")

# Digit runs longer than this collapse to _OVERFLOW_SEGMENT, which is
# larger than any shorter segment and equal for all overflowing ones
_MAX_SEGMENT_DIGITS = 309
_OVERFLOW_SEGMENT = 10 ** _MAX_SEGMENT_DIGITS

# Labels for the components GetVersionDifference inspects
_COMPONENT_LABELS = ("major", "minor", "patch")


def NormalizeVersion(version: str) -> str:
    """
    Remove a single leading 'v' from a version string

    Args:
        version: Raw version string (e.g. "v1.2.3")

    Returns:
        str: Version without the prefix (e.g. "1.2.3")
    """
    if version.startswith("v"):
        return version[1:]
    return version


def ParseSegment(segment: str) -> int:
    """
    Convert one version segment to an integer

    Only the leading ASCII digits are used. Segments without leading
    digits (including empty segments) yield 0.

    Args:
        segment: Single component of a version string

    Returns:
        int: Numeric value of the segment
    """
    match = _LEADING_INTEGER_PATTERN.match(segment)
    if not match:
        return 0

    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_SEGMENT_DIGITS:
        return _OVERFLOW_SEGMENT
    return int(digits)


def ParseVersion(version: str) -> Tuple[int, ...]:
    """
    Parse a version string into a tuple of integer components

    Args:
        version: Version string such as "v1.2.3", "2.0" or "1.0.0-rc1"

    Returns:
        Tuple[int, ...]: Components in order of significance, never empty
    """
    normalized = NormalizeVersion(version)
    return tuple(ParseSegment(part) for part in _SEPARATOR_PATTERN.split(normalized))


def _ComponentAt(parts: Tuple[int, ...], index: int) -> int:
    """Component at index, with missing trailing components treated as 0"""
    return parts[index] if index < len(parts) else 0


def CompareVersions(v1: str, v2: str) -> int:
    """
    Compare two version strings component by component

    Args:
        v1: First version
        v2: Second version

    Returns:
        int: -1 if v1 < v2, 0 if equal, 1 if v1 > v2
    """
    parts1 = ParseVersion(v1)
    parts2 = ParseVersion(v2)

    for index in range(max(len(parts1), len(parts2))):
        p1 = _ComponentAt(parts1, index)
        p2 = _ComponentAt(parts2, index)
        if p1 < p2:
            return -1
        if p1 > p2:
            return 1

    return 0


def GetVersionDifference(current: str, latest: str) -> str:
    """
    Describe how far the current version is behind the latest one

    Only major, minor and patch are examined. The magnitude is latest minus
    current at the first differing component and is not clamped.

    Args:
        current: Version the caller is running
        latest: Latest published version

    Returns:
        str: e.g. "1 minor version", "2 major versions" or "up to date"
    """
    current_parts = ParseVersion(current)
    latest_parts = ParseVersion(latest)

    for index, label in enumerate(_COMPONENT_LABELS):
        current_value = _ComponentAt(current_parts, index)
        latest_value = _ComponentAt(latest_parts, index)
        if current_value != latest_value:
            diff = latest_value - current_value
            suffix = "" if diff == 1 else "s"
            return f"{diff} {label} version{suffix}"

    return "up to date"
