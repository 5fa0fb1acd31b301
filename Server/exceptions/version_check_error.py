"""
Version Check Service - Base Exception

Base exception class for all version check errors.
"""


class VersionCheckError(Exception):
    """Base exception for version check errors."""
    pass
