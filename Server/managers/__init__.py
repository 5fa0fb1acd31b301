"""
Version Check Service - Managers Package

This package contains manager classes for configuration and GitHub access.
"""

from managers.config_manager import ConfigManager, DEFAULT_CONFIG
from managers.github_manager import GitHubManager

__all__ = ['ConfigManager', 'DEFAULT_CONFIG', 'GitHubManager']
