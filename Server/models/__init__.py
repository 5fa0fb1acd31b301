"""
Version Check Service - Models Package

This package contains all data models for the service:
- github: Pydantic models for GitHub API payloads
- api: Pydantic models for the service's own endpoints
- infrastructure: Dataclass models for configuration and check results
"""

# Re-export all models for convenient importing
from models.github import *
from models.api import *
from models.infrastructure import *
