"""
Version Check Service - Service Information

Name and version reported by the health endpoint and the OpenAPI schema.
"""

SERVICE_NAME = "Version Check Service"
SERVICE_VERSION = "1.0.0"
