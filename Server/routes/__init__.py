"""
Version Check Service - Routes Package

Each module exposes a FastAPI router included by server.py.
"""
