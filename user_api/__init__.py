"""
User API root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, infrastructure (in-memory and MongoDB user stores) and the
dependency injection container.
"""
