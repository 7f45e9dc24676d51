"""
User service application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain contracts, the default user service and MongoDB persistence.
"""
