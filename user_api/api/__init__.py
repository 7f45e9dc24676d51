"""
API layer for the user service.

Exposes the HTTP endpoints for user creation, lookup, login and token refresh.
"""
