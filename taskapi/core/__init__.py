"""
Core utilities shared across the task service.

This package hosts configuration (env vars, backend selection), logging setup
and the JSON envelope helpers used by every router.
"""
