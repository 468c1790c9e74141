"""Pydantic models for request validation and response serialization.

JSON field names are camelCase, matching the browser client; Python
attribute names stay snake_case.
"""
