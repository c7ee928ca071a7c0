"""
Pydantic schema definitions for API payloads.

The service manages a single entity, so one model serves as request
body, response body and storage value.
"""

from .record import Record  # noqa: F401
