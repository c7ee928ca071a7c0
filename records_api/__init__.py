"""
Top‑level package for the Records API.

Makes ``records_api`` importable with fully qualified names like
``records_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
