"""
Service layer abstraction.

Services encapsulate the business rules.  They receive their storage
adapter explicitly, so API handlers and tests can swap the SQLite
backend for the in-memory one without changing any rule.
"""
