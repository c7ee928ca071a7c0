"""
Version 1 of the API.

Breaking changes to the record shape or status codes belong in a new
version subpackage.
"""
