"""Typed data model for OpenAPI 3.0 documents, read from and written to plain data."""

__version__ = "0.1.0"