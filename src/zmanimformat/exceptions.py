"""Zmanim formatting exception classes."""

from __future__ import annotations


class ZmanimFormatError(Exception):
    """Base exception for all zmanimformat errors."""


class FormatterRangeError(ZmanimFormatError, ValueError):
    """Millisecond count outside the signed 64-bit range."""


class CatalogError(ZmanimFormatError):
    """Invalid capability registry (bad accessor name, label or duplicate)."""
