"""Helpers for searching, summarising and rearranging integer sequences."""

__version__ = "0.1.0"
__all__ = ["aggregates", "rearranging", "searching"]