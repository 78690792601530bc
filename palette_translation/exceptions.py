#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the translation engine.

Grammar problems never raise: a malformed clause is abandoned and the
translation keeps whatever was parsed before it. The exceptions below cover
the file boundaries (palettes and raw translation tables).
"""


class TranslationError(Exception):
    """Base exception for all palette translation errors"""
    pass


class PaletteError(TranslationError):
    """Raised when a palette cannot be loaded, built or exported"""
    pass


class TableFormatError(TranslationError):
    """Raised when a raw translation table file is unusable"""
    pass


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for user display.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    if isinstance(error, FileNotFoundError):
        return f"File not found during {operation}"
    elif isinstance(error, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(error, PaletteError):
        return f"Palette error: {error}"
    elif isinstance(error, TableFormatError):
        return f"Translation table error: {error}"
    else:
        return f"Failed to {operation}: {error}"
