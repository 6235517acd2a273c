"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DiscoveryError,
    HookError,
    LocalizationError,
    NotInitializedError,
    SwitchConflictError,
    UnavailableLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiscoveryError",
    "ErrorTemplate",
    "HookError",
    "LocalizationError",
    "NotInitializedError",
    "OutputFormat",
    "SwitchConflictError",
    "UnavailableLocaleError",
]
