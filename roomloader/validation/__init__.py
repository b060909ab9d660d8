"""
Diagnostics and errors for room loading.

Public API:
    - ValidationResult, ValidationIssue, Severity: Diagnostic report types
    - LoadStage: Loader stage enumeration
    - ValidationError: Raised by ValidationResult.raise_if_failed()
    - RoomLoadError and subclasses: Fatal load errors
"""

from .core import (
    DirectiveParseError,
    LoadStage,
    MalformedCall,
    MeshSourceError,
    RoomLoadError,
    Severity,
    UnterminatedString,
    ValidationError,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    'DirectiveParseError',
    'LoadStage',
    'MalformedCall',
    'MeshSourceError',
    'RoomLoadError',
    'Severity',
    'UnterminatedString',
    'ValidationError',
    'ValidationIssue',
    'ValidationResult',
]
