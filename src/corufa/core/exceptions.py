"""CORUFA checklist exception hierarchy."""

from __future__ import annotations


class CorufaError(Exception):
    """Base exception for all checklist errors."""


class ParseError(CorufaError):
    """User-supplied input could not be parsed; current state is left untouched."""


class BundleParseError(ParseError):
    """Exported {dossier, limits} JSON document is malformed."""


class BulkAnalysisParseError(ParseError):
    """Delimited lab-result text is malformed."""


class RegistryParseError(ParseError):
    """Driller registry list could not be read."""


class FieldUpdateError(CorufaError):
    """A field edit names an unknown section/field or carries an invalid value."""


class StorageError(CorufaError):
    """Key-value storage operation failed."""

    def __init__(self, operation: str, key: str, message: str) -> None:
        self.operation = operation
        self.key = key
        super().__init__(f"{operation} failed for key={key!r}: {message}")


class RecordDecodeError(StorageError):
    """A stored value exists but is not valid UTF-8 text."""
