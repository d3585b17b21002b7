class CreationError(Exception):
    """Base exception for creation records and history."""


class CreationImportError(CreationError):
    """Raised when an exported creation cannot be imported."""
