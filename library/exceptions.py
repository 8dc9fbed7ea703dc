# --- library/exceptions.py ---

class LibraryError(Exception):
    """Base exception for all document library errors."""
    pass

class InvalidDocumentPropertiesError(LibraryError, ValueError):
    """Raised when a document rejects the properties it is given."""
    pass

class LibraryConfigError(LibraryError):
    """Raised when the library configuration cannot be loaded or validated."""
    pass
