"""
Core components of the Document Library.
"""

from .document_library import DocumentLibrary
from .events import DocumentEvent, DocumentEventType, EventEmitter
from .models import Document, DocumentProperties
from .exceptions import LibraryError, InvalidDocumentPropertiesError, LibraryConfigError
