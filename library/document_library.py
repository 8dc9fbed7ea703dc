# --- library/document_library.py ---

import re
import logging
from typing import Any, Iterator, List, Optional, TYPE_CHECKING

from core.config import LibraryConfig
from core.interfaces import IDocument, IDocumentListener, ILibrary
from .events import DocumentEvent, DocumentEventType, EventEmitter

if TYPE_CHECKING:
    from core.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class DocumentLibrary(ILibrary):
    """In-memory collection of documents that notifies listeners of changes.

    Documents are kept in insertion order and looked up by identity, never by
    equality. Every change that actually modifies the library is announced to
    the registered listeners after the change is complete.
    """

    def __init__(self, config: Optional[LibraryConfig] = None):
        """Initialize an empty library.

        Args:
            config: Library configuration (defaults to ``LibraryConfig()``)
        """
        self.config = config or LibraryConfig()
        self._documents: List[IDocument] = []
        self._emitter = EventEmitter(self.config.events)

    @classmethod
    def from_config_manager(cls, manager: "ConfigManager") -> "DocumentLibrary":
        """Create a library from the configuration resolved by a ConfigManager."""
        return cls(manager.get_library_config())

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[IDocument]:
        return iter(self._documents)

    def iterate(self) -> Iterator[IDocument]:
        """Iterate over the documents in insertion order.

        The iterator is live: the library must not be changed while it is
        being consumed.
        """
        return iter(self._documents)

    def count(self) -> int:
        """Number of documents in the library."""
        return len(self._documents)

    def _index_of(self, document: IDocument) -> int:
        for index, stored in enumerate(self._documents):
            if stored is document:
                return index
        return -1

    def subscribe(self, listener: IDocumentListener) -> None:
        self._emitter.subscribe(listener)

    def unsubscribe(self, listener: IDocumentListener) -> None:
        self._emitter.unsubscribe(listener)

    def emit_event(self, event: DocumentEvent) -> None:
        self._emitter.publish(event)

    def add(self, document: IDocument) -> bool:
        """Append a document to the library.

        Args:
            document: The document to add

        Returns:
            True if the document was added; False if it is None, or if it is
            already present and duplicates are not allowed
        """
        if document is None:
            logger.debug("Ignoring attempt to add a missing document")
            return False

        if not self.config.allow_duplicates and self._index_of(document) != -1:
            logger.debug(f"Document '{document.title}' is already in {self.config.name}")
            return False

        self._documents.append(document)
        logger.debug(f"Added '{document.title}' to {self.config.name} ({len(self._documents)} documents)")
        self.emit_event(DocumentEvent(document, DocumentEventType.ADDED))
        return True

    def remove(self, document: IDocument) -> None:
        """Remove the first occurrence of a document.

        Removing a document that is not in the library does nothing.

        Args:
            document: The document to remove
        """
        index = self._index_of(document)
        if index == -1:
            logger.debug("Document to remove is not in the library")
            return

        removed = self._documents.pop(index)
        logger.debug(f"Removed '{removed.title}' from {self.config.name} ({len(self._documents)} documents)")
        self.emit_event(DocumentEvent(removed, DocumentEventType.REMOVED))

    def update(self, document: IDocument, properties: Any) -> None:
        """Update the properties of a document in the library.

        The update itself is done by the document. If the document rejects
        the properties its exception propagates and no event is emitted.
        Updating a document that is not in the library does nothing.

        Args:
            document: The document to update
            properties: The new document properties
        """
        index = self._index_of(document)
        if index == -1:
            logger.debug("Document to update is not in the library")
            return

        stored = self._documents[index]
        stored.update_properties(properties)
        logger.debug(f"Updated '{stored.title}' in {self.config.name}")
        self.emit_event(DocumentEvent(stored, DocumentEventType.UPDATED))

    def find(self, pattern: str) -> List[IDocument]:
        """Return the documents whose title contains a match for a regex.

        Args:
            pattern: Regular expression searched for in each title

        Returns:
            Matching documents, in library order

        Raises:
            re.error: If the pattern is not a valid regular expression
        """
        flags = 0 if self.config.search.case_sensitive else re.IGNORECASE
        regex = re.compile(pattern, flags)
        return [doc for doc in self._documents if regex.search(doc.title)]
