# --- core/interfaces.py ---

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, TYPE_CHECKING

if TYPE_CHECKING:
    from library.events import DocumentEvent


class IDocument(ABC):
    """Interface for a document managed by the library."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Title of the document."""
        pass

    @abstractmethod
    def update_properties(self, properties: Any) -> None:
        """Apply new properties to the document.

        Args:
            properties: The new document properties

        Raises:
            Whatever the document raises for properties it rejects
        """
        pass


class IDocumentListener(ABC):
    """Interface for receivers of document change events."""

    @abstractmethod
    def handle(self, event: "DocumentEvent") -> None:
        """Process the given event.

        Args:
            event: The event to process
        """
        pass


class ILibrary(ABC):
    """Interface for a collection of documents that publishes its changes."""

    @abstractmethod
    def count(self) -> int:
        """Number of documents in the library."""
        pass

    @abstractmethod
    def add(self, document: IDocument) -> bool:
        """Add a document to the library.

        Args:
            document: The document to add

        Returns:
            True if the document was added, False otherwise
        """
        pass

    @abstractmethod
    def remove(self, document: IDocument) -> None:
        """Remove a document from the library.

        Args:
            document: The document to remove
        """
        pass

    @abstractmethod
    def update(self, document: IDocument, properties: Any) -> None:
        """Update the properties of a document in the library.

        Args:
            document: The document to update
            properties: The new document properties
        """
        pass

    @abstractmethod
    def find(self, pattern: str) -> List[IDocument]:
        """Find documents whose title contains a match for a regex.

        Args:
            pattern: Regular expression to search titles with

        Returns:
            Matching documents, in library order
        """
        pass

    @abstractmethod
    def iterate(self) -> Iterator[IDocument]:
        """Iterate over the documents in insertion order."""
        pass

    @abstractmethod
    def subscribe(self, listener: IDocumentListener) -> None:
        """Register a listener for document events."""
        pass

    @abstractmethod
    def unsubscribe(self, listener: IDocumentListener) -> None:
        """Unregister a listener."""
        pass

    @abstractmethod
    def emit_event(self, event: "DocumentEvent") -> None:
        """Deliver an event to every registered listener."""
        pass
