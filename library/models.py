# library/models.py

from dataclasses import dataclass
from typing import Optional, Tuple, Any

from core.interfaces import IDocument
from .exceptions import InvalidDocumentPropertiesError


@dataclass(frozen=True)
class DocumentProperties:
    """Editable properties of a document."""
    title: str
    author: Optional[str] = None
    keywords: Tuple[str, ...] = ()


@dataclass(eq=False)
class Document(IDocument):
    """
    A document known to the library.

    Documents compare by identity: two documents with the same properties
    are still different entries in a library.
    """
    properties: DocumentProperties
    file_path: Optional[str] = None

    def __post_init__(self):
        self._validate(self.properties)

    @property
    def title(self) -> str:
        return self.properties.title

    @property
    def author(self) -> Optional[str]:
        return self.properties.author

    def update_properties(self, properties: DocumentProperties) -> None:
        """Replace the document properties.

        Args:
            properties: The new properties

        Raises:
            InvalidDocumentPropertiesError: If the properties are not valid,
                in which case the document keeps its current properties
        """
        self._validate(properties)
        self.properties = properties

    @staticmethod
    def _validate(properties: Any) -> None:
        if not isinstance(properties, DocumentProperties):
            raise InvalidDocumentPropertiesError(
                f"Expected DocumentProperties, got {type(properties).__name__}"
            )
        if not isinstance(properties.title, str) or not properties.title.strip():
            raise InvalidDocumentPropertiesError("Document title must be a non-empty string")
