# tests/unit/test_models.py

import dataclasses
import pytest

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from core.interfaces import IDocument
from library.exceptions import InvalidDocumentPropertiesError, LibraryError
from library.models import Document, DocumentProperties


class TestDocument:
    """Unit tests for the reference Document implementation."""

    def test_document_exposes_title(self):
        doc = Document(DocumentProperties(title="Alpha", author="Ann"), file_path="/tmp/alpha.pdf")

        assert isinstance(doc, IDocument)
        assert doc.title == "Alpha"
        assert doc.author == "Ann"
        assert doc.file_path == "/tmp/alpha.pdf"

    def test_document_fields(self):
        assert [f.name for f in dataclasses.fields(Document)] == ["properties", "file_path"]

    def test_documents_compare_by_identity(self):
        first = Document(DocumentProperties(title="Alpha"))
        second = Document(DocumentProperties(title="Alpha"))

        assert first != second
        assert first == first

    def test_update_properties(self):
        doc = Document(DocumentProperties(title="Alpha"))
        new_properties = DocumentProperties(title="Beta", keywords=("greek",))

        doc.update_properties(new_properties)

        assert doc.title == "Beta"
        assert doc.properties.keywords == ("greek",)

    @pytest.mark.parametrize("properties", [
        DocumentProperties(title=""),
        DocumentProperties(title="   "),
        {"title": "Beta"},
        None,
    ])
    def test_update_properties_rejects_invalid(self, properties):
        doc = Document(DocumentProperties(title="Alpha"))

        with pytest.raises(InvalidDocumentPropertiesError):
            doc.update_properties(properties)

        assert doc.title == "Alpha"

    def test_invalid_properties_error_hierarchy(self):
        assert issubclass(InvalidDocumentPropertiesError, LibraryError)
        assert issubclass(InvalidDocumentPropertiesError, ValueError)

    def test_construction_validates_properties(self):
        with pytest.raises(InvalidDocumentPropertiesError):
            Document(DocumentProperties(title=""))
