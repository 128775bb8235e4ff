"""
Document model for the retrieval system.

Single responsibility: Define the structure of documents
the corpus index is built from.
"""

from dataclasses import dataclass


ABOUT_DOCUMENT_ID = "about"


@dataclass(frozen=True)
class Document:
    """
    A piece of portfolio text to be indexed.

    `id` is "about" for the bio, otherwise the id of the work item the
    text was built from.
    """
    id: str
    text: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "text": self.text,
        }
