import regex as re

from .exceptions import EmptyInputError
from .schemas import Document

WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Lowercase text and collapse every whitespace run to a single space."""
    if not text:
        return ""
    return WHITESPACE.sub(' ', text.lower()).strip()


def word_count(text: str) -> int:
    return len(text.split()) if text else 0


def build_document(text: str) -> Document:
    """Wrap raw resume text in an immutable Document."""
    if not text or not text.strip():
        raise EmptyInputError("resume_text")
    return Document(raw_text=text, normalized_text=normalize(text), word_count=word_count(text))
