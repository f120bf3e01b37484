"""Errors raised while turning an uploaded document into text."""

from typing import Optional


class ResumeParserError(Exception):
    """Base class for document errors surfaced to the caller."""


class UnsupportedFormat(ResumeParserError):
    """The declared media type is not one of the recognized document types."""

    def __init__(self, media_type: Optional[str]):
        self.media_type = media_type
        super().__init__(f"Unsupported file type: {media_type!r}")


class DecodeFailure(ResumeParserError):
    """The format decoder could not parse the buffer."""

    def __init__(self, media_type: str, reason: str = "Failed to parse resume file"):
        self.media_type = media_type
        self.reason = reason
        super().__init__(f"{reason} ({media_type})")


class DocumentTooLarge(ResumeParserError):
    """The document exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Document is {size} bytes, limit is {limit} bytes")
