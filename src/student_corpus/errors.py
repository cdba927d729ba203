"""
Exception hierarchy for student_corpus.

Every failure raised while talking to the remote content tree or while
turning its payloads into datasets derives from CorpusError, so callers
can tell expected data problems apart from programming errors.
"""

from typing import Optional


class CorpusError(Exception):
    """Base class for all student_corpus data and transport failures."""
    pass


class TransportError(CorpusError):
    """Raised when a request to the content service does not succeed.

    Attributes:
        status_code: HTTP status of the response, or None when no response
            was received at all (connection refused, DNS failure, ...).
        url: URL that was requested.
    """

    def __init__(self, status_code: Optional[int], url: str, message: str = ""):
        self.status_code = status_code
        self.url = url
        if not message:
            if status_code is None:
                message = f"Request failed: {url}"
            else:
                message = f"HTTP {status_code}: {url}"
        super().__init__(message)


class DecodeError(CorpusError):
    """Raised when content cannot be decoded or parsed as text/JSON."""
    pass


class DatasetParseError(DecodeError):
    """Raised when a dataset document is not a valid structured document."""

    def __init__(self, source_path: str, reason: str):
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"Invalid dataset {source_path}: {reason}")
