"""
Custom Exception Hierarchy for the Blog API
===========================================

Every application error carries the HTTP status it should be answered with,
so the global handler in ``blog.errors`` can render it without a lookup table.

Usage:
    from blog.common.exceptions import ElasticsearchError

    try:
        self.es.index(index=self.INDEX_NAME, id=doc_id, document=doc)
    except TransportError as e:
        raise ElasticsearchError("Failed to index entry") from e
"""


class BlogError(Exception):
    """
    Base exception for all Blog API errors.

    Attributes:
        message: Human-readable error message
        code: Error code for API responses
        details: Additional error details
        status_code: HTTP status used when the error reaches the handler
    """

    status_code = 500

    def __init__(self, message: str, code: str = "BLOG000", details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        return {
            "error": self.__class__.__name__,
            "resultMessage": self.message,
            "resultCode": self.code,
            "details": self.details
        }


# ============================================
# Database Exceptions
# ============================================

class DatabaseError(BlogError):
    """Base exception for storage-related errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="DB001", details=details)


class ElasticsearchError(DatabaseError):
    """Elasticsearch operation failed."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)
        self.code = "DB005"


# ============================================
# Validation Exceptions
# ============================================

class ValidationError(BlogError):
    """Input validation failed."""

    status_code = 400

    def __init__(self, message: str, field: str = None, details: dict = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code="VAL001", details=details)

