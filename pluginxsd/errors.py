"""Exceptions raised while generating a plugin schema."""

from typing import Optional


class SchemaGenerationError(Exception):
    """
    Exception raised when schema generation fails.

    Attributes:
        message: Human-readable error description
        context: Optional context about where the error occurred
        cause: Optional underlying exception that caused this error
    """

    def __init__(self, message: str, context: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        self.message = message
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f"{message} (context: {context})"
        super().__init__(full_message)


class TemplateError(SchemaGenerationError):
    """Raised when the template schema is missing, unreadable or has no single insertion marker."""


class RegistryError(SchemaGenerationError):
    """Raised when a plugin registry cannot be loaded."""
