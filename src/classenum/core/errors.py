"""
Error types for classenum declarations, lookups and JSON conversion.
"""

from __future__ import annotations


class ClassEnumError(Exception):
    """Base exception for all classenum errors."""

    def __init__(self, message: str, enumeration: str | None = None):
        self.message = message
        self.enumeration = enumeration
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the enumeration name if available."""
        if self.enumeration:
            return f"{self.enumeration}: {self.message}"
        return self.message


class EnumerationDefinitionError(ClassEnumError):
    """
    Raised when an enumeration class body declares invalid members.

    Examples:
    - Member id that is not an integer
    - Two members sharing an id
    - Member value that is not an instance of the payload type
    """

    pass


class UnknownMemberError(ClassEnumError, LookupError):
    """Raised when no member matches a requested id or name."""

    pass


class EnumerationTypeMismatch(ClassEnumError, TypeError):
    """Raised when a member is compared with or written as another enumeration type."""

    pass


class DuplicateTypeTag(ClassEnumError):
    """Raised when a tag is already bound to a different payload type."""

    def __init__(self, tag: str, existing: type, new: type):
        self.tag = tag
        super().__init__(
            f"Tag '{tag}' is already registered for {existing.__qualname__}, "
            f"cannot register {new.__qualname__}"
        )


class DeserializationError(ClassEnumError, ValueError):
    """
    Raised when a serialized member cannot be read back.

    Subclasses ValueError so pydantic validators report it as a
    validation failure.
    """

    pass


class InvalidSerializedForm(DeserializationError):
    """Raised when the input is not a JSON string literal."""

    pass


class UnknownTypeTag(DeserializationError):
    """Raised when a tag does not resolve to any registered payload type."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Deserialization failed, type tag '{tag}' is not valid")


class VariantNotInEnumeration(DeserializationError):
    """Raised when a tag resolves to a payload type no member carries."""

    def __init__(self, tag: str, enumeration: str):
        self.tag = tag
        super().__init__(
            f"Deserialization failed, no member carries a value of type '{tag}'",
            enumeration=enumeration,
        )
