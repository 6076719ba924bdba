"""Core enumeration, tag registry and converter."""

from .converter import EnumerationConverter, can_convert, dumps, loads
from .enumeration import Enumeration, member
from .errors import (
    ClassEnumError,
    DeserializationError,
    DuplicateTypeTag,
    EnumerationDefinitionError,
    EnumerationTypeMismatch,
    InvalidSerializedForm,
    UnknownMemberError,
    UnknownTypeTag,
    VariantNotInEnumeration,
)
from .tags import TypeTagRegistry, payload_types, payload_variant, type_tag

__all__ = [
    "Enumeration",
    "member",
    "EnumerationConverter",
    "can_convert",
    "dumps",
    "loads",
    "TypeTagRegistry",
    "payload_types",
    "payload_variant",
    "type_tag",
    "ClassEnumError",
    "DeserializationError",
    "DuplicateTypeTag",
    "EnumerationDefinitionError",
    "EnumerationTypeMismatch",
    "InvalidSerializedForm",
    "UnknownMemberError",
    "UnknownTypeTag",
    "VariantNotInEnumeration",
]
