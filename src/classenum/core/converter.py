"""
JSON conversion for enumeration members.

A member is written as a JSON string holding the type tag of its payload,
for example ``"classenum.example.MyClass1"``. Nothing else about the member
is persisted. Reading resolves the tag to a payload type through the
enumeration's tag registry, then returns the first declared member whose
payload is exactly of that type. Reads never create members: the result
is always one of the existing singletons.

Usage:
    from classenum.core.converter import dumps, loads

    text = dumps(MyEnum.MY_CLASS_1)      # '"classenum.example.MyClass1"'
    loads(text, MyEnum) is MyEnum.MY_CLASS_1

Enumerations also work as pydantic field types; see
``EnumerationConverter.core_schema``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic_core import core_schema as cs

from .enumeration import Enumeration
from .errors import EnumerationTypeMismatch, InvalidSerializedForm, VariantNotInEnumeration

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enumeration[Any])


def can_convert(tp: Any) -> bool:
    """Return True if ``tp`` is a concrete enumeration class."""
    return isinstance(tp, type) and issubclass(tp, Enumeration) and tp is not Enumeration


class EnumerationConverter(Generic[E]):
    """Reads and writes members of one enumeration class."""

    def __init__(self, enum_type: type[E]):
        if not can_convert(enum_type):
            raise TypeError(f"{enum_type!r} is not an Enumeration subclass")
        self.enum_type = enum_type

    def write(self, member: E) -> str:
        """Return the type tag of the member's payload."""
        if type(member) is not self.enum_type:
            raise EnumerationTypeMismatch(
                f"Cannot write {type(member).__qualname__} as {self.enum_type.__qualname__}"
            )
        tag = self.enum_type.tag_registry().tag_of(type(member.value))
        logger.debug("Wrote %r as '%s'", member, tag)
        return tag

    def read(self, tag: str) -> E:
        """
        Return the member whose payload type matches ``tag``.

        Raises:
            UnknownTypeTag: If the tag is not registered.
            VariantNotInEnumeration: If no member carries a payload of that type.
        """
        selected = self.enum_type.tag_registry().resolve(tag)
        for m in self.enum_type.get_all():
            if type(m.value) is selected:
                logger.debug("Read '%s' as %r", tag, m)
                return m
        raise VariantNotInEnumeration(tag, self.enum_type.__qualname__)

    def serialize(self, member: E) -> str:
        """Return the JSON string literal for a member."""
        return json.dumps(self.write(member))

    def deserialize(self, text: str | bytes) -> E:
        """
        Return the member encoded in a JSON string literal.

        Raises:
            InvalidSerializedForm: If the input is not valid JSON or not a string.
            UnknownTypeTag: If the tag is not registered.
            VariantNotInEnumeration: If no member carries a payload of that type.
        """
        try:
            tag = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidSerializedForm(
                f"Deserialization failed, invalid JSON: {e}",
                enumeration=self.enum_type.__qualname__,
            ) from e
        if not isinstance(tag, str):
            raise InvalidSerializedForm(
                f"Deserialization failed, expected a JSON string, got {type(tag).__name__}",
                enumeration=self.enum_type.__qualname__,
            )
        return self.read(tag)

    def core_schema(self) -> cs.CoreSchema:
        """
        Build the pydantic core schema for fields typed with this enumeration.

        JSON input must be a tag string. Python input may be a member or a
        tag string. Members dump to their tag in JSON mode and stay members
        in Python mode.
        """
        from_tag = cs.no_info_after_validator_function(self.read, cs.str_schema())
        return cs.json_or_python_schema(
            json_schema=from_tag,
            python_schema=cs.union_schema([cs.is_instance_schema(self.enum_type), from_tag]),
            serialization=cs.plain_serializer_function_ser_schema(self.write, when_used="json"),
        )


def dumps(member: Enumeration[Any]) -> str:
    """Serialize a member to its JSON string literal."""
    return EnumerationConverter(type(member)).serialize(member)


def loads(text: str | bytes, enum_type: type[E]) -> E:
    """Deserialize a JSON string literal to a member of ``enum_type``."""
    return EnumerationConverter(enum_type).deserialize(text)
