"""
classenum - closed "class enums" whose members carry objects.

Members are singletons declared on an Enumeration subclass, each wrapping a
payload object. A converter writes a member as the JSON type tag of its
payload and reads the tag back to the same singleton.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    ClassEnumError,
    DeserializationError,
    Enumeration,
    EnumerationConverter,
    UnknownTypeTag,
    VariantNotInEnumeration,
    dumps,
    loads,
    member,
    payload_variant,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "Enumeration",
    "EnumerationConverter",
    "member",
    "payload_variant",
    "dumps",
    "loads",
    "ClassEnumError",
    "DeserializationError",
    "UnknownTypeTag",
    "VariantNotInEnumeration",
]
