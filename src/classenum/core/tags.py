"""
Type tag registry for enumeration payloads.

A tag is the wire identifier of a payload's runtime type. Tags default to
the dotted import path of the class (``module.QualName``), which keeps them
unique across modules. Resolution never imports anything: a tag only
resolves if its type was registered, either explicitly with
``payload_variant`` or implicitly when an enumeration declares a member
carrying it.

Usage:
    from classenum.core.tags import payload_variant, payload_types

    @payload_variant
    class Circle:
        ...

    payload_types.resolve("shapes.Circle")  # Circle
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TypeVar, overload

from .errors import DuplicateTypeTag, UnknownTypeTag

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


def type_tag(tp: type) -> str:
    """Return the default tag for a type, e.g. ``classenum.example.MyClass1``."""
    return f"{tp.__module__}.{tp.__qualname__}"


class TypeTagRegistry:
    """Bidirectional mapping between tag strings and payload types."""

    def __init__(self) -> None:
        self._types: dict[str, type] = {}
        self._tags: dict[type, str] = {}

    def register(self, tp: type, tag: str | None = None) -> str:
        """
        Bind a payload type to a tag.

        Registering the same type under the same tag again is a no-op. A
        redefinition of a type (same ``module.QualName``, new class object,
        e.g. after ``importlib.reload``) replaces the old binding when the
        default tag is used.

        Returns:
            The tag the type is bound to.

        Raises:
            DuplicateTypeTag: If the tag is already bound to another type.
        """
        explicit = tag is not None
        tag = tag or self._tags.get(tp) or type_tag(tp)
        existing = self._types.get(tag)
        if existing is tp:
            return tag
        if existing is not None:
            redefined = not explicit and tag == type_tag(tp) == type_tag(existing)
            if not redefined:
                raise DuplicateTypeTag(tag, existing, tp)
            if self._tags.get(existing) == tag:
                del self._tags[existing]
            logger.debug("Rebinding '%s' to redefined payload type %s", tag, tp.__qualname__)
        self._types[tag] = tp
        self._tags.setdefault(tp, tag)
        logger.debug("Registered payload type %s as '%s'", tp.__qualname__, tag)
        return tag

    def resolve(self, tag: str) -> type:
        """Return the type bound to ``tag``, raising UnknownTypeTag if none is."""
        try:
            return self._types[tag]
        except KeyError:
            raise UnknownTypeTag(tag) from None

    def tag_of(self, tp: type) -> str:
        """Return the registered tag for ``tp``, or its default tag if unregistered."""
        return self._tags.get(tp) or type_tag(tp)

    def __contains__(self, tag: object) -> bool:
        return tag in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)


# Shared registry used by enumerations that do not pass their own
payload_types = TypeTagRegistry()


@overload
def payload_variant(cls: T, /) -> T: ...


@overload
def payload_variant(*, tag: str | None = ..., registry: TypeTagRegistry | None = ...) -> Callable[[T], T]: ...


def payload_variant(
    cls: T | None = None,
    /,
    *,
    tag: str | None = None,
    registry: TypeTagRegistry | None = None,
) -> T | Callable[[T], T]:
    """Class decorator registering a payload type, optionally under a custom tag."""
    target = registry if registry is not None else payload_types

    def decorator(tp: T) -> T:
        target.register(tp, tag)
        return tp

    if cls is not None:
        return decorator(cls)
    return decorator
