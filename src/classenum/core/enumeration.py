"""
Closed "class enum" base type.

An enumeration is a class whose members are singleton instances of that
class, each carrying an arbitrary payload object. Members are declared in
the class body with ``member()`` and are built exactly once, in declaration
order, when the class is created. After that the set is closed: no new
members can be constructed, and members themselves are immutable.

Usage:
    class Shape(Enumeration[Drawable]):
        CIRCLE = member(1, Circle())
        SQUARE = member(2, Square())

    Shape.CIRCLE.value.draw()
    Shape.get_all()        # (Shape.CIRCLE, Shape.SQUARE)
    Shape(2) is Shape.SQUARE

Identity is the explicit integer id: two members are equal only when they
belong to the same concrete class and share an id, and members order by id.
"""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Self,
    TypeVar,
    cast,
    get_args,
    get_origin,
)

from .errors import EnumerationDefinitionError, EnumerationTypeMismatch, UnknownMemberError
from .tags import TypeTagRegistry, payload_types

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import core_schema

logger = logging.getLogger(__name__)

U = TypeVar("U")


class _MemberDeclaration:
    """Placeholder left in a class body by ``member()`` until the class is built."""

    __slots__ = ("id", "value")

    def __init__(self, id: int, value: Any):
        self.id = id
        self.value = value

    def __repr__(self) -> str:
        return f"member({self.id!r}, {self.value!r})"


def member(id: int, value: Any) -> Any:
    """Declare an enumeration member with an explicit id and payload."""
    return _MemberDeclaration(id, value)


class Enumeration(Generic[U]):
    """Base class for closed sets of singleton members carrying a payload of type U."""

    __slots__ = ("_id", "_value", "_name")

    _members: ClassVar[tuple[Any, ...]] = ()
    _tags: ClassVar[TypeTagRegistry] = payload_types

    _id: int
    _value: U
    _name: str

    def __init_subclass__(cls, tags: TypeTagRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if tags is not None:
            cls._tags = tags
        cls._members = cls._build_members()
        logger.debug(
            "Declared enumeration %s with %d member(s)", cls.__qualname__, len(cls._members)
        )

    def __new__(cls, id: int) -> Self:
        return cls.from_id(id)

    @classmethod
    def _build_members(cls) -> tuple[Self, ...]:
        """Replace the member() declarations in the class body with singletons."""
        declared = [
            (name, attr)
            for name, attr in vars(cls).items()
            if isinstance(attr, _MemberDeclaration)
        ]
        payload = cls.payload_type()
        check_payload = isinstance(payload, type) and not getattr(payload, "_is_protocol", False)

        members: list[Self] = []
        ids: dict[int, str] = {}
        value_types: dict[type, str] = {}
        for name, decl in declared:
            if not isinstance(decl.id, int) or isinstance(decl.id, bool):
                raise EnumerationDefinitionError(
                    f"Member '{name}' id must be an int, got {decl.id!r}",
                    enumeration=cls.__qualname__,
                )
            if decl.id in ids:
                raise EnumerationDefinitionError(
                    f"Member '{name}' reuses id {decl.id} of member '{ids[decl.id]}'",
                    enumeration=cls.__qualname__,
                )
            if check_payload and not isinstance(decl.value, payload):
                raise EnumerationDefinitionError(
                    f"Member '{name}' value {decl.value!r} is not a {payload.__qualname__}",
                    enumeration=cls.__qualname__,
                )

            value_type = type(decl.value)
            if value_type in value_types:
                logger.warning(
                    "%s.%s carries the same payload type as %s.%s; "
                    "deserialization resolves to the first",
                    cls.__qualname__,
                    name,
                    cls.__qualname__,
                    value_types[value_type],
                )
            else:
                value_types[value_type] = name
            cls._tags.register(value_type)

            instance = object.__new__(cls)
            object.__setattr__(instance, "_id", decl.id)
            object.__setattr__(instance, "_value", decl.value)
            object.__setattr__(instance, "_name", name)
            setattr(cls, name, instance)
            ids[decl.id] = name
            members.append(instance)
        return tuple(members)

    @classmethod
    def payload_type(cls) -> Any:
        """Return the U of the nearest ``Enumeration[U]`` base, or Any if unbound."""
        for klass in cls.__mro__:
            for base in vars(klass).get("__orig_bases__", ()):
                if get_origin(base) is Enumeration:
                    args = get_args(base)
                    if args and not isinstance(args[0], TypeVar):
                        return args[0]
                    return Any
        return Any

    @classmethod
    def tag_registry(cls) -> TypeTagRegistry:
        """Return the registry this enumeration's payload types are tagged in."""
        return cls._tags

    @classmethod
    def get_all(cls) -> tuple[Self, ...]:
        """Return every member of this enumeration in declaration order."""
        return cls._members

    @classmethod
    def from_id(cls, id: int) -> Self:
        if isinstance(id, int) and not isinstance(id, bool):
            for m in cls._members:
                if m._id == id:
                    return m
        raise UnknownMemberError(f"{id!r} is not a valid member id", enumeration=cls.__qualname__)

    @classmethod
    def from_name(cls, name: str) -> Self:
        for m in cls._members:
            if m._name == name:
                return m
        raise UnknownMemberError(
            f"'{name}' is not a valid member name", enumeration=cls.__qualname__
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def value(self) -> U:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    def compare_to(self, other: object) -> int:
        """
        Compare two members by id.

        Returns:
            -1, 0 or 1 as this member's id is lower, equal or higher.

        Raises:
            EnumerationTypeMismatch: If ``other`` is not a member of the same class.
        """
        if type(other) is not type(self):
            raise EnumerationTypeMismatch(
                f"Cannot compare {type(self).__qualname__} with {type(other).__qualname__}"
            )
        peer = cast(Self, other)
        return (self._id > peer._id) - (self._id < peer._id)

    def __lt__(self, other: object) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__qualname__} members are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__qualname__} members are immutable")

    # Members are singletons: copies and unpickled objects are the member itself
    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return getattr, (type(self), self._name)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}.{self._name}: {self._id}>"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from .converter import EnumerationConverter

        return EnumerationConverter(cls).core_schema()
