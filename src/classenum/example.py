"""
Example enumeration whose members carry class instances.

``MyEnum`` has two members, each wrapping a different implementation of
``MyInterface``. ``main()`` walks the whole idiom once: pick a member,
serialize it, deserialize it back to the same singleton and call the
shared method on the recovered payload.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .core.converter import EnumerationConverter
from .core.enumeration import Enumeration, member

logger = logging.getLogger(__name__)


class MyInterface(ABC):
    """Capability shared by every payload of MyEnum."""

    @abstractmethod
    def my_common_method(self) -> str: ...


class MyClass1(MyInterface):
    def my_common_method(self) -> str:
        return "MyClass1 says hello"

    def __str__(self) -> str:
        return "MyClass1"


class MyClass2(MyInterface):
    def my_common_method(self) -> str:
        return "MyClass2 says hello"

    def __str__(self) -> str:
        return "MyClass2"


class MyEnum(Enumeration[MyInterface]):
    MY_CLASS_1 = member(1, MyClass1())
    MY_CLASS_2 = member(2, MyClass2())


def main() -> str:
    """Round-trip MyEnum.MY_CLASS_1 through JSON and call its payload."""
    my_enum = MyEnum.MY_CLASS_1

    converter = EnumerationConverter(MyEnum)
    text = converter.serialize(my_enum)
    logger.info("Serialized %r to %s", my_enum, text)

    deserialized = converter.deserialize(text)
    logger.info("Deserialized %s to %r", text, deserialized)

    return deserialized.value.my_common_method()
