"""
Tests for JSON conversion of enumeration members.

Tests cover:
- Write path: payload type tag as a JSON string
- Read path: tag back to the existing singleton
- Read errors: malformed input, unknown tag, tag of a foreign payload type
- pydantic fields typed with an enumeration
"""

import json

import pytest
from pydantic import BaseModel, ValidationError

from classenum.core.converter import EnumerationConverter, can_convert, dumps, loads
from classenum.core.enumeration import Enumeration, member
from classenum.core.errors import (
    DeserializationError,
    EnumerationTypeMismatch,
    InvalidSerializedForm,
    UnknownTypeTag,
    VariantNotInEnumeration,
)
from classenum.core.tags import TypeTagRegistry, payload_variant, type_tag
from classenum.example import MyClass1, MyEnum, MyInterface


@payload_variant
class MyClass3(MyInterface):
    """Registered payload type that no MyEnum member carries."""

    def my_common_method(self) -> str:
        return "MyClass3 says hello"


_custom_tags = TypeTagRegistry()


@payload_variant(tag="one", registry=_custom_tags)
class One:
    pass


class Tagged(Enumeration[object], tags=_custom_tags):
    ONE = member(1, One())


class TestCanConvert:
    def test_concrete_enumeration(self):
        assert can_convert(MyEnum)

    def test_base_and_other_types(self):
        assert not can_convert(Enumeration)
        assert not can_convert(MyClass1)
        assert not can_convert(MyEnum.MY_CLASS_1)
        assert not can_convert(None)

    def test_converter_rejects_non_enumeration(self):
        with pytest.raises(TypeError):
            EnumerationConverter(MyClass1)


class TestWrite:
    def test_write_emits_payload_tag(self, converter):
        assert converter.write(MyEnum.MY_CLASS_1) == "classenum.example.MyClass1"

    def test_serialize_emits_json_string(self, converter):
        text = converter.serialize(MyEnum.MY_CLASS_2)
        assert text == '"classenum.example.MyClass2"'
        assert json.loads(text) == type_tag(type(MyEnum.MY_CLASS_2.value))

    def test_custom_tag_is_written(self):
        assert dumps(Tagged.ONE) == '"one"'

    def test_write_rejects_other_enumeration(self, converter):
        with pytest.raises(EnumerationTypeMismatch):
            converter.write(Tagged.ONE)


class TestRead:
    @pytest.mark.parametrize("m", MyEnum.get_all(), ids=lambda m: m.name)
    def test_round_trip_returns_same_singleton(self, converter, m):
        assert converter.deserialize(converter.serialize(m)) is m

    def test_read_tag(self, converter):
        assert converter.read("classenum.example.MyClass2") is MyEnum.MY_CLASS_2

    def test_loads(self):
        assert loads('"classenum.example.MyClass1"', MyEnum) is MyEnum.MY_CLASS_1
        assert loads(b'"one"', Tagged) is Tagged.ONE

    def test_capability_after_round_trip(self, converter):
        original = MyEnum.MY_CLASS_1
        recovered = converter.deserialize(converter.serialize(original))
        assert recovered.value.my_common_method() == original.value.my_common_method()
        assert recovered.value.my_common_method() == "MyClass1 says hello"

    def test_unknown_tag(self, converter):
        with pytest.raises(UnknownTypeTag) as exc_info:
            converter.deserialize('"not.a.real.Type"')
        assert exc_info.value.tag == "not.a.real.Type"

    def test_tag_of_foreign_payload_type(self, converter):
        tag = type_tag(MyClass3)
        with pytest.raises(VariantNotInEnumeration) as exc_info:
            converter.deserialize(json.dumps(tag))
        assert exc_info.value.tag == tag
        assert exc_info.value.enumeration == "MyEnum"

    def test_tag_from_other_registry_is_unknown(self, converter):
        with pytest.raises(UnknownTypeTag):
            converter.read("one")

    @pytest.mark.parametrize(
        "text", ["not json", '{"tag": "x"}', "1", "null", "", b'"\xff\xfe"']
    )
    def test_invalid_serialized_form(self, converter, text):
        with pytest.raises(InvalidSerializedForm):
            converter.deserialize(text)

    def test_read_errors_are_value_errors(self, converter):
        with pytest.raises(ValueError):
            converter.deserialize('"not.a.real.Type"')
        assert issubclass(VariantNotInEnumeration, DeserializationError)


# =============================================================================
# pydantic integration
# =============================================================================


class Selection(BaseModel):
    choice: MyEnum


class TestPydanticField:
    def test_dump_json_writes_tag(self):
        model = Selection(choice=MyEnum.MY_CLASS_2)
        assert model.model_dump_json() == '{"choice":"classenum.example.MyClass2"}'
        assert model.model_dump(mode="json") == {"choice": "classenum.example.MyClass2"}

    def test_python_dump_keeps_member(self):
        assert Selection(choice=MyEnum.MY_CLASS_1).model_dump() == {"choice": MyEnum.MY_CLASS_1}

    def test_validate_json_returns_singleton(self):
        model = Selection.model_validate_json('{"choice":"classenum.example.MyClass1"}')
        assert model.choice is MyEnum.MY_CLASS_1

    def test_python_input_accepts_tag(self):
        assert Selection(choice="classenum.example.MyClass2").choice is MyEnum.MY_CLASS_2

    def test_unknown_tag_is_validation_error(self):
        with pytest.raises(ValidationError, match="not.a.real.Type"):
            Selection.model_validate_json('{"choice":"not.a.real.Type"}')

    def test_foreign_tag_is_validation_error(self):
        with pytest.raises(ValidationError):
            Selection(choice=type_tag(MyClass3))

    def test_other_enumeration_rejected(self):
        with pytest.raises(ValidationError):
            Selection(choice=Tagged.ONE)
