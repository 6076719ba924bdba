"""Tests for the bundled MyEnum example."""

import logging

from classenum.example import MyClass1, MyClass2, MyEnum, main


def test_main_round_trips_and_calls_payload():
    assert main() == "MyClass1 says hello"


def test_main_logs_each_step(caplog):
    with caplog.at_level(logging.INFO, logger="classenum.example"):
        main()
    assert "Serialized <MyEnum.MY_CLASS_1: 1>" in caplog.text
    assert "Deserialized" in caplog.text


def test_variants_share_capability():
    assert MyClass1().my_common_method() != MyClass2().my_common_method()
    for m in MyEnum.get_all():
        assert m.value.my_common_method().endswith("says hello")
