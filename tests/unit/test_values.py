"""Tests for runtime values: undefined, JSObject, display and serialization."""

import copy

from jssim.ast_nodes import FunctionDeclaration
from jssim.values import (
    UNDEFINED,
    JSObject,
    format_value,
    is_undefined,
    serialize_value,
)


class TestUndefined:
    def test_singleton_survives_copying(self):
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy({"v": UNDEFINED})["v"] is UNDEFINED

    def test_distinct_from_none(self):
        assert UNDEFINED is not None
        assert is_undefined(UNDEFINED)
        assert not is_undefined(None)

    def test_falsy_and_repr(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "undefined"


class TestJSObject:
    def test_missing_property_is_undefined(self):
        assert JSObject(addr="obj_0").get("nope") is UNDEFINED

    def test_set_preserves_insertion_order(self):
        obj = JSObject(addr="obj_0")
        obj.set("b", 1)
        obj.set("a", 2)
        obj.set("b", 3)
        assert list(obj.properties) == ["b", "a"]
        assert obj.get("b") == 3


class TestFormatValue:
    def test_primitives(self):
        assert format_value(UNDEFINED) == "undefined"
        assert format_value(None) == "null"
        assert format_value(True) == "true"
        assert format_value("text") == "text"
        assert format_value(3) == "3"

    def test_integral_float_drops_fraction(self):
        assert format_value(2.0) == "2"
        assert format_value(2.5) == "2.5"

    def test_object_and_function(self):
        assert format_value(JSObject(addr="obj_0")) == "[object Object]"
        assert format_value(FunctionDeclaration(name="f")) == "[Function: f]"


class TestSerializeValue:
    def test_nested_structures(self):
        inner = JSObject(addr="obj_1", properties={"u": UNDEFINED})
        outer = JSObject(addr="obj_0", properties={"inner": inner, "n": 1})
        assert serialize_value({"o": outer, "xs": [UNDEFINED]}) == {
            "o": {
                "addr": "obj_0",
                "properties": {
                    "inner": {
                        "addr": "obj_1",
                        "properties": {"u": {"__undefined__": True}},
                    },
                    "n": 1,
                },
            },
            "xs": [{"__undefined__": True}],
        }

    def test_function_reference(self):
        assert serialize_value(FunctionDeclaration(name="g")) == {"__function__": "g"}
