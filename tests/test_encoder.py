"""Tests for encoder module"""

import pytest

from toonify.core.encoder import json_to_toon, serialize_value
from toonify.core.errors import InputShapeError, ToonifyError


class TestJsonToToon:
    """Test suite for json_to_toon"""

    def test_convert_records(self, users_json, users_toon):
        """Test converting a record collection to TOON"""
        assert json_to_toon(users_json) == users_toon

    def test_compact_output(self):
        """Test compact mode drops separators between header and rows"""
        data = {"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}

        assert json_to_toon(data, compact=True) == "users[2]{id,name}:1,Alice2,Bob"

    def test_special_characters_written_as_is(self):
        """Test that commas and quotes in values are not escaped"""
        data = {
            "data": [
                {"text": "Hello, World!", "symbol": "@#$"},
                {"text": 'Test "quotes"', "symbol": "&*%"},
            ]
        }

        expected = 'data[2]{text,symbol}:\nHello, World!,@#$\nTest "quotes",&*%'
        assert json_to_toon(data) == expected

    def test_none_values(self):
        """Test that None becomes an empty value"""
        data = {"items": [{"id": 1, "value": None}, {"id": 2, "value": None}]}

        assert json_to_toon(data) == "items[2]{id,value}:\n1,\n2,"

    def test_nested_values_as_compact_json(self):
        """Test that objects and arrays are written as compact JSON"""
        data = {"records": [{"id": 1, "meta": {"type": "A", "count": 5}, "tags": ["x", "y"]}]}

        expected = 'records[1]{id,meta,tags}:\n1,{"type":"A","count":5},["x","y"]'
        assert json_to_toon(data) == expected

    def test_field_order_follows_first_record(self):
        """Test that header fields keep the first record's key order"""
        data = {"rows": [{"b": 2, "a": 1}, {"a": 3, "b": 4, "extra": 5}]}

        assert json_to_toon(data) == "rows[2]{b,a}:\n2,1\n4,3"

    def test_falsy_values_count_as_present(self):
        """Test that field presence is checked by key, not truthiness"""
        data = {"rows": [{"n": 1, "flag": True}, {"n": 0, "flag": False}]}

        assert json_to_toon(data) == "rows[2]{n,flag}:\n1,true\n0,false"

    def test_single_record_compact(self):
        """Test compact mode with one record"""
        data = {"one": [{"a": "x"}]}

        assert json_to_toon(data, compact=True) == "one[1]{a}:x"


class TestInputShapeErrors:
    """Test suite for rejected record collections"""

    def test_empty_array(self):
        with pytest.raises(InputShapeError, match="Array cannot be empty"):
            json_to_toon({"users": []})

    @pytest.mark.parametrize("data", ["not an object", [1, 2, 3], None, 42])
    def test_non_object_input(self, data):
        with pytest.raises(InputShapeError, match="Input must be an object"):
            json_to_toon(data)

    def test_multiple_root_keys(self):
        data = {"users": [{"id": 1}], "posts": [{"id": 2}]}

        with pytest.raises(InputShapeError, match="exactly one root key"):
            json_to_toon(data)

    def test_no_root_keys(self):
        with pytest.raises(InputShapeError, match="exactly one root key"):
            json_to_toon({})

    def test_value_not_array(self):
        with pytest.raises(InputShapeError, match="Value must be an array"):
            json_to_toon({"users": "not an array"})

    def test_missing_field(self):
        """Test that the first offending row and field are named"""
        data = {"users": [{"id": 1, "name": "Alice"}, {"id": 2}, {"name": "C"}]}

        with pytest.raises(InputShapeError, match='Row 1 is missing field "name"'):
            json_to_toon(data)

    def test_record_not_object(self):
        data = {"users": [{"id": 1}, "bob"]}

        with pytest.raises(InputShapeError, match="Row 1 must be an object"):
            json_to_toon(data)

    def test_is_toonify_error(self):
        """Test that shape errors share the package base class"""
        with pytest.raises(ToonifyError):
            json_to_toon({"users": []})


class TestSerializeValue:
    """Test suite for serialize_value"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""),
            ("text", "text"),
            (42, "42"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
            ({"a": [1, 2]}, '{"a":[1,2]}'),
            ([], "[]"),
            ({"name": "Zoë"}, '{"name":"Zoë"}'),
        ],
    )
    def test_serialize(self, value, expected):
        assert serialize_value(value) == expected
