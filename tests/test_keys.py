"""Tests for yamlenv.keys"""

import pytest
from pydantic import BaseModel

from yamlenv import KeyCollisionError
from yamlenv.keys import snake_to_camel, to_camel_case


class TestSnakeToCamel:
    """Tests for single key conversion"""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("base_url", "baseUrl"),
            ("max_retry_count", "maxRetryCount"),
            ("timeout", "timeout"),
            ("alreadyCamel", "alreadyCamel"),
            ("retry__count", "retry_Count"),
            ("_private", "Private"),
            ("version_2", "version_2"),
            ("trailing_", "trailing_"),
            ("UPPER_CASE", "UPPER_CASE"),
            ("", ""),
        ],
    )
    def test_conversion(self, key, expected):
        assert snake_to_camel(key) == expected

    @pytest.mark.parametrize("key", [1, None, True, 2.5])
    def test_non_string_keys_unchanged(self, key):
        assert snake_to_camel(key) == key

    @pytest.mark.parametrize("key", ["base_url", "retry__count", "a_b_c", "x_1_y"])
    def test_idempotent(self, key):
        assert snake_to_camel(snake_to_camel(key)) == snake_to_camel(key)


class TestToCamelCase:
    """Tests for recursive key conversion"""

    def test_nested_structure(self):
        value = {
            "api": {"base_url": "https://y.test", "timeout": 1000},
            "upstream_hosts": [{"host_name": "a", "port_number": 1}, "plain_string"],
        }

        assert to_camel_case(value) == {
            "api": {"baseUrl": "https://y.test", "timeout": 1000},
            "upstreamHosts": [{"hostName": "a", "portNumber": 1}, "plain_string"],
        }

    def test_input_not_mutated(self):
        value = {"outer_key": {"inner_key": [1, 2]}}
        to_camel_case(value)
        assert value == {"outer_key": {"inner_key": [1, 2]}}

    def test_preserves_order_and_scalars(self):
        value = {"z_last": None, "a_first": 1.5, "m_mid": [True, "x_y", 0]}
        result = to_camel_case(value)
        assert list(result) == ["zLast", "aFirst", "mMid"]
        assert result["mMid"] == [True, "x_y", 0]

    def test_tuple_stays_tuple(self):
        assert to_camel_case(({"a_b": 1},)) == ({"aB": 1},)

    @pytest.mark.parametrize("scalar", [None, 1, "some_value", False])
    def test_scalars_pass_through(self, scalar):
        assert to_camel_case(scalar) == scalar

    def test_pydantic_model_is_dumped(self):
        class Db(BaseModel):
            host_name: str

        class Config(BaseModel):
            primary_db: Db

        result = to_camel_case(Config(primary_db=Db(host_name="h")))
        assert result == {"primaryDb": {"hostName": "h"}}

    def test_idempotent(self):
        value = {"a_b": {"c_d": [{"e_f": 1}]}, "g": 2}
        once = to_camel_case(value)
        assert to_camel_case(once) == once

    def test_collision_raises_by_default(self):
        with pytest.raises(KeyCollisionError) as exc_info:
            to_camel_case({"db": {"base_url": "a", "baseUrl": "b"}})

        details = exc_info.value.details
        assert details["path"] == "db"
        assert details["key"] == "baseUrl"
        assert details["first"] == "base_url"
        assert details["second"] == "baseUrl"

    def test_collision_last_wins(self):
        result = to_camel_case({"base_url": "a", "other": 1, "baseUrl": "b"}, on_collision="last")
        assert result == {"other": 1, "baseUrl": "b"}
        assert list(result) == ["other", "baseUrl"]

    def test_unknown_policy_raises(self):
        with pytest.raises(ValueError):
            to_camel_case({}, on_collision="first")
