"""request parameter extraction unit tests."""

from types import SimpleNamespace

import httpx
import pytest

from k1s0_paging import (
    CURSOR_TYPE,
    OFFSET_TYPE,
    Options,
    PaginationType,
    UnsupportedTypeError,
    get_cursor_from_request,
    get_limit_from_request,
    get_offset_from_request,
    get_pagination_type,
    new_options,
    parse_int64,
)

BASE_URL = "http://api.local/v1/items"


def make_request(query: str = "") -> httpx.Request:
    url = f"{BASE_URL}?{query}" if query else BASE_URL
    return httpx.Request("GET", url)


# --- parse_int64 tests ---


def test_parse_int64_valid() -> None:
    assert parse_int64("42") == 42
    assert parse_int64("-3") == -3
    assert parse_int64("+7") == 7
    assert parse_int64("0") == 0


@pytest.mark.parametrize("raw", [None, "", "abc", "1.5", " 10", "10 ", "1_000", "0x10", "10\n"])
def test_parse_int64_malformed(raw: str | None) -> None:
    assert parse_int64(raw) is None


def test_parse_int64_range() -> None:
    assert parse_int64("9223372036854775807") == 2**63 - 1
    assert parse_int64("-9223372036854775808") == -(2**63)
    assert parse_int64("9223372036854775808") is None


# --- limit tests ---


def test_limit_absent_uses_default() -> None:
    opts = Options(default_limit=25)
    assert get_limit_from_request(make_request(), opts) == 25


def test_limit_empty_uses_default() -> None:
    opts = Options(default_limit=25)
    assert get_limit_from_request(make_request("limit="), opts) == 25


def test_limit_malformed_uses_default() -> None:
    opts = Options(default_limit=25)
    assert get_limit_from_request(make_request("limit=abc"), opts) == 25


def test_limit_parsed() -> None:
    assert get_limit_from_request(make_request("limit=42"), new_options()) == 42


def test_limit_clamped_to_max() -> None:
    opts = Options(max_limit=100)
    assert get_limit_from_request(make_request("limit=500"), opts) == 100


def test_limit_unbounded_when_max_zero() -> None:
    opts = Options(max_limit=0)
    assert get_limit_from_request(make_request("limit=500"), opts) == 500


def test_limit_unbounded_when_max_negative() -> None:
    opts = Options(max_limit=-1)
    assert get_limit_from_request(make_request("limit=500"), opts) == 500


def test_limit_malformed_default_is_clamped() -> None:
    opts = Options(default_limit=200, max_limit=100)
    assert get_limit_from_request(make_request("limit=abc"), opts) == 100


def test_limit_absent_default_is_not_clamped() -> None:
    opts = Options(default_limit=200, max_limit=100)
    assert get_limit_from_request(make_request(), opts) == 200


def test_limit_negative_is_passed_through() -> None:
    assert get_limit_from_request(make_request("limit=-5"), new_options()) == -5


def test_limit_custom_key_name() -> None:
    opts = Options(limit_key_name="per_page")
    assert get_limit_from_request(make_request("per_page=7&limit=9"), opts) == 7


# --- offset / cursor tests ---


def test_offset_parsed() -> None:
    assert get_offset_from_request(make_request("offset=40"), new_options()) == 40


@pytest.mark.parametrize("query", ["", "offset=", "offset=x1"])
def test_offset_absent_or_malformed_is_zero(query: str) -> None:
    assert get_offset_from_request(make_request(query), new_options()) == 0


def test_offset_negative_is_passed_through() -> None:
    assert get_offset_from_request(make_request("offset=-10"), new_options()) == -10


def test_cursor_parsed() -> None:
    assert get_cursor_from_request(make_request("cursor=1700000000"), new_options()) == 1700000000


@pytest.mark.parametrize("query", ["", "cursor=", "cursor=next"])
def test_cursor_absent_or_malformed_is_zero(query: str) -> None:
    assert get_cursor_from_request(make_request(query), new_options()) == 0


def test_cursor_custom_key_name() -> None:
    opts = Options(cursor_key_name="since")
    assert get_cursor_from_request(make_request("since=12"), opts) == 12


def test_repeated_key_first_value_wins() -> None:
    assert get_offset_from_request(make_request("offset=5&offset=9"), new_options()) == 5


# --- request shapes ---


def test_request_from_query_params_object() -> None:
    request = SimpleNamespace(query_params={"limit": "15"})
    assert get_limit_from_request(request, new_options()) == 15


class ScopeMappingRequest(dict):
    """Mapping over a scope that also exposes query_params, like Starlette."""

    def __init__(self, query_params: dict[str, str]) -> None:
        super().__init__(type="http", path="/v1/items")
        self.query_params = query_params


def test_request_mapping_with_query_params_prefers_query_params() -> None:
    request = ScopeMappingRequest({"limit": "12"})
    assert get_limit_from_request(request, new_options()) == 12


def test_request_from_url_params_object() -> None:
    request = SimpleNamespace(url=httpx.URL(f"{BASE_URL}?offset=30"))
    assert get_offset_from_request(request, new_options()) == 30


def test_request_from_mapping_with_list_values() -> None:
    query = {"limit": ["11", "99"], "offset": []}
    assert get_limit_from_request(query, new_options()) == 11
    assert get_offset_from_request(query, new_options()) == 0


def test_request_from_url_string() -> None:
    assert get_offset_from_request(f"{BASE_URL}?offset=8", new_options()) == 8


def test_request_from_raw_query_string() -> None:
    assert get_limit_from_request("limit=3&offset=6", new_options()) == 3


def test_unsupported_request_type() -> None:
    with pytest.raises(UnsupportedTypeError, match="int"):
        get_limit_from_request(123, new_options())


# --- pagination type tests ---


def test_pagination_type_cursor() -> None:
    assert get_pagination_type(make_request("cursor=7"), new_options()) == CURSOR_TYPE


@pytest.mark.parametrize("query", ["", "cursor=0", "cursor=-3", "cursor=abc", "offset=10"])
def test_pagination_type_offset(query: str) -> None:
    assert get_pagination_type(make_request(query), new_options()) == OFFSET_TYPE


def test_pagination_type_default_options() -> None:
    assert get_pagination_type(make_request("cursor=7")) == PaginationType.CURSOR
    assert get_pagination_type(make_request("since=7")) == PaginationType.OFFSET


def test_pagination_type_compares_to_string() -> None:
    assert get_pagination_type(make_request("cursor=1")) == "cursor"
    assert get_pagination_type(make_request()) == "offset"
