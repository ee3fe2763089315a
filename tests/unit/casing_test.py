"""Unit tests for the method-name casing transform."""

import pytest

from idl2rs.core.casing import camel_to_snake


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("GetCount", "get_count"),
        ("GetWebView2Settings", "get_web_view2_settings"),
        ("ABCdef", "abcdef"),
        ("add_NavigationStarting", "add_navigation_starting"),
        ("get_IsVisible", "get_is_visible"),
        ("Navigate", "navigate"),
        ("navigate", "navigate"),
        ("put_UserAgent", "put_user_agent"),
        ("ExecuteScript", "execute_script"),
        ("GetHTTPResponse", "get_httpresponse"),
        ("X", "x"),
        ("", ""),
    ],
)
def test_camel_to_snake(name: str, expected: str) -> None:
    assert camel_to_snake(name) == expected


def test_separator_only_after_non_uppercase() -> None:
    """A run of capitals gets no internal underscores."""
    assert camel_to_snake("CallDevToolsProtocolMethodForSession") == "call_dev_tools_protocol_method_for_session"
    assert camel_to_snake("OpenDevToolsWindow") == "open_dev_tools_window"
    assert camel_to_snake("IOStream") == "iostream"


def test_digit_starts_lowercase_run() -> None:
    assert camel_to_snake("Version2Info") == "version2_info"


def test_any_other_character_starts_lowercase_run() -> None:
    assert camel_to_snake("$Value") == "$_value"


def test_existing_underscores_are_not_doubled() -> None:
    assert camel_to_snake("get_Name") == "get_name"
    assert camel_to_snake("Already_Snake") == "already_snake"


@pytest.mark.parametrize("name", ["get_count", "get_web_view2_settings", "abcdef", "add_navigation_starting"])
def test_stable_on_snake_case(name: str) -> None:
    assert camel_to_snake(name) == name
    assert camel_to_snake(camel_to_snake(name)) == camel_to_snake(name)


@pytest.mark.parametrize("name", ["GetCount", "GetWebView2Settings", "ABCdef", "put_IsMuted"])
def test_idempotent(name: str) -> None:
    once = camel_to_snake(name)
    assert camel_to_snake(once) == once
