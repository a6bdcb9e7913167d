"""Unit tests for helper functions."""

import pytest

from crmdesk.core.utils import camel_to_snake, parse_user_agent

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
EDGE_WINDOWS = CHROME_WINDOWS + " Edg/120.0.0.0"
SAFARI_MAC = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
)
FIREFOX_LINUX = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("dateFormat", "date_format"),
        ("defaultModule", "default_module"),
        ("theme", "theme"),
        ("date_format", "date_format"),
    ],
)
def test_camel_to_snake(name, expected):
    assert camel_to_snake(name) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "user_agent, expected",
    [
        (CHROME_WINDOWS, {"browser": "Chrome", "os": "Windows"}),
        (EDGE_WINDOWS, {"browser": "Edge", "os": "Windows"}),
        (SAFARI_MAC, {"browser": "Safari", "os": "macOS"}),
        (FIREFOX_LINUX, {"browser": "Firefox", "os": "Linux"}),
        ("curl/8.4.0", {"browser": "Unknown", "os": "Unknown"}),
        (None, {"browser": "Unknown", "os": "Unknown"}),
        ("", {"browser": "Unknown", "os": "Unknown"}),
    ],
)
def test_parse_user_agent(user_agent, expected):
    assert parse_user_agent(user_agent) == expected


@pytest.mark.unit
def test_parse_user_agent_checks_os_in_fixed_order():
    # Android agents also mention Linux, iOS agents mention Mac OS X
    android = "Mozilla/5.0 (Linux; Android 14) Chrome/120.0 Mobile Safari/537.36"
    iphone = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) Safari/604.1"
    assert parse_user_agent(android)["os"] == "Linux"
    assert parse_user_agent(iphone)["os"] == "macOS"
    assert parse_user_agent("Mozilla/5.0 (iPad; CPU OS 17_1)")["os"] == "iOS"
