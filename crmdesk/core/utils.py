"""Utility functions for the server."""

import re
from typing import Dict


def camel_to_snake(name):
    """Converts a camel case string to snake case."""
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()
    return name


def parse_user_agent(user_agent: str | None) -> Dict[str, str]:
    """Guess browser and operating system from a User-Agent header.

    Args:
        user_agent: Raw User-Agent value, may be None

    Returns:
        dict: {"browser": ..., "os": ...}, "Unknown" where nothing matched
    """
    browser, os_name = "Unknown", "Unknown"
    if not user_agent:
        return {"browser": browser, "os": os_name}

    # Chrome and Edge both claim "Chrome"; Chrome claims "Safari"
    if "Chrome" in user_agent and "Edg" not in user_agent:
        browser = "Chrome"
    elif "Firefox" in user_agent:
        browser = "Firefox"
    elif "Safari" in user_agent and "Chrome" not in user_agent:
        browser = "Safari"
    elif "Edg" in user_agent:
        browser = "Edge"

    if "Windows" in user_agent:
        os_name = "Windows"
    elif "Mac" in user_agent:
        os_name = "macOS"
    elif "Linux" in user_agent:
        os_name = "Linux"
    elif "Android" in user_agent:
        os_name = "Android"
    elif "iPhone" in user_agent or "iPad" in user_agent:
        os_name = "iOS"

    return {"browser": browser, "os": os_name}
