"""
Base address selection for the NEO data API.

Pure string selection, no network access. Environment policy is injected
by the caller instead of being guessed from the shape of an address.
"""

from enum import Enum
from typing import Callable, Optional


class Environment(Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


DEVELOPMENT_SETTINGS = ("dev", "development", "local")


def environment_from_setting(value: Optional[str]) -> Environment:
    """Classify an explicit environment setting such as APP_ENV."""
    if value and value.strip().lower() in DEVELOPMENT_SETTINGS:
        return Environment.DEVELOPMENT
    return Environment.PRODUCTION


def resolve_base_address(explicit_override: Optional[str], current_origin: str) -> str:
    """Return the override when it is set, otherwise the page origin.

    Both values are returned verbatim.
    """
    if explicit_override:
        return explicit_override
    return current_origin


def resolve_for_environment(
    explicit_override: Optional[str],
    current_origin: str,
    classify: Callable[[], Environment],
    development_address: Optional[str] = None,
) -> str:
    """Resolve the base address using an injected environment classifier.

    Order: override, then the development address when ``classify`` reports
    a development environment and one was supplied, then the origin.
    """
    if explicit_override:
        return explicit_override
    if development_address and classify() is Environment.DEVELOPMENT:
        return development_address
    return resolve_base_address(None, current_origin)
