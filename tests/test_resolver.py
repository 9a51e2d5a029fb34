import pytest

from neofeed.resolver import (
    Environment,
    environment_from_setting,
    resolve_base_address,
    resolve_for_environment,
)


def development():
    return Environment.DEVELOPMENT


def production():
    return Environment.PRODUCTION


def test_empty_override_falls_back_to_origin():
    assert resolve_base_address("", "https://app.example.com") == "https://app.example.com"


def test_override_wins_over_origin():
    assert resolve_base_address("https://api.example.com", "https://app.example.com") == "https://api.example.com"


@pytest.mark.parametrize("override", [
    "https://api.example.com",
    "http://localhost:8000/",
    " https://spaced.example.com ",
    "relative/path",
])
@pytest.mark.parametrize("origin", ["https://app.example.com", "", "http://127.0.0.1:3000"])
def test_override_returned_verbatim(override, origin):
    assert resolve_base_address(override, origin) == override


@pytest.mark.parametrize("origin", ["https://app.example.com", "http://localhost:3000", ""])
def test_missing_override_returns_origin_exactly(origin):
    assert resolve_base_address(None, origin) == origin
    assert resolve_base_address("", origin) == origin


@pytest.mark.parametrize("value,expected", [
    ("development", Environment.DEVELOPMENT),
    ("DEV", Environment.DEVELOPMENT),
    (" local ", Environment.DEVELOPMENT),
    ("production", Environment.PRODUCTION),
    ("staging", Environment.PRODUCTION),
    ("", Environment.PRODUCTION),
    (None, Environment.PRODUCTION),
])
def test_environment_from_setting(value, expected):
    assert environment_from_setting(value) is expected


def test_development_address_used_only_in_development():
    assert resolve_for_environment(
        None, "https://app.example.com", development, "http://localhost:8000"
    ) == "http://localhost:8000"
    assert resolve_for_environment(
        None, "https://app.example.com", production, "http://localhost:8000"
    ) == "https://app.example.com"


def test_override_beats_development_address():
    assert resolve_for_environment(
        "https://api.example.com", "https://app.example.com", development, "http://localhost:8000"
    ) == "https://api.example.com"


def test_development_without_address_uses_origin():
    assert resolve_for_environment(None, "https://app.example.com", development) == "https://app.example.com"
    assert resolve_for_environment("", "https://app.example.com", development, "") == "https://app.example.com"


def test_classifier_not_consulted_when_override_set():
    calls = []

    def classify():
        calls.append(True)
        return Environment.DEVELOPMENT

    resolve_for_environment("https://api.example.com", "https://app.example.com", classify, "http://localhost:8000")
    assert calls == []
