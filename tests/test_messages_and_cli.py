from click.testing import CliRunner

import main
from neofeed import client as client_module
from neofeed.messages import message_for
from neofeed.outcome import NetworkError, ServerError, Success, Timeout, UnknownError


def test_each_category_has_a_distinct_message():
    outcomes = [Success(payload=[]), Timeout(), ServerError(status=503), NetworkError(), UnknownError()]
    messages = [message_for(o) for o in outcomes]

    assert len(set(messages)) == len(messages)
    assert "try again" in message_for(Timeout()).lower()
    assert "503" in message_for(ServerError(status=503))
    assert "connection" in message_for(NetworkError()).lower()


def invoke(monkeypatch, tmp_path, outcome, *args):
    seen = {}

    async def fake_fetch(url, params, timeout_ms, client=None):
        seen.update(url=url, params=params, timeout_ms=timeout_ms)
        return outcome

    for var in ('NEO_API_BASE_URL', 'NEO_APP_ORIGIN', 'NEO_DEV_API_URL', 'NEO_API_TIMEOUT_MS', 'APP_ENV'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(client_module, "fetch_with_guard", fake_fetch)

    config = tmp_path / "config.yaml"
    config.write_text("api:\n  origin: https://app.example.com\nlogging:\n  json: false\n")
    result = CliRunner().invoke(main.cli, ["--config", str(config), *args])
    return result, seen


def test_cli_success_prints_count(monkeypatch, tmp_path):
    result, seen = invoke(monkeypatch, tmp_path, Success(payload=[{"id": "1"}, {"id": "2"}]), "--hazardous")

    assert result.exit_code == 0
    assert "2 objects" in result.output
    assert seen['url'] == "https://app.example.com/api/neos/"
    assert seen['params'] == {"hazardous": "true"}
    assert seen['timeout_ms'] == 30000


def test_cli_options_override_config(monkeypatch, tmp_path):
    result, seen = invoke(monkeypatch, tmp_path, Success(payload=[]),
                          "--base-url", "https://api.example.com", "--timeout-ms", "1200")

    assert result.exit_code == 0
    assert seen['url'] == "https://api.example.com/api/neos/"
    assert seen['timeout_ms'] == 1200


def test_cli_failure_exits_non_zero_with_message(monkeypatch, tmp_path):
    result, _ = invoke(monkeypatch, tmp_path, ServerError(status=503))

    assert result.exit_code == 1
    assert "503" in result.output


def test_cli_invalid_timeout_reported_without_fetching(monkeypatch, tmp_path):
    async def fail_fetch(*args, **kwargs):
        raise AssertionError("fetch should not run")

    monkeypatch.setattr(client_module, "fetch_with_guard", fail_fetch)
    config = tmp_path / "config.yaml"
    config.write_text("api:\n  origin: https://app.example.com\n")

    result = CliRunner().invoke(main.cli, ["--config", str(config)], env={'NEO_API_TIMEOUT_MS': 'soon'})

    assert result.exit_code == 1
    assert "timeout_ms" in result.output
    assert not isinstance(result.exception, ValueError)
