import threading
import time
from unittest import mock

import pytest
import requests

from password_analyzer.analyzer import PasswordAnalysis, PasswordAnalyzer, analyze
from password_analyzer.client import AnalyzerClient, Debouncer
from password_analyzer.config import AppConfig

API_URL = "http://analyzer.test/api/analyze"


def make_client(json_body=None, post_error=None, status_error=None, json_error=None, analyzer=None):
    session = mock.Mock(spec=requests.Session)
    response = mock.Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_body
    if post_error is not None:
        session.post.side_effect = post_error
    else:
        session.post.return_value = response
    return AnalyzerClient(api_url=API_URL, timeout=2, analyzer=analyzer, session=session), session


def test_remote_result_is_used():
    remote = analyze("Tr0ub4dor&3")
    client, session = make_client({"status": "success", "data": remote.to_dict()})

    assert client.analyze("Tr0ub4dor&3") == remote
    session.post.assert_called_once_with(
        API_URL,
        headers={"Content-Type": "application/json"},
        json={"password": "Tr0ub4dor&3"},
        timeout=2,
    )


def test_bare_analysis_body_is_accepted():
    remote = analyze("abc12345")
    client, _ = make_client(remote.to_dict())
    assert client.analyze("abc12345") == remote


def test_empty_password_skips_network():
    client, session = make_client()
    assert client.analyze("") == PasswordAnalysis()
    session.post.assert_not_called()


@pytest.mark.parametrize("kwargs", [
    {"post_error": requests.exceptions.ConnectionError("refused")},
    {"post_error": requests.exceptions.Timeout("slow")},
    {"status_error": requests.exceptions.HTTPError("500 Server Error")},
    {"json_error": ValueError("No JSON object could be decoded")},
    {"json_body": {"status": "success", "data": {"score": 1}}},
    {"json_body": ["not", "an", "object"]},
    {"json_body": {"status": "success", "data": {
        "score": 1, "strengthLabel": "x", "entropy": 0,
        "feedback": [{"type": "info", "message": "?"}], "suggestions": [],
    }}},
])
def test_falls_back_to_local_analysis(kwargs):
    client, _ = make_client(**kwargs)
    assert client.analyze("password") == analyze("password")


def test_fallback_uses_configured_analyzer():
    local = PasswordAnalyzer(common_passwords=["zebra-crossing"])
    client, _ = make_client(post_error=requests.exceptions.ConnectionError(), analyzer=local)

    result = client.analyze("zebra-crossing")
    assert "This is a commonly used password" in [item.message for item in result.feedback]


def test_defaults_come_from_config():
    client = AnalyzerClient()
    try:
        assert client.api_url == AppConfig.API_URL
        assert client.timeout == AppConfig.REQUEST_TIMEOUT_SECONDS
    finally:
        client.close()


def test_context_manager_closes_session():
    client, session = make_client()
    with client:
        pass
    session.close.assert_called_once_with()


def test_debouncer_runs_only_last_call():
    calls = []
    done = threading.Event()

    def record(value):
        calls.append(value)
        done.set()

    debouncer = Debouncer(record, wait=0.05)
    for value in ("p", "pa", "pas", "pass"):
        debouncer.call(value)

    assert done.wait(2)
    time.sleep(0.1)
    assert calls == ["pass"]
    assert not debouncer.pending


def test_debouncer_flush_runs_pending_call_now():
    calls = []
    debouncer = Debouncer(calls.append, wait=10)
    debouncer.call("now")
    assert debouncer.pending

    debouncer.flush()
    assert calls == ["now"]
    assert not debouncer.pending


def test_debouncer_cancel_drops_pending_call():
    calls = []
    debouncer = Debouncer(calls.append, wait=10)
    debouncer.call("never")
    debouncer.cancel()
    debouncer.flush()
    assert calls == []


def test_debouncer_default_wait():
    assert Debouncer(print).wait == AppConfig.DEBOUNCE_SECONDS


def test_debouncer_ignores_timer_superseded_by_newer_call():
    calls = []
    debouncer = Debouncer(calls.append, wait=10)
    debouncer.call("first")
    expired_generation = debouncer._generation
    debouncer.call("second")

    # A timer from the first call that fires late must not run the second call early.
    debouncer._fire(expired_generation)
    assert calls == []
    assert debouncer.pending

    debouncer.flush()
    assert calls == ["second"]


def test_debouncer_ignores_timer_after_cancel():
    calls = []
    debouncer = Debouncer(calls.append, wait=10)
    debouncer.call("dropped")
    generation = debouncer._generation
    debouncer.cancel()

    debouncer._fire(generation)
    assert calls == []
