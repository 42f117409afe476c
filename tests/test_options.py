import warnings

import pytest

from jsonrpc_proxy import JSON_MEDIA_TYPE, MediaTypeOverrideWarning, RpcProxy, TransportOptions

URL = "http://localhost:1080"


def test_defaults() -> None:
    options = TransportOptions()
    assert options.timeout == 5.0
    assert options.media_type == JSON_MEDIA_TYPE
    assert options.request_headers() == {"Content-Type": JSON_MEDIA_TYPE}


def test_replace_rejects_unknown_options() -> None:
    with pytest.raises(TypeError, match="Timeuot"):
        TransportOptions().replace(Timeuot=10)


@pytest.mark.parametrize("timeout", [0, -1])
def test_timeout_must_be_positive(timeout) -> None:
    with pytest.raises(ValueError):
        TransportOptions(timeout=timeout)


def test_request_headers_merge_user_agent_and_custom_headers() -> None:
    options = TransportOptions(headers={"X-Trace": "abc"}, user_agent="jsonrpc-proxy/0.1")
    assert options.request_headers() == {
        "X-Trace": "abc",
        "Content-Type": JSON_MEDIA_TYPE,
        "User-Agent": "jsonrpc-proxy/0.1",
    }


def test_content_type_header_wins_over_media_type() -> None:
    options = TransportOptions(headers={"content-type": "text/xml"})
    assert options.content_type == "text/xml"


def test_proxy_keyword_options() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        proxy = RpcProxy(URL, timeout=10, headers={"X-Api-Key": "k"})
    assert proxy.options.timeout == 10
    assert proxy.options.headers == {"X-Api-Key": "k"}
    assert proxy.options.media_type == JSON_MEDIA_TYPE


def test_proxy_keyword_options_extend_given_options() -> None:
    proxy = RpcProxy(URL, TransportOptions(timeout=30, verify=False), headers={"A": "b"})
    assert proxy.options.timeout == 30
    assert proxy.options.verify is False
    assert proxy.options.headers == {"A": "b"}


def test_proxy_unknown_option_propagates() -> None:
    with pytest.raises(TypeError):
        RpcProxy(URL, retries=3)


def test_media_type_is_forced_to_json_with_warning() -> None:
    with pytest.warns(MediaTypeOverrideWarning, match="application/json"):
        proxy = RpcProxy(URL, media_type="text/plain")
    assert proxy.options.media_type == JSON_MEDIA_TYPE


def test_content_type_header_is_forced_to_json_with_warning() -> None:
    with pytest.warns(MediaTypeOverrideWarning):
        proxy = RpcProxy(URL, headers={"Content-Type": "text/plain", "X-Keep": "1"})
    assert proxy.options.headers == {"X-Keep": "1"}
    assert proxy.options.request_headers()["Content-Type"] == JSON_MEDIA_TYPE


def test_options_can_be_replaced_after_construction() -> None:
    proxy = RpcProxy(URL)
    proxy.options = TransportOptions(timeout=60)
    assert proxy.options.timeout == 60

    with pytest.warns(MediaTypeOverrideWarning):
        proxy.options = TransportOptions(media_type="application/xml")
    assert proxy.options.media_type == JSON_MEDIA_TYPE


def test_options_must_be_transport_options() -> None:
    proxy = RpcProxy(URL)
    with pytest.raises(TypeError, match="TransportOptions"):
        proxy.options = {"timeout": 10}
    with pytest.raises(TypeError):
        RpcProxy(URL, {"timeout": 10})


def test_caller_options_are_not_mutated() -> None:
    headers = {"Content-Type": "text/plain"}
    options = TransportOptions(headers=headers)
    with pytest.warns(MediaTypeOverrideWarning):
        RpcProxy(URL, options)
    assert options.headers == {"Content-Type": "text/plain"}
    assert headers == {"Content-Type": "text/plain"}


def test_override_warning_points_at_constructor_call() -> None:
    with pytest.warns(MediaTypeOverrideWarning) as record:
        RpcProxy(URL, media_type="text/plain")
    assert record[0].filename == __file__


def test_override_warning_points_at_options_assignment() -> None:
    proxy = RpcProxy(URL)
    with pytest.warns(MediaTypeOverrideWarning) as record:
        proxy.options = TransportOptions(media_type="text/plain")
    assert record[0].filename == __file__


@pytest.mark.parametrize("timeout", [(3.05, 27), (None, 10), None])
def test_timeout_accepts_connect_read_pair(timeout) -> None:
    assert TransportOptions(timeout=timeout).timeout == timeout


@pytest.mark.parametrize("timeout", [(0, 10), (5, -1), (1, 2, 3)])
def test_bad_timeout_pair(timeout) -> None:
    with pytest.raises(ValueError):
        TransportOptions(timeout=timeout)
