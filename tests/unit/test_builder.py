"""Unit tests for Builder validation, defaults and header semantics."""
from __future__ import annotations

import pytest

from httpclient.app.config.settings import ClientSettings
from httpclient.app.domain.builder import Builder
from httpclient.app.domain.errors import BuilderError


def test_build_without_host_raises(settings):
    with pytest.raises(BuilderError, match="host") as exc_info:
        Builder(settings).path("/").build()

    assert exc_info.value.message == "host is required"


def test_build_without_path_raises(settings):
    with pytest.raises(BuilderError, match="path is required"):
        Builder(settings).host("example.com").build()


def test_build_without_method_raises(settings):
    with pytest.raises(BuilderError, match="method is required"):
        Builder(settings).host("example.com").path("/").method(None).build()


def test_build_with_cleared_headers_raises(settings):
    with pytest.raises(BuilderError, match="headers are required"):
        Builder(settings).host("example.com").path("/").clear_headers().build()


def test_build_with_out_of_range_port_raises(settings):
    with pytest.raises(BuilderError, match="port"):
        Builder(settings).host("example.com").path("/").port(70000).build()


def test_build_defaults(settings):
    """Unset body becomes "", defaults come from settings, Connection: close is seeded."""
    request = Builder(settings).host("example.com").path("/").build()

    assert request.body == ""
    assert request.method == "GET"
    assert request.port == 80
    assert request.http_version == "1.1"
    assert request.headers == {"Connection": "close"}


def test_defaults_follow_settings():
    custom = ClientSettings(
        HTTP_CLIENT_DEFAULT_PORT=8080,
        HTTP_CLIENT_DEFAULT_HTTP_VERSION="1.0",
        HTTP_CLIENT_DEFAULT_METHOD="HEAD",
    )
    request = Builder(custom).host("example.com").path("/").build()

    assert request.port == 8080
    assert request.http_version == "1.0"
    assert request.method == "HEAD"


def test_header_upsert_keeps_latest_value(settings):
    request = (
        Builder(settings)
        .host("example.com")
        .path("/")
        .header("X-Test", "first")
        .header("X-Test", "second")
        .build()
    )

    assert request.headers["X-Test"] == "second"
    assert list(request.headers).count("X-Test") == 1


def test_header_keys_are_case_sensitive(settings):
    request = Builder(settings).host("h").path("/").header("x-a", "1").header("X-A", "2").build()
    assert request.headers["x-a"] == "1"
    assert request.headers["X-A"] == "2"


def test_connection_header_can_be_overridden_or_removed(settings):
    overridden = Builder(settings).host("h").path("/").header("Connection", "keep-alive").build()
    removed = Builder(settings).host("h").path("/").remove_header("Connection").header("A", "b").build()

    assert overridden.headers["Connection"] == "keep-alive"
    assert "Connection" not in removed.headers


def test_builder_is_reusable_and_requests_are_independent(settings):
    builder = Builder(settings).host("example.com").path("/one")
    first = builder.build()
    second = builder.path("/two").header("X-New", "1").build()

    assert first.path == "/one"
    assert "X-New" not in first.headers
    assert second.path == "/two"
    assert second.headers["X-New"] == "1"


def test_request_is_immutable(settings):
    request = Builder(settings).host("example.com").path("/").build()

    with pytest.raises(AttributeError):
        request.method = "POST"  # type: ignore[misc]


def test_end_to_end_builder_scenario(settings):
    request = (
        Builder(settings)
        .uri("http://example.com/path:8080")
        .method("POST")
        .body("a=1")
        .header("X-Test", "v")
        .build()
    )

    assert request.host == "example.com"
    assert request.path == "/path"
    assert request.port == 8080
    assert request.method == "POST"
    assert request.headers == {"Connection": "close", "X-Test": "v"}
    assert request.body == "a=1"


def test_bare_builder_ignores_environment_defaults(monkeypatch):
    monkeypatch.setenv("HTTP_CLIENT_DEFAULT_PORT", "8443")
    monkeypatch.setenv("HTTP_CLIENT_DEFAULT_METHOD", "DELETE")
    monkeypatch.setenv("HTTP_CLIENT_DEFAULT_HTTP_VERSION", "1.0")

    request = Builder().host("example.com").path("/").build()

    assert request.port == 80
    assert request.method == "GET"
    assert request.http_version == "1.1"


def test_bare_builder_unaffected_by_invalid_environment(monkeypatch):
    monkeypatch.setenv("HTTP_CLIENT_DEFAULT_PORT", "abc")

    request = Builder().host("example.com").path("/").build()

    assert request.port == 80


def test_builder_headers_not_shared_with_built_request(settings):
    builder = Builder(settings).host("example.com").path("/")
    request = builder.build()
    builder.header("X-Late", "1")

    assert "X-Late" not in request.headers
