"""Tests for restify.routing.controllers — "METHOD /path" controller keys."""

import logging

import pytest

from restify.errors import ConfigurationError, MissingPathError, UnsupportedMethodError
from restify.routing.controllers import ControllerEntry, parse_controller_key, parse_controllers


def _noop(ctx, next) -> None:
    return None


class TestParseControllerKey:
    def test_method_and_path(self) -> None:
        assert parse_controller_key("POST /users") == (frozenset({"POST"}), "/users")

    def test_multiple_methods(self) -> None:
        methods, path = parse_controller_key("get|Head /users/:id")  # type: ignore[misc]
        assert methods == frozenset({"GET", "HEAD"})
        assert path == "/users/:id"

    def test_implicit_get_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="restify.routing"):
            assert parse_controller_key("/users") == (frozenset({"GET"}), "/users")
        assert "registering it as GET" in caplog.text

    def test_empty_key(self) -> None:
        with pytest.raises(MissingPathError):
            parse_controller_key("")

    def test_unknown_method(self) -> None:
        with pytest.raises(UnsupportedMethodError, match="FETCH"):
            parse_controller_key("GET|FETCH /users")

    def test_repeated_whitespace(self) -> None:
        assert parse_controller_key("GET  /x") == (frozenset({"GET"}), "/x")

    def test_extra_tokens(self) -> None:
        with pytest.raises(ConfigurationError, match="METHOD /path"):
            parse_controller_key("GET /a b")

    def test_whitespace_only_key(self) -> None:
        with pytest.raises(MissingPathError):
            parse_controller_key("   ")

    def test_path_without_slash_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="restify.routing"):
            assert parse_controller_key("GET users") is None
        assert 'must start with "/"' in caplog.text


class TestParseControllers:
    def test_mapping_controller(self) -> None:
        controller = {"GET /a": _noop, "DELETE /a/:id": _noop}
        entries = parse_controllers([controller])
        assert entries == [
            ControllerEntry(frozenset({"GET"}), "/a", _noop),
            ControllerEntry(frozenset({"DELETE"}), "/a/:id", _noop),
        ]

    def test_object_controller(self) -> None:
        class Users:
            pass

        users = Users()
        setattr(users, "GET /users", _noop)
        setattr(users, "PUT /users/{id}", _noop)
        users.not_callable = "ignored"  # type: ignore[attr-defined]
        entries = parse_controllers([users])
        assert [(e.path, e.methods) for e in entries] == [
            ("/users", frozenset({"GET"})),
            ("/users/{id}", frozenset({"PUT"})),
        ]

    def test_skipped_entries_do_not_abort_batch(self) -> None:
        controller = {"GET nope": _noop, "GET /yes": _noop}
        entries = parse_controllers([controller])
        assert [e.path for e in entries] == ["/yes"]

    def test_several_controllers_in_order(self) -> None:
        entries = parse_controllers([{"GET /1": _noop}, {"GET /2": _noop}])
        assert [e.path for e in entries] == ["/1", "/2"]

    def test_unknown_method_is_fatal(self) -> None:
        with pytest.raises(UnsupportedMethodError):
            parse_controllers([{"GET /ok": _noop, "BREW /coffee": _noop}])
