"""Tests for fallback handler registry."""

import pytest

from neo_files.files.application.handlers import (
    generate_format_on_the_fly_with_persistence,
    return_about_blank,
    return_empty_string,
)
from neo_files.files.application.services import (
    available_handlers,
    register_handler,
    resolve_handler,
    unregister_handler,
)
from neo_files.files.core.exceptions import InvalidFallbackHandler


class HandlerHolder:
    """Class exposing a handler as a static method."""

    @staticmethod
    def return_dash(event):
        event.resolve("-")


class TestResolveHandler:
    """Test cases for resolve_handler."""

    def test_builtin_names(self):
        assert available_handlers() == [
            "generate_format_on_the_fly",
            "generate_format_on_the_fly_with_persistence",
            "raise_error",
            "return_about_blank",
            "return_default_url",
            "return_empty_string",
            "return_hash",
            "return_source_file_url",
        ]
        assert resolve_handler("return_about_blank") is return_about_blank
        assert resolve_handler(" return_empty_string ") is return_empty_string

    def test_callable_passes_through(self):
        def custom(event):
            pass

        assert resolve_handler(custom) is custom

    def test_dotted_path(self):
        handler = resolve_handler(
            "neo_files.files.application.handlers.cannot_get_url_handlers."
            "generate_format_on_the_fly_with_persistence"
        )

        assert handler is generate_format_on_the_fly_with_persistence

    def test_colon_path_with_class_attribute(self):
        handler = resolve_handler(f"{__name__}:HandlerHolder.return_dash")

        assert handler is HandlerHolder.return_dash

    @pytest.mark.parametrize("ref", [
        "unknown",
        "no_such_module_xyz.handler",
        "..foo",
        ".relative:handler",
        "neo_files.files.application.handlers:missing_handler",
        "neo_files.config.settings:FileUrlSettings.model_config",
        "",
        42,
        None,
    ])
    def test_invalid_references(self, ref):
        with pytest.raises(InvalidFallbackHandler) as exc_info:
            resolve_handler(ref)

        assert exc_info.value.error_code == "INVALID_FALLBACK_HANDLER"


class TestRegisterHandler:
    """Test cases for custom handler registration."""

    def test_register_and_unregister(self):
        def return_slash(event):
            event.resolve("/")

        register_handler("return_slash", return_slash)
        try:
            assert "return_slash" in available_handlers()
            assert resolve_handler("return_slash") is return_slash
        finally:
            assert unregister_handler("return_slash") is True

        assert "return_slash" not in available_handlers()
        assert unregister_handler("return_slash") is False

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidFallbackHandler):
            register_handler("broken", "not callable")

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError):
            register_handler(" ", lambda event: None)
