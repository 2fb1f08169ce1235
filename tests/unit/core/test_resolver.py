"""
Unit tests for shimkit.core.resolver.

These tests verify candidate ordering, the value/function duality of
``prefixed`` and the truthiness rule that decides between set and get.
"""

import dataclasses
import logging
import types
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from shimkit.core.config.schema import ResolverConfig
from shimkit.core.resolver import (
    VENDOR_PREFIXES,
    PrefixResolver,
    bind_fn,
    default_resolver,
    prefixed,
)


class Element:
    """Host whose capability is a regular method."""

    def __init__(self):
        self.calls = []

    def requestFullscreen(self, *args):
        self.calls.append(args)
        return "entered"


class TestCandidates:
    """Tests for the prefix search order."""

    def test_default_prefixes(self):
        assert VENDOR_PREFIXES == ("", "webkit", "moz", "MS", "ms")
        assert default_resolver().prefixes == VENDOR_PREFIXES

    def test_candidate_names(self):
        """Unprefixed name first, then each prefix with a capitalized name."""
        assert list(PrefixResolver().candidates("requestFullscreen")) == [
            "requestFullscreen",
            "webkitRequestFullscreen",
            "mozRequestFullscreen",
            "MSRequestFullscreen",
            "msRequestFullscreen",
        ]

    def test_resolver_is_immutable(self):
        resolver = PrefixResolver(prefixes=["", "o"])
        assert resolver.prefixes == ("", "o")
        with pytest.raises(dataclasses.FrozenInstanceError):
            resolver.prefixes = ("",)

    def test_from_config(self):
        resolver = PrefixResolver.from_config(ResolverConfig(vendor_prefixes=["", "o"]))
        assert resolver.prefixes == ("", "o")


class TestMethodResolution:
    """Tests for callable members."""

    def test_unprefixed_method_returns_bound_callable(self):
        element = Element()
        request = prefixed(element, "requestFullscreen")

        assert callable(request)
        assert request() == "entered"
        assert request("a", 1) == "entered"
        assert element.calls == [(), ("a", 1)]

    def test_function_stored_on_mapping_gets_host_as_receiver(self):
        fn = Mock(return_value="ok")
        host = {"requestFullscreen": fn}

        request = prefixed(host, "requestFullscreen")
        fn.assert_not_called()

        assert request() == "ok"
        fn.assert_called_once_with(host)

    def test_vendor_prefixed_fallback(self):
        """A prefixed-only host behaves like the unprefixed case."""
        fn = Mock(return_value="ok")
        host = SimpleNamespace(mozRequestFullscreen=fn)

        request = prefixed(host, "requestFullscreen")
        assert request("x") == "ok"
        fn.assert_called_once_with(host, "x")

    def test_unprefixed_preferred(self):
        plain = Mock()
        vendor = Mock()
        host = {"requestFullscreen": plain, "webkitRequestFullscreen": vendor}

        prefixed(host, "requestFullscreen")()

        plain.assert_called_once_with(host)
        vendor.assert_not_called()

    def test_prefix_order(self):
        """webkit is tried before moz."""
        webkit = Mock()
        moz = Mock()
        host = {"mozRequestFullscreen": moz, "webkitRequestFullscreen": webkit}

        prefixed(host, "requestFullscreen")()

        webkit.assert_called_once_with(host)
        moz.assert_not_called()

    def test_call_with_argument_list(self):
        """A supplied val is spread as the call's arguments."""
        element = Element()
        assert prefixed(element, "requestFullscreen", ["a", 1]) == "entered"
        assert element.calls == [("a", 1)]

    def test_empty_argument_list_calls(self):
        """An empty list still means "call now"."""
        element = Element()
        assert prefixed(element, "requestFullscreen", []) == "entered"
        assert element.calls == [()]

    def test_none_argument_list_calls_without_arguments(self):
        """None as the argument list calls the member with no arguments."""
        fn = Mock(return_value="ok")
        host = {"requestFullscreen": fn}

        assert prefixed(host, "requestFullscreen", None) == "ok"
        fn.assert_called_once_with(host)

    def test_static_method_on_class_not_rebound(self):
        class Clock:
            @staticmethod
            def webkitNow():
                return 42

        assert prefixed(Clock(), "now")() == 42

    def test_module_host(self):
        """Module-level functions are called as-is."""
        module = types.ModuleType("fake_host")
        module.msNow = lambda: 7
        assert prefixed(module, "now")() == 7


class TestValueResolution:
    """Tests for non-callable members."""

    def test_get(self):
        style = {"webkitTransform": "none"}
        assert prefixed(style, "transform") == "none"

    def test_set(self):
        style = {"webkitTransform": "none"}

        assert prefixed(style, "transform", "rotate(45deg)") == "rotate(45deg)"
        assert style == {"webkitTransform": "rotate(45deg)"}

    def test_set_attribute(self):
        host = SimpleNamespace(msZoom=1)
        assert prefixed(host, "zoom", 2) == 2
        assert host.msZoom == 2

    def test_presence_check_does_not_run_getters(self):
        """Only the read of the matched member runs a property getter."""

        class Screen:
            reads = 0

            @property
            def mozOrientation(self):
                Screen.reads += 1
                return "landscape"

        assert prefixed(Screen(), "orientation") == "landscape"
        assert Screen.reads == 1

    def test_getter_raising_attribute_error_still_counts_as_present(self):
        """A present name ends the search even if its getter fails."""

        class Host:
            @property
            def webkitHidden(self):
                raise AttributeError("not ready")

            mozHidden = True

        with pytest.raises(AttributeError, match="not ready"):
            prefixed(Host(), "hidden")

    def test_inherited_member_counts(self):
        class Base:
            webkitHidden = True

        class Document(Base):
            pass

        assert prefixed(Document(), "hidden") is True

    @pytest.mark.parametrize("falsy", ["", 0, None, False])
    def test_falsy_value_reads_instead_of_writing(self, falsy):
        """Sharp edge: a falsy val cannot be written and performs a get."""
        style = {"transform": "scale(2)"}

        assert prefixed(style, "transform", falsy) == "scale(2)"
        assert style == {"transform": "scale(2)"}

    def test_first_match_is_final(self):
        """The search stops at the first name even if a later one is callable."""
        vendor = Mock()
        host = {"fullscreen": False, "webkitFullscreen": vendor}

        assert prefixed(host, "fullscreen") is False
        vendor.assert_not_called()


class TestUnsupported:
    """Tests for hosts with no variant."""

    def test_returns_none(self):
        assert prefixed({}, "requestFullscreen") is None
        assert prefixed(SimpleNamespace(), "requestFullscreen") is None

    def test_unknown_prefix_ignored(self):
        host = {"oTransition": "all"}
        assert prefixed(host, "transition") is None
        assert PrefixResolver(prefixes=("", "o")).resolve(host, "transition") == "all"

    def test_debug_log(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shimkit.core.resolver")
        prefixed({}, "requestFullscreen")
        assert "no variant of 'requestFullscreen'" in caplog.text


class TestBindFn:
    """Tests for bind_fn."""

    def test_context_is_first_argument(self):
        fn = Mock(return_value=3)
        context = object()

        assert bind_fn(fn, context)(1, key=2) == 3
        fn.assert_called_once_with(context, 1, key=2)

    def test_preserves_metadata(self):
        def handler(receiver):
            """Handle."""
            return receiver

        bound = bind_fn(handler, "ctx")
        assert bound.__name__ == "handler"
        assert bound() == "ctx"
