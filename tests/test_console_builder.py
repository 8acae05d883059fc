"""
Console builder tests

Chaining, named/hex/decoration styles, CSS, terminating methods, the format
options policy and reset-after-flush guarantees.
"""

import pytest

from stylog.lib.ansi import RESET, StyleError, styles
from stylog.lib.colors import ColorError, hex_to_ansi
from stylog.lib.format import format_with_options
from stylog.lib.statement import Console, DEFAULT_FORMAT_OPTIONS, statement
from stylog.models.styles import StyleKind


RED = styles.token_get(StyleKind.FOREGROUND, "red")
BLACK_BG = styles.token_get(StyleKind.BACKGROUND, "black")


class TestChaining:
    """Builder calls mutate pending state and return the builder"""

    def test_every_builder_call_returns_self(self, console):
        assert console.raw("a") is console
        assert console.fg("red") is console
        assert console.bg("black") is console
        assert console.decoration("dim") is console
        assert console.fg_hex("#000") is console
        assert console.bg_hex("#fff") is console
        assert console.styled(RED) is console
        assert console.close() is console
        assert console.apply() is console
        assert console.css(color="red") is console
        assert console.options(None) is console

    def test_prepare_without_arguments_is_identity(self, console):
        assert console._prepare() is console
        assert console.pending.items == []

    def test_raw_without_values_is_noop(self, console):
        console.raw()
        assert console.pending.items == []

    def test_css_does_not_touch_items(self, console):
        console.css(color="red")
        assert console.pending.items == []
        assert console.pending.css == ["color: red"]

    def test_unknown_style_leaves_state_unchanged(self, console):
        with pytest.raises(StyleError):
            console.fg("chartreuse", "text")
        assert console.pending.items == []

    def test_reset_not_settable_as_decoration(self, console):
        with pytest.raises(StyleError):
            console.decoration("reset")

    def test_bad_hex(self, console):
        with pytest.raises(ColorError):
            console.fg_hex("#zzzzzz", "text")
        assert console.pending.items == []

    def test_instances_do_not_share_state(self, sink):
        first = Console(sink=sink)
        second = statement(sink=sink)
        first.fg("red", "only in first")
        assert second.pending.items == []


class TestStyledOutput:
    """Flushed statements carry the expected fused strings"""

    def test_named_foreground(self, console, sink):
        console.fg("red", "hello").close().log()
        assert sink.last == ("log", (f"{RED}hello{RESET}",))

    @pytest.mark.parametrize("kind", [StyleKind.FOREGROUND, StyleKind.BACKGROUND])
    def test_every_named_color(self, console, sink, kind):
        for name in styles.styles_listByKind(kind):
            console.style(kind, name, "Some log data").close().log()
            token = styles.token_get(kind, name)
            assert sink.last == ("log", (f"{token}Some log data{RESET}",))

    def test_every_decoration(self, console, sink):
        for name in styles.styles_listByKind(StyleKind.DECORATION):
            console.decoration(name, "Some log data").close().log()
            token = styles.token_get(StyleKind.DECORATION, name)
            assert sink.last == ("log", (f"{token}Some log data{RESET}",))

    def test_armed_color_with_text_at_flush(self, console, sink):
        """Armed tokens and the reset stack until the flush text arrives"""
        console.fg("red").close().log("world")
        assert sink.last == ("log", (f"{RED}{RESET}world",))

    def test_hex_foreground(self, console, sink):
        console.fg_hex("#5AC981", "x").close().log()
        assert sink.last == ("log", (f"{hex_to_ansi('#5AC981', 38)}x{RESET}",))

    def test_hex_background(self, console, sink):
        console.bg_hex("#5AC981", "x").close().log()
        assert sink.last == ("log", (f"{hex_to_ansi('#5AC981', 48)}x{RESET}",))

    def test_stacked_backgrounds_and_foreground(self, console, sink):
        console.bg("black").bg("black").fg("red", "text").close().log()
        assert sink.last == ("log", (f"{BLACK_BG}{BLACK_BG}{RED}text{RESET}",))

    def test_raw_before_styled(self, console, sink):
        console.raw("unstyled before").fg("red", "styled data").close().log()
        assert sink.last == ("log", ("unstyled before", f"{RED}styled data{RESET}"))

    def test_multiple_colors(self, console, sink):
        green = styles.token_get(StyleKind.FOREGROUND, "green")
        console.fg("red", "Red ").fg("green", "Green").close().log()
        assert sink.last == ("log", (f"{RED}Red ", f"{green}Green{RESET}"))

    def test_non_text_payload_identity(self, console, sink):
        def some_function():
            pass

        console.fg("red", "Some log data", some_function).close().log()
        assert sink.last == ("log", (f"{RED}Some log data", some_function, RESET))
        assert sink.last[1][1] is some_function

    def test_object_between_armed_style_and_text(self, console, sink):
        data = [1, 2, 3]
        console.fg("red", data).raw("text").log()
        method, args = sink.last
        assert args[0] is data
        assert args[1] == f"{RED}text"


class TestCss:
    """CSS declarations"""

    def test_css_declarations(self, console, sink):
        console.css({
            "color": "red",
            "fontFamily": "system-ui",
            "fontSize": "4rem",
            "WebkitTextStroke": "1px black",
            "fontWeight": "bold",
        }).log("Some log data")

        assert sink.last == (
            "log",
            (
                "%cSome log data",
                "color: red; font-family: system-ui; font-size: 4rem; "
                "-webkit-text-stroke: 1px black; font-weight: bold",
            ),
        )

    def test_css_keyword_arguments(self, console, sink):
        console.css(font_weight="bold").log("x")
        assert sink.last == ("log", ("%cx", "font-weight: bold"))

    def test_css_groups_accumulate(self, console, sink):
        console.css(color="red").css(fontSize=12).log("x")
        assert sink.last == ("log", ("%cx", "color: red; font-size: 12"))

    def test_css_cleared_after_flush(self, console, sink):
        console.css(color="red").log("x")
        console.log("y")
        assert sink.last == ("log", ("y",))
        assert console.pending.css is None


class TestTerminatingMethods:
    """log, info, group and group_collapsed flush to the matching sink method"""

    @pytest.mark.parametrize("method", ["log", "info", "group", "group_collapsed"])
    def test_routes_to_sink(self, console, sink, method):
        getattr(console.fg("red", "label").close(), method)()
        assert sink.last == (method, (f"{RED}label{RESET}",))

    def test_group_collapsed_alias(self, console, sink):
        console.groupCollapsed("label")
        assert sink.last == ("group_collapsed", ("label",))

    def test_returns_sink_result(self, console):
        assert console.log("x") == "log"

    def test_flush_with_trailing_args_only(self, console, sink):
        console.log("count:", 5)
        assert sink.last == ("log", ("count:", 5))

    def test_empty_flush(self, console, sink):
        console.log()
        assert sink.last == ("log", ())

    def test_passthrough(self, console, sink):
        console.fg("red")
        console.warn("careful")
        assert sink.last == ("warn", ("careful",))
        # pass-through calls do not consume the pending statement
        assert len(console.pending.items) == 1

    def test_unknown_attribute(self, console):
        with pytest.raises(AttributeError):
            console.not_a_method


class TestResetAfterFlush:
    """Nothing survives a flush"""

    def test_no_residue(self, console, sink):
        console.fg("red", "first").bg("black").log()
        console.log("second")
        assert sink.last == ("log", ("second",))

    def test_pending_statement_cleared_in_place(self, console):
        pending = console.pending
        console.fg("red", "x").css(color="red").log()
        assert console.pending is pending
        assert pending.items == []
        assert pending.css is None

    def test_state_reset_when_sink_raises(self, failing_sink):
        console = Console(sink=failing_sink)
        console.fg("red", "boom").css(color="red").options({"depth": 1})

        with pytest.raises(RuntimeError, match="sink unavailable"):
            console.log()

        assert console.pending.items == []
        assert console.pending.css is None
        assert console.format_options is DEFAULT_FORMAT_OPTIONS

    def test_state_reset_when_formatter_raises(self, sink):
        def broken_formatter(options, *args):
            raise ValueError("bad options")

        console = Console(sink=sink, formatter=broken_formatter)
        console.fg("red", "x")
        with pytest.raises(ValueError):
            console.log()
        assert console.pending.items == []
        assert sink.calls == []


class TestFormatOptions:
    """Options-aware formatting and the reset-to-default policy"""

    def test_default_options(self):
        assert DEFAULT_FORMAT_OPTIONS == {"colors": True}
        assert Console.DEFAULT_FORMAT_OPTIONS is DEFAULT_FORMAT_OPTIONS

    def test_default_options_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_FORMAT_OPTIONS["colors"] = False
        assert DEFAULT_FORMAT_OPTIONS["colors"] is True

    def test_formatter_probed_from_sink(self):
        class FormattingSink:
            def log(self, *args):
                return args

            @staticmethod
            def format_with_options(options, *args):
                return "|".join(str(arg) for arg in args)

        console = Console(sink=FormattingSink())
        assert console.log("a", "b") == ("a|b",)

    def test_no_formatter_spreads_arguments(self, console, sink):
        assert console.formatter is None
        console.log("a", "b")
        assert sink.last == ("log", ("a", "b"))

    def test_default_formatting(self, sink):
        console = Console(sink=sink, formatter=format_with_options)
        console.fg("red", "Some log data").close().log()
        assert sink.last == ("log", (f"{RED}Some log data{RESET}",))

    def test_default_formatting_non_text(self, sink):
        def some_function():
            pass

        console = Console(sink=sink, formatter=format_with_options)
        console.fg("red", "Some log data", some_function).close().log()
        expected = format_with_options(
            DEFAULT_FORMAT_OPTIONS, f"{RED}Some log data", some_function, RESET
        )
        assert sink.last == ("log", (expected,))

    def test_custom_options(self, sink):
        console = Console(sink=sink, formatter=format_with_options)
        console.options({"colors": False, "breakLength": 40}).log("See object %O", {"foo": 42})
        expected = format_with_options({"colors": False, "breakLength": 40}, "See object %O", {"foo": 42})
        assert sink.last == ("log", (expected,))
        assert expected == "See object {'foo': 42}"

    def test_none_disables_formatting_for_one_flush(self, sink):
        console = Console(sink=sink, formatter=format_with_options)

        console.options(None).log("a", "b")
        assert sink.last == ("log", ("a", "b"))

        console.log("a", "b")
        assert sink.last == ("log", ("a b",))

    def test_empty_options_skip_formatting(self, sink):
        console = Console(sink=sink, formatter=format_with_options)
        console.options({}).log("a", "b")
        assert sink.last == ("log", ("a", "b"))

    def test_options_persist_until_flush(self, console):
        custom = {"colors": False}
        console.options(custom).fg("red")
        assert console.format_options is custom
        console.log()
        assert console.format_options is DEFAULT_FORMAT_OPTIONS
