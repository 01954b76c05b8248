"""Tests for envtag.output.console module."""

from __future__ import annotations

import io

from rich.console import Console

from envtag.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message_and_style(self) -> None:
        console = MockConsole()
        console.print("hello")
        console.print("v1.0.1", Style.TAG)

        assert console.messages == ["hello", "v1.0.1"]
        assert console.outputs[1].style == Style.TAG

    def test_helpers_set_style(self) -> None:
        console = MockConsole()
        console.success("Created tag d0.0.1")
        console.error("push rejected")
        console.warning("using defaults")

        assert console.outputs[0].style == Style.SUCCESS
        assert console.has_error()
        assert console.has_warning()
        assert console.find("push rejected")[0].message == "error: push rejected"

    def test_text_joins_lines(self) -> None:
        console = MockConsole()
        console.header("Found tag prefixes:")
        console.newline()
        console.info("done")
        assert console.text == "Found tag prefixes:\n\ndone"


class TestRichConsole:
    def test_markup_in_messages_is_not_interpreted(self) -> None:
        buffer = io.StringIO()
        console = RichConsole(Console(file=buffer, force_terminal=False, width=120))

        console.print("Fix [bold] parsing", Style.DIM)
        console.success("Created tag v[1]")

        out = buffer.getvalue()
        assert "Fix [bold] parsing" in out
        assert "Created tag v[1]" in out

    def test_str_of_style(self) -> None:
        assert str(Style.WARNING) == "warning"
