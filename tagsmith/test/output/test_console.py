"""Tests for tagsmith.output.console module."""

from __future__ import annotations

import pytest

from tagsmith.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixed_helpers(self) -> None:
        console = MockConsole()
        console.success("tagged v1.0.0")
        console.info("regenerating CHANGELOG.md")
        console.error("working tree has uncommitted changes")
        assert console.messages == [
            "OK tagged v1.0.0",
            "info: regenerating CHANGELOG.md",
            "error: working tree has uncommitted changes",
        ]
        assert console.has_error()

    def test_block_is_recorded_verbatim(self) -> None:
        console = MockConsole()
        console.block("[main 1a2b3c4] 🔖 chore(release): prepare for v1.0.0")
        assert console.text == "[main 1a2b3c4] 🔖 chore(release): prepare for v1.0.0"

    def test_find(self) -> None:
        console = MockConsole()
        console.header("Tag v1.0.0")
        console.block("tag v1.0.0")
        console.info("tagged v0.9.0")
        assert [o.style for o in console.find("v1.0.0")] == [Style.HEADER, Style.DEFAULT]


class TestRichConsole:
    def test_markup_in_messages_is_not_interpreted(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("invalid version tag: '[bold]v1'")
        console.block("[#42] fix")

        out = capsys.readouterr().out
        assert "[bold]v1" in out
        assert "[#42] fix" in out
