"""Tests for HtmlRenderer."""

from __future__ import annotations

import logging

import pytest

from minimark.renderers.html import HtmlRenderer
from minimark.tokens import Token, TokenType


def li(value: str) -> Token:
    return Token(TokenType.LIST_ITEM, value)


def p(value: str) -> Token:
    return Token(TokenType.PARAGRAPH, value)


class TestBlockElements:
    """Single-token rendering."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading(self, level: int) -> None:
        token = Token(TokenType[f"HEADING{level}"], "Title")
        assert HtmlRenderer().render([token]) == f"<h{level}>Title</h{level}>"

    def test_paragraph(self) -> None:
        assert HtmlRenderer().render([p("Hello")]) == "<p>Hello</p>"

    def test_text_is_unwrapped(self) -> None:
        assert HtmlRenderer().render([Token(TokenType.TEXT, "Oops")]) == "Oops"

    def test_empty_stream(self) -> None:
        assert HtmlRenderer().render([]) == ""

    def test_content_is_not_escaped(self) -> None:
        assert HtmlRenderer().render([p("<b>&amp;</b>")]) == "<p><b>&amp;</b></p>"

    def test_elements_are_concatenated_without_separators(self) -> None:
        tokens = [Token(TokenType.HEADING1, "A"), p("B"), Token(TokenType.TEXT, "C")]
        assert HtmlRenderer().render(tokens) == "<h1>A</h1><p>B</p>C"


class TestListGrouping:
    """Runs of LIST_ITEM collapse into one <ul>."""

    def test_single_run(self) -> None:
        html = HtmlRenderer().render([li("a"), li("b"), li("c")])
        assert html == "<ul><li>a</li><li>b</li><li>c</li></ul>"

    def test_runs_split_by_paragraph(self) -> None:
        html = HtmlRenderer().render([li("a"), p("paragraph"), li("b")])
        assert html == "<ul><li>a</li></ul><p>paragraph</p><ul><li>b</li></ul>"

    def test_runs_split_by_text(self) -> None:
        html = HtmlRenderer().render([li("a"), Token(TokenType.TEXT, "x"), li("b")])
        assert html == "<ul><li>a</li></ul>x<ul><li>b</li></ul>"

    def test_list_closed_at_end_of_stream(self) -> None:
        html = HtmlRenderer().render([p("intro"), li("one")])
        assert html == "<p>intro</p><ul><li>one</li></ul>"

    def test_list_followed_by_heading(self) -> None:
        html = HtmlRenderer().render([li("one"), Token(TokenType.HEADING2, "Next")])
        assert html == "<ul><li>one</li></ul><h2>Next</h2>"

    def test_empty_item(self) -> None:
        assert HtmlRenderer().render([li("")]) == "<ul><li></li></ul>"


class TestRendererInput:
    """Accepted input shapes and reuse."""

    def test_accepts_generator(self) -> None:
        tokens = (t for t in [li("a"), li("b")])
        assert HtmlRenderer().render(tokens) == "<ul><li>a</li><li>b</li></ul>"

    def test_instance_is_reusable(self) -> None:
        renderer = HtmlRenderer()
        assert renderer.render([li("a")]) == "<ul><li>a</li></ul>"
        assert renderer.render([p("b")]) == "<p>b</p>"

    def test_logs_token_count(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="minimark")
        HtmlRenderer().render([li("a"), p("b")])
        assert "Rendered 2 tokens" in caplog.text
