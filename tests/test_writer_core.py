"""
Tests for WriterCore, Property and the notation check.
"""

import pytest

from mllwriter import HTMLWriter, JSONWriter, XMLWriter
from mllwriter.exceptions import NotationError, UnbalancedTagError
from mllwriter.writer import MLLWriter, Property, WriterCore, check_notation


class TestProperty:
    """Property keeps its pairs in insertion order."""

    def test_first_pair(self):
        prop = Property("class", "superhero")
        assert prop.pairs[0] == ("class", "superhero")
        assert len(prop) == 1

    def test_add(self):
        prop = Property("class", "superhero")
        prop.add("style", "width: auto")
        assert prop.pairs[1] == ("style", "width: auto")
        assert list(prop) == [("class", "superhero"), ("style", "width: auto")]

    def test_duplicates_kept(self):
        prop = Property("class", "a")
        prop.add("class", "b")
        assert len(prop) == 2

    def test_equality(self):
        assert Property("a", "1") == Property("a", "1")
        assert Property("a", "1") != Property("a", "2")


class TestWriterCore:
    """Indent bookkeeping."""

    def test_indent_methods(self):
        core = WriterCore(4)
        assert core.indent == ""

        core.set_indent_step(2)
        assert core.indent == " " * 8

        core.dec_indent_step()
        assert core.indent == " " * 4

        core.inc_indent_step()
        assert core.indent == " " * 8

        core.set_indent_step_size(3)
        core.set_indent_step(1)
        assert core.indent == "   "

    def test_dec_never_below_zero(self):
        core = WriterCore(4)
        core.set_indent_step_size(2)
        core.inc_indent_step()
        core.set_indent_step_size(4)
        core.dec_indent_step()
        assert core.indent == ""
        core.dec_indent_step()
        assert core.indent == ""

    def test_step_size_change_keeps_indent(self):
        core = WriterCore(4)
        core.inc_indent_step()
        core.set_indent_step_size(2)
        assert core.indent == " " * 4

    def test_line_feeds(self):
        core = WriterCore(2)
        assert core.line_feed() == "\n"
        assert core.line_feed_inc() == "\n  "
        assert core.line_feed(3) == "\n\n\n  "
        assert core.line_feed_dec() == "\n"

    def test_clear(self):
        core = WriterCore(4)
        core.push("div")
        core.set_indent_step(3)
        core.clear(2)
        assert core.indent_step_size == 2
        assert core.indent == ""
        assert core.block_stack == []

    def test_pop_empty_stack(self):
        core = WriterCore(4)
        with pytest.raises(UnbalancedTagError):
            core.pop()


class TestNotation:
    """Tag and attribute names must be lowercase ASCII alphanumerics."""

    @pytest.mark.parametrize("name", ["div", "h1", "img", "x2y"])
    def test_accepts(self, name):
        assert check_notation(name) == name

    @pytest.mark.parametrize("name", ["Div", "data-id", "my tag", "", "größe", "a_b"])
    def test_rejects(self, name):
        with pytest.raises(NotationError):
            check_notation(name)

    def test_notation_error_is_value_error(self):
        with pytest.raises(ValueError):
            check_notation("DIV")


class TestSharedBehavior:
    """Behavior every writer type has in common."""

    @pytest.mark.parametrize("writer_type", [HTMLWriter, XMLWriter, JSONWriter])
    def test_is_mll_writer(self, writer_type):
        assert isinstance(writer_type(), MLLWriter)

    def test_cannot_instantiate_abstract_writer(self):
        with pytest.raises(TypeError):
            MLLWriter()

    def test_custom_indent_step_size(self):
        wr = HTMLWriter(indent_step_size=1)
        wr.line_feed_inc()
        assert wr.content == "\n "

    def test_write_and_print(self, html_writer):
        html_writer.write("<p>")
        print("hello", file=html_writer, end="")
        assert html_writer.content == "<p>hello"

    def test_str_is_content(self, html_writer):
        html_writer.single_tag("br")
        assert str(html_writer) == "<br>"

    def test_describe(self, html_writer):
        html_writer.open_tag("div")
        html_writer.inc_indent_step()
        assert html_writer.describe() == (
            "indent_step_size: 4\nindent: 4\nblock_stack: ['div']\n<div>\n"
        )

    def test_copy_is_independent(self, html_writer):
        html_writer.open_tag("div")
        clone = html_writer.copy()
        clone.close_tag()
        assert html_writer.content == "<div>"
        assert html_writer.open_blocks == 1
        assert clone.content == "<div></div>"
        assert clone.open_blocks == 0

    def test_line_feed_multiple(self, xml_writer):
        xml_writer.set_indent_step(1)
        xml_writer.line_feed(2)
        assert xml_writer.content == "\n\n  "
