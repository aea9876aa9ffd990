"""
Tests for the XMLWriter.
"""

import pytest

from mllwriter import Property, XMLWriter
from mllwriter.exceptions import NotationError, UnbalancedTagError, WriterStateError


class TestXMLWriter:

    def test_new_and_clear(self):
        wr = XMLWriter()
        assert wr.content == ""
        assert wr.core.indent_step_size == 2
        assert wr.core.indent == ""
        assert wr.core.block_stack == []

        wr.open_tag("div")
        wr.set_indent_step(4)
        wr.set_indent_step_size(8)
        wr.clear()
        assert wr.content == ""
        assert wr.core.indent_step_size == 2
        assert wr.core.indent == ""
        assert wr.core.block_stack == []

    def test_single_element(self, xml_writer):
        xml_writer.single_tag("img")
        assert xml_writer.content == "<img>"

    def test_dual_elements(self, xml_writer):
        xml_writer.open_tag("div")
        xml_writer.close_tag()
        assert xml_writer.content == "<div></div>"

        xml_writer.clear()
        xml_writer.open_tag_w_property("div", "class", "container")
        assert xml_writer.content == '<div class="container">'

    def test_mixed_entries(self, xml_writer):
        xml_writer.open_tag("div")
        xml_writer.add_property("class", "container")
        xml_writer.line_feed_inc()
        xml_writer.single_tag("img")
        xml_writer.add_property("style", "width: auto")
        xml_writer.line_feed_dec()
        xml_writer.close_tag()
        assert xml_writer.content == '<div class="container">\n  <img style="width: auto">\n</div>'

    def test_property_string(self, xml_writer):
        properties = Property("class", "container")
        properties.add("style", "width: auto")
        xml_writer.single_tag("img")
        xml_writer.add_properties(properties)
        assert xml_writer.content == '<img class="container" style="width: auto">'

        xml_writer.clear()
        xml_writer.single_tag("img")
        xml_writer.add_property("style", "width: auto")
        assert xml_writer.content == '<img style="width: auto">'

    def test_comment(self, xml_writer):
        xml_writer.add_comment("generated")
        assert xml_writer.content == "<!-- generated -->"

    def test_declaration(self, xml_writer):
        xml_writer.declaration()
        xml_writer.line_feed()
        xml_writer.open_tag("note")
        xml_writer.close_tag()
        assert xml_writer.content == '<?xml version="1.0" encoding="UTF-8"?>\n<note></note>'

    def test_property_after_declaration(self, xml_writer):
        xml_writer.declaration()
        with pytest.raises(WriterStateError):
            xml_writer.add_property("lang", "en")

    def test_quote_value(self, xml_writer):
        assert xml_writer.quote_value('a "b" & <c>') == "a &quot;b&quot; &amp; &lt;c&gt;"
        assert xml_writer.quote_value("it's") == "it's"

    def test_text_is_escaped(self, xml_writer):
        xml_writer.open_tag("title")
        xml_writer.add_text("R&D <draft>")
        xml_writer.close_tag()
        assert xml_writer.content == "<title>R&amp;D &lt;draft&gt;</title>"

    def test_uppercase_tag(self, xml_writer):
        with pytest.raises(NotationError):
            xml_writer.open_tag("Note")

    def test_close_without_open(self, xml_writer):
        with pytest.raises(UnbalancedTagError):
            xml_writer.close_tag()
