"""
Document renderer.
Walks a tree of Node models and drives any MLLWriter to produce the document.
"""

from datetime import datetime, timezone as dt_timezone
from typing import Dict, List, Optional, Union

import pytz

from ..exceptions import DocumentError
from ..html_writer import HTMLWriter
from ..json_writer import JSONWriter
from ..markup import MarkupWriter
from ..models import Node, OutputFormat, WriterConfig
from ..utils import get_logger
from ..writer import MLLWriter, Property
from ..xml_writer import XMLWriter

WRITER_TYPES = {
    OutputFormat.HTML: HTMLWriter,
    OutputFormat.XML: XMLWriter,
    OutputFormat.JSON: JSONWriter,
}


def writer_for(
    output_format: Union[OutputFormat, str],
    config: Optional[WriterConfig] = None
) -> MLLWriter:
    """Create a fresh writer for the format with the configured indent step size."""
    config = config or WriterConfig()
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        raise DocumentError(f"Unknown output format: {output_format}") from None
    return WRITER_TYPES[fmt](config.indent_step_size(fmt))


class DocumentRenderer:
    """
    Renders document trees with HTML, XML or JSON writers.

    Markup documents put every child on its own indented line and close
    childless elements on the same line. JSON documents need exactly one
    root element; its tag is not written.
    """

    def __init__(self, config: Optional[WriterConfig] = None):
        self.config = config or WriterConfig()
        self.logger = get_logger()

    def render(self, nodes: List[Node], output_format: Union[OutputFormat, str]) -> str:
        """
        Render nodes into a new writer of the given format.

        Args:
            nodes: Top level nodes of the document
            output_format: Target format

        Returns:
            The rendered document
        """
        writer = writer_for(output_format, self.config)
        self.render_into(writer, nodes)
        self.logger.debug(
            f"Rendered {len(nodes)} top level node(s) as {type(writer).__name__} "
            f"({len(writer.content)} characters)"
        )
        return writer.content

    def render_into(self, writer: MLLWriter, nodes: List[Node]):
        """
        Render nodes at the current position of an existing writer.

        Blocks opened before the call stay open; every block the nodes open
        must be closed again.
        """
        depth = writer.open_blocks
        if isinstance(writer, JSONWriter):
            self._render_json_document(writer, nodes)
        elif isinstance(writer, MarkupWriter):
            self._render_markup_document(writer, nodes)
        else:
            raise DocumentError(f"No rendering rules for {type(writer).__name__}")

        if writer.open_blocks != depth:
            raise DocumentError(
                f"rendering left {writer.open_blocks - depth} block(s) unbalanced in {type(writer).__name__}"
            )

    # ------------------------------------------------------------------
    # HTML / XML
    # ------------------------------------------------------------------

    def _render_markup_document(self, writer: MarkupWriter, nodes: List[Node]):
        lines = 0

        if self.config.declaration:
            if isinstance(writer, XMLWriter):
                writer.declaration(encoding=self.config.encoding.upper())
            elif isinstance(writer, HTMLWriter):
                writer.doctype()
            lines += 1

        if self.config.stamp:
            if lines:
                writer.line_feed()
            writer.add_comment(self.build_stamp())
            lines += 1

        for node in nodes:
            if lines:
                writer.line_feed()
            self._render_markup_node(writer, node)
            lines += 1

    def _render_markup_node(self, writer: MarkupWriter, node: Node):
        if node.comment is not None:
            writer.add_comment(node.comment)
            return
        if node.text is not None:
            writer.add_text(node.text)
            return

        if node.single:
            writer.single_tag(node.tag)
        else:
            writer.open_tag(node.tag)

        properties = self._build_properties(writer, node.properties)
        if properties:
            writer.add_properties(properties)

        if node.single:
            return

        if len(node.children) == 1 and node.children[0].text is not None:
            writer.add_text(node.children[0].text)
        elif node.children:
            writer.line_feed_inc()
            for i, child in enumerate(node.children):
                if i:
                    writer.line_feed()
                self._render_markup_node(writer, child)
            writer.line_feed_dec()

        writer.close_tag()

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def _render_json_document(self, writer: JSONWriter, nodes: List[Node]):
        roots = [node for node in nodes if node.is_element]
        if len(roots) != 1 or len(nodes) != 1:
            raise DocumentError("a JSON document needs exactly one root element and nothing else")

        self._render_json_node(writer, roots[0], root=True)

    def _render_json_node(self, writer: JSONWriter, node: Node, root: bool = False):
        if node.single:
            # JSONWriter rejects single tags
            writer.single_tag(node.tag)

        if not root and not node.tag:
            raise DocumentError("nested JSON objects need a member name as tag")

        writer.open_tag("" if root else node.tag)

        if root and self.config.stamp:
            writer.add_comment(self.build_stamp())

        for name, value in node.properties.items():
            writer.add_property(name, writer.quote_value(value))

        for child in node.children:
            if child.comment is not None:
                writer.add_comment(child.comment)
            elif child.text is not None:
                raise DocumentError(f"text nodes are not supported in JSON (inside '{node.tag}')")
            else:
                self._render_json_node(writer, child)

        writer.close_tag()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _build_properties(self, writer: MLLWriter, values: Dict) -> Optional[Property]:
        """Turn a mapping into a Property with values quoted for the writer."""
        properties = None
        for name, value in values.items():
            quoted = writer.quote_value(value)
            if properties is None:
                properties = Property(name, quoted)
            else:
                properties.add(name, quoted)
        return properties

    def build_stamp(self) -> str:
        """Generation note written as the first comment of stamped documents."""
        return f"Generated by mllwriter at {self._get_current_timestamp()}"

    def _get_current_timestamp(self) -> str:
        """Get current timestamp in configured timezone."""
        try:
            tz = pytz.timezone(self.config.timezone)
        except pytz.UnknownTimeZoneError:
            self.logger.warning(f"Unknown timezone '{self.config.timezone}', using UTC")
            return datetime.now(dt_timezone.utc).strftime("%Y-%m-%d %H:%M (UTC)")
        now = datetime.now(tz)
        return now.strftime("%Y-%m-%d %H:%M") + f" ({self.config.timezone})"
