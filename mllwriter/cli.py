"""
CLI for rendering document trees to HTML, XML or JSON.
Document trees are read from YAML or JSON files.
"""

import json
import sys
import time
from pathlib import Path
from typing import List, Optional

import click
import yaml
from pydantic import ValidationError

from . import __version__
from .exceptions import DocumentError, MLLWriterError
from .models import Node, OutputFormat, WriterConfig
from .output import DocumentFileWriter, DocumentRenderer
from .utils import init_logger


class DocumentLoader:
    """Load document trees from YAML or JSON files."""

    def load(self, file_path: str) -> List[Node]:
        """
        Load the nodes of a document file.

        The file holds either a single node mapping or a list of nodes.
        Files ending in .json are parsed as JSON, anything else as YAML.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Document file not found: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            raise DocumentError(f"Document file is not valid UTF-8: {file_path}: {e}") from e

        if data is None:
            raise DocumentError(f"Document file is empty: {file_path}")
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise DocumentError(f"Document file must hold a node or a list of nodes: {file_path}")

        try:
            nodes = [Node.model_validate(item) for item in data]
        except ValidationError as e:
            raise DocumentError(f"Invalid document tree in {file_path}: {e}") from e

        return nodes


@click.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--format', 'output_format',
    type=click.Choice([f.value for f in OutputFormat]),
    help='Output format (default: from config, then from --output-file extension)'
)
@click.option(
    '--output-file',
    help='Write the document to this file instead of stdout'
)
@click.option(
    '--append',
    is_flag=True,
    help='Append to the output file instead of overwriting it'
)
@click.option(
    '--indent',
    type=click.IntRange(min=0),
    help='Indent step size in spaces (overrides the per-format defaults)'
)
@click.option(
    '--config',
    type=click.Path(dir_okay=False),
    default='config.yaml',
    help='Path to configuration file (default: config.yaml)'
)
@click.option(
    '--stamp',
    is_flag=True,
    help='Start the document with a "Generated by" comment'
)
@click.option(
    '--declaration',
    is_flag=True,
    help='Start HTML with a doctype and XML with an XML declaration'
)
@click.option(
    '--timezone',
    help='Timezone for the generation stamp (default: America/Chicago)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.version_option(version=__version__, prog_name='mllwriter')
def main(
    source: str,
    output_format: Optional[str],
    output_file: Optional[str],
    append: bool,
    indent: Optional[int],
    config: str,
    stamp: bool,
    declaration: bool,
    timezone: Optional[str],
    debug: bool
):
    """
    Render a document tree (YAML or JSON) as HTML, XML or JSON.

    Examples:

      # HTML to stdout
      mllwriter page.yaml --format html

      # Format from the output file extension
      mllwriter page.yaml --output-file out/page.xml

      # JSON with 4 spaces per indent step
      mllwriter person.yaml --format json --indent 4
    """
    try:
        config_data = load_config(config)
        writer_config = build_writer_config(
            config_data=config_data,
            output_file=output_file,
            output_format=output_format,
            indent=indent,
            stamp=stamp,
            declaration=declaration,
            timezone=timezone,
            debug=debug
        )
    except (DocumentError, ValidationError) as e:
        click.echo(f"Error loading config file: {e}", err=True)
        sys.exit(1)

    logger = init_logger(
        debug_mode=writer_config.debug_mode,
        debug_log_file=writer_config.debug_log_file
    )

    fmt = resolve_format(writer_config)
    if fmt is None:
        click.echo("Error: No output format given.", err=True)
        click.echo("Use --format, set output.format in the config file,", err=True)
        click.echo("or pass an --output-file ending in .html, .xml or .json", err=True)
        sys.exit(1)

    if writer_config.output_file:
        logger.print_header(f"mllwriter: {source} -> {writer_config.output_file} ({fmt.value.upper()})")

    started = time.monotonic()
    try:
        nodes = DocumentLoader().load(source)
        logger.debug(f"Loaded {len(nodes)} top level node(s) from {source}")

        content = DocumentRenderer(writer_config).render(nodes, fmt)

        if writer_config.output_file:
            file_writer = DocumentFileWriter(
                writer_config.output_file,
                encoding=writer_config.encoding,
                trailing_newline=writer_config.trailing_newline
            )
            file_writer.write_document(content, append=append)
        else:
            click.echo(content, nl=writer_config.trailing_newline)

    except (MLLWriterError, OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error(f"Rendering {source} failed: {e}", exc_info=debug)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if writer_config.output_file:
        logger.success(f"Rendered {source} as {fmt.value.upper()}")
        logger.print_summary(
            output_format=fmt.value,
            target=writer_config.output_file,
            characters=len(content),
            duration=time.monotonic() - started
        )


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file. A missing file means defaults."""
    path = Path(config_path)

    if not path.exists():
        if config_path != 'config.yaml':
            click.echo(f"Warning: Config file not found: {config_path}", err=True)
            click.echo("Using default configuration", err=True)
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise DocumentError(f"{config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentError(f"{config_path}: not valid UTF-8: {e}") from e

    if not isinstance(data, dict):
        raise DocumentError(f"{config_path}: top level must be a mapping")
    return data


def build_writer_config(
    config_data: dict,
    output_file: Optional[str] = None,
    output_format: Optional[str] = None,
    indent: Optional[int] = None,
    stamp: bool = False,
    declaration: bool = False,
    timezone: Optional[str] = None,
    debug: bool = False
) -> WriterConfig:
    """Build WriterConfig from config file and CLI overrides."""

    # Start with config file values
    writer_section = _config_section(config_data, 'writer')
    output_section = _config_section(config_data, 'output')
    debug_section = _config_section(config_data, 'debug')

    indent_section = writer_section.get('indent_step_size')
    if indent_section is None:
        indent_section = {}
    elif isinstance(indent_section, int) and not isinstance(indent_section, bool):
        indent_section = {fmt.value: indent_section for fmt in OutputFormat}
    elif not isinstance(indent_section, dict):
        raise DocumentError(
            "writer.indent_step_size must be a number or a mapping of format to number"
        )

    def indent_for(fmt: str, default: int) -> int:
        if indent is not None:
            return indent
        return indent_section.get(fmt, default)

    return WriterConfig(
        html_indent_step_size=indent_for('html', 4),
        xml_indent_step_size=indent_for('xml', 2),
        json_indent_step_size=indent_for('json', 2),
        output_file=output_file or output_section.get('file'),
        format=output_format or output_section.get('format'),
        encoding=output_section.get('encoding', 'utf-8'),
        trailing_newline=output_section.get('trailing_newline', True),
        declaration=declaration or output_section.get('declaration', False),
        stamp=stamp or output_section.get('stamp', False),
        timezone=timezone or output_section.get('timezone', 'America/Chicago'),
        debug_mode=debug or debug_section.get('enabled', False),
        debug_log_file=debug_section.get('log_file', './debug/debug.log'),
    )


def _config_section(config_data: dict, name: str) -> dict:
    section = config_data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise DocumentError(f"config section '{name}' must be a mapping")
    return section


def resolve_format(config: WriterConfig) -> Optional[OutputFormat]:
    """Explicit format first, then the output file extension."""
    if config.format is not None:
        return config.format
    if config.output_file:
        return OutputFormat.from_path(config.output_file)
    return None


if __name__ == '__main__':
    main()
