"""
Shared fixtures for the mllwriter tests.
"""

import pytest

from mllwriter import HTMLWriter, JSONWriter, XMLWriter
from mllwriter.models import WriterConfig


@pytest.fixture
def html_writer():
    return HTMLWriter()


@pytest.fixture
def xml_writer():
    return XMLWriter()


@pytest.fixture
def json_writer():
    return JSONWriter()


@pytest.fixture
def writer_config():
    return WriterConfig(timezone="UTC")
