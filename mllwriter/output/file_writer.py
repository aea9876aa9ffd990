"""
Document file writer.
Handles atomic writes of writer content to a single output file.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from ..utils import get_logger
from ..writer import MLLWriter


class DocumentFileWriter:
    """
    Writes documents to a file.
    Overwrites atomically, or appends to an existing file.
    """

    def __init__(self, output_file: str, encoding: str = "utf-8", trailing_newline: bool = True):
        self.output_file = Path(output_file)
        self.encoding = encoding
        self.trailing_newline = trailing_newline
        self.logger = get_logger()

        # Ensure output directory exists
        self.output_file.parent.mkdir(parents=True, exist_ok=True)

    def write_document(self, document: Union[MLLWriter, str], append: bool = False):
        """
        Write a document to the output file.

        Args:
            document: A writer (its content is written) or a rendered string
            append: Append to existing file vs overwrite
        """
        content = document.content if isinstance(document, MLLWriter) else document
        if self.trailing_newline and not content.endswith("\n"):
            content += "\n"

        self.logger.debug(f"Writing {len(content)} characters to {self.output_file}")

        try:
            if append and self.output_file.exists():
                with open(self.output_file, 'a', encoding=self.encoding) as f:
                    f.write(content)
                self.logger.info(f"Appended document to {self.output_file}")
            else:
                self._atomic_write(content)
                self.logger.info(f"Wrote document to {self.output_file}")

        except OSError as e:
            self.logger.error(f"Error writing output file: {e}", exc_info=True)
            raise

    def _atomic_write(self, content: str):
        """
        Write content atomically using temp file + rename.
        Prevents corruption if process is interrupted.
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.output_file.parent,
            prefix='.tmp_',
            suffix=self.output_file.suffix
        )

        try:
            with os.fdopen(temp_fd, 'w', encoding=self.encoding) as f:
                f.write(content)

            shutil.move(temp_path, self.output_file)

        except Exception:
            # Clean up temp file on error
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def file_exists(self) -> bool:
        """Check if output file exists."""
        return self.output_file.exists()

    def get_content(self) -> str:
        """Read current content of output file."""
        if not self.output_file.exists():
            return ""

        with open(self.output_file, 'r', encoding=self.encoding) as f:
            return f.read()

    def clear(self):
        """Delete output file if it exists."""
        if self.output_file.exists():
            self.output_file.unlink()
            self.logger.info(f"Cleared output file: {self.output_file}")
