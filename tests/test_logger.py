"""
Tests for the rich console logger.
"""

from mllwriter.utils import get_logger, init_logger
from mllwriter.utils.logger import WriterLogger


class TestWriterLogger:

    def test_print_header(self, capsys):
        WriterLogger().print_header("Rendering page.yaml")
        captured = capsys.readouterr()
        assert "Rendering page.yaml" in captured.err
        assert captured.out == ""

    def test_print_table(self, capsys):
        WriterLogger().print_table("Sizes", [["html", 4], ["xml", 2]], ["Format", "Indent"])
        err = capsys.readouterr().err
        assert "Sizes" in err
        assert "Format" in err
        assert "html" in err

    def test_print_summary(self, capsys):
        WriterLogger().print_summary("json", "out.json", 42, 0.5)
        err = capsys.readouterr().err
        assert "Render Complete" in err
        assert "out.json" in err
        assert "0.500s" in err

    def test_debug_log_file(self, tmp_path):
        log_file = tmp_path / "debug" / "debug.log"
        logger = WriterLogger(debug_mode=True, debug_log_file=str(log_file))
        logger.debug("walking nodes")
        for handler in logger.logger.handlers:
            handler.flush()
        assert "walking nodes" in log_file.read_text(encoding="utf-8")

    def test_init_logger_replaces_global(self):
        logger = init_logger()
        assert get_logger() is logger
