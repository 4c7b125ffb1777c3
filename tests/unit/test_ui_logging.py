"""Tests for session log files."""

import json
import logging

from histfit.ui.logging import close_logging, log, log_dict, log_section, setup_logging


class TestSessionLog:
    """Tests for setup_logging / close_logging."""

    def test_text_log(self, tmp_path):
        path = tmp_path / "logs" / "run.log"
        setup_logging(path)
        try:
            log_section("fit")
            log("hello world")
            log_dict({"trials": 10})
            logging.getLogger("histfit.core.studies").warning("library message")
        finally:
            close_logging()

        content = path.read_text()
        assert "session started" in content
        assert "=== FIT ===" in content
        assert "hello world" in content
        assert "- trials: 10" in content
        assert "library message" in content
        assert "session completed" in content

    def test_json_log(self, tmp_path):
        path = tmp_path / "run.json"
        setup_logging(path)
        try:
            log("structured", level="warning")
        finally:
            close_logging()

        records = [json.loads(line) for line in path.read_text().splitlines()]
        assert any(r["message"] == "structured" and r["level"] == "WARNING" for r in records)

    def test_json_format_option(self, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(path, log_format="json")
        close_logging()
        first = json.loads(path.read_text().splitlines()[0])
        assert first["logger"] == "histfit"

    def test_handlers_removed(self, tmp_path):
        setup_logging(tmp_path / "run.log")
        close_logging()
        assert logging.getLogger("histfit").handlers == []

    def test_disabled_without_file(self):
        setup_logging(None)
        log("goes nowhere")
        close_logging()
        assert logging.getLogger("histfit").handlers == []
