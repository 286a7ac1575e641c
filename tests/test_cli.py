"""
Tests for the command-line entry point.
"""

import pytest

from conftest import make_line, make_log
from mirrorlog.cli import main


class TestMain:
    """Tests for mirrorlog LOGFILE."""

    def test_success(self, sample_log_file):
        assert main([str(sample_log_file)]) == 0
        assert sample_log_file.with_name("session_elapsed.log").exists()

    def test_conversion_error_exit_code(self, tmp_path):
        log_file = tmp_path / "bad.log"
        log_file.write_text(make_log([make_line(1, "not a timestamp")]))

        assert main([str(log_file)]) == 1
        assert not (tmp_path / "bad_elapsed.log").exists()

    def test_missing_file_exit_code(self, tmp_path):
        assert main([str(tmp_path / "missing.log")]) == 1

    def test_requires_logfile(self):
        with pytest.raises(SystemExit):
            main([])
