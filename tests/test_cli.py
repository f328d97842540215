import logging

from sandfall.cli import main
from sandfall.logging_config import setup_logging


def test_main_example(example_file, capsys):
    assert main([str(example_file)]) == 0
    out = capsys.readouterr().out
    assert "Open field result: 24" in out
    assert "Bounded result: 93" in out


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Input not found" in capsys.readouterr().out


def test_main_malformed_point(tmp_path, capsys):
    path = tmp_path / "scan.txt"
    path.write_text("498;4 -> 498,6\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Malformed scan" in capsys.readouterr().out


def test_main_diagonal_path(tmp_path, capsys):
    path = tmp_path / "scan.txt"
    path.write_text("0,0 -> 2,2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Malformed scan" in capsys.readouterr().out


def test_main_custom_source(tmp_path, capsys):
    path = tmp_path / "scan.txt"
    path.write_text("0,5 -> 20,5\n", encoding="utf-8")
    assert main([str(path), "--source-x", "30", "--source-y", "0"]) == 0
    out = capsys.readouterr().out
    assert "Source: 30,0" in out
    # Nothing under the source: the first grain is lost
    assert "Open field result: 0" in out


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))
    logger = logging.getLogger("sandfall")
    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    setup_logging(logging.WARNING)


def test_main_empty_scan(tmp_path, capsys):
    path = tmp_path / "scan.txt"
    path.write_text("\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Invalid scan" in capsys.readouterr().out
