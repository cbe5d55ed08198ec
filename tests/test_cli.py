# test_cli.py - CLI smoke checks

import json
import logging

import pytest

from hotspot_detector import DLBHotspotDetector, Hotspot
from hotspot_detector.cli import main, read_wordlist
from hotspot_detector.report import render_hotspots
from hotspot_detector.utils.logger_utils import Log, setup_logging


def test_read_wordlist_keeps_spaces(tmp_path):
    p = tmp_path / "leaks.txt"
    p.write_text("password123\n\n pass word \r\nadmin\n", encoding="utf-8")
    assert list(read_wordlist(str(p))) == ["password123", " pass word ", "admin"]


def test_main_prints_hotspots(tmp_path, capsys):
    leaks = tmp_path / "leaks.txt"
    leaks.write_text("password123\nadmin123\nletmein\n", encoding="utf-8")
    rc = main(
        [
            "--wordlist", str(leaks),
            "--config", str(tmp_path / "cfg.json"),
            "--log-level", "WARNING",
            "mypass123",
            "zzzz",
        ]
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert "pass" in out
    assert "123" in out
    assert "no hotspots" in out


def test_main_rejects_bad_range(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "cfg.json"), "--min-n", "4", "--max-n", "2", "abc"])
    assert rc == 2
    assert "invalid n-range" in capsys.readouterr().out


def test_main_missing_wordlist(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "cfg.json"), "--wordlist", str(tmp_path / "nope.txt")])
    assert rc == 1


def test_render_hotspots_columns():
    table = render_hotspots([Hotspot("[x]", freq=1)], show_corpus_stats=False)
    assert len(table.columns) == 4
    assert table.row_count == 1
    assert len(render_hotspots([]).columns) == 9


def test_time_block_logs_metric(caplog):
    pkg_logger = setup_logging("INFO")
    # package logger does not propagate, listen on it directly
    pkg_logger.addHandler(caplog.handler)
    try:
        with Log.time_block("unit") as t:
            pass
    finally:
        pkg_logger.removeHandler(caplog.handler)
    assert t.elapsed >= 0
    assert any("unit done" in r.getMessage() for r in caplog.records)


def test_setup_logging_does_not_propagate():
    pkg_logger = setup_logging("warning")
    assert pkg_logger.level == logging.WARNING
    assert pkg_logger.propagate is False
    setup_logging("INFO")
    assert sum(1 for h in pkg_logger.handlers if h.__class__.__name__ == "RichHandler") == 1


@pytest.mark.parametrize("level", ["LOUD", 5, None, ""])
def test_setup_logging_rejects_unknown_level(level):
    with pytest.raises(ValueError):
        setup_logging(level)


def test_read_wordlist_keeps_undecodable_bytes(tmp_path):
    p = tmp_path / "leaks.txt"
    p.write_bytes(b"pass\xffword\nplain\n")
    words = list(read_wordlist(str(p)))
    assert words[0] != "password"
    assert len(words[0]) == 9
    assert words[0].encode("utf-8", "surrogateescape") == b"pass\xffword"
    assert words[1] == "plain"


def test_undecodable_line_adds_no_joined_ngrams(tmp_path):
    p = tmp_path / "leaks.txt"
    p.write_bytes(b"pass\xffword\n")
    det = DLBHotspotDetector()
    det.add_leaked_passwords(read_wordlist(str(p)), 3, 4)
    assert "ssw" not in det
    assert "sswo" not in det
    assert "pas" in det and "word" in det


def test_main_rejects_unknown_log_level(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "cfg.json"), "--log-level", "LOUD", "abc"])
    assert rc == 2
    assert "unknown log level" in capsys.readouterr().out


@pytest.mark.parametrize(
    "settings,message",
    [
        ({"log_level": "LOUD"}, "unknown log level"),
        ({"log_level": 7}, "unknown log level"),
        ({"min_n": "three"}, "min_n must be an integer"),
        ({"max_n": [6]}, "max_n must be an integer"),
    ],
)
def test_main_rejects_bad_config_values(tmp_path, capsys, settings, message):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps(settings))
    rc = main(["--config", str(p), "abc"])
    assert rc == 2
    assert message in capsys.readouterr().out


def test_main_show_config(tmp_path, capsys):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"max_n": 5}))
    rc = main(["--config", str(p), "--show-config"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "max_n" in out and "5" in out
    assert "log_level" in out
