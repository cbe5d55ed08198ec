import json

import pytest

from hotspot_detector import InvalidArgumentError
from hotspot_detector.utils.config_manager import Config


def test_defaults_without_file(tmp_path):
    cfg = Config(str(tmp_path / "missing.json"))
    assert cfg.data["min_n"] == 3 and cfg.data["max_n"] == 6
    assert not (tmp_path / "missing.json").exists()
    dc = cfg.detector_config()
    assert (dc.min_n, dc.max_n) == (3, 6)


def test_file_overrides_defaults(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"min_n": 2, "max_n": 4}))
    cfg = Config(str(p))
    assert cfg.detector_config().max_n == 4
    assert cfg.data["log_level"] == "INFO"


def test_malformed_file_falls_back(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("{not json")
    assert Config(str(p)).data["min_n"] == 3


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.set("max_n", "8")
    cfg.set("show_corpus_stats", "false")
    assert cfg.data["max_n"] == 8
    assert cfg.data["show_corpus_stats"] is False
    assert json.loads(p.read_text())["max_n"] == 8


def test_set_unknown_key(tmp_path):
    with pytest.raises(KeyError):
        Config(str(tmp_path / "c.json")).set("colour", "red")


def test_bad_range_in_file(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"min_n": 5, "max_n": 2}))
    with pytest.raises(InvalidArgumentError):
        Config(str(p)).detector_config()


@pytest.mark.parametrize("value", ["three", True, None, 2.5])
def test_non_integer_bounds_raise_value_error(tmp_path, value):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"min_n": value}))
    with pytest.raises(ValueError, match="min_n must be an integer"):
        Config(str(p)).detector_config()


def test_numeric_string_bounds_accepted(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"min_n": "2", "max_n": "4"}))
    dc = Config(str(p)).detector_config()
    assert (dc.min_n, dc.max_n) == (2, 4)


def test_show_lists_settings(tmp_path, capsys):
    Config(str(tmp_path / "c.json")).show()
    out = capsys.readouterr().out
    for key in ("min_n", "max_n", "log_level", "show_corpus_stats"):
        assert key in out
