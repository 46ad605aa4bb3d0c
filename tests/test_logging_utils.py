import json

from cryptgen.logging_utils import get_logger, log


def test_key_value_line_on_stderr(monkeypatch, capsys):
    monkeypatch.setenv("CRYPTGEN_LOG_LEVEL", "debug")
    get_logger("test").info(event="rooms_placed", count=3, note="two words", skipped=None)
    captured = capsys.readouterr()
    assert captured.out == ""
    line = captured.err.strip()
    assert line.startswith("level=info ts=")
    assert "event=rooms_placed" in line
    assert "count=3" in line
    assert "note=two_words" in line
    assert "logger=test" in line
    assert "skipped" not in line


def test_threshold_filters_lower_levels(monkeypatch, capsys):
    monkeypatch.setenv("CRYPTGEN_LOG_LEVEL", "warn")
    logger = get_logger("test")
    logger.debug(event="hidden")
    logger.info(event="hidden")
    logger.warn(event="shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "event=shown" in err
    assert not logger.enabled_for("info")
    assert logger.enabled_for("error")


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("CRYPTGEN_LOG_LEVEL", "info")
    monkeypatch.setenv("CRYPTGEN_LOG_JSON", "1")
    log.error(event="boom", phase="tunnels")
    rec = json.loads(capsys.readouterr().err)
    assert rec["level"] == "error"
    assert rec["event"] == "boom"
    assert rec["logger"] == "cryptgen"
    assert isinstance(rec["ts"], int)


def test_loggers_cached_by_name():
    assert get_logger("dungeon") is get_logger("dungeon")
    assert get_logger("cryptgen") is log
