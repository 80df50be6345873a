"""Tests for logging setup and the Pino-compatible log record format."""

import importlib
import io
import json

import lincol.utils.logging as lincol_logging
from lincol import index
from lincol.utils.logging import (
    PINO_LEVELS,
    configure_file_logging,
    configure_logging,
    logger,
    pino_compatible_sink,
    to_pino,
)


def _capture(emit):
    records = []
    handler_id = logger.add(lambda message: records.append(to_pino(message.record)), level="DEBUG")
    try:
        emit()
    finally:
        logger.remove(handler_id)
    return records


def test_pino_record_fields():
    records = _capture(lambda: logger.debug("Indexed {count} pointers", count=3))
    assert len(records) == 1
    record = records[0]
    assert record["level"] == PINO_LEVELS["DEBUG"] == 20
    assert record["msg"] == "Indexed 3 pointers"
    assert record["count"] == 3
    assert isinstance(record["time"], int)
    assert isinstance(record["pid"], int)


def test_pino_record_includes_exception():
    def emit():
        try:
            raise ValueError("bad offset")
        except ValueError:
            logger.opt(exception=True).error("failed")

    record = _capture(emit)[0]
    assert record["level"] == 50
    assert record["err"] == {"type": "ValueError", "message": "bad offset"}


def test_pino_sink_writes_ndjson_to_stderr(capsys):
    handler_id = logger.add(pino_compatible_sink, level="DEBUG")
    try:
        logger.debug("Indexed {count} pointers", count=2)
    finally:
        logger.remove(handler_id)
    captured = capsys.readouterr()
    assert captured.out == ""
    line = captured.err.strip().splitlines()[-1]
    assert json.loads(line)["msg"] == "Indexed 2 pointers"


# ============================================================================
# Library behaviour: lincol stays out of the host application's logging
# ============================================================================


def test_import_keeps_host_handlers():
    stream = io.StringIO()
    handler_id = logger.add(stream, level="INFO", format="{message}")
    try:
        importlib.reload(lincol_logging)
        logger.info("host message")
    finally:
        logger.remove(handler_id)
    assert "host message" in stream.getvalue()


def test_library_records_are_disabled_by_default():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record["name"]), level="DEBUG")
    try:
        index('{"a": [1, 2]}')
    finally:
        logger.remove(handler_id)
    assert not [name for name in records if name.startswith("lincol")]


def test_library_records_can_be_enabled(lincol_logs):
    records = _capture(lambda: index('{"a": [1, 2]}'))
    assert any(record["msg"] == "Indexed json source: 4 pointers" for record in records)


# ============================================================================
# Application setup
# ============================================================================


def test_configure_logging_json_mode(capsys, tmp_path):
    log_file = tmp_path / "lincol.ndjson"
    handler_ids = configure_logging(level="debug", json_mode=True, log_file=str(log_file))
    try:
        index("a: 1\n")
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)
        logger.disable("lincol")

    assert len(handler_ids) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    messages = [json.loads(line)["msg"] for line in captured.err.splitlines()]
    assert "Indexed yaml source: 2 pointers" in messages
    file_messages = [json.loads(line)["msg"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert "Indexed yaml source: 2 pointers" in file_messages


def test_configure_logging_reads_environment(monkeypatch, capsys):
    monkeypatch.setenv("LINCOL_LOG_LEVEL", "error")
    monkeypatch.delenv("LINCOL_LOG_JSON", raising=False)
    monkeypatch.delenv("LINCOL_LOG_FILE", raising=False)
    handler_ids = configure_logging()
    try:
        logger.warning("below the threshold")
        logger.error("at the threshold")
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)
        logger.disable("lincol")

    assert len(handler_ids) == 1
    err = capsys.readouterr().err
    assert "at the threshold" in err
    assert "below the threshold" not in err


def test_configure_file_logging(tmp_path):
    handler_id = configure_file_logging(tmp_path / "logs", level="DEBUG")
    try:
        index("[1]")
    finally:
        logger.remove(handler_id)
        logger.disable("lincol")
    assert "Indexed json source: 2 pointers" in (tmp_path / "logs" / "lincol.log").read_text(encoding="utf-8")
