from __future__ import annotations

import io
import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR.parent / "src") not in sys.path:
    sys.path.insert(0, str(TESTS_DIR.parent / "src"))

from tplview import __version__  # noqa: E402
from tplview.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol  # noqa: E402
from tplview.logging.factory import DefaultLoggerFactory  # noqa: E402
from tplview.logging.helpers import (  # noqa: E402
    JsonLogFormatter,
    setup_base_logger,
    get_logger,
    is_trace_render_enabled,
    trace_render,
)


def _record(msg: str, **extra) -> logging.LogRecord:
    rec = logging.LogRecord("tplview.render", logging.WARNING, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(rec, key, value)
    return rec


def test_get_logger_namespacing():
    assert get_logger().name == "tplview"
    assert get_logger("tplview").name == "tplview"
    assert get_logger("render").name == "tplview.render"
    assert get_logger("tplview.cli").name == "tplview.cli"


def test_json_formatter_fields():
    payload = json.loads(JsonLogFormatter().format(_record("hello")))
    assert payload["level"] == "WARNING"
    assert payload["module"] == "tplview.render"
    assert payload["msg"] == "hello"
    assert payload["version"] == __version__
    assert payload["ts"].endswith("Z")
    assert "ctx" not in payload


def test_json_formatter_context():
    payload = json.loads(JsonLogFormatter().format(_record("x", context={"path": Path("a")})))
    assert payload["ctx"] == {"path": "a"}


def test_trace_render_is_env_gated():
    log = get_logger("trace-test")
    log.setLevel(logging.DEBUG)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    log.addHandler(handler)
    try:
        with patch.dict(os.environ, {"TPLVIEW_TRACE_RENDER": "0"}):
            assert not is_trace_render_enabled()
            trace_render(log, "hidden")
        with patch.dict(os.environ, {"TPLVIEW_TRACE_RENDER": "1"}):
            assert is_trace_render_enabled()
            trace_render(log, "shown", path="x.html.j2")
    finally:
        log.removeHandler(handler)
    text = stream.getvalue()
    assert "hidden" not in text
    assert "shown" in text and "x.html.j2" in text


def test_factory_returns_namespaced_logger():
    log = DefaultLoggerFactory(level=logging.WARNING).get_logger("render")
    assert log.name == "tplview.render"
    assert logging.getLogger("tplview").handlers


def test_loggers_and_factory_satisfy_protocols():
    factory = DefaultLoggerFactory()
    assert isinstance(factory, LoggerFactoryProtocol)
    assert isinstance(factory.get_logger("render"), LoggerLikeProtocol)
    assert isinstance(logging.LoggerAdapter(get_logger("x"), {}), LoggerLikeProtocol)
    assert not isinstance(object(), LoggerLikeProtocol)


def test_from_flags_maps_verbosity():
    assert DefaultLoggerFactory.from_flags().level == logging.WARNING
    verbose_json = DefaultLoggerFactory.from_flags(json_logs=True, verbose=True)
    assert (verbose_json.level, verbose_json.json_logs) == (logging.DEBUG, True)


def test_setup_base_logger_switches_formatter_in_place():
    base = logging.getLogger("tplview")
    saved = (list(base.handlers), base.level, base.propagate)
    stream = io.StringIO()
    try:
        setup_base_logger(json_logs=False, level=logging.INFO, stream=stream)
        get_logger("switch").info("plain line")
        setup_base_logger(json_logs=True, level=logging.INFO)
        get_logger("switch").info("json line")
        ours = [h for h in base.handlers if getattr(h, "_tplview_base", False)]
        assert len(ours) == 1
    finally:
        base.handlers[:] = saved[0]
        base.setLevel(saved[1])
        base.propagate = saved[2]
    first, second = stream.getvalue().splitlines()
    assert first == "INFO: plain line"
    assert json.loads(second)["msg"] == "json line"


def test_injected_logger_like_object_receives_records():
    from tplview.config.registry import ConfigRegistry

    class _Recorder:
        def __init__(self):
            self.records = []

        def debug(self, msg, *args, **kwargs):
            self.records.append(msg % args)

        warning = error = debug

    rec = _Recorder()
    ConfigRegistry(logger=rec).merge({"path": "x/"})
    assert rec.records and "x/" in rec.records[0]
