"""
Snippetbox: Structured Logging Tests
=======================================

What:  Field order, quoting and extras for the key/value and JSON formatters.
"""

import json
import logging
import sys

import pytest

from snippetbox.log import JSONFormatter, KeyValueFormatter, format_value


def _record(msg="starting server", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="snippetbox",
        level=level,
        pathname="/srv/snippetbox/__main__.py",
        lineno=12,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


class TestFormatValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (":4000", ":4000"),
            (42, "42"),
            (0.5, "0.5"),
            ("", '""'),
            ("starting server", '"starting server"'),
            ("a=b", '"a=b"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("line\nbreak", '"line\\nbreak"'),
        ],
    )
    def test_quoting(self, value, expected):
        assert format_value(value) == expected


class TestKeyValueFormatter:
    def test_basic_line(self):
        line = KeyValueFormatter().format(_record(addr=":4000"))

        assert line.startswith("time=")
        assert line.endswith(' level=INFO msg="starting server" addr=:4000')

    def test_extras_keep_insertion_order(self):
        line = KeyValueFormatter().format(_record("received request", method="GET", uri="/", status=200))

        assert line.endswith('msg="received request" method=GET uri=/ status=200')

    def test_message_args_interpolated(self):
        record = _record("listening on %s")
        record.args = (":4000",)

        assert 'msg="listening on :4000"' in KeyValueFormatter().format(record)

    def test_add_source(self):
        line = KeyValueFormatter(add_source=True).format(_record())

        assert "source=/srv/snippetbox/__main__.py:12 msg=" in line

    def test_exception_single_line(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("unexpected error", level=logging.ERROR)
            record.exc_info = sys.exc_info()

        line = KeyValueFormatter().format(record)

        assert "\n" not in line
        assert "level=ERROR" in line
        assert "exc=" in line
        assert "ValueError: boom" in line


class TestJSONFormatter:
    def test_fields(self):
        payload = json.loads(JSONFormatter().format(_record(addr=":4000", port=4000)))

        assert payload["level"] == "INFO"
        assert payload["msg"] == "starting server"
        assert payload["addr"] == ":4000"
        assert payload["port"] == 4000
        assert list(payload)[:3] == ["time", "level", "msg"]

    def test_non_serialisable_extra(self):
        payload = json.loads(JSONFormatter().format(_record(path=object())))

        assert payload["path"].startswith("<object object")

    def test_add_source(self):
        payload = json.loads(JSONFormatter(add_source=True).format(_record()))

        assert payload["source"] == "/srv/snippetbox/__main__.py:12"
        assert list(payload)[:4] == ["time", "level", "source", "msg"]

    def test_time_matches_key_value_format(self):
        record = _record()

        payload = json.loads(JSONFormatter().format(record))

        assert payload["time"] == KeyValueFormatter().formatTime(record)

    def test_exception_under_exc_key(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("unexpected error", level=logging.ERROR, request_id="abc12345")
            record.exc_info = sys.exc_info()

        line = JSONFormatter().format(record)
        payload = json.loads(line)

        assert "\n" not in line
        assert payload["level"] == "ERROR"
        assert payload["request_id"] == "abc12345"
        assert "ValueError: boom" in payload["exc"]
        assert "exc_info" not in payload
        assert list(payload)[-1] == "exc"
