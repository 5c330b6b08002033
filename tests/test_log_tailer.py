"""Tests for incremental xlogfile reading."""
import io

import pytest

from core.errors import MalformedNumberError, MissingFieldError
from core.log_tailer import LogTailer
from tests.fixtures.xlog_helpers import append_lines, make_line, xlogfile_path


@pytest.fixture
def xlog(dgl_root):
    return xlogfile_path(dgl_root)


def test_empty_log_reports_no_change(xlog):
    with LogTailer.open(xlog) as tailer:
        result = tailer.poll()
    assert result.records == []
    assert result.changed is False


def test_existing_lines_are_read_in_order(xlog):
    append_lines(xlog, make_line(name="a"), make_line(name="b"))
    with LogTailer.open(xlog) as tailer:
        result = tailer.poll()
    assert [r.name for r in result.records] == ["a", "b"]
    assert result.changed is True


def test_only_new_lines_on_each_poll(xlog):
    append_lines(xlog, make_line(name="a"))
    with LogTailer.open(xlog) as tailer:
        assert [r.name for r in tailer.poll().records] == ["a"]
        assert tailer.poll().changed is False

        append_lines(xlog, make_line(name="b"), make_line(name="c"))
        assert [r.name for r in tailer.poll().records] == ["b", "c"]
        assert tailer.poll().records == []
        assert tailer.lines_read == 3


def test_unterminated_line_waits_for_its_newline(xlog):
    line = make_line(name="slow")
    with LogTailer.open(xlog) as tailer:
        append_lines(xlog, line[:20])
        assert tailer.poll().changed is False

        append_lines(xlog, line[20:-1])
        assert tailer.poll().changed is False

        append_lines(xlog, "\n")
        result = tailer.poll()
    assert [r.name for r in result.records] == ["slow"]


def test_blank_lines_are_ignored():
    stream = io.BytesIO(("\n" + make_line(name="a") + "\n").encode())
    assert [r.name for r in LogTailer(stream).poll().records] == ["a"]


def test_parse_failure_propagates(xlog):
    append_lines(xlog, make_line(name="a"), make_line(name=None))
    with LogTailer.open(xlog) as tailer:
        with pytest.raises(MissingFieldError):
            tailer.poll()


def test_records_before_a_bad_line_are_kept(xlog):
    append_lines(xlog, make_line(name="a"), make_line(points="x"), make_line(name="c"))
    with LogTailer.open(xlog) as tailer:
        with pytest.raises(MalformedNumberError):
            tailer.poll()
        result = tailer.poll()
        assert [r.name for r in result.records] == ["a", "c"]
        assert tailer.poll().changed is False


def test_undecodable_bytes_survive_in_fields():
    line = make_line(name="PLACEHOLDER").encode().replace(b"PLACEHOLDER", b"caf\xe9")
    record, = LogTailer(io.BytesIO(line)).poll().records
    assert record.name.encode("utf-8", "surrogateescape") == b"caf\xe9"
