# tests/test_logger_utils.py

import pytest
from markov_textgen.utils.logger_utils import Log


def test_write_appends_to_file(tmp_path):
    path = tmp_path / "sub" / "run.log"
    log = Log(str(path), echo=False)
    log.info("hello")
    log.error("boom")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO" in lines[0] and lines[0].endswith("| hello")
    assert "ERROR" in lines[1]


def test_echo_goes_to_stderr(tmp_path, capsys):
    log = Log(str(tmp_path / "run.log"), use_color=False)
    log.warning("careful")
    out = capsys.readouterr()
    assert out.out == ""
    assert "WARNING | careful" in out.err


def test_time_block_records_metric(tmp_path):
    path = tmp_path / "run.log"
    log = Log(str(path), echo=False)
    with log.time_block("train") as t:
        pass
    assert t.elapsed >= 0.0
    assert "train done:" in path.read_text(encoding="utf-8")


def test_time_block_records_failure(tmp_path):
    path = tmp_path / "run.log"
    log = Log(str(path), echo=False)
    with pytest.raises(RuntimeError):
        with log.time_block("train"):
            raise RuntimeError("bad corpus")
    text = path.read_text(encoding="utf-8")
    assert "ERROR" in text
    assert "train failed" in text and "RuntimeError: bad corpus" in text
    assert "train done" not in text
