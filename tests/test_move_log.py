import re
from pathlib import Path
import pytest

from skyroute.config import load_config
from skyroute.persistence.move_log import (
    append_move_log,
    default_logs_root,
    generate_session_id,
    read_move_logs,
    validate_session_id,
)


def test_append_move_log_multiple_lines(tmp_path: Path):
    logs_root = tmp_path / "logs"
    session_id = generate_session_id()
    for i in range(3):
        append_move_log(session_id, {"step": i}, logs_root)
    path = logs_root / session_id / "moves.jsonl"
    lines = path.read_text(encoding="utf-8").strip().split("\n")
    assert len(lines) == 3
    records = read_move_logs(session_id, logs_root)
    assert [r["step"] for r in records] == [0, 1, 2]
    assert [r["step"] for r in read_move_logs(session_id, logs_root, limit=2)] == [0, 1]


def test_read_missing_log_is_empty(tmp_path: Path):
    assert read_move_logs("sess_missing", tmp_path) == []


def test_read_move_logs_skips_corrupt_lines(tmp_path: Path):
    logs_root = tmp_path / "logs"
    session_id = generate_session_id()
    log_path = logs_root / session_id / "moves.jsonl"
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_path.write_text(
        "{\"step\": 1}\n" + "{bad json}\n" + "\n" + "{\"step\": 2}\n",
        encoding="utf-8",
    )
    records = read_move_logs(session_id, logs_root)
    assert [r["step"] for r in records] == [1, 2]


def test_session_id_format():
    session_id = generate_session_id()
    assert re.match(r"^\d{8}_\d{6}_[0-9a-f]{8}$", session_id)


def test_invalid_session_id_rejected(tmp_path: Path):
    bad_ids = ["../x", "..\\x", "a/b", "a\\b", "", "a..b", "a b"]
    for sid in bad_ids:
        with pytest.raises(ValueError):
            validate_session_id(sid)
    with pytest.raises(ValueError):
        append_move_log("../x", {"step": 0}, tmp_path)


def test_default_logs_root():
    assert default_logs_root(None) == Path("data/logs")
    cfg = load_config("configs/config.yaml")
    assert default_logs_root(cfg) == cfg.app.logs_dir


def test_session_id_length_limit():
    validate_session_id("a" * 64)
    with pytest.raises(ValueError):
        validate_session_id("a" * 65)
    with pytest.raises(ValueError):
        validate_session_id(None)  # type: ignore[arg-type]
