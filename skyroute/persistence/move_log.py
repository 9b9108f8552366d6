"""JSONL move log for game sessions."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import re
from datetime import datetime, timezone
import secrets

from skyroute.config import AppConfig

_SESSION_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


def validate_session_id(session_id: str) -> None:
    """Session ids become directory names, so only word characters and dashes pass."""
    if not isinstance(session_id, str) or not _SESSION_ID_RE.fullmatch(session_id):
        raise ValueError(f"invalid session_id: {session_id!r}")


def generate_session_id() -> str:
    """UTC timestamp plus 8 hex chars, e.g. 20261019_121500_1a2b3c4d."""
    return f"{datetime.now(timezone.utc):%Y%m%d_%H%M%S}_{secrets.token_hex(4)}"


def default_logs_root(config: Optional[AppConfig]) -> Path:
    """Resolve the move log root from config or return data/logs."""
    if config is None:
        return Path("data/logs")
    return config.app.logs_dir


def get_session_dir(session_id: str, logs_root: Path) -> Path:
    validate_session_id(session_id)
    return logs_root / session_id


def append_move_log(session_id: str, record: Dict[str, Any], logs_root: Path) -> Path:
    """Append one JSON record to moves.jsonl and return its path."""
    session_dir = get_session_dir(session_id, logs_root)
    session_dir.mkdir(parents=True, exist_ok=True)
    path = session_dir / "moves.jsonl"
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return path


def read_move_logs(session_id: str, logs_root: Path, limit: int | None = None) -> List[Dict[str, Any]]:
    """Read moves.jsonl into list of dicts, skipping corrupt lines."""
    path = get_session_dir(session_id, logs_root) / "moves.jsonl"
    if not path.exists():
        return []
    results: List[Dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if limit is not None and len(results) >= limit:
                break
            line = line.strip()
            if not line:
                continue
            try:
                results.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return results
