from pathlib import Path
import logging

import pytest

from skyroute.config import AppConfig, configure_logging, load_config


def test_load_default_config():
    cfg = load_config("configs/config.yaml")
    assert isinstance(cfg, AppConfig)
    assert cfg.game.default_region == "africa"
    assert cfg.game.history_limit == 64
    assert cfg.logging.log_jsonl is True
    assert cfg.app.logs_dir == Path("data/logs")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SKYROUTE_REGION", "Australia")
    monkeypatch.setenv("SKYROUTE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SKYROUTE_LOGS_DIR", "/tmp/skyroute-logs")
    cfg = load_config("configs/config.yaml")
    assert cfg.game.default_region == "australia"
    assert cfg.logging.level == "DEBUG"
    assert cfg.app.logs_dir == Path("/tmp/skyroute-logs")


def test_missing_section_raises(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("app: {name: t}\nlogging: {level: INFO}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="game"):
        load_config(str(path))


def test_non_mapping_root_raises(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_negative_history_limit_raises(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "app: {}\ngame: {history_limit: -1}\nlogging: {}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_config(str(path))


def test_resolve_paths(tmp_path: Path):
    cfg = load_config("configs/config.yaml").resolve_paths(tmp_path)
    assert cfg.app.logs_dir == (tmp_path / "data/logs").resolve()


def test_configure_logging_sets_level(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("app: {}\ngame: {}\nlogging: {level: warning}\n", encoding="utf-8")
    cfg = load_config(str(path))
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(cfg)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_configure_logging_unknown_level(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("app: {}\ngame: {}\nlogging: {level: chatty}\n", encoding="utf-8")
    cfg = load_config(str(path))
    with pytest.raises(ValueError):
        configure_logging(cfg)
