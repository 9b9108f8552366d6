"""Configuration loader and typed config objects."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict
import logging as std_logging
import os

from dotenv import load_dotenv
import yaml


@dataclass(frozen=True)
class AppSection:
    name: str
    env: str
    logs_dir: Path


@dataclass(frozen=True)
class GameSection:
    default_region: str
    history_limit: int


@dataclass(frozen=True)
class LoggingSection:
    level: str
    log_jsonl: bool


@dataclass(frozen=True)
class AppConfig:
    app: AppSection
    game: GameSection
    logging: LoggingSection

    def resolve_paths(self, project_root: Path) -> "AppConfig":
        """Return a copy with app paths resolved to absolute paths."""
        app = self.app
        resolved = replace(
            app,
            logs_dir=(project_root / app.logs_dir).resolve() if not app.logs_dir.is_absolute() else app.logs_dir,
        )
        return replace(self, app=resolved)


def _load_env() -> None:
    if Path(".env").exists():
        load_dotenv(dotenv_path=Path(".env"), override=False)


def _require_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    if key not in cfg or not isinstance(cfg[key], dict):
        raise ValueError(f"Missing or invalid config section: {key}")
    return cfg[key]


def load_config(config_path: str = "configs/config.yaml") -> AppConfig:
    """Load YAML config, apply env overrides, return typed AppConfig."""
    _load_env()

    path = Path(config_path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    app_cfg = _require_section(data, "app")
    game_cfg = _require_section(data, "game")
    logging_cfg = _require_section(data, "logging")

    # Environment overrides
    env_region = os.getenv("SKYROUTE_REGION", "")
    env_level = os.getenv("SKYROUTE_LOG_LEVEL", "")
    env_logs_dir = os.getenv("SKYROUTE_LOGS_DIR", "")

    app = AppSection(
        name=str(app_cfg.get("name", "skyroute")),
        env=str(app_cfg.get("env", "dev")),
        logs_dir=Path(env_logs_dir or str(app_cfg.get("logs_dir", "data/logs"))),
    )

    history_limit = int(game_cfg.get("history_limit", 64))
    if history_limit < 0:
        raise ValueError("game.history_limit must be >= 0")
    game = GameSection(
        default_region=(env_region or str(game_cfg.get("default_region", "africa"))).lower(),
        history_limit=history_limit,
    )

    logging = LoggingSection(
        level=(env_level or str(logging_cfg.get("level", "INFO"))).upper(),
        log_jsonl=bool(logging_cfg.get("log_jsonl", True)),
    )

    return AppConfig(app=app, game=game, logging=logging)


def configure_logging(cfg: AppConfig) -> None:
    """Apply the configured log level to the root logger."""
    level = std_logging.getLevelName(cfg.logging.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {cfg.logging.level}")
    std_logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    std_logging.getLogger().setLevel(level)
