"""Single-player game session driving the walk engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from skyroute.config import AppConfig
from skyroute.engine.validators import validate_move
from skyroute.engine.walk import advance, initialize, is_winning, reset
from skyroute.models.graph import GameOutcome, GameState, GraphConfig
from skyroute.persistence.move_log import (
    append_move_log,
    default_logs_root,
    generate_session_id,
    validate_session_id,
)
from skyroute.regions.catalog import get_region

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 64


@dataclass
class GameSession:
    config: GraphConfig
    app_config: Optional[AppConfig] = None
    logs_root: Optional[Path] = None
    session_id: str = field(default_factory=generate_session_id)
    state: GameState = field(init=False)
    history: List[GameState] = field(default_factory=list, init=False)
    last_event: Optional[Dict[str, Any]] = field(default=None, init=False)

    def __post_init__(self) -> None:
        validate_session_id(self.session_id)
        self.state = initialize(self.config)

    @classmethod
    def start(
        cls,
        region_id: Optional[str] = None,
        app_config: Optional[AppConfig] = None,
        logs_root: Optional[Path] = None,
    ) -> "GameSession":
        if region_id is None:
            region_id = app_config.game.default_region if app_config else "africa"
        if logs_root is None and app_config is not None:
            logs_root = default_logs_root(app_config)
        return cls(config=get_region(region_id), app_config=app_config, logs_root=logs_root)

    def _history_limit(self) -> int:
        if self.app_config is None:
            return DEFAULT_HISTORY_LIMIT
        return self.app_config.game.history_limit

    def _jsonl_enabled(self) -> bool:
        if self.logs_root is None:
            return False
        if self.app_config is None:
            return True
        return self.app_config.logging.log_jsonl

    def _record(self, event_type: str, **fields: Any) -> Dict[str, Any]:
        record = {
            "type": event_type,
            "session_id": self.session_id,
            "region_id": self.config.region_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **fields,
            "visited": list(self.state.visited),
            "total": self.state.total,
            "completed": self.state.completed,
        }
        self.last_event = record
        if self._jsonl_enabled():
            append_move_log(self.session_id, record, self.logs_root)  # type: ignore[arg-type]
        return record

    def click(self, code: str) -> GameState:
        """Forward a clicked airport to the engine and return the new state."""
        previous = self.state
        ok, reason = validate_move(previous, self.config, code)
        if not ok:
            logger.debug("rejected %s in %s: %s", code, self.config.region_id, reason)
            self._record("move_rejected", airport=code, from_airport=previous.last_visited, reason=reason)
            return self.state

        self.state = advance(previous, self.config, code)
        self.history.append(previous)
        limit = self._history_limit()
        if len(self.history) > limit:
            del self.history[: len(self.history) - limit]
        weight = self.state.total - previous.total
        logger.info(
            "%s: %s -> %s (+%d, total=%d)",
            self.config.region_id,
            previous.last_visited,
            code,
            weight,
            self.state.total,
        )
        self._record("move", airport=code, from_airport=previous.last_visited, weight=weight)
        if self.state.completed:
            outcome = self.outcome()
            logger.info(
                "%s: reached %s with total=%d (winner=%s)",
                self.config.region_id,
                self.config.goal,
                self.state.total,
                outcome.is_winner if outcome else False,
            )
            self._record("completed", is_winner=bool(outcome and outcome.is_winner))
        return self.state

    def undo(self) -> GameState:
        """Step back one move. A finished game only leaves through reset."""
        if self.state.completed or not self.history:
            return self.state
        self.state = self.history.pop()
        self._record("undo")
        return self.state

    def reset(self) -> GameState:
        self.state = reset(self.config)
        self.history.clear()
        self._record("reset")
        return self.state

    def switch_region(self, region_id: str) -> GameState:
        self.config = get_region(region_id)
        self.state = initialize(self.config)
        self.history.clear()
        logger.info("switched to region %s", self.config.region_id)
        self._record("switch_region")
        return self.state

    def is_winner(self) -> bool:
        return is_winning(self.state, self.config)

    def outcome(self) -> Optional[GameOutcome]:
        if not self.state.completed:
            return None
        return GameOutcome(
            region_id=self.config.region_id,
            path=list(self.state.visited),
            total=self.state.total,
            winning_total=self.config.winning_total,
            is_winner=is_winning(self.state, self.config),
        )
