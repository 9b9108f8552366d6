"""Terminal front end: replay or type airport codes to walk a region."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from skyroute.config import configure_logging, load_config
from skyroute.engine.session import GameSession
from skyroute.engine.validators import audit_winning_total, shortest_path
from skyroute.engine.walk import traced_connections
from skyroute.persistence.move_log import default_logs_root, read_move_logs
from skyroute.regions.catalog import get_region, list_regions

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _airport_label(session: GameSession, code: str) -> str:
    airport = session.config.get_airport(code)
    return f"{code} ({airport.name})" if airport else code


def render_state(session: GameSession) -> str:
    state = session.state
    legs = traced_connections(state, session.config)
    lines = [f"region: {session.config.title}"]
    if legs:
        lines.append("path: " + " ".join([state.visited[0]] + [f"-{leg.weight}-> {leg.to_code}" for leg in legs]))
    else:
        lines.append(f"path: {state.visited[0]}")
    lines.append(f"total: {state.total}")
    if state.completed:
        verdict = "WIN" if session.is_winner() else "LOSE"
        lines.append(f"goal reached: {verdict} (target {session.config.winning_total})")
    else:
        choices = ", ".join(_airport_label(session, code) for code in state.frontier) or "(dead end)"
        lines.append(f"next: {choices}")
    return "\n".join(lines)


def run_interactive(session: GameSession, stdin: TextIO, stdout: TextIO) -> None:
    print(render_state(session), file=stdout)
    for raw in stdin:
        command = raw.strip()
        if not command:
            continue
        upper = command.upper()
        if upper in {"QUIT", "EXIT"}:
            break
        if upper == "UNDO":
            session.undo()
        elif upper == "RESET":
            session.reset()
        else:
            before = session.state
            session.click(upper)
            if session.state is before and session.last_event:
                print(f"cannot fly to {upper}: {session.last_event.get('reason')}", file=stdout)
        print(render_state(session), file=stdout)


def _print_audit(region_ids: List[str]) -> int:
    problems = 0
    for region_id in region_ids:
        config = get_region(region_id)
        result = shortest_path(config)
        route = "->".join(result[1]) if result else "unreachable"
        print(f"{region_id}: shortest {route} = {result[0] if result else '-'}; winning_total={config.winning_total}")
        for warning in audit_winning_total(config):
            problems += 1
            print(f"  warning: {warning}")
    return problems


def _print_move_log(session_id: str, logs_root: Path) -> None:
    try:
        records = read_move_logs(session_id, logs_root)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if not records:
        raise SystemExit(f"no moves recorded for session {session_id}")
    for record in records:
        detail = record.get("reason") or "->".join(record.get("visited", []))
        print(f"{record.get('type')}: {record.get('airport', '-')} total={record.get('total')} {detail}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Trace a route from Haneda to the regional goal airport.")
    parser.add_argument("--config", default="configs/config.yaml")
    parser.add_argument("--region", default=None)
    parser.add_argument("--moves", nargs="*", default=None, help="airport codes to click in order")
    parser.add_argument("--logs-root", default=None)
    parser.add_argument("--list-regions", action="store_true")
    parser.add_argument("--audit", action="store_true", help="compare winning totals with shortest routes")
    parser.add_argument("--show-log", metavar="SESSION_ID", default=None, help="print the recorded moves of a session")
    args = parser.parse_args(argv)

    if args.list_regions:
        for region_id in list_regions():
            print(f"{region_id}: {get_region(region_id).title}")
        return
    if args.audit:
        if _print_audit(list_regions()):
            raise SystemExit(1)
        return

    try:
        cfg = load_config(args.config).resolve_paths(PROJECT_ROOT)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"config error: {exc}") from exc
    configure_logging(cfg)

    if args.show_log:
        _print_move_log(args.show_log, Path(args.logs_root) if args.logs_root else default_logs_root(cfg))
        return

    logs_root = Path(args.logs_root) if args.logs_root else None
    try:
        session = GameSession.start(args.region, app_config=cfg, logs_root=logs_root)
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc

    if args.moves is None:
        run_interactive(session, sys.stdin, sys.stdout)
        return

    for code in args.moves:
        session.click(code.upper())
    print(render_state(session))


if __name__ == "__main__":
    main()
