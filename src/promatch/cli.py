"""Command-line interface for serving the API or analyzing a player offline."""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path

from promatch.analysis import AnalysisService, RandomMetricsProvider, parse_attributes
from promatch.config import Settings
from promatch.errors import InvalidAttributesError, RosterConfigError
from promatch.persistence import JsonSessionStore
from promatch.roster import load_roster


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Match youth players against a pro roster")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the REST API with uvicorn")
    serve.add_argument("--host", default=settings.host, help="Bind address")
    serve.add_argument("--port", type=int, default=settings.port, help="Bind port (defaults to $PORT or 3000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    analyze = subparsers.add_parser("analyze", help="Analyze an attributes JSON file without the server")
    analyze.add_argument("attributes", type=Path, help="Path to player attributes JSON")
    analyze.add_argument("--video", type=Path, default=None, help="Optional clip (content is not inspected)")
    analyze.add_argument("--roster", type=Path, default=settings.roster_path, help="Roster JSON path")
    analyze.add_argument(
        "--session-dir",
        type=Path,
        default=settings.session_dir,
        help="Directory for session records",
    )
    analyze.add_argument("--top-k", type=int, default=settings.top_k, help="Number of similar players")
    analyze.add_argument("--seed", type=int, default=None, help="Seed for placeholder metrics")
    return parser.parse_args(argv)


def _serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "promatch.api:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def _analyze(args: argparse.Namespace) -> dict:
    try:
        raw_attrs, attributes = parse_attributes(args.attributes.read_text(encoding="utf-8"))
    except InvalidAttributesError as exc:
        raise SystemExit(f"{args.attributes}: {exc}") from exc
    try:
        roster = load_roster(args.roster)
    except RosterConfigError as exc:
        raise SystemExit(str(exc)) from exc

    rng = random.Random(args.seed) if args.seed is not None else None
    service = AnalysisService(
        roster,
        JsonSessionStore(args.session_dir),
        RandomMetricsProvider(rng),
        top_k=max(1, args.top_k),
    )
    result = service.analyze(raw_attrs, attributes, args.video)
    return {
        "session_id": result.session_id,
        "metrics": result.metrics.model_dump(),
        "suggestions": result.suggestions,
        "similar_players": [match.model_dump() for match in result.similar_players],
    }


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.command == "serve":
        _serve(args)
        return
    payload = _analyze(args)
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
