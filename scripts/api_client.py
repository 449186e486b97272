"""Lightweight REST client for the promatch API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_attributes(raw: str) -> dict:
    path = Path(raw)
    text = path.read_text(encoding="utf-8") if path.exists() else raw
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid attributes JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the promatch REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("video", type=Path, nargs="?", help="Video clip to upload")
    parser.add_argument(
        "--attributes",
        default='{"height_cm": 180, "dominant_foot": "right", "position": "striker", "age": 22}',
        help="Attributes JSON string or path to a JSON file",
    )
    parser.add_argument("--get-session", metavar="SESSION_ID", help="Fetch a stored session and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.get_session:
            resp = client.get(f"/sessions/{args.get_session}")
            if resp.status_code == 404:
                raise SystemExit(f"session {args.get_session} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
            return

        if args.video is None:
            raise SystemExit("a video file is required unless using --get-session")

        attributes = load_attributes(args.attributes)
        files = {"video": (args.video.name, args.video.read_bytes(), "video/mp4")}
        resp = client.post("/analyze", files=files, data={"attributes": json.dumps(attributes)})
        resp.raise_for_status()
        payload = resp.json()
        print(f"Session {payload['session_id']}")
        print("Metrics:", json.dumps(payload["metrics"], indent=2))
        for suggestion in payload["suggestions"]:
            print(f"- {suggestion}")
        for match in payload["similar_players"]:
            print(f"{match['similarity']:.3f}  {match['name']} ({match['position']}, {match['club']})")


if __name__ == "__main__":
    main()
