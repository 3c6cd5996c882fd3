from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from snake_arcade.config import load_settings
from snake_arcade.errors import ReplayError
from snake_arcade.highscore import HighScoreTracker, JsonFileStore
from snake_arcade.replay import load_replay, run_replay, summarize


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snake-arcade")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    serve_p = sub.add_parser("serve", help="serve the browser client")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None, help="overrides $PORT (default 3456)")
    serve_p.add_argument("--public-dir", type=_existing_path, default=None)

    play_p = sub.add_parser("play", help="play in the terminal")
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--highscore-file", type=Path, default=None)

    replay_p = sub.add_parser("replay", help="run a recorded game and print the result")
    replay_p.add_argument("path", type=_existing_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()

    if args.cmd == "serve":
        from snake_arcade.server import run_server

        run_server(
            static_dir=args.public_dir or settings.public_dir,
            host=args.host or settings.host,
            port=args.port if args.port is not None else settings.port,
        )
        return 0

    if args.cmd == "play":
        from snake_arcade.terminal import play

        tracker = HighScoreTracker(JsonFileStore(args.highscore_file or settings.highscore_path))
        return play(tracker, seed=args.seed)

    if args.cmd == "replay":
        try:
            replay = load_replay(args.path)
        except ReplayError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(json.dumps(summarize(run_replay(replay))))
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")
