from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3456


def repo_root() -> Path:
    # Project root is the directory that contains the `snake_arcade/` package.
    return Path(__file__).resolve().parents[1]


def package_public_dir() -> Path:
    return Path(__file__).resolve().parent / "public"


def load_env() -> None:
    # Prefer a project-local `.env`, fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    public_dir: Path
    highscore_path: Path


def _env_port(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {value!r}") from e
    if not (0 <= port <= 65535):
        raise ValueError(f"PORT out of range: {port}")
    return port


def load_settings() -> Settings:
    load_env()
    public_raw = (os.getenv("SNAKE_PUBLIC_DIR") or "").strip()
    highscore_raw = (os.getenv("SNAKE_HIGHSCORE_PATH") or "").strip()
    return Settings(
        host=(os.getenv("SNAKE_HOST") or "127.0.0.1").strip(),
        port=_env_port(os.getenv("PORT")),
        public_dir=Path(public_raw).expanduser() if public_raw else package_public_dir(),
        highscore_path=(
            Path(highscore_raw).expanduser()
            if highscore_raw
            else Path.home() / ".snake_arcade" / "highscore.json"
        ),
    )
