from __future__ import annotations

from enum import Enum

from snake_arcade.session import GameSession
from snake_arcade.types import Direction, Phase


class Control(str, Enum):
    START = "start"
    PAUSE = "pause"
    RESET = "reset"


Intent = Direction | Control

_DIRECTION_KEYS = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
}

_CONTROL_KEYS = {
    " ": Control.PAUSE,
    "space": Control.PAUSE,
    "p": Control.PAUSE,
    "enter": Control.START,
    "r": Control.RESET,
}


def key_to_intent(key: str) -> Intent | None:
    """Map a key name (DOM ``KeyboardEvent.key`` style) to an intent.

    Letters are matched case-insensitively; unknown keys map to ``None``.
    """
    if key == " ":
        return Control.PAUSE
    name = key.strip().lower()
    if name in _DIRECTION_KEYS:
        return _DIRECTION_KEYS[name]
    return _CONTROL_KEYS.get(name)


def apply_intent(session: GameSession, intent: Intent) -> bool:
    if isinstance(intent, Direction):
        return session.set_direction(intent)
    if intent == Control.START:
        if session.phase == Phase.OVER:
            return session.restart()
        return session.start()
    if intent == Control.PAUSE:
        return session.toggle_pause()
    if intent == Control.RESET:
        session.reset()
        return True
    raise AssertionError(f"unhandled intent: {intent}")


def dispatch_key(session: GameSession, key: str) -> bool:
    intent = key_to_intent(key)
    if intent is None:
        return False
    return apply_intent(session, intent)
