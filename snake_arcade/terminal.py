"""Terminal front end: curses drawing, keyboard input, asyncio timing."""

from __future__ import annotations

import asyncio
import curses
import random

from snake_arcade.controls import dispatch_key
from snake_arcade.highscore import HighScoreTracker
from snake_arcade.render import render_ascii, render_status
from snake_arcade.session import GameSession
from snake_arcade.types import GameSnapshot, TickOutcome

_POLL_SECONDS = 0.01

_CURSES_KEYS = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
    curses.KEY_RIGHT: "ArrowRight",
    curses.KEY_ENTER: "Enter",
    10: "Enter",
    13: "Enter",
}

HELP = "Arrows/WASD move  Space pause  Enter start  R reset  Q quit"


def curses_key_name(ch: int) -> str | None:
    if ch in _CURSES_KEYS:
        return _CURSES_KEYS[ch]
    if 0 <= ch < 256:
        return chr(ch)
    return None


class CursesView:
    def __init__(self, stdscr: curses.window, session: GameSession) -> None:
        self._scr = stdscr
        self._session = session

    def draw(self, snap: GameSnapshot, outcome: TickOutcome | None = None) -> None:
        self._scr.erase()
        board = render_ascii(snap).splitlines()
        max_y, max_x = self._scr.getmaxyx()
        lines = [*board, "", render_status(snap, high_score=self._session.high_score), HELP]
        for y, line in enumerate(lines[: max_y - 1]):
            self._scr.addnstr(y, 0, line, max_x - 1)
        self._scr.refresh()


async def _run(stdscr: curses.window, tracker: HighScoreTracker, seed: int | None) -> None:
    loop = asyncio.get_running_loop()
    session = GameSession(scheduler=loop, tracker=tracker, rng=random.Random(seed))
    view = CursesView(stdscr, session)
    session.subscribe(view.draw)
    view.draw(session.snapshot())

    try:
        while True:
            ch = stdscr.getch()
            if ch == -1:
                await asyncio.sleep(_POLL_SECONDS)
                continue
            if ch in (ord("q"), ord("Q")):
                return
            key = curses_key_name(ch)
            if key is not None:
                dispatch_key(session, key)
    finally:
        # Leaves no timer behind once the loop shuts down.
        session.reset()


def play(tracker: HighScoreTracker, *, seed: int | None = None) -> int:
    def _main(stdscr: curses.window) -> None:
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)
        asyncio.run(_run(stdscr, tracker, seed))

    curses.wrapper(_main)
    print(f"High score: {tracker.high_score}")
    return 0
