from __future__ import annotations

from snake_arcade.types import Direction, GameSnapshot, Phase

EMPTY = "."
BODY = "o"
FOOD = "*"
HEAD = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}
PAUSED_BANNER = "PAUSED"


def render_ascii(snap: GameSnapshot) -> str:
    """Draw the board one text row per grid row, newline terminated.

    The head glyph points in the committed direction. While paused, the middle
    row is overlaid with a centred ``PAUSED`` banner.
    """
    n = snap.tile_count
    rows = [[EMPTY] * n for _ in range(n)]
    if snap.food is not None:
        rows[snap.food.y][snap.food.x] = FOOD
    for seg in snap.snake[1:]:
        rows[seg.y][seg.x] = BODY
    head = snap.head
    rows[head.y][head.x] = HEAD[snap.direction]

    lines = ["".join(r) for r in rows]
    if snap.phase == Phase.PAUSED and n >= len(PAUSED_BANNER):
        mid = n // 2
        start = (n - len(PAUSED_BANNER)) // 2
        line = lines[mid]
        lines[mid] = line[:start] + PAUSED_BANNER + line[start + len(PAUSED_BANNER) :]
    return "\n".join(lines) + "\n"


def render_status(snap: GameSnapshot, *, high_score: int) -> str:
    label = {
        Phase.IDLE: "press Enter to start",
        Phase.RUNNING: "running",
        Phase.PAUSED: "paused",
        Phase.OVER: f"game over, final score {snap.score}",
    }[snap.phase]
    return f"Score: {snap.score}  High: {high_score}  Speed: {snap.speed_ms}ms  [{label}]"
