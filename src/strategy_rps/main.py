import random
import sys
from collections import deque

import cv2
from loguru import logger

from strategy_rps.config import load_config, setup_logging
from strategy_rps.session import SessionState, play_round
from strategy_rps.ui_overlay import (
    QUIT,
    button_at,
    layout_buttons,
    make_theme,
    render_board,
)

KEY_ACTIONS = {
    ord("r"): "Rock", ord("R"): "Rock", ord("1"): "Rock",
    ord("p"): "Paper", ord("P"): "Paper", ord("2"): "Paper",
    ord("s"): "Scissors", ord("S"): "Scissors", ord("3"): "Scissors",
    ord("q"): QUIT, ord("Q"): QUIT, 27: QUIT,  # ESC
}


def make_mouse_handler(buttons, pending: deque, pointer: dict):
    def on_mouse(event, x, y, flags, param):
        hit = button_at(buttons, x, y)
        if event == cv2.EVENT_MOUSEMOVE:
            pointer["hover"] = hit.label if hit else None
        elif event == cv2.EVENT_LBUTTONUP and hit is not None:
            pending.append(hit.label)
    return on_mouse


def run_window(cfg: dict, session: SessionState, rng) -> int:
    """Event loop for one session; returns the exit status once Quit fires."""
    win_cfg = cfg.get("window", {})
    title = str(win_cfg.get("title", "Rock Paper Scissors Game"))
    width = int(win_cfg.get("width", 640))
    height = int(win_cfg.get("height", 560))

    ui_cfg = cfg.get("ui", {})
    font_path = ui_cfg.get("font_path", "")
    use_ttf = bool(ui_cfg.get("use_ttf", False))
    log_lines = int(ui_cfg.get("log_lines", 10))
    theme = make_theme(ui_cfg)

    buttons = layout_buttons(width)
    pending = deque()
    pointer = {"hover": None}

    cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(title, make_mouse_handler(buttons, pending, pointer))
    logger.info(f"Window '{title}' ready ({width}x{height})")

    try:
        while True:
            board = render_board(width, height, session.tally, session.log, buttons,
                                 pointer["hover"], log_lines, font_path, use_ttf, theme)
            cv2.imshow(title, board)
            key = cv2.waitKey(30) & 0xFF
            if key in KEY_ACTIONS:
                pending.append(KEY_ACTIONS[key])

            # closing the window quits at once; queued moves are dropped
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                pending.clear()
                pending.append(QUIT)

            if not pending:
                continue
            action = pending.popleft()
            if action == QUIT:
                logger.info(f"Quit after {session.tally.rounds} rounds")
                break
            play_round(session, action, rng)
    finally:
        cv2.destroyAllWindows()
    return 0


def main() -> int:
    cfg = load_config()
    setup_logging(cfg)
    rng = random.Random(cfg.get("ai", {}).get("seed"))
    return run_window(cfg, SessionState(), rng)


if __name__ == "__main__":
    sys.exit(main())
