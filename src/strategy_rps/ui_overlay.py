from dataclasses import dataclass
from typing import List, Optional, Sequence

import cv2
import numpy as np

from strategy_rps.game_logic import MOVES, Outcome
from strategy_rps.session import RoundResult, Tally
from strategy_rps.utils.facy_text import (
    put_text, put_text_center, add_translucent_bar
)

QUIT = "Quit"

BUTTON_SIZE = (120, 60)
QUIT_SIZE = (100, 50)
BUTTON_GAP = 10

PANEL_TOP, PANEL_BOTTOM = 10, 100
STATS_TOP, STATS_ROW_H = 115, 40
LOG_TOP = 250
LOG_LINE_H = 28


# Theme helper
class Theme:
    def __init__(self, d):
        self.background   = tuple(d.get("background",   [238, 238, 238]))
        self.panel_bg     = tuple(d.get("panel_bg",     [255, 255, 255]))
        self.text         = tuple(d.get("text",         [40, 40, 40]))
        self.accent       = tuple(d.get("accent",       [160, 110, 40]))
        self.button_bg    = tuple(d.get("button_bg",    [220, 220, 220]))
        self.button_hover = tuple(d.get("button_hover", [200, 215, 235]))
        self.win          = tuple(d.get("win",          [40, 150, 40]))
        self.lose         = tuple(d.get("lose",         [40, 40, 190]))
        self.tie          = tuple(d.get("tie",          [120, 120, 120]))

    def outcome_color(self, outcome: Outcome):
        return {
            Outcome.PLAYER_WIN: self.win,
            Outcome.COMPUTER_WIN: self.lose,
            Outcome.TIE: self.tie,
        }[outcome]


def make_theme(ui_cfg: dict) -> Theme:
    themes = ui_cfg.get("themes", {}) or {}
    return Theme(themes.get(ui_cfg.get("active_theme", "classic"), {}))


@dataclass(frozen=True)
class Button:
    label: str
    x0: int
    y0: int
    x1: int
    y1: int

    def contains(self, x: int, y: int) -> bool:
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1


# ---------- Layout ----------
def layout_buttons(width: int) -> List[Button]:
    """Rock / Paper / Scissors / Quit in one centred row inside the top panel."""
    sizes = [(m.value, BUTTON_SIZE) for m in MOVES] + [(QUIT, QUIT_SIZE)]
    total = sum(w for _, (w, _) in sizes) + BUTTON_GAP * (len(sizes) - 1)
    x = max(0, (width - total) // 2)
    mid_y = (PANEL_TOP + 16 + PANEL_BOTTOM) // 2
    buttons = []
    for label, (w, h) in sizes:
        y0 = mid_y - h // 2
        buttons.append(Button(label, x, y0, x + w, y0 + h))
        x += w + BUTTON_GAP
    return buttons


def button_at(buttons: Sequence[Button], x: int, y: int) -> Optional[Button]:
    for b in buttons:
        if b.contains(x, y):
            return b
    return None


# ---------- Panels ----------
def draw_button_panel(frame, buttons: Sequence[Button], hover: Optional[str] = None,
                      font_path: str = "", use_ttf: bool = False,
                      theme: Optional[Theme] = None):
    theme = theme or Theme({})
    h, w = frame.shape[:2]
    cv2.rectangle(frame, (8, PANEL_TOP), (w - 8, PANEL_BOTTOM), theme.panel_bg, -1)
    cv2.rectangle(frame, (8, PANEL_TOP), (w - 8, PANEL_BOTTOM), theme.accent, 1, cv2.LINE_AA)
    put_text(frame, "Choose your move", (16, PANEL_TOP + 4), 14, theme.accent, font_path, use_ttf)

    for b in buttons:
        bg = theme.button_hover if b.label == hover else theme.button_bg
        cv2.rectangle(frame, (b.x0, b.y0), (b.x1, b.y1), bg, -1)
        cv2.rectangle(frame, (b.x0, b.y0), (b.x1, b.y1), theme.text, 1, cv2.LINE_AA)
        put_text_center(frame, b.label, ((b.x0 + b.x1) // 2, (b.y0 + b.y1) // 2), 18,
                        theme.text, font_path, use_ttf)


def draw_scoreboard(frame, tally: Tally,
                    font_path: str = "", use_ttf: bool = False,
                    theme: Optional[Theme] = None):
    theme = theme or Theme({})
    h, w = frame.shape[:2]
    rows = [
        ("Player Wins:", tally.player_wins),
        ("Computer Wins:", tally.computer_wins),
        ("Ties:", tally.ties),
    ]
    value_x0 = w // 2
    for i, (label, value) in enumerate(rows):
        y = STATS_TOP + i * STATS_ROW_H
        put_text(frame, label, (24, y + 10), 18, theme.text, font_path, use_ttf)
        cv2.rectangle(frame, (value_x0, y + 4), (w - 24, y + STATS_ROW_H - 4), theme.panel_bg, -1)
        cv2.rectangle(frame, (value_x0, y + 4), (w - 24, y + STATS_ROW_H - 4), theme.tie, 1)
        put_text(frame, str(value), (value_x0 + 8, y + 10), 18, theme.text, font_path, use_ttf)


def draw_round_log(frame, results: Sequence[RoundResult], max_lines: int = 10,
                   font_path: str = "", use_ttf: bool = False,
                   theme: Optional[Theme] = None):
    """Results area: newest `max_lines` rounds, oldest on top."""
    theme = theme or Theme({})
    h, w = frame.shape[:2]
    y1 = min(h - 8, LOG_TOP + max_lines * LOG_LINE_H + 12)
    frame[:] = add_translucent_bar(frame, (8, LOG_TOP), (w - 8, y1), theme.panel_bg, 0.85)
    cv2.rectangle(frame, (8, LOG_TOP), (w - 8, y1), theme.tie, 1)

    visible = list(results)[-max_lines:] if max_lines > 0 else []
    for i, r in enumerate(visible):
        y = LOG_TOP + 8 + i * LOG_LINE_H
        put_text(frame, r.describe(), (18, y), 16, theme.outcome_color(r.outcome), font_path, use_ttf)


def render_board(width: int, height: int, tally: Tally, results: Sequence[RoundResult],
                 buttons: Sequence[Button], hover: Optional[str] = None,
                 max_lines: int = 10, font_path: str = "", use_ttf: bool = False,
                 theme: Optional[Theme] = None):
    theme = theme or Theme({})
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:] = theme.background
    draw_button_panel(frame, buttons, hover, font_path, use_ttf, theme)
    draw_scoreboard(frame, tally, font_path, use_ttf, theme)
    draw_round_log(frame, results, max_lines, font_path, use_ttf, theme)
    return frame
