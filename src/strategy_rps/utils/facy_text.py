import os
from typing import Dict, Optional, Tuple

import cv2
import numpy as np
from PIL import ImageFont, ImageDraw, Image

FONT = cv2.FONT_HERSHEY_SIMPLEX

_FONT_CACHE: Dict[Tuple[str, int], Optional[ImageFont.FreeTypeFont]] = {}


def _bgr_to_rgb(c):
    return (int(c[2]), int(c[1]), int(c[0]))


def _load_font(font_path: str, font_size: int):
    """Load .otf/.ttf once per size; None when the path is empty or unreadable."""
    key = (font_path or "", int(font_size))
    if key in _FONT_CACHE:
        return _FONT_CACHE[key]
    font = None
    if font_path:
        try:
            font = ImageFont.truetype(os.path.normpath(font_path), int(font_size))
        except OSError:
            font = None
    _FONT_CACHE[key] = font
    return font


def _hershey_scale(font_size: int) -> float:
    # FONT_HERSHEY_SIMPLEX is ~30px tall at scale 1.0
    return max(0.3, font_size / 30.0)


def text_size(text: str, font_size: int, font_path: str = "", use_ttf: bool = False) -> Tuple[int, int]:
    font = _load_font(font_path, font_size) if use_ttf else None
    if font is not None:
        x0, y0, x1, y1 = font.getbbox(text)
        return x1 - x0, y1 - y0
    (w, h), _ = cv2.getTextSize(text, FONT, _hershey_scale(font_size), 1)
    return w, h


def put_text(frame_bgr, text: str, topleft_xy, font_size: int, color=(255, 255, 255),
             font_path: str = "", use_ttf: bool = False):
    """
    Draw top-left anchored text in place. Uses PIL when a TTF loads,
    otherwise falls back to OpenCV's Hershey font.
    """
    font = _load_font(font_path, font_size) if use_ttf else None
    x, y = int(topleft_xy[0]), int(topleft_xy[1])
    if font is None:
        _, h = text_size(text, font_size)
        cv2.putText(frame_bgr, text, (x, y + h), FONT, _hershey_scale(font_size),
                    tuple(int(c) for c in color), 1, cv2.LINE_AA)
        return frame_bgr

    img = Image.fromarray(frame_bgr[:, :, ::-1])  # BGR->RGB
    draw = ImageDraw.Draw(img)
    draw.text((x, y), text, font=font, fill=_bgr_to_rgb(color))
    frame_bgr[:] = np.array(img)[:, :, ::-1]  # RGB->BGR
    return frame_bgr


def put_text_center(frame_bgr, text: str, center_xy, font_size: int, color=(255, 255, 255),
                    font_path: str = "", use_ttf: bool = False):
    w, h = text_size(text, font_size, font_path, use_ttf)
    x = int(center_xy[0] - w / 2)
    y = int(center_xy[1] - h / 2)
    return put_text(frame_bgr, text, (x, y), font_size, color, font_path, use_ttf)


def add_translucent_bar(frame_bgr, top_left, bottom_right, color_bgr=(0, 0, 0), alpha=0.35):
    overlay = frame_bgr.copy()
    cv2.rectangle(overlay, top_left, bottom_right, color_bgr, -1)
    return cv2.addWeighted(overlay, alpha, frame_bgr, 1 - alpha, 0)
