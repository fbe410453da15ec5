#
# PROJECT: kanvas
# MODULE: kanvas/present.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses

from .color import Palette
from .config import KanvasConfig
from .surface import Surface, render_cell_ascii, render_cell_braille


def present(stdscr, surface: Surface, config: KanvasConfig, palette: Palette,
            top: int = 0):
    """
    Copy a surface onto a curses screen, starting at row `top`.

    Erases the screen first.  Does NOT call stdscr.refresh(); the caller
    should do that after optional HUD / overlay drawing.
    """
    th, tw = stdscr.getmaxyx()
    stdscr.erase()

    bg_pair = palette.pair_for(surface.background, surface.background)
    if bg_pair:
        stdscr.bkgd(' ', curses.color_pair(bg_pair))

    render = render_cell_braille if config.use_braille else render_cell_ascii
    for row, col, mask, color, char in surface.cells():
        y = row + top
        # curses refuses to write the bottom-right cell
        if y >= th or col >= tw - 1:
            continue
        attr = curses.color_pair(palette.pair_for(color, surface.background))
        try:
            stdscr.addstr(y, col, char if char is not None else render(mask), attr)
        except curses.error:
            pass
