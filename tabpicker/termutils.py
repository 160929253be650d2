import curses
import sys

from .config import Settings
from .render import Style, render_frame
from .session import Key, Outcome, SelectionLoop, SessionResult, SessionState

ESCAPE_DELAY_MS = 25

_KEYMAP = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.ENTER,
    10: Key.ENTER,
    13: Key.ENTER,
    9: Key.TAB,
    27: Key.ESCAPE,  # escape key
    curses.KEY_RESIZE: Key.RESIZE,
}


def err_print(text: str) -> None:
    """Prints text in red to stderr."""
    print(f"\033[1;31merror: {text}\033[0m", file=sys.stderr)


class CursesTerminal:
    """reads picker keys from a curses window and paints frames onto it"""

    def __init__(self, stdscr, settings: Settings, hint_attr: int = curses.A_DIM):
        self._stdscr = stdscr
        self._settings = settings
        self._attrs = {
            Style.TITLE: curses.A_BOLD,
            Style.HINT: hint_attr,
            Style.PLAIN: curses.A_NORMAL,
            Style.SELECTED: curses.A_REVERSE,
        }

    def read_key(self) -> Key | None:
        return _KEYMAP.get(self._stdscr.getch())

    def draw(self, state: SessionState) -> None:
        self._stdscr.erase()
        h, w = self._stdscr.getmaxyx()

        for y, line in enumerate(render_frame(state, self._settings, height=h)):
            if y >= h:  # check against available height
                break
            # the last column is left empty, writing there moves the cursor off screen
            self._stdscr.addnstr(y, 0, line.text, max(0, w - 1), self._attrs[line.style])

        self._stdscr.refresh()


def run_curses_session(state: SessionState, settings: Settings) -> SessionResult:
    """runs the interactive picker on the real terminal"""

    def main_loop(stdscr) -> SessionResult:
        curses.curs_set(0)
        curses.set_escdelay(ESCAPE_DELAY_MS)
        stdscr.keypad(True)

        # initialize color
        curses.start_color()
        curses.init_pair(1, curses.COLOR_CYAN, curses.COLOR_BLACK)

        terminal = CursesTerminal(stdscr, settings, hint_attr=curses.color_pair(1))
        loop = SelectionLoop(state, terminal, terminal.draw)
        try:
            return loop.run()
        except KeyboardInterrupt:
            return SessionResult(Outcome.CANCELLED)

    # wrapper restores the terminal mode and cursor however the loop ends
    return curses.wrapper(main_loop)
