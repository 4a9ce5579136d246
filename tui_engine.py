import curses
import time

from errors import InputError, RenderError, TerminalModeError
from logger import get_logger
from survival_state import Command

logger = get_logger(__name__)

# ---------------- KEYS ----------------
KEY_COMMANDS = {
    ord("q"): Command.QUIT,
    curses.KEY_RIGHT: Command.NEXT_TAB,
    curses.KEY_LEFT: Command.PREVIOUS_TAB,
}


def decode_key(key):
    """Map a getch() code to a Command. Anything unbound is a NOOP."""
    return KEY_COMMANDS.get(key, Command.NOOP)


# ---------------- SCREEN BUFFER ----------------
class Screen:
    """Off-screen frame. Draw calls are clipped to the current size."""

    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.ops = []

    def resize(self, height, width):
        self.height = height
        self.width = width

    def clear(self):
        self.ops = []

    def text(self, row, col, s, attr=0):
        if row < 0 or row >= self.height or col >= self.width or not s:
            return
        if col < 0:
            s = s[-col:]
            col = 0
        s = s[: self.width - col]
        if s:
            self.ops.append((row, col, s, attr))

    def box(self, rect, title=None, title_attr=0):
        if rect.height < 2 or rect.width < 2:
            return
        inner = rect.width - 2
        self.text(rect.row, rect.col, "┌" + "─" * inner + "┐")
        for r in range(rect.row + 1, rect.row + rect.height - 1):
            self.text(r, rect.col, "│")
            self.text(r, rect.col + rect.width - 1, "│")
        self.text(rect.row + rect.height - 1, rect.col, "└" + "─" * inner + "┘")
        if title:
            self.text(rect.row, rect.col + 1, title[:inner], title_attr)

    def lines(self):
        """Plain-text rendition of the frame, attributes dropped."""
        grid = [[" "] * self.width for _ in range(self.height)]
        for row, col, s, _ in self.ops:
            for i, ch in enumerate(s):
                grid[row][col + i] = ch
        return ["".join(line).rstrip() for line in grid]


# ---------------- TERMINAL ----------------
class CursesTerminal:
    """Owns curses mode for the lifetime of a session.

    Use as a context manager so the terminal is handed back on every
    exit path:

        with CursesTerminal() as term:
            run_app(term, app, draw, tick_rate)
    """

    def __init__(self):
        self.window = None
        self.screen = Screen()
        self._active = False

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.restore()
        except TerminalModeError:
            if exc_type is None:
                raise
            logger.exception("Could not restore terminal while handling %s", exc_type.__name__)
        return False

    @property
    def active(self):
        return self._active

    def enter(self):
        """initscr puts us on the alternate screen; then cbreak, keypad, mouse."""
        try:
            self.window = curses.initscr()
        except curses.error as exc:
            raise TerminalModeError(f"could not initialise terminal: {exc}") from exc
        self._active = True
        try:
            curses.noecho()
            curses.cbreak()
            self.window.keypad(True)
            self._set_cursor(0)
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        except BaseException as exc:
            try:
                self.restore()
            except TerminalModeError:
                logger.exception("Restore after failed enter also failed")
            if isinstance(exc, curses.error):
                raise TerminalModeError(f"could not enter curses mode: {exc}") from exc
            raise
        logger.debug("Entered curses mode")

    def restore(self):
        if not self._active:
            return
        self._active = False
        try:
            try:
                curses.mousemask(0)
                self._set_cursor(1)
                self.window.keypad(False)
                curses.nocbreak()
                curses.echo()
            finally:
                curses.endwin()
        except curses.error as exc:
            raise TerminalModeError(f"could not restore terminal: {exc}") from exc
        logger.debug("Restored terminal")

    def _set_cursor(self, visibility):
        try:
            curses.curs_set(visibility)
        except curses.error:
            # not every terminal can hide the cursor
            logger.debug("curs_set(%d) unsupported", visibility)

    def draw(self, fn):
        """Build a frame with fn(screen) and push it to the window."""
        try:
            self.screen.resize(*self.window.getmaxyx())
            self.screen.clear()
            fn(self.screen)
            self.window.erase()
            for row, col, s, attr in self.screen.ops:
                if row == self.screen.height - 1 and col + len(s) >= self.screen.width:
                    # addstr errors after writing the bottom-right cell
                    self.window.insstr(row, col, s, attr)
                else:
                    self.window.addstr(row, col, s, attr)
            self.window.refresh()
        except curses.error as exc:
            raise RenderError(f"could not draw frame: {exc}") from exc

    def poll_key(self, timeout):
        """Wait up to `timeout` seconds for a key. None on timeout."""
        try:
            self.window.timeout(max(0, int(timeout * 1000)))
            key = self.window.getch()
        except curses.error as exc:
            raise InputError(f"could not read input: {exc}") from exc
        return None if key == -1 else key


# ---------------- MAIN LOOP ----------------
def compute_timeout(tick_rate, elapsed):
    """Time left before the next tick is due, never negative."""
    return max(0.0, tick_rate - elapsed)


def run_app(terminal, app, draw, tick_rate, clock=time.monotonic):
    """
    Render, wait for a key for at most the rest of the tick, apply it,
    then tick if the interval has passed. Returns the number of frames
    drawn once a QUIT key arrives.
    """
    last_tick = clock()
    frames = 0

    while True:
        terminal.draw(lambda screen: draw(screen, app))
        frames += 1

        timeout = compute_timeout(tick_rate, clock() - last_tick)
        key = terminal.poll_key(timeout)
        if key is not None:
            command = decode_key(key)
            if not app.apply(command):
                logger.info("Quit after %d frames", frames)
                return frames

        if clock() - last_tick >= tick_rate:
            last_tick = clock()
            app.on_tick()
