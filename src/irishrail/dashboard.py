"""Full-screen departure board that refreshes itself periodically."""

import curses
import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .board import Row, project_rows
from .client import Client
from .config import REFRESH_EVERY
from .errors import DisplayInitError, IrishRailError
from .models import Station

logger = logging.getLogger(__name__)

# Title line plus a spacer line above the table, one spare line below
CHROME_LINES = 3

ESCAPE = 27
QUIT_KEYS = (ESCAPE, ord("q"), ord("Q"))

CP_TITLE = 1


class LoopState(Enum):
    INITIALIZING = "initializing"
    RENDERING = "rendering"
    WAITING = "waiting"
    TERMINATED = "terminated"


class DisplaySurface(ABC):
    """A full-screen terminal that draws a title plus a table and emits events."""

    @abstractmethod
    def open(self) -> None:
        """Acquire the terminal. Raises DisplayInitError on failure."""

    @abstractmethod
    def close(self) -> None:
        """Restore the terminal. Safe to call more than once."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Current (height, width) of the terminal."""

    @abstractmethod
    def render(self, title: str, rows: Sequence[Row]) -> None:
        """Draw the title and rows, replacing whatever was on screen."""

    @abstractmethod
    def loop(
        self,
        on_tick: Callable[[int], None],
        on_resize: Callable[[int, int], None],
        on_quit: Callable[[], None],
    ) -> None:
        """Dispatch events until stop_loop() is called.

        on_tick receives the tick count (1, 2, 3, ...), on_resize the new
        (height, width).
        """

    @abstractmethod
    def stop_loop(self) -> None:
        """Make loop() return after the current event."""


def _safe_addstr(win, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        win.addnstr(y, x, s, max(0, win.getmaxyx()[1] - x - 1), attr)
    except curses.error:
        pass


def _cattr(pair_id: int, extra: int = 0) -> int:
    try:
        return curses.color_pair(pair_id) | extra
    except curses.error:
        return extra


def format_table(rows: Sequence[Row], gap: int = 2) -> List[str]:
    """Pad every column to its widest cell."""
    if not rows:
        return []
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    spacer = " " * gap
    return [spacer.join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]


class CursesSurface(DisplaySurface):
    """DisplaySurface backed by curses, ticking once per tick_seconds."""

    def __init__(self, tick_seconds: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.tick_seconds = tick_seconds
        self.clock = clock
        self._screen = None
        self._running = False

    def open(self) -> None:
        try:
            self._screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self._screen.keypad(True)
            if hasattr(curses, "set_escdelay"):
                curses.set_escdelay(25)
            self._init_colors()
        except curses.error as e:
            self.close()
            raise DisplayInitError(f"Could not initialize terminal: {e}") from e
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # not every terminal can hide the cursor

    @staticmethod
    def _init_colors() -> None:
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(CP_TITLE, curses.COLOR_GREEN, -1)
        except curses.error:
            pass  # monochrome terminal

    def close(self) -> None:
        if self._screen is None:
            return
        self._screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self._screen = None

    def size(self) -> Tuple[int, int]:
        return self._screen.getmaxyx()

    def render(self, title: str, rows: Sequence[Row]) -> None:
        scr = self._screen
        scr.erase()
        _safe_addstr(scr, 0, 0, title, _cattr(CP_TITLE, curses.A_BOLD))
        for i, line in enumerate(format_table(rows)):
            _safe_addstr(scr, 2 + i, 0, line, curses.A_BOLD if i == 0 else 0)
        scr.refresh()

    def loop(self, on_tick, on_resize, on_quit) -> None:
        scr = self._screen
        scr.timeout(100)
        self._running = True
        count = 0
        next_tick = self.clock() + self.tick_seconds
        while self._running:
            ch = scr.getch()
            if ch == curses.KEY_RESIZE:
                curses.update_lines_cols()
                scr.clear()
                on_resize(*self.size())
            elif ch in QUIT_KEYS:
                on_quit()
                continue

            now = self.clock()
            if now >= next_tick:
                count += 1
                on_tick(count)
                next_tick += self.tick_seconds
                if next_tick < self.clock():
                    # a slow fetch overran the period; don't burst ticks to catch up
                    next_tick = self.clock() + self.tick_seconds

    def stop_loop(self) -> None:
        self._running = False


class RefreshLoop:
    """
    Keeps a station's departure board on screen and up to date.

    Every tick the "last update" age in the title is redrawn; every
    refresh_every ticks the board is re-fetched. A failed background
    refresh leaves the previous rows on screen.
    """

    def __init__(
        self,
        client: Client,
        station: Station,
        surface: DisplaySurface,
        refresh_every: int = REFRESH_EVERY,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.station = station
        self.surface = surface
        self.refresh_every = refresh_every
        self.clock = clock

        self.state = LoopState.INITIALIZING
        self.rows: List[Row] = []
        self.capacity = 0
        self.last_update = 0.0

    def fetch_rows(self) -> List[Row]:
        return project_rows(self.client.get_train_details(self.station))

    @property
    def elapsed(self) -> int:
        """Whole seconds since the last successful fetch."""
        return int(self.clock() - self.last_update)

    def title(self) -> str:
        return f"{self.station.name} (Last update: {self.elapsed} seconds ago)"

    def start(self) -> None:
        """First fetch and render. Any error here is fatal and propagates."""
        self.rows = self.fetch_rows()
        self.last_update = self.clock()
        height, _ = self.surface.size()
        self.capacity = max(0, height - CHROME_LINES)
        self.render()

    def render(self) -> None:
        self.state = LoopState.RENDERING
        self.surface.render(self.title(), self.rows[: self.capacity])
        self.state = LoopState.WAITING

    def on_tick(self, count: int) -> None:
        if self.state is LoopState.TERMINATED:
            return
        if count % self.refresh_every != 0:
            self.render()
            return
        try:
            rows = self.fetch_rows()
        except IrishRailError as e:
            logger.warning(f"Refresh for {self.station.code} failed, keeping previous rows: {e}")
            return
        self.rows = rows
        self.last_update = self.clock()
        logger.info(f"Refreshed {self.station.code}: {len(rows) - 1} rows")
        self.render()

    def on_resize(self, height: int, width: int) -> None:
        logger.debug(f"Terminal resized to {width}x{height}")
        self.capacity = max(0, height - CHROME_LINES)
        self.render()

    def on_quit(self) -> None:
        self.state = LoopState.TERMINATED
        self.surface.stop_loop()

    def run(self) -> None:
        self.start()
        self.surface.loop(self.on_tick, self.on_resize, self.on_quit)


def run_dashboard(
    client: Client,
    station: Station,
    refresh_every: int = REFRESH_EVERY,
    surface: Optional[DisplaySurface] = None,
) -> None:
    """
    Show the departure board for a station until the user quits.

    Raises:
        DisplayInitError: If the terminal could not be acquired.
        IrishRailError: If the first fetch fails.
    """
    surface = surface or CursesSurface()
    surface.open()
    try:
        RefreshLoop(client, station, surface, refresh_every=refresh_every).run()
    finally:
        surface.close()
