from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from .suggestions import Candidate


class Key(Enum):
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    ENTER = "enter"
    ESCAPE = "escape"
    RESIZE = "resize"


class Outcome(Enum):
    COMMITTED = "committed"
    CANCELLED = "cancelled"
    INVALID = "invalid"


@dataclass(frozen=True)
class SessionResult:
    outcome: Outcome
    value: str | None = None


@dataclass
class SessionState:
    """everything that lives for the duration of one picker run"""

    candidates: tuple[Candidate, ...]
    current_input: str = ""
    selected_index: int | None = field(default=None)

    def __post_init__(self):
        self.candidates = tuple(self.candidates)
        if not self.candidates:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        elif not 0 <= self.selected_index < len(self.candidates):
            raise ValueError(
                f"selected index {self.selected_index} out of range for {len(self.candidates)} candidate(s)"
            )

    def move(self, step: int) -> None:
        """moves the selection by step, wrapping around at both ends"""
        if self.selected_index is None:
            return
        self.selected_index = (self.selected_index + step) % len(self.candidates)

    def selected(self) -> Candidate | None:
        if self.selected_index is None:
            return None
        if not 0 <= self.selected_index < len(self.candidates):
            return None
        return self.candidates[self.selected_index]


class KeySource(Protocol):
    def read_key(self) -> Key | None:
        """blocks until the next key press, None for keys the picker ignores"""
        ...


class SelectionLoop:
    """drives the session state from key presses until commit or cancel"""

    def __init__(
        self,
        state: SessionState,
        keys: KeySource,
        redraw: Callable[[SessionState], None],
    ):
        self.state = state
        self._keys = keys
        self._redraw = redraw

    def handle(self, key: Key) -> SessionResult | None:
        """applies one key press, returns a result once the session is over"""
        if key is Key.ESCAPE:
            return SessionResult(Outcome.CANCELLED)
        if key is Key.ENTER:
            return self._commit()

        if key is Key.UP:
            self.state.move(-1)
        elif key is Key.DOWN:
            self.state.move(1)
        # tab is reserved for cycling views, for now it only repaints like resize
        self._redraw(self.state)
        return None

    def _commit(self) -> SessionResult:
        candidate = self.state.selected()
        if candidate is None:
            return SessionResult(Outcome.INVALID)
        return SessionResult(Outcome.COMMITTED, candidate.value)

    def run(self) -> SessionResult:
        self._redraw(self.state)
        while True:
            key = self._keys.read_key()
            if key is None:
                continue
            result = self.handle(key)
            if result is not None:
                return result
