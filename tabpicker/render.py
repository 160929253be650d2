from dataclasses import dataclass
from enum import Enum

from .config import Settings
from .session import SessionState
from .suggestions import Candidate

NAVIGATION_HINT = "Use ↑↓ arrows to navigate, Enter to select, Esc to cancel"
TAB_HINT = "Tab: Cycle between filtered views"
FOOTER_HINT = "Press Enter to insert selection, Esc to cancel"
ELLIPSIS = "..."


class Style(Enum):
    TITLE = "title"
    HINT = "hint"
    PLAIN = "plain"
    SELECTED = "selected"


@dataclass(frozen=True)
class FrameLine:
    text: str
    style: Style = Style.PLAIN


def truncate(value: str, max_length: int) -> str:
    """cuts value to max_length characters, marking the cut with an ellipsis"""
    if len(value) <= max_length:
        return value
    return value[: max_length - len(ELLIPSIS)] + ELLIPSIS


def format_candidate(candidate: Candidate, settings: Settings) -> str:
    label = candidate.label.ljust(settings.label_width)
    value = truncate(candidate.value, settings.value_width)
    return f" {label} : {value} "


def _header(state: SessionState, settings: Settings) -> list[FrameLine]:
    echo = state.current_input if state.current_input else "(none)"
    return [
        FrameLine(settings.title, Style.TITLE),
        FrameLine(NAVIGATION_HINT, Style.HINT),
        FrameLine(TAB_HINT, Style.HINT),
        FrameLine(f"Current input: {echo}"),
        FrameLine(""),
    ]


def _footer() -> list[FrameLine]:
    return [FrameLine(""), FrameLine(FOOTER_HINT, Style.HINT)]


def visible_range(total: int, selected: int | None, rows: int) -> range:
    """the slice of candidates to show so the selected one stays on screen"""
    if rows >= total:
        return range(total)
    selected = selected or 0
    start = min(max(0, selected - rows // 2), total - rows)
    return range(start, start + rows)


def render_frame(
    state: SessionState, settings: Settings | None = None, height: int | None = None
) -> list[FrameLine]:
    """
    builds the full screen for the given state

    when height is given and the list does not fit, only a window of candidates
    around the selection is included
    """
    settings = settings or Settings()
    header = _header(state, settings)
    footer = _footer()

    total = len(state.candidates)
    rows = total
    if height is not None:
        rows = max(1, height - len(header) - len(footer))

    lines = list(header)
    for i in visible_range(total, state.selected_index, rows):
        style = Style.SELECTED if i == state.selected_index else Style.PLAIN
        lines.append(FrameLine(format_candidate(state.candidates[i], settings), style))
    lines.extend(footer)
    return lines


def frame_text(frame: list[FrameLine]) -> str:
    return "\n".join(line.text for line in frame)
