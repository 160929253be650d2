from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    label: str
    value: str


def matches(candidate: Candidate, needle: str) -> bool:
    """case-insensitive substring match against label or value"""
    needle = needle.lower()
    return needle in candidate.label.lower() or needle in candidate.value.lower()


def filter_and_sort(
    raw: dict[str, str], current_input: str = ""
) -> tuple[Candidate, ...]:
    """builds the ordered candidate list shown to the user"""
    candidates = [Candidate(label, value) for label, value in raw.items()]

    # blank input shows everything
    if current_input and not current_input.isspace():
        candidates = [c for c in candidates if matches(c, current_input)]

    return tuple(sorted(candidates, key=lambda c: c.label))
