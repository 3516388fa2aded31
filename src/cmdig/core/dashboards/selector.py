"""
Interactive dashboard selection.

Uses questionary's autocomplete prompt with prompt_toolkit's fuzzy
completer: typing "vmi" narrows the menu to "VM Instances", Tab or the
arrow keys move through matches, Enter takes the best match for what was
typed, Ctrl-C cancels.
"""

from __future__ import annotations

from typing import Sequence

import questionary
from prompt_toolkit.completion import CompleteEvent, FuzzyCompleter, WordCompleter
from prompt_toolkit.document import Document

from cmdig.core.dashboards.models import DashboardEntry

DEFAULT_PROMPT = "Dashboard:"

# Match against the whole input, spaces included, not only the last word.
_WHOLE_INPUT = r"^.*"


def build_labels(entries: Sequence[DashboardEntry]) -> list[str]:
    """
    One unique label per entry, in order.

    Repeated display names get a numeric suffix ("GKE", "GKE (2)") so
    each entry stays selectable.
    """
    labels: list[str] = []
    seen: set[str] = set()
    for entry in entries:
        label = entry.display_name
        n = 1
        while label in seen:
            n += 1
            label = f"{entry.display_name} ({n})"
        seen.add(label)
        labels.append(label)
    return labels


def build_completer(labels: Sequence[str], meta: dict[str, str] | None = None) -> FuzzyCompleter:
    """Fuzzy completer over full labels."""
    words = WordCompleter(
        list(labels),
        ignore_case=True,
        sentence=True,
        match_middle=True,
        meta_dict=meta or {},
    )
    return FuzzyCompleter(words, pattern=_WHOLE_INPUT)


def best_match(completer: FuzzyCompleter, text: str) -> str | None:
    """Highest-ranked label for ``text``, or None when nothing matches."""
    document = Document(text, cursor_position=len(text))
    for completion in completer.get_completions(document, CompleteEvent()):
        return completion.text
    return None


def select_entry(
    entries: Sequence[DashboardEntry],
    prompt: str = DEFAULT_PROMPT,
) -> DashboardEntry | None:
    """
    Let the user pick one entry.

    Returns:
        The chosen entry, or None if the list is empty or the user cancelled
    """
    if not entries:
        return None

    labels = build_labels(entries)
    by_label = dict(zip(labels, entries))
    completer = build_completer(labels, {label: by_label[label].kind for label in labels})

    answer = questionary.autocomplete(
        prompt,
        choices=labels,
        completer=completer,
        validate=lambda text: best_match(completer, text) is not None or "No matching dashboard",
    ).ask()

    if answer is None:
        return None
    label = answer if answer in by_label else best_match(completer, answer)
    return by_label.get(label) if label else None
