"""Canonical event labels for meet results and time standards.

Meets and standards sheets spell the same event differently ("100 Bu",
"100m Butterfly", "100Fly"). Every label is rewritten to the vocabulary
Free / Back / Breast / Fly / IM with spaces and meter markers removed,
so "100 Bu" and "100Fly" both become "100Fly".
"""

import re

# Ordered (pattern, replacement) rules, applied as a pass over the label.
EVENT_RULES: list[tuple[re.Pattern[str], str]] = [
    # Layout
    (re.compile(r"\s+"), ""),
    (re.compile(r"(?<=\d)m(?=[A-Z])"), ""),  # "100mFly" -> "100Fly"
    # Full stroke names
    (re.compile(r"Butterfly"), "Fly"),
    (re.compile(r"Freestyle"), "Free"),
    (re.compile(r"Backstroke"), "Back"),
    (re.compile(r"Breaststroke"), "Breast"),
    (re.compile(r"I\.M\.?|M\.E\.?"), "IM"),
    # Abbreviations used in meet exports
    (re.compile(r"Bu"), "Fly"),
    (re.compile(r"ME"), "IM"),
    (re.compile(r"FL"), "Fly"),
    (re.compile(r"Fr(?!ee)"), "Free"),
    (re.compile(r"Bk"), "Back"),
    (re.compile(r"Br(?!east)"), "Breast"),
]


def normalize_event(raw_event: str) -> str:
    """Rewrite an event label to its canonical form.

    Unknown tokens pass through unchanged; distances and relay indicators
    ("50", "4x50") are never touched.

    Examples:
        "100Bu" -> "100Fly"
        "200ME" -> "200IM"
        "4x50 Fr" -> "4x50Free"
    """
    event = raw_event
    # A rewrite can form a new token with its neighbours ("MEE" -> "IME"),
    # so passes repeat until the label is stable
    while True:
        rewritten = _apply_rules(event)
        if rewritten == event:
            return event
        event = rewritten


def _apply_rules(event: str) -> str:
    for pattern, replacement in EVENT_RULES:
        event = pattern.sub(replacement, event)
    return event
