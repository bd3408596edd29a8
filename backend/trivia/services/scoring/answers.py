"""Free-text answer normalization and containment matching."""

import re

from .errors import EmptyOrMalformedAnswer

INTERROGATIVE_PREFIXES = ('what is', 'who is', 'what are', 'who are', 'where is')

_PREFIX_RE = re.compile(
    r'^(?:' + '|'.join(re.escape(p) for p in INTERROGATIVE_PREFIXES) + r')\s+',
    re.IGNORECASE,
)
_STRIP_CHARS = str.maketrans('', '', '?()')


def _strip_once(text: str) -> str:
    text = text.strip()
    text = _PREFIX_RE.sub('', text, count=1)
    return text.translate(_STRIP_CHARS).strip()


def normalize(text: str) -> str:
    """Return the canonical comparison form of an answer.

    Lower-cases, drops one leading interrogative phrase ("what is ...?"),
    removes question marks and parentheses and trims whitespace. The steps
    are repeated until nothing changes, so normalizing an already normalized
    string is a no-op.
    """
    current = text.lower()
    while True:
        stripped = _strip_once(current)
        if stripped == current:
            return current
        current = stripped


def clean_submission(submitted) -> str:
    """Normalize a player's submission, rejecting blank or non-text input."""
    if not isinstance(submitted, str):
        raise EmptyOrMalformedAnswer(f"answer must be text, got {type(submitted).__name__}")
    normalized = normalize(submitted)
    if not normalized:
        raise EmptyOrMalformedAnswer('answer is empty')
    return normalized


def matches(submitted, canonical: str) -> bool:
    """True when either normalized form equals or contains the other.

    Containment is deliberately lenient ("lynchburg" matches "the city of
    lynchburg") and has no typo tolerance. Blank submissions never match.
    """
    try:
        given = clean_submission(submitted)
    except EmptyOrMalformedAnswer:
        return False
    expected = normalize(canonical)
    if not expected:
        return False
    return given == expected or given in expected or expected in given
