import re
from types import MappingProxyType
from typing import Optional

from data.states import US_STATES

_WHITESPACE = re.compile(r"\s+")
_TRAILING_PUNCTUATION = ".,;:!?"


def normalization_key(text: str) -> str:
    """Fold a state name to its lookup key: 'New   York.' -> 'new-york'"""
    folded = text.lower().strip().rstrip(_TRAILING_PUNCTUATION).strip()
    return _WHITESPACE.sub("-", folded)


# Built once at import, read-only afterwards
STATE_KEYS = MappingProxyType({normalization_key(name): name for name in US_STATES})


def normalize_state(text: str) -> Optional[str]:
    """Return the canonical state name for free-text input, or None"""
    return STATE_KEYS.get(normalization_key(text))


def list_states() -> list[dict]:
    return [{"name": name, "key": normalization_key(name)} for name in US_STATES]
