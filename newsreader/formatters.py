# newsreader/formatters.py

"""
Rendering rules for each recognised span type.

Adding a type means writing one function below and one entry in
FORMATTERS; the annotator picks it up from the registry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

Formatter = Callable[[str], str]

TWITTER_URL = "https://twitter.com/"
TWITTER_HASHTAG_URL = "https://twitter.com/hashtag/"


def format_entity(text: str) -> str:
    return f"<strong>{text}</strong>"


def format_link(text: str) -> str:
    return f'<a href="{text}">{text}</a>'


def _prefixed_anchor(text: str, base_url: str) -> str:
    # first char ('@' or '#') stays literal, the rest is linked
    if not text:
        return ""
    rest = text[1:]
    return f'{text[0]}<a href="{base_url}{rest}">{rest}</a>'


def format_twitter_username(text: str) -> str:
    return _prefixed_anchor(text, TWITTER_URL)


def format_twitter_hashtag(text: str) -> str:
    return _prefixed_anchor(text, TWITTER_HASHTAG_URL)


FORMATTERS: Mapping[str, Formatter] = MappingProxyType(
    {
        "entity": format_entity,
        "link": format_link,
        "twitterUsername": format_twitter_username,
        "twitterHashtag": format_twitter_hashtag,
    }
)


def lookup(span_type: str) -> Optional[Formatter]:
    return FORMATTERS.get(span_type)


def render(span_type: str, text: str) -> Optional[str]:
    """Render text with the formatter for span_type, or None if unknown."""
    formatter = lookup(span_type)
    if formatter is None:
        return None
    return formatter(text)


def known_types() -> List[str]:
    return sorted(FORMATTERS)
