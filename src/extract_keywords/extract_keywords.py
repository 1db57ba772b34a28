"""Turn a title and snippet into a set of keyword stems."""

from __future__ import annotations

from typing import Callable, Iterable

from common.text import STOP_WORDS, STORY_STOP_WORDS, tokenize
from extract_keywords.stemmer import is_valid_stem, search_stem, story_stem


def _record_text(title: str | None, summary: str | None) -> str:
    # Title repeated to weight it over the snippet
    parts = [title or "", title or "", summary or ""]
    return " ".join(part for part in parts if part)


def _stem_tokens(
    tokens: Iterable[str],
    stem: Callable[[str], str],
    stop_words: frozenset[str] = STOP_WORDS,
) -> frozenset[str]:
    keywords = set()
    for token in tokens:
        stemmed = stem(token)
        if is_valid_stem(stemmed, stop_words):
            keywords.add(stemmed)
    return frozenset(keywords)


def extract_keywords(text: str | None) -> frozenset[str]:
    """Search-index keywords (stemmer variant A) for free text or a query tag."""
    return _stem_tokens(tokenize(text), search_stem)


def extract_record_keywords(title: str | None, summary: str | None = None) -> frozenset[str]:
    """Search-index keywords for a record's title and snippet."""
    return extract_keywords(_record_text(title, summary))


def extract_story_keywords(title: str | None, summary: str | None = None) -> frozenset[str]:
    """Clustering keywords (stemmer variant B) for a record's title and snippet.

    Also drops institutions and big cities that show up across unrelated stories.
    """
    text = _record_text(title, summary)
    return _stem_tokens(tokenize(text, STORY_STOP_WORDS), story_stem, STORY_STOP_WORDS)
