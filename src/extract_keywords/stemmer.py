"""Crude suffix stemmers.

Two variants exist and are kept separate. Search keywords must be stemmed the
same way at index time and at query time, so the suffix list and its order are
part of the stored data format.
"""

from common.text import STOP_WORDS

MIN_STEM_LENGTH = 3

# Checked in this order; the first suffix leaving a stem of MIN_STEM_LENGTH wins.
SEARCH_SUFFIXES = (
    # verbal nouns
    "ovanjem", "ovanje", "ovanju", "ovanja", "ovanih",
    # adjectives
    "skega", "skemu", "skem", "skih", "skim",
    # declension
    "ega", "em", "ih", "im", "om", "mi",
    "jem", "ja", "ju", "je", "ji", "jo",
    # bare vowels
    "a", "e", "i", "o", "u",
)


def search_stem(token: str) -> str:
    """Variant A: strip the first matching inflectional suffix."""
    if len(token) <= MIN_STEM_LENGTH:
        return token

    for suffix in SEARCH_SUFFIXES:
        if token.endswith(suffix):
            stem = token[: -len(suffix)]
            if len(stem) >= MIN_STEM_LENGTH:
                return stem

    return token


def story_stem(token: str) -> str:
    """Variant B: length-based truncation used for story clustering."""
    if len(token) <= 4:
        return token
    if len(token) > 6:
        return token[:-2]
    return token[:-1]


def is_valid_stem(stem: str, stop_words: frozenset[str] = STOP_WORDS) -> bool:
    return len(stem) >= MIN_STEM_LENGTH and stem not in stop_words
