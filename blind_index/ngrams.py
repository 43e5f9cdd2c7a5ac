"""
Trigram tokenization for blind substring search.

- Text is normalized (special chars removed, transliterated) before splitting.
- Words come from Unicode word-boundary segmentation (UAX #29), not whitespace splitting.
- Words shorter than 3 characters are right-padded with "-"; windows are per character, never per byte.
"""

from typing import List, Set

from uniseg.wordbreak import words

from .config import NGRAM_SIZE, PAD_CHAR
from .normalize import normalize


def split_words(text: str) -> List[str]:
    """Word segments of text; whitespace and punctuation segments are dropped."""
    return [w for w in words(text) if any(c.isalnum() for c in w)]


def pad_word(word: str) -> str:
    """Right-pad a short word to NGRAM_SIZE: "x" -> "x--"."""
    return word.ljust(NGRAM_SIZE, PAD_CHAR)


def word_to_trigrams(word: str) -> Set[str]:
    """All contiguous NGRAM_SIZE windows of word. Empty if word is shorter than NGRAM_SIZE."""
    return {word[i : i + NGRAM_SIZE] for i in range(len(word) - NGRAM_SIZE + 1)}


def extract_trigrams(text: str) -> Set[str]:
    """
    Unique trigrams of text across all its words.
    Empty text gives an empty set; every member is exactly NGRAM_SIZE characters.
    """
    trigrams: Set[str] = set()
    for word in split_words(normalize(text)):
        trigrams |= word_to_trigrams(pad_word(word))
    return trigrams
