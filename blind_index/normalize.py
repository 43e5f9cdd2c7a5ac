"""
Text normalization before trigram extraction.

- Removes a fixed set of punctuation/symbols outright (no replacement), so "812-111" becomes "812111".
- Transliterates each remaining character to lowercase Latin via Unidecode.
- Characters with no Latin equivalent are kept verbatim and are not case-folded.
"""

import re

from unidecode import unidecode

SPECIAL_CHARS = re.compile(r"""[!@#$%^&*(){}_<>:;,."'`|+=/~\[\]\\-]""")

# Unidecode's placeholder for code points its tables list but cannot map.
_UNKNOWN = "[?]"


def strip_special_chars(text: str) -> str:
    return SPECIAL_CHARS.sub("", text)


def transliterate_char(ch: str) -> str:
    """
    Latin approximation of a single character, lowercased.
    May expand to several characters (e.g. ideographs, ligatures); falls back to ch unchanged.
    """
    latin = unidecode(ch)
    if not latin or latin == _UNKNOWN:
        return ch
    return latin.lower()


def normalize(text: str) -> str:
    """Strip special characters, then transliterate what remains. Total over str."""
    return "".join(transliterate_char(ch) for ch in strip_special_chars(text))
