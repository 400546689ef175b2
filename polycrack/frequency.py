"""
Frequency analysis
==================
Empirical letter frequencies and their reduction to a single score:
the index of coincidence against a language profile,

    IC = sum( f_text(c) * f_language(c) )

Correctly decrypted natural-language text lands close to the
language's ``target_ic`` (about 0.065 for English); a wrong shift
gives a flatter distribution and a lower index.
"""

from collections import Counter
from typing import Dict, Mapping

from .languages import Language


def frequency_table(text: str) -> Dict[str, float]:
    """Relative frequency of each character in `text`. Empty text gives {}."""
    if not text:
        return {}
    n = len(text)
    return {ch: count / n for ch, count in Counter(text).items()}


def index_of_coincidence(table: Mapping[str, float], language: Language) -> float:
    # characters outside the profile contribute nothing
    expected = language.letter_freq
    return sum(freq * expected[ch] for ch, freq in table.items() if ch in expected)
