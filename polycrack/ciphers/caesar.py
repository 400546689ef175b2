"""
Caesar: single-shift substitution
==================================
Every letter moves `shift` places along the alphabet, wrapping
around at the end. Used on its own and as the per-column building
block of the Vigenère attack, where each residue class of the
ciphertext is one Caesar cipher.

The substitution table (one entry per alphabet letter) is rebuilt
on every call; the engine keeps no state between calls.
"""

from ..languages import Language
from ..text import normalize


class CaesarCipher:
    """Shift cipher over a language's alphabet."""

    def __init__(self, language: Language):
        self.language = language

    def strip(self, text: str) -> str:
        """Normalize `text` to this cipher's alphabet."""
        return normalize(text, self.language)

    def _table(self, shift: int) -> dict:
        alphabet = self.language.alphabet
        shift %= self.language.alphabet_size
        return str.maketrans(alphabet, alphabet[shift:] + alphabet[:shift])

    def _substitute(self, text: str, table: dict) -> str:
        return self.strip(text).translate(table)

    def encrypt(self, text: str, shift: int) -> str:
        """Shift every letter forward by `shift`. Input is normalized first."""
        return self._substitute(text, self._table(shift))

    def decrypt(self, text: str, shift: int) -> str:
        """Undo `encrypt(text, shift)`."""
        return self._substitute(text, self._table(-shift))
