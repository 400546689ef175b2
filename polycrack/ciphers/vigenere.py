"""
Vigenère: repeating-key polyalphabetic cipher, and its attack
==============================================================
Encryption adds key and plaintext offsets modulo the alphabet size,
the key repeating over the text.

Cracking without the key:
  for each candidate key length L
    split the ciphertext into L residue classes (i mod L)
      → each class was shifted by one key letter: a Caesar cipher
    break each class by trying every shift and keeping the one whose
      index of coincidence is closest to the language's target
    score L by the sum of those closest distances
    interleave the decrypted classes back into one candidate
  rank candidates by score, lowest first

Historical note: Blaise de Vigenère, 1553. The column attack was
published by Kasiski in 1863.
A heuristic: multiples of the true key length also decrypt
correctly, and short texts may rank a wrong length first.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from ..frequency import frequency_table, index_of_coincidence
from ..keyrecovery import Rot, recover_key
from ..languages import Language
from ..text import letter, normalize, offset
from .caesar import CaesarCipher

logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    """One decoding attempt: lower score is a better guess."""
    score: float
    plaintext: str
    key_length: int


class VigenereCipher:
    """Vigenère cipher over a language profile, with a frequency-analysis attack."""

    def __init__(self, language: Language, rot: int = Rot.ROT0, strict_period: bool = False):
        self.language = language
        self.rot = Rot(rot)
        self.strict_period = strict_period
        self.caesar = CaesarCipher(language)
        logger.debug(f"VigenereCipher {language.name} | rot={self.rot.name}")

    @classmethod
    def from_settings(cls, settings) -> "VigenereCipher":
        """Build a cipher from a `polycrack.config.Settings` instance."""
        return cls(settings.language(), rot=settings.ROT, strict_period=settings.STRICT_PERIOD)

    def _key_offsets(self, key: str) -> List[int]:
        key = normalize(key, self.language)
        if not key:
            raise ValueError(f"Vigenère key must contain {self.language.name} letters.")
        return [offset(k, self.language) for k in key]

    def _apply(self, text: str, key: str, sign: int) -> str:
        text = normalize(text, self.language)
        shifts = self._key_offsets(key)
        period = len(shifts)
        return "".join(
            letter(offset(ch, self.language) + sign * shifts[i % period], self.language)
            for i, ch in enumerate(text)
        )

    def encrypt(self, text: str, key: str) -> str:
        """Encrypt under a repeating key. Both are normalized first."""
        return self._apply(text, key, 1)

    def decrypt(self, text: str, key: str) -> str:
        """Decrypt with a known key."""
        return self._apply(text, key, -1)

    # ── residue classes ──────────────────────────────────────────────────────
    @staticmethod
    def divide(text: str, groups: int) -> List[str]:
        """Split `text` into `groups` subsequences by index modulo `groups`."""
        if groups < 1:
            raise ValueError("Number of groups must be at least 1.")
        return [text[j::groups] for j in range(groups)]

    @staticmethod
    def interleave(parts: List[str]) -> str:
        """Inverse of `divide`: position i comes from parts[i % L][i // L]."""
        size = len(parts)
        total = sum(len(p) for p in parts)
        return "".join(parts[i % size][i // size] for i in range(total))

    # ── attack ───────────────────────────────────────────────────────────────
    def best_caesar_shift(self, text: str) -> Tuple[int, float]:
        """
        Exhaustive Caesar search on normalized `text`.

        Returns (shift, |ic - target_ic|) for the shift whose decryption is
        closest to the language's target index; the lowest shift wins ties.
        An empty text returns (0, 0.0): it carries no evidence either way.
        """
        if not text:
            return 0, 0.0

        target = self.language.target_ic
        best_shift, best_diff = 0, float("inf")
        for shift in range(self.language.alphabet_size):
            plain = self.caesar.decrypt(text, shift)
            ic = index_of_coincidence(frequency_table(plain), self.language)
            diff = abs(ic - target)
            if diff < best_diff:
                best_shift, best_diff = shift, diff
        return best_shift, best_diff

    def crack(self, ciphertext: str, max_key_length: int) -> List[Candidate]:
        """
        Try every key length in [1, max_key_length) and rank the decryptions.

        Returns one Candidate per key length, ascending by score; equal
        scores keep ascending key-length order. A budget of 1 or less gives [].
        """
        text = normalize(ciphertext, self.language)
        candidates = []

        for key_len in range(1, max_key_length):
            total_diff = 0.0
            plain_groups = []
            for group in self.divide(text, key_len):
                shift, diff = self.best_caesar_shift(group)
                total_diff += diff
                plain_groups.append(self.caesar.decrypt(group, shift))

            candidates.append(Candidate(total_diff, self.interleave(plain_groups), key_len))
            logger.debug(f"Key length {key_len}: score={total_diff:.5f}")

        ranked = sorted(candidates, key=lambda c: c.score)
        if ranked:
            logger.info(
                f"Cracked {len(text)} letters over {len(ranked)} key lengths | "
                f"best length={ranked[0].key_length} score={ranked[0].score:.5f}"
            )
        return ranked

    def recover_key(self, plaintext: str, ciphertext: str, strict: Optional[bool] = None) -> Optional[str]:
        """Literal key for a plaintext/ciphertext pair, or None on length mismatch."""
        if strict is None:
            strict = self.strict_period
        return recover_key(plaintext, ciphertext, self.language, rot=self.rot, strict=strict)
