"""
Language profiles
=================
Per-alphabet constants used by every other module: alphabet size,
first letter, the index of coincidence expected from correctly
decrypted text, and the letter-frequency table that index is
measured against.

The alphabet is always a contiguous run of code points starting at
``start_letter``. Russian is modelled as the 32 letters А..Я (Ё is
outside the run and is dropped by normalization).
"""

from types import MappingProxyType
from typing import Dict, Mapping


class Language:
    """Immutable alphabet profile. Validated once, at construction."""

    FREQ_TOLERANCE = 0.01

    def __init__(self, name: str, start_letter: str, alphabet_size: int,
                 target_ic: float, letter_freq: Dict[str, float]):
        if alphabet_size <= 0:
            raise ValueError("Alphabet size must be positive.")
        if len(start_letter) != 1:
            raise ValueError("Start letter must be a single character.")
        if not 0 < target_ic < 1:
            raise ValueError("Target index of coincidence must lie in (0, 1).")

        expected = {chr(ord(start_letter) + i) for i in range(alphabet_size)}
        if set(letter_freq) != expected:
            raise ValueError(
                f"Frequency table for {name} must cover exactly "
                f"{alphabet_size} letters starting at {start_letter!r}."
            )
        if any(f < 0 for f in letter_freq.values()):
            raise ValueError("Letter frequencies must be non-negative.")
        total = sum(letter_freq.values())
        if abs(total - 1.0) > self.FREQ_TOLERANCE:
            raise ValueError(f"Letter frequencies for {name} sum to {total:.4f}, not 1.0.")

        self._name = name
        self._start_letter = start_letter
        self._alphabet_size = alphabet_size
        self._target_ic = target_ic
        self._letter_freq = MappingProxyType(dict(letter_freq))

    @property
    def name(self) -> str:
        return self._name

    @property
    def start_letter(self) -> str:
        return self._start_letter

    @property
    def start_code(self) -> int:
        return ord(self._start_letter)

    @property
    def alphabet_size(self) -> int:
        return self._alphabet_size

    @property
    def target_ic(self) -> float:
        return self._target_ic

    @property
    def letter_freq(self) -> Mapping[str, float]:
        return self._letter_freq

    @property
    def alphabet(self) -> str:
        return "".join(chr(self.start_code + i) for i in range(self._alphabet_size))

    def __repr__(self):
        return f"Language({self._name}, {self._alphabet_size} letters from {self._start_letter!r})"


ENGLISH = Language("English", "A", 26, 0.065, {
    "A": 0.082, "B": 0.015, "C": 0.028, "D": 0.043, "E": 0.127,
    "F": 0.022, "G": 0.020, "H": 0.061, "I": 0.070, "J": 0.002,
    "K": 0.008, "L": 0.040, "M": 0.024, "N": 0.067, "O": 0.075,
    "P": 0.019, "Q": 0.001, "R": 0.060, "S": 0.063, "T": 0.091,
    "U": 0.028, "V": 0.010, "W": 0.023, "X": 0.001, "Y": 0.020,
    "Z": 0.001,
})

RUSSIAN = Language("Russian", "А", 32, 0.0553, {
    "А": 0.07998, "Б": 0.01592, "В": 0.04533, "Г": 0.01687,
    "Д": 0.02977, "Е": 0.08483, "Ж": 0.00940, "З": 0.01641,
    "И": 0.07367, "Й": 0.01208, "К": 0.03486, "Л": 0.04343,
    "М": 0.03203, "Н": 0.06700, "О": 0.10983, "П": 0.02804,
    "Р": 0.04746, "С": 0.05473, "Т": 0.06318, "У": 0.02615,
    "Ф": 0.00267, "Х": 0.00966, "Ц": 0.00486, "Ч": 0.01450,
    "Ш": 0.00718, "Щ": 0.00361, "Ъ": 0.00037, "Ы": 0.01898,
    "Ь": 0.01735, "Э": 0.00331, "Ю": 0.00639, "Я": 0.02001,
})

LANGUAGES = {
    "english": ENGLISH,
    "russian": RUSSIAN,
}


def get_language(name: str) -> Language:
    """Look up a built-in profile by name (case-insensitive)."""
    try:
        return LANGUAGES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown language {name!r}. Available: {', '.join(sorted(LANGUAGES))}"
        ) from None
