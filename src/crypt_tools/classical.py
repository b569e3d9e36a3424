import string
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from .errors import InvalidArgument

AlphabetName = Literal["upper", "lower", "digits"]


@dataclass(frozen=True)
class Alphabet:
    name: AlphabetName
    symbols: str

    @property
    def size(self) -> int:
        return len(self.symbols)

    def shift(self, char: str, level: int) -> str:
        position = self.symbols.index(char)
        return self.symbols[(position + level) % self.size]


UPPERCASE = Alphabet("upper", string.ascii_uppercase)
LOWERCASE = Alphabet("lower", string.ascii_lowercase)
DIGITS = Alphabet("digits", string.digits)

# Letter classes are checked before digits.
ALPHABETS: Tuple[Alphabet, ...] = (UPPERCASE, LOWERCASE, DIGITS)


def classify(char: str) -> Optional[Alphabet]:
    """Return the alphabet class containing `char`, or None."""
    for alphabet in ALPHABETS:
        if char in alphabet.symbols:
            return alphabet
    return None


def shift_cipher(text: str, level: int) -> str:
    """
    Shift A-Z, a-z and 0-9 by `level` positions, wrapping inside each class.

    Any other character is copied unchanged. Negative levels shift backwards,
    so shift_cipher(shift_cipher(text, n), -n) == text.
    """
    result: List[str] = []
    for char in text:
        alphabet = classify(char)
        if alphabet is None:
            result.append(char)
        else:
            result.append(alphabet.shift(char, level))
    return "".join(result)


caesar = shift_cipher


def char_value(char: str) -> int:
    """
    Numeric value of a key character.

    Digits map to themselves, letters to 1-26 regardless of case, anything
    else to 0.
    """
    if len(char) != 1:
        raise InvalidArgument(f"Expected a single character, got {char!r}.")
    alphabet = classify(char)
    if alphabet is DIGITS:
        return int(char)
    if alphabet is None:
        return 0
    return alphabet.symbols.index(char) + 1


def keyed_shift_cipher(text: str, key: str, reverse: bool = False) -> str:
    """
    Vigenere cipher over the shift_cipher classes.

    Character `i` is shifted by char_value(key[i % len(key)]); the key
    advances on every character, including ones that pass through.
    """
    if not key:
        raise InvalidArgument("Key must not be empty.")
    offsets = [char_value(k) for k in key]
    result: List[str] = []
    for idx, ch in enumerate(text):
        offset = offsets[idx % len(offsets)]
        result.append(shift_cipher(ch, -offset if reverse else offset))
    return "".join(result)


vigenere = keyed_shift_cipher
