import string
from enum import Enum


class CharacterClass(Enum):
    """
    The four kinds of characters a password can be built from.
    Declaration order is the canonical order used everywhere else.
    """

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


ALPHABETS = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.NUMBERS: string.digits,
    CharacterClass.SYMBOLS: "!@#$%^&*()_+~`|}{[]:;?><,./-=",
}

CANONICAL_ORDER = tuple(CharacterClass)

