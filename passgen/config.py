import os
from dataclasses import dataclass
from typing import FrozenSet, Optional

from dotenv import load_dotenv

from passgen.charsets import CANONICAL_ORDER, CharacterClass
from passgen.errors import InvalidConfig

# limits of the length slider in the front end
DEFAULT_LENGTH = 16
MIN_UI_LENGTH = 8
MAX_UI_LENGTH = 32

DEFAULT_ENHANCE_URL = "http://localhost:3400/enhancePasswordFlow"
DEFAULT_ENHANCE_TIMEOUT = 8.0


@dataclass(frozen=True)
class GenerationConfig:
    """
    What the user picked: how long the password is and which
    character classes may appear in it.
    """

    length: int = DEFAULT_LENGTH
    enabled_classes: FrozenSet[CharacterClass] = frozenset(CANONICAL_ORDER)

    def __post_init__(self):
        # accept any iterable of classes or their names, store it as a frozenset
        classes = set()
        for member in self.enabled_classes:
            try:
                classes.add(CharacterClass(member))
            except (ValueError, TypeError):
                raise InvalidConfig(f"Unknown character class: {member!r}") from None
        object.__setattr__(self, "enabled_classes", frozenset(classes))

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
    ) -> "GenerationConfig":
        flags = {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.NUMBERS: numbers,
            CharacterClass.SYMBOLS: symbols,
        }
        return cls(length=length, enabled_classes=frozenset(c for c, on in flags.items() if on))

    def ordered_classes(self) -> list:
        return [c for c in CANONICAL_ORDER if c in self.enabled_classes]

    def combined_alphabet(self) -> str:
        return "".join(c.alphabet for c in self.ordered_classes())

    def with_length(self, length: int) -> "GenerationConfig":
        return GenerationConfig(length=length, enabled_classes=self.enabled_classes)

    def toggled(self, char_class: CharacterClass) -> "GenerationConfig":
        return GenerationConfig(
            length=self.length,
            enabled_classes=self.enabled_classes ^ {char_class},
        )


@dataclass
class Settings:
    enhance_url: str = DEFAULT_ENHANCE_URL
    enhance_timeout: float = DEFAULT_ENHANCE_TIMEOUT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """
        Reads PASSGEN_* variables, after loading a .env file if there is one.
        Variables already set in the environment win over the .env file.
        """
        load_dotenv(dotenv_path)

        timeout_raw = os.getenv("PASSGEN_ENHANCE_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_ENHANCE_TIMEOUT
        except ValueError as e:
            raise ValueError(f"PASSGEN_ENHANCE_TIMEOUT must be a number, got {timeout_raw!r}") from e

        return cls(
            enhance_url=os.getenv("PASSGEN_ENHANCE_URL", DEFAULT_ENHANCE_URL),
            enhance_timeout=timeout,
            log_level=os.getenv("PASSGEN_LOG_LEVEL", "WARNING").upper(),
        )

