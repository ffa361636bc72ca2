import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from passgen.config import GenerationConfig
from passgen.errors import InvalidConfig

logger = logging.getLogger(__name__)

_default_rng = random.SystemRandom()

# (minimum length, points), checked top to bottom, first match wins
LENGTH_BONUSES = ((12, 40), (8, 20))
VARIETY_POINTS = 15
LABEL_THRESHOLDS = ((80, "Very Strong"), (60, "Strong"), (40, "Medium"))
WEAK_LABEL = "Weak"


@dataclass(frozen=True)
class StrengthAssessment:
    score: int
    label: str


def validate_config(config: GenerationConfig) -> None:
    """
    Raises InvalidConfig if `config` can't produce a password.
    When length < number of enabled classes we reject instead of truncating,
    so a generated password always covers every enabled class.
    """
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfig(f"length must be an integer, got {length!r}")
    if not config.enabled_classes:
        raise InvalidConfig("enabled_classes is empty: select at least one character type")
    if length <= 0:
        raise InvalidConfig(f"length must be positive, got {length}")
    if length < len(config.enabled_classes):
        raise InvalidConfig(
            f"length {length} is smaller than the number of enabled classes "
            f"({len(config.enabled_classes)})"
        )


def generate(config: GenerationConfig, rng: Optional[random.Random] = None) -> str:
    """
    Generates a random password for `config`.

    One character from every enabled class goes into a seed buffer, the
    remaining positions are drawn from the combined alphabet into a filler
    buffer, and the merged result is shuffled with Random.shuffle
    (Fisher-Yates, so every permutation is equally likely).
    """
    validate_config(config)
    rng = rng or _default_rng

    seed = [rng.choice(c.alphabet) for c in config.ordered_classes()]

    all_chars = config.combined_alphabet()
    filler = [rng.choice(all_chars) for _ in range(config.length - len(seed))]

    password_chars = seed + filler
    rng.shuffle(password_chars)

    logger.debug(
        "generated password: length=%d classes=%s",
        config.length,
        ",".join(c.value for c in config.ordered_classes()),
    )
    return "".join(password_chars)


def generate_many(config: GenerationConfig, count: int, rng: Optional[random.Random] = None) -> List[str]:
    if count < 1:
        raise InvalidConfig(f"count must be at least 1, got {count}")
    return [generate(config, rng) for _ in range(count)]


def strength_label(score: int) -> str:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return WEAK_LABEL


def assess(config: GenerationConfig) -> StrengthAssessment:
    """
    Coarse strength heuristic based only on the config, not on the characters drawn.
    Works for any length and any set of classes, including none.
    """
    score = 0
    for min_length, points in LENGTH_BONUSES:
        if config.length >= min_length:
            score += points
            break

    score += VARIETY_POINTS * len(config.enabled_classes)

    return StrengthAssessment(score=score, label=strength_label(score))


def score_enhancement(strength_score: float) -> int:
    """Converts the enhancement service's 0..1 score to the 0..100 scale."""
    return max(0, min(100, round(strength_score * 100)))
