"""
password_gen.py - Random password generator.

How this works:
1. The caller picks a length and which character classes to use
2. The alphabets of every selected class are concatenated into one pool
3. Each position is drawn independently and uniformly from that pool

The random source is a plain "give me an index below n" callable. By default
that is `random.randrange` (a general-purpose PRNG, not `secrets`), and tests
swap in a deterministic one so the output is reproducible.
"""

import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Optional


logger = logging.getLogger(__name__)

# Returns an index in [0, n) for a pool of size n
RandomIndex = Callable[[int], int]


class InvalidOptions(ValueError):
    """Raised when generation options cannot produce a password."""


class CharacterClass(enum.Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SYMBOL = "symbol"


ALPHABETS = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Pool order follows the order the classes are listed in the UI
POOL_ORDER = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


@dataclass(frozen=True)
class GenerationOptions:
    length: int
    classes: frozenset

    @classmethod
    def from_classes(cls, length: int, classes: Iterable[CharacterClass]) -> "GenerationOptions":
        return cls(length=length, classes=frozenset(classes))


def coerce_classes(classes: Iterable) -> frozenset:
    """
    Normalize classes given as CharacterClass members or their values.

    Raises:
        InvalidOptions: On anything that is not a known character class
    """
    try:
        return frozenset(CharacterClass(c) for c in classes)
    except ValueError as e:
        raise InvalidOptions("Unknown character class.") from e


def build_pool(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of the selected classes (no de-duplication)."""
    selected = coerce_classes(classes)
    return "".join(ALPHABETS[c] for c in POOL_ORDER if c in selected)


def generate(options: GenerationOptions, rng: Optional[RandomIndex] = None) -> str:
    """
    Generate a random password.

    Args:
        options: Length and character classes to draw from
        rng: Random-index provider, defaults to random.randrange

    Returns:
        A string of exactly options.length characters from the pool

    Raises:
        InvalidOptions: If no class is selected, a class is unknown or the length is below 1
    """
    if not options.classes:
        raise InvalidOptions("Select at least one character type.")
    if options.length < 1:
        raise InvalidOptions("Password length must be at least 1.")

    pick = rng or random.randrange
    pool = build_pool(options.classes)
    password = "".join(pool[pick(len(pool))] for _ in range(options.length))

    logger.debug("Generated %d-char password from a %d-char pool", options.length, len(pool))
    return password


def generate_password(
    length: int = 12,
    use_uppercase: bool = True,
    use_lowercase: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    rng: Optional[RandomIndex] = None,
) -> str:
    """Generate a password from checkbox-style flags."""
    flags = {
        CharacterClass.UPPERCASE: use_uppercase,
        CharacterClass.LOWERCASE: use_lowercase,
        CharacterClass.DIGIT: use_digits,
        CharacterClass.SYMBOL: use_symbols,
    }
    options = GenerationOptions.from_classes(length, (c for c, on in flags.items() if on))
    return generate(options, rng=rng)
