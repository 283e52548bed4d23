"""Named text transforms applied to placeholder values.

Every transform is a total ``str -> str`` function. Names are looked up
through ``Transform.from_name``; unknown names map to ``Transform.IDENTITY``
and are dropped by the placeholder parser rather than reported.
"""
import random
import re
import string
from enum import Enum
from typing import Callable, Dict, Optional, Union

RANDOM_SUFFIX_LENGTH = 32
RANDOM_ALPHABET = string.ascii_letters + string.digits
PATH_SEPARATOR = "/"

_REPEATED_DOTS = re.compile(r"\.{2,}")
_REPEATED_HYPHENS = re.compile(r"-{2,}")


class Transform(Enum):
    """Closed set of transforms a placeholder can chain."""

    IDENTITY = "identity"
    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZE = "capitalize"
    DECAPITALIZE = "decapitalize"
    START_CASE = "start-case"
    WORD_CHARS = "word-only"
    HYPHENATE = "hyphenate"
    UPPER_CAMEL = "upper-camel"
    LOWER_CAMEL = "lower-camel"
    NORMALIZE = "normalize"
    SNAKE_CASE = "snake-case"
    PATH_SEGMENTS = "packaged"
    ADD_RANDOM = "random"

    @classmethod
    def from_name(cls, name: str) -> "Transform":
        """Resolve a transform name or synonym, IDENTITY when unknown."""
        return _SYNONYMS.get(name.strip(), cls.IDENTITY)

    @property
    def names(self):
        """Every name that resolves to this transform, sorted."""
        return sorted(name for name, t in _SYNONYMS.items() if t is self)


_SYNONYMS: Dict[str, Transform] = {
    "lower": Transform.LOWER,
    "lowercase": Transform.LOWER,
    "upper": Transform.UPPER,
    "uppercase": Transform.UPPER,
    "cap": Transform.CAPITALIZE,
    "capitalize": Transform.CAPITALIZE,
    "decap": Transform.DECAPITALIZE,
    "decapitalize": Transform.DECAPITALIZE,
    "start": Transform.START_CASE,
    "start-case": Transform.START_CASE,
    "word": Transform.WORD_CHARS,
    "word-only": Transform.WORD_CHARS,
    "hyphen": Transform.HYPHENATE,
    "hyphenate": Transform.HYPHENATE,
    "hyphnate": Transform.HYPHENATE,
    "pascal": Transform.UPPER_CAMEL,
    "Camel": Transform.UPPER_CAMEL,
    "upper-camel": Transform.UPPER_CAMEL,
    "camel": Transform.LOWER_CAMEL,
    "lower-camel": Transform.LOWER_CAMEL,
    "norm": Transform.NORMALIZE,
    "normalize": Transform.NORMALIZE,
    "snake": Transform.SNAKE_CASE,
    "snake-case": Transform.SNAKE_CASE,
    "packaged": Transform.PATH_SEGMENTS,
    "package-dir": Transform.PATH_SEGMENTS,
    "random": Transform.ADD_RANDOM,
    "generate-random": Transform.ADD_RANDOM,
    "identity": Transform.IDENTITY,
}


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:].lower()


def decapitalize(s: str) -> str:
    return s[:1].lower() + s[1:]


def collapse_whitespace(s: str) -> str:
    return " ".join(s.split())


def start_case(s: str) -> str:
    return " ".join(capitalize(word) for word in s.split())


def word_chars_only(s: str) -> str:
    return "".join(c for c in s if c.isascii() and (c == "_" or c.isalnum()))


def hyphenate(s: str) -> str:
    return collapse_whitespace(s).replace(" ", "-")


def join_camel_case(s: str, pascal: bool) -> str:
    """Join space separated words in camel case.

    Input without a space is only stripped of non-word characters; its case
    is left untouched.
    """
    if " " not in s:
        return word_chars_only(s)

    words = s.split()
    if not words:
        return ""
    head = capitalize(words[0]) if pascal else words[0].lower()
    tail = "".join(capitalize(word) for word in words[1:])
    return word_chars_only(head + tail)


def normalize(s: str) -> str:
    return collapse_whitespace(s.lower()).replace(" ", "-")


def snake_case(s: str) -> str:
    s = _REPEATED_DOTS.sub(".", s)
    s = _REPEATED_HYPHENS.sub("-", s)
    return collapse_whitespace(s).replace(" ", "_")


def path_segments(s: str) -> str:
    segments = _REPEATED_DOTS.sub(".", s).replace(".", PATH_SEPARATOR)
    return segments.strip(PATH_SEPARATOR)


def add_random(s: str, rng: Optional[random.Random] = None) -> str:
    """Append ``-`` and 32 random alphanumeric characters."""
    rng = rng or random.Random()
    suffix = "".join(rng.choice(RANDOM_ALPHABET) for _ in range(RANDOM_SUFFIX_LENGTH))
    return f"{s}-{suffix}"


_FUNCTIONS: Dict[Transform, Callable[[str], str]] = {
    Transform.IDENTITY: lambda s: s,
    Transform.LOWER: str.lower,
    Transform.UPPER: str.upper,
    Transform.CAPITALIZE: capitalize,
    Transform.DECAPITALIZE: decapitalize,
    Transform.START_CASE: start_case,
    Transform.WORD_CHARS: word_chars_only,
    Transform.HYPHENATE: hyphenate,
    Transform.UPPER_CAMEL: lambda s: join_camel_case(s, pascal=True),
    Transform.LOWER_CAMEL: lambda s: join_camel_case(s, pascal=False),
    Transform.NORMALIZE: normalize,
    Transform.SNAKE_CASE: snake_case,
    Transform.PATH_SEGMENTS: path_segments,
}


def apply(
    transform: Union[Transform, str],
    value: str,
    rng: Optional[random.Random] = None,
) -> str:
    """Apply one transform, given as a ``Transform`` or by name, to ``value``.

    ``rng`` is only consulted by ``ADD_RANDOM``; pass a seeded
    ``random.Random`` for reproducible output.
    """
    if not isinstance(transform, Transform):
        transform = Transform.from_name(transform)
    if transform is Transform.ADD_RANDOM:
        return add_random(value, rng)
    return _FUNCTIONS[transform](value)
