"""SecureGen -- password and UUID generation utilities.

Core functions for constrained-random password construction, heuristic
strength scoring, and version-4 UUID synthesis.  Everything here is a pure
function of its inputs and the random source; UI state lives in
:mod:`securegen.session`.
"""

import logging
import math
import re
import secrets

logger = logging.getLogger(__name__)


# ── Configuration ──────────────────────────────────────────────────────────

MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 20

CHARSETS = {
    "uppercase": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "lowercase": "abcdefghijklmnopqrstuvwxyz",
    "numbers":   "0123456789",
    "symbols":   "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

FALLBACK_CATEGORY = "uppercase"

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def clamp_length(value) -> int:
    """Coerce *value* to a usable password length.

    Strings are read up to the first non-digit, so ``"24px"`` gives 24 and
    ``"12.5"`` gives 12.  Unparsable, infinite, empty or zero values fall
    back to :data:`DEFAULT_LENGTH`; everything else is clamped to
    ``[MIN_LENGTH, MAX_LENGTH]``.
    """
    try:
        if isinstance(value, str):
            match = _LEADING_INT_RE.match(value)
            length = int(match.group(1)) if match else 0
        else:
            length = int(value)
    except (TypeError, ValueError, OverflowError):
        length = 0
    if not length:
        length = DEFAULT_LENGTH
    return max(MIN_LENGTH, min(MAX_LENGTH, length))


def resolve_categories(categories) -> tuple[tuple[str, ...], bool]:
    """Return the canonical category tuple and whether the fallback kicked in.

    Duplicates are dropped and the order is always uppercase, lowercase,
    numbers, symbols.  An empty selection becomes ``("uppercase",)``.
    """
    wanted = set(categories)
    unknown = wanted - set(CHARSETS)
    if unknown:
        raise ValueError(f"Unknown character categories: {sorted(unknown)}")

    if not wanted:
        logger.warning(
            "No character category selected, falling back to %s",
            FALLBACK_CATEGORY,
        )
        return (FALLBACK_CATEGORY,), True

    return tuple(name for name in CHARSETS if name in wanted), False


# ── Password generation ────────────────────────────────────────────────────


def create_password(length: int, categories) -> str:
    """Build a random password of *length* characters.

    At least one character from each selected category is guaranteed, so
    when *length* is smaller than the number of categories the result is
    longer than requested.  Uses :mod:`secrets` for randomness.
    """
    names, _ = resolve_categories(categories)

    pool = ""
    chars = []
    for name in names:
        alphabet = CHARSETS[name]
        pool += alphabet
        chars.append(secrets.choice(alphabet))

    remaining = length - len(chars)
    chars += [secrets.choice(pool) for _ in range(remaining)]

    # Fisher-Yates shuffle with cryptographic randomness
    for i in range(len(chars) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)


def generate(length: int = DEFAULT_LENGTH, categories=tuple(CHARSETS)) -> dict:
    """Generate a password and score it.

    Returns a dict with keys:
        password   -- str
        score      -- int 0-5
        label      -- str
        categories -- tuple[str, ...]  (after fallback)
        fallback   -- bool  (True when the selection was empty)
    """
    names, fallback = resolve_categories(categories)
    password = create_password(length, names)
    report = score_strength(password)
    logger.debug(
        "Generated %d-char password from %s (%s)",
        len(password), ", ".join(names), report["label"],
    )
    return {
        "password": password,
        "score": report["score"],
        "label": report["label"],
        "categories": names,
        "fallback": fallback,
    }


# ── Strength analysis ──────────────────────────────────────────────────────

LABELS = ["Very Weak", "Weak", "Regular", "Strong", "Very Strong"]

LABEL_COLORS = {
    "Very Weak":   "#f87171",
    "Weak":        "#fb923c",
    "Regular":     "#fbbf24",
    "Strong":      "#a3e635",
    "Very Strong": "#4ade80",
}

MAX_SCORE = 5

_SEQUENCES = ["123", "abc", "qwe"]

_SYMBOL_RE = re.compile("[" + re.escape(CHARSETS["symbols"]) + "]")


def has_repeating_pattern(password: str) -> bool:
    """True for three identical characters in a row or a trivial sequence."""
    for i in range(len(password) - 2):
        if password[i] == password[i + 1] == password[i + 2]:
            return True

    lower = password.lower()
    return any(seq in lower for seq in _SEQUENCES)


def score_strength(password: str) -> dict:
    """Score *password* on a 0-5 scale.

    Returns a dict with keys:
        length    -- int
        checks    -- dict[str, bool]  (the seven scoring criteria)
        repeating -- bool  (repetition penalty applied)
        score     -- int 0-5
        label     -- str
        warnings  -- list[str]
    """
    checks = {
        "length":          len(password) >= 12,
        "uppercase":       bool(re.search(r"[A-Z]", password)),
        "lowercase":       bool(re.search(r"[a-z]", password)),
        "numbers":         bool(re.search(r"[0-9]", password)),
        "symbols":         bool(_SYMBOL_RE.search(password)),
        "long_length":     len(password) >= 16,
        "very_long_length": len(password) >= 20,
    }

    score = sum(checks.values())

    repeating = has_repeating_pattern(password)
    if repeating:
        score = max(0, score - 1)

    score = min(score, MAX_SCORE)
    # Uneven buckets: 2 -> Weak, 3 and 4 -> Regular, 5 -> Strong
    index = min(math.floor(score / 1.4), len(LABELS) - 1)

    warnings: list[str] = []
    if repeating:
        warnings.append("Repeated characters or simple sequence detected")
    if not checks["length"]:
        warnings.append("Consider using 12+ characters")

    return {
        "length": len(password),
        "checks": checks,
        "repeating": repeating,
        "score": score,
        "label": LABELS[index],
        "warnings": warnings,
    }


def strength_color(label: str) -> str:
    """Return the bar colour for a strength *label*."""
    return LABEL_COLORS.get(label, LABEL_COLORS["Very Strong"])


def strength_percent(score: int) -> float:
    """Return the bar width (0-100) for a strength *score*."""
    return score / MAX_SCORE * 100


# ── UUID generation ────────────────────────────────────────────────────────

_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def generate_uuid() -> str:
    """Return a random RFC 4122 version-4 UUID string (lowercase hex)."""
    out = []
    for c in _UUID_TEMPLATE:
        if c == "x":
            out.append(format(secrets.randbelow(16), "x"))
        elif c == "y":
            out.append(format(secrets.randbelow(16) & 0x3 | 0x8, "x"))
        else:
            out.append(c)
    return "".join(out)
