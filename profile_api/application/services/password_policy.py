"""Password strength policy for password changes."""

import re

MIN_LENGTH = 8
MAX_BYTES = 72  # bcrypt input limit
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~"

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

# Requirement label as shown to users, in message order.
REQUIREMENTS: tuple[tuple[str, str], ...] = (
    ("min_length", f"at least {MIN_LENGTH} characters"),
    ("has_upper", "one uppercase letter"),
    ("has_lower", "one lowercase letter"),
    ("has_number", "one number"),
    ("has_special", "one special character (!@#$%^&*()_+-=[]{}|;':\",./<>?~)"),
)


def check_password_strength(password: str) -> dict[str, bool]:
    """Return requirement key -> satisfied for every rule in REQUIREMENTS, plus max_bytes."""
    return {
        "min_length": len(password) >= MIN_LENGTH,
        "has_upper": bool(_UPPER_RE.search(password)),
        "has_lower": bool(_LOWER_RE.search(password)),
        "has_number": bool(_DIGIT_RE.search(password)),
        "has_special": bool(_SPECIAL_RE.search(password)),
        "max_bytes": not exceeds_max_bytes(password),
    }


def exceeds_max_bytes(password: str) -> bool:
    """True when the UTF-8 encoding is longer than bcrypt accepts."""
    return len(password.encode("utf-8")) > MAX_BYTES


def missing_requirements(password: str) -> tuple[str, ...]:
    """Return the labels of unmet REQUIREMENTS (empty when none are missing)."""
    checks = check_password_strength(password)
    return tuple(label for key, label in REQUIREMENTS if not checks[key])


def password_strength_message(missing: tuple[str, ...], too_long: bool = False) -> str:
    """Human-readable message for a rejected password; empty string if nothing is wrong."""
    parts = []
    if missing:
        parts.append("Password must contain: " + ", ".join(missing))
    if too_long:
        parts.append(f"Password must be at most {MAX_BYTES} bytes")
    return "; ".join(parts)
