import re
from typing import Dict

SPECIAL_CHARACTERS = "!@#$%^&*()_+[]{}|;:,.<>?"
MIN_LENGTH = 12

_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

LABELS = {5: "Very Strong", 4: "Strong", 3: "Moderate"}


def check_password_strength(password: str) -> dict:
    """
    Scores a secret against five criteria (length >= 12, digit, lowercase,
    uppercase, special character) and returns the count met plus a label.
    """
    criteria: Dict[str, bool] = {
        "length": len(password) >= MIN_LENGTH,
        "digit": re.search(r"[0-9]", password) is not None,
        "lowercase": re.search(r"[a-z]", password) is not None,
        "uppercase": re.search(r"[A-Z]", password) is not None,
        "special": _SPECIAL_RE.search(password) is not None,
    }

    score = sum(criteria.values())

    return {
        "password": password,
        "score": score,
        "label": LABELS.get(score, "Weak"),
        "criteria": criteria,
    }
