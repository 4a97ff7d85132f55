"""
Random password generation and a simple strength score.
"""
import re
import secrets

from calctech.core.errors import CalculatorInputError

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Sets with look-alike characters (I O i l o 0 1) already removed
UPPERCASE_CLEAR = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWERCASE_CLEAR = "abcdefghjkmnpqrstuvwxyz"
NUMBERS_CLEAR = "23456789"

AMBIGUOUS_SYMBOLS = "{}[]()/\\'\"`~,;:.<>"

MIN_LENGTH = 4
MAX_LENGTH = 128

STRENGTH_LEVELS = [
    # (max score, label, feedback)
    (2, "Weak", "This password is too weak. Add more characters and variety."),
    (4, "Fair", "This password is okay but could be stronger. Try adding more character types."),
    (6, "Good", "This is a good password. Consider making it longer for extra security."),
    (7, "Excellent", "This is an excellent, strong password! Keep it safe."),
]


def build_charset(uppercase=True, lowercase=True, numbers=True, symbols=True,
                  exclude_similar=True, exclude_ambiguous=False):
    charset = ""
    if uppercase:
        charset += UPPERCASE_CLEAR if exclude_similar else UPPERCASE
    if lowercase:
        charset += LOWERCASE_CLEAR if exclude_similar else LOWERCASE
    if numbers:
        charset += NUMBERS_CLEAR if exclude_similar else NUMBERS
    if symbols:
        charset += "".join(c for c in SYMBOLS if c not in AMBIGUOUS_SYMBOLS) if exclude_ambiguous else SYMBOLS
    return charset


def password_strength(pwd):
    """Score 0..7: three length steps plus one per character class present."""
    score = sum([
        len(pwd) >= 8,
        len(pwd) >= 12,
        len(pwd) >= 16,
        bool(re.search(r"[a-z]", pwd)),
        bool(re.search(r"[A-Z]", pwd)),
        bool(re.search(r"[0-9]", pwd)),
        bool(re.search(r"[^a-zA-Z0-9]", pwd)),
    ])
    for ceiling, label, feedback in STRENGTH_LEVELS:
        if score <= ceiling:
            return {"score": score, "label": label, "feedback": feedback}


def generate_password(length=16, uppercase=True, lowercase=True, numbers=True, symbols=True,
                      exclude_similar=True, exclude_ambiguous=False):
    length = length or 16
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise CalculatorInputError(f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}.")

    charset = build_charset(uppercase, lowercase, numbers, symbols, exclude_similar, exclude_ambiguous)
    if not charset:
        raise CalculatorInputError("Please select at least one character type")

    password = "".join(secrets.choice(charset) for _ in range(length))
    return {
        "password": password,
        "length": length,
        "charset_size": len(charset),
        "strength": password_strength(password),
    }
