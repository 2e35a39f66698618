"""
Text Utility Functions

Provides text canonicalization used to compare player names.
"""
import re

_DISALLOWED_CHARS = re.compile(r'[^a-z0-9\s]')
_WHITESPACE_RUNS = re.compile(r'\s+')


def normalize_name(name: str) -> str:
    """
    Canonicalize a display name into a comparison key.

    Lower-cases the name, drops every character that is not an ASCII letter,
    digit or whitespace, collapses whitespace runs to one space and trims.
    Two names refer to the same player iff their normalized forms are equal.

    Args:
        name: Display name (e.g. "Ronald Acuna Jr.")

    Returns:
        Normalized key (e.g. "ronald acuna jr")

    Examples:
        >>> normalize_name("Bill  Muncey!")
        'bill muncey'

        >>> normalize_name("  J.D. Martinez ")
        'jd martinez'

        >>> normalize_name("José Ramírez")
        'jos ramrez'
    """
    lowered = name.lower()
    stripped = _DISALLOWED_CHARS.sub('', lowered)
    return _WHITESPACE_RUNS.sub(' ', stripped).strip()
