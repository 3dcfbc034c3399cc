"""String exercises: palindromes, initials, de-duplication and case."""

from __future__ import annotations


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same backwards."""
    return s == s[::-1]


def first_letters(s: str) -> str:
    """Return the first character and every character that follows a space."""
    return "".join(
        char for index, char in enumerate(s) if index == 0 or s[index - 1] == " "
    )


def remove_duplicates(s: str) -> str:
    """Keep only the first occurrence of each character, in order."""
    return "".join(dict.fromkeys(s))


def modify_case(s: str) -> str:
    """Upper-case ``s`` if it starts with an upper-case letter, else lower-case it."""
    if s and "A" <= s[0] <= "Z":
        return s.upper()
    return s.lower()