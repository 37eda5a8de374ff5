"""Characters permitted verbatim in the body of a secret-token URI.

This module defines the allow-list shared by encoding and decoding: ASCII
letters, digits, and the punctuation ``-._~!$&'()*+,;=:@``. Every other
byte must appear in a token body percent-encoded.
"""
import re
import string

# Punctuation that RFC 8959 token bodies may carry without escaping.
TOKEN_PUNCTUATION = "-._~!$&'()*+,;=:@"

# Set of characters allowed verbatim in a token body.
TOKEN_CHARS_SET = frozenset(
    string.ascii_letters + string.digits + TOKEN_PUNCTUATION)

# Anchored with fullmatch() by the decoder; built from TOKEN_CHARS_SET.
TOKEN_BODY_PATTERN = re.compile(
    ("(?:[" + "".join(re.escape(c) for c in sorted(TOKEN_CHARS_SET)) + "]"
     + "|%[0-9A-Fa-f]{2})*").encode("ascii"))


def get_token_chars() -> set[str]:
    """Get the set of characters allowed verbatim in a token body.

    Returns:
        set[str]: A copy of the allow-list. Includes ASCII letters, digits,
            and the characters -._~!$&'()*+,;=:@ .
    """
    return set(TOKEN_CHARS_SET)


def contains_disallowed_chars(a_str: str) -> bool:
    """Check if a string contains characters that must be percent-encoded.

    Args:
        a_str (str): Input string to check.

    Returns:
        bool: True if any character of a_str is outside the allow-list,
            False otherwise.
    """
    return any(c not in TOKEN_CHARS_SET for c in a_str)
