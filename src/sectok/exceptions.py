"""Custom exception types for sectok.

Defines one exception class:

- ``InvalidSecretTokenError`` — a URI is not a well-formed secret-token URI.

Only the strict entry points raise it; ``decode`` and ``is_valid`` report
malformed input by returning ``None`` / ``False``.
"""

from __future__ import annotations


PREFIX_MISMATCH = "prefix"
EMPTY_BODY = "empty"
MALFORMED_BODY = "grammar"
INVALID_UTF8 = "utf8"

_REASON_MESSAGES = {
    PREFIX_MISMATCH: "URI does not start with 'secret-token:'",
    EMPTY_BODY: "URI has no token after 'secret-token:'",
    MALFORMED_BODY: "token contains characters that must be percent-encoded"
                    " or a malformed percent-escape",
    INVALID_UTF8: "percent-decoded token is not valid UTF-8",
}


class InvalidSecretTokenError(ValueError):
    """A value is not a well-formed secret-token URI.

    The message names the rule that failed and never includes the URI
    itself, since the URI carries the secret.

    Args:
        reason: One of ``"prefix"``, ``"empty"``, ``"grammar"``, ``"utf8"``.

    Attributes:
        reason: Name of the rule that rejected the URI.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(_REASON_MESSAGES.get(reason, reason))
        self.reason = reason
