"""An immutable value object holding a secret and its secret-token URI.

SecretToken keeps the secret out of reprs and tracebacks: ``repr`` shows
only a masked URI, while ``str`` yields the full URI for configuration
files and headers.

Examples:
    >>> token = SecretToken.from_uri("secret-token:hello")
    >>> token
    SecretToken('secret-token:***')
    >>> token.secret
    'hello'
"""
from __future__ import annotations

from collections.abc import Hashable

from .token_codec import PREFIX, SecretTokenURI, decode_strict, encode


class SecretToken(Hashable):
    """A secret wrapped as an RFC 8959 secret-token URI.

    Instances compare equal and hash equal when their secrets are equal.
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str):
        """Wrap a secret.

        Args:
            secret: The plaintext secret.

        Raises:
            TypeError: If secret is not a str.
        """
        if not isinstance(secret, str):
            raise TypeError(f"secret must be str, got {type(secret)!r}")
        object.__setattr__(self, "_secret", secret)

    @classmethod
    def from_uri(cls, uri: SecretTokenURI) -> SecretToken:
        """Parse a secret-token URI.

        Args:
            uri: The URI, as text or bytes.

        Returns:
            SecretToken: The parsed token.

        Raises:
            InvalidSecretTokenError: If uri is not a well-formed
                secret-token URI.
        """
        return cls(decode_strict(uri))

    @property
    def secret(self) -> str:
        """The plaintext secret."""
        return self._secret

    @property
    def uri(self) -> str:
        """The secret-token URI for the secret."""
        return encode(self._secret)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{PREFIX}***')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, SecretToken):
            return NotImplemented
        return self._secret == other._secret

    def __hash__(self):
        return hash((SecretToken, self._secret))
