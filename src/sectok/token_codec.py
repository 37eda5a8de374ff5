"""Encode secrets into RFC 8959 secret-token URIs and decode them back.

A secret-token URI is the literal prefix ``secret-token:`` followed by the
secret, UTF-8 encoded, with every byte outside the allow-list of
``sectok.token_chars`` percent-encoded.

Decoding is total: malformed input is ordinary data, so ``decode`` returns
None and ``is_valid`` returns False instead of raising. Callers that prefer
exceptions use ``decode_strict``.

Examples:
    >>> encode("Łódź")
    'secret-token:%C5%81%C3%B3d%C5%BA'
    >>> decode("secret-token:hello")
    'hello'
    >>> decode("SECRET-TOKEN:hello") is None
    True
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional
from urllib.parse import quote_from_bytes, unquote_to_bytes

from parameterizable import ParameterizableClass, sort_dict_by_keys

from .exceptions import (InvalidSecretTokenError, PREFIX_MISMATCH,
                         EMPTY_BODY, MALFORMED_BODY, INVALID_UTF8)
from .token_chars import TOKEN_PUNCTUATION, TOKEN_BODY_PATTERN

logger = logging.getLogger(__name__)

# The URI scheme.
SCHEME = "secret-token"

# The URI scheme with colon.
PREFIX = SCHEME + ":"

_PREFIX_BYTES = PREFIX.encode("ascii")

_ESCAPE_PATTERN = re.compile(r"%[0-9A-F]{2}")

SecretTokenURI = str | bytes | bytearray | memoryview


class SecretTokenCodec(ParameterizableClass):
    """Converts between secrets and secret-token URIs.

    Attributes (can't be changed after initialization):
        lowercase_hex (bool):
            If True, ``encode`` emits percent-escapes with lowercase hex
            digits (``%c5``); otherwise uppercase (``%C5``). Decoding
            accepts either case.
    """

    lowercase_hex: bool

    def __init__(self, lowercase_hex: bool = False):
        if not isinstance(lowercase_hex, bool):
            raise TypeError(
                f"lowercase_hex must be bool, got {type(lowercase_hex)!r}")
        self.lowercase_hex = lowercase_hex
        ParameterizableClass.__init__(self)

    def get_params(self) -> dict[str, Any]:
        """Return configuration parameters of this codec.

        Returns:
            dict[str, Any]: A sorted dictionary of parameters used to
                reconstruct the instance.
        """
        params = dict(lowercase_hex=self.lowercase_hex)
        sorted_params = sort_dict_by_keys(params)
        return sorted_params

    def encode(self, secret: str) -> str:
        """Encode a secret into a secret-token URI.

        Non-ASCII characters are UTF-8 encoded, bytes outside the allow-list
        are percent-encoded, and the prefix is prepended.

        Args:
            secret: The secret to wrap.

        Returns:
            str: The secret-token URI.

        Raises:
            TypeError: If secret is not a str.
            UnicodeEncodeError: If secret contains lone surrogates.
        """
        if not isinstance(secret, str):
            raise TypeError(f"secret must be str, got {type(secret)!r}")

        body = quote_from_bytes(secret.encode("utf-8"), safe=TOKEN_PUNCTUATION)
        if self.lowercase_hex:
            body = _ESCAPE_PATTERN.sub(lambda m: m.group(0).lower(), body)

        return PREFIX + body

    def decode(self, uri: SecretTokenURI) -> Optional[str]:
        """Decode a secret-token URI into its secret.

        Args:
            uri: The URI, as text or bytes.

        Returns:
            Optional[str]: The secret, or None when uri does not start with
            the prefix, has an empty token, contains characters that must
            be percent-encoded or a malformed escape, or percent-decodes to
            invalid UTF-8.
        """
        secret, reason = _parse(uri)
        if reason is not None:
            logger.debug("Rejected secret-token URI (%s)", reason)
        return secret

    def is_valid(self, uri: SecretTokenURI) -> bool:
        """Return True if uri decodes to a secret."""
        return self.decode(uri) is not None

    def decode_strict(self, uri: SecretTokenURI) -> str:
        """Decode a secret-token URI, raising on malformed input.

        Args:
            uri: The URI, as text or bytes.

        Returns:
            str: The secret.

        Raises:
            TypeError: If uri is neither text nor bytes-like.
            InvalidSecretTokenError: If uri is not a well-formed
                secret-token URI. The ``reason`` attribute names the rule
                that failed.
        """
        if not isinstance(uri, (str, bytes, bytearray, memoryview)):
            raise TypeError(f"uri must be str or bytes, got {type(uri)!r}")
        secret, reason = _parse(uri)
        if reason is not None:
            raise InvalidSecretTokenError(reason)
        return secret


def _split_body(uri: Any) -> tuple[Optional[bytes], Optional[str]]:
    """Strip the prefix and return the raw token body as bytes.

    Returns:
        A (body, reason) pair; body is None when reason names a failed rule.
    """
    if isinstance(uri, str):
        if not uri.startswith(PREFIX):
            return None, PREFIX_MISMATCH
        body = uri[len(PREFIX):]
        if not body:
            return None, EMPTY_BODY
        if not body.isascii():
            return None, MALFORMED_BODY
        return body.encode("ascii"), None

    if isinstance(uri, (bytes, bytearray, memoryview)):
        uri = bytes(uri)
        if not uri.startswith(_PREFIX_BYTES):
            return None, PREFIX_MISMATCH
        body = uri[len(_PREFIX_BYTES):]
        if not body:
            return None, EMPTY_BODY
        return body, None

    return None, PREFIX_MISMATCH


def _parse(uri: Any) -> tuple[Optional[str], Optional[str]]:
    """Validate and decode a URI.

    The grammar is checked on the raw body before percent-decoding; the
    UTF-8 check runs on the decoded bytes. Both must pass.

    Returns:
        A (secret, reason) pair; exactly one of them is None.
    """
    body, reason = _split_body(uri)
    if reason is not None:
        return None, reason

    if TOKEN_BODY_PATTERN.fullmatch(body) is None:
        return None, MALFORMED_BODY

    try:
        secret = unquote_to_bytes(body).decode("utf-8")
    except UnicodeDecodeError:
        return None, INVALID_UTF8

    return secret, None


DEFAULT_CODEC = SecretTokenCodec()


def encode(secret: str) -> str:
    """Encode a secret into a secret-token URI with uppercase escapes."""
    return DEFAULT_CODEC.encode(secret)


def decode(uri: SecretTokenURI) -> Optional[str]:
    """Decode a secret-token URI; return None if it is malformed."""
    return DEFAULT_CODEC.decode(uri)


def is_valid(uri: SecretTokenURI) -> bool:
    """Return True if uri is a well-formed secret-token URI."""
    return DEFAULT_CODEC.is_valid(uri)


def decode_strict(uri: SecretTokenURI) -> str:
    """Decode a secret-token URI; raise InvalidSecretTokenError if malformed."""
    return DEFAULT_CODEC.decode_strict(uri)
