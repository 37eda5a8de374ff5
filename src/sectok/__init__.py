"""Encode and decode RFC 8959 secret-token URIs.

A secret-token URI is ``secret-token:`` followed by a percent-encoded
secret, e.g. ``secret-token:E92FB7EB-D882-47A4-A265-A0B6135DC842%20foo``.
The scheme makes leaked credentials easy to recognise and scan for.

Functions:
    encode(): Wraps a secret into a secret-token URI.
    decode(): Unwraps a secret-token URI, returning None if it is malformed.
    is_valid(): Tells whether a value is a well-formed secret-token URI.
    decode_strict(): Like decode(), but raises InvalidSecretTokenError.
    get_token_chars(): Returns the set of characters allowed verbatim in
        a token.
    contains_disallowed_chars(): Tells whether a string has characters
        that must be percent-encoded.

Classes:
    SecretTokenCodec: Configurable codec behind the module-level functions.
    SecretToken: Immutable value object that never shows its secret in repr.
    InvalidSecretTokenError: Raised by the strict API on malformed URIs.

Constants:
    SCHEME, PREFIX: The scheme name and the scheme with colon.
"""
from ._version_info import __version__
from .token_chars import *
from .token_codec import SCHEME, PREFIX, SecretTokenCodec, DEFAULT_CODEC
from .token_codec import encode, decode, is_valid, decode_strict
from .secret_token import SecretToken
from .exceptions import InvalidSecretTokenError
