import pytest

from data_for_codec_tests import valid_pairs, invalid_uris
from sectok import is_valid, decode

pytestmark = pytest.mark.smoke


@pytest.mark.parametrize("uri", [u for u, _ in valid_pairs] + invalid_uris)
def test_is_valid_agrees_with_decode(uri):
    assert is_valid(uri) == (decode(uri) is not None)
    assert is_valid(uri.encode("utf-8")) == (decode(uri.encode("utf-8")) is not None)


@pytest.mark.parametrize("uri, _", valid_pairs)
def test_is_valid_accepts_valid_uris(uri, _):
    assert is_valid(uri) is True


@pytest.mark.parametrize("uri", invalid_uris)
def test_is_valid_rejects_invalid_uris(uri):
    assert is_valid(uri) is False


def test_is_valid_delegates_to_decode(monkeypatch):
    from sectok import token_codec

    calls = []

    def fake_decode(self, uri):
        calls.append(uri)
        return None

    monkeypatch.setattr(token_codec.SecretTokenCodec, "decode", fake_decode)
    assert is_valid("secret-token:hello") is False
    assert calls == ["secret-token:hello"]
