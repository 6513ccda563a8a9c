import pytest

from wdtools.encoding import (
    base64_decode_std,
    base64_decode_url,
    base64_encode_std,
    base64_encode_url,
    hex_encode,
    md5,
    sha1,
)

SAMPLE = "@hello, wo/-rld*"


def test_hex():
    data = bytes([101, 201, 30, 40, 50, 60, 70, 80])
    assert hex_encode(data) == "65c91e28323c4650"


def test_hex_of_text():
    assert hex_encode("AB") == "4142"


def test_base64_url():
    ciphertext = base64_encode_url(SAMPLE)
    assert ciphertext == "QGhlbGxvLCB3by8tcmxkKg"
    assert base64_decode_url(ciphertext) == SAMPLE.encode()


def test_base64_std():
    ciphertext = base64_encode_std(SAMPLE)
    assert ciphertext == "QGhlbGxvLCB3by8tcmxkKg=="
    assert base64_decode_std(ciphertext) == SAMPLE.encode()


@pytest.mark.parametrize("payload", [b"", b"a", b"ab", b"abc", bytes(range(256))])
def test_base64_round_trips(payload):
    assert base64_decode_url(base64_encode_url(payload)) == payload
    assert base64_decode_std(base64_encode_std(payload)) == payload


def test_url_decode_rejects_padding():
    with pytest.raises(ValueError):
        base64_decode_url("QGhlbGxvLCB3by8tcmxkKg==")


def test_url_decode_rejects_standard_alphabet():
    with pytest.raises(ValueError):
        base64_decode_url("ab+/")


def test_url_decode_rejects_bad_length():
    with pytest.raises(ValueError):
        base64_decode_url("abcde")


def test_std_decode_requires_padding():
    with pytest.raises(ValueError):
        base64_decode_std("QGhlbGxvLCB3by8tcmxkKg")


def test_std_decode_rejects_foreign_characters():
    with pytest.raises(ValueError):
        base64_decode_std("ab-_")


def test_md5():
    assert hex_encode(md5("hello world")) == "5eb63bbbe01eeed093cb22bb8f5acdc3"
    assert len(md5(b"")) == 16


def test_sha1():
    assert sha1("hello world") == "2aae6c35c94fcfb415dbe95f408b9ce91ee846ed"


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        hex_encode(12)