import pytest

from caspersdk import cep57

PUBLIC_KEY_BODY = "381b36cd07Ad85348607ffE0fA3A2d033eA941D14763358eBEacE9C8aD3cB771"
UREF_BODY = "000102030405060708090a0b0c0d0e0f000102030405060708090a0b0c0d0e0f"


def test_has_checksum():
    assert cep57.has_checksum(PUBLIC_KEY_BODY) is True
    assert cep57.has_checksum(UREF_BODY) is False
    assert cep57.has_checksum(UREF_BODY.upper()) is False
    assert cep57.has_checksum("") is False


def test_has_checksum_rejects_non_hex():
    with pytest.raises(ValueError):
        cep57.has_checksum("00zz")


def test_encode_known_public_key():
    raw = bytes.fromhex(PUBLIC_KEY_BODY)
    assert cep57.encode(raw) == PUBLIC_KEY_BODY


def test_decode_known_public_key():
    assert cep57.decode(PUBLIC_KEY_BODY) == bytes.fromhex(PUBLIC_KEY_BODY)


def test_decode_without_checksum():
    assert cep57.decode(UREF_BODY) == bytes.fromhex(UREF_BODY)


def test_decode_bad_checksum():
    tampered = PUBLIC_KEY_BODY.replace("Ad", "ad", 1)
    with pytest.raises(cep57.ChecksumError):
        cep57.decode(tampered)


@pytest.mark.parametrize("size", [0, 1, 16, 32, 33, 75])
def test_round_trip(size):
    data = bytes((i * 37 + 11) % 256 for i in range(size))
    encoded = cep57.encode(data)
    assert encoded.lower() == data.hex()
    assert cep57.decode(encoded) == data


def test_long_input_is_plain_upper_hex():
    data = bytes(range(76))
    encoded = cep57.encode(data)
    assert encoded == data.hex().upper()
    assert cep57.decode(encoded) == data


def test_checksum_error_is_value_error():
    tampered = PUBLIC_KEY_BODY.replace("Ad", "aD", 1)
    with pytest.raises(ValueError):
        cep57.decode(tampered)