import re
from datetime import datetime

import pytest

from caspersdk import crypto_util


def test_hex_encode_is_upper_case():
    assert crypto_util.hex_encode(bytes([0x01, 0xAB])) == "01AB"


@pytest.mark.parametrize("data", [b"", b"\x00", bytes(range(40))])
def test_hex_round_trip(data):
    assert crypto_util.hex_decode(crypto_util.hex_encode(data)) == data


def test_hex_decode_accepts_lower_case():
    assert crypto_util.hex_decode("0a0b") == crypto_util.hex_decode("0A0B")


def test_time_to_rfc3339_shape():
    text = crypto_util.time_to_rfc3339(1_700_000_000)
    assert len(text) == 24
    assert text[10] == "T"
    assert text[19] in "+-"
    assert bool(
        re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{4}", text)
    ) is True


@pytest.mark.parametrize("timestamp", [0, 1_000_000_000, 1_700_000_000])
def test_time_to_rfc3339_round_trip(timestamp):
    text = crypto_util.time_to_rfc3339(timestamp)
    parsed = datetime.strptime(text, "%Y-%m-%dT%H:%M:%S%z")
    assert parsed.timestamp() == timestamp