# caspersdk

Building blocks for working with Casper network data in Python. It has no
runtime dependencies.

## What is in it

- `caspersdk.base` – hex helpers (`hex_decode`, `hex_encode`, `reverse_hex`),
  fixed-size little-endian integers (`hex_to_integer`, `integer_to_hex`), and
  the length-prefixed little-endian encoding of U128, U256 and U512 values
  (`uint_to_hex`, `uint_from_hex`, `uint_to_dec`, `uint_from_dec`).
- `caspersdk.cep57` – CEP-57 mixed-case checksummed hex: `encode`, `decode`,
  `has_checksum` and `ChecksumError`. Inputs longer than 75 bytes are written
  as plain upper-case hex.
- `caspersdk.string_util` – string helpers, including `string_to_hex` (a
  4-byte little-endian length followed by the character bytes) and
  `hex_to_string`.
- `caspersdk.crypto_util` – upper-case `hex_encode`, lenient `hex_decode`, and
  `time_to_rfc3339`, which formats a Unix timestamp in local time.
- `caspersdk.access_rights` – the `AccessRights` bit mask and its JSON form.
- `caspersdk.uref` – `URef`, an unforgeable reference written
  `uref-<64 hex digits>-<3 digit access rights>`.
- `caspersdk.signature` – `Signature` and `KeyAlgo` (ED25519, SECP256K1).
- `caspersdk.rpc_results` – `RpcResult`, `GetStateRootHashResult` and
  `PutDeployResult`, read from and written to JSON objects.
- `caspersdk.log_config` – `LogConfig`, `LogConfigurator` and `init_default`
  to set up a named logger writing either to standard output or to a rotating
  file `logs/rotating_<name>.txt` (5 MiB per file, 10 backups).

## Installation

```
pip install caspersdk
```

## Examples

Length-prefixed big integers:

```python
from caspersdk.base import uint_to_hex, uint_from_hex

encoded = uint_to_hex(2**64 - 1)        # "08ffffffffffffffff"
assert uint_from_hex(encoded, 512) == 2**64 - 1
```

CEP-57 checksums:

```python
from caspersdk import cep57

text = cep57.encode(bytes(range(32)))   # mixed-case hex carrying the checksum
assert cep57.decode(text) == bytes(range(32))
```

When a mixed-case string of at most 75 bytes does not match its own
checksum, `cep57.decode` raises `cep57.ChecksumError`. All-lower-case or
all-upper-case hex is decoded without a check.

URefs:

```python
from caspersdk.uref import URef
from caspersdk.access_rights import AccessRights

uref = URef.from_raw_bytes(bytes(32), AccessRights.READ_ADD_WRITE)
print(uref.to_string())                 # uref-0000...0000-007
assert URef.from_string(uref.to_string()).to_bytes() == uref.to_bytes()
```

`URef.to_bytes()` returns the URef key tag byte, the 32 address bytes and the
access rights byte.

Signatures:

```python
from caspersdk.signature import Signature, KeyAlgo

sig = Signature.from_raw_bytes(bytes(64), KeyAlgo.ED25519)
assert sig.to_hex_string().startswith("01")
assert Signature.from_json(sig.to_json()).to_bytes() == sig.to_bytes()
```

RPC results:

```python
from caspersdk.rpc_results import GetStateRootHashResult

result = GetStateRootHashResult.from_json(
    {"api_version": "1.5.6", "state_root_hash": "abcd"}
)
print(result.state_root_hash)
```

Logging:

```python
from caspersdk.log_config import LogConfig, Severity, Sink, init_default

logger = init_default(LogConfig(log_name="casper_sdk", severity=Severity.debug, sink=Sink.console))
logger.debug("ready")
```

## What it does not do

This package holds encodings and data types only. It does not connect to a
node or send RPC requests, does not load key files, and does not create or
verify signatures: `Signature` only wraps signature bytes already made. It
also does not serialize CLValues or build deploys.

## Running the tests

```
pip install -e ".[test]"
pytest
```