"""Encoding helpers and core data types for the Casper network: CEP-57 hex, big integers, URefs, signatures, RPC results and logging setup."""

__version__ = "1.0.0"

__all__ = [
    "access_rights",
    "base",
    "cep57",
    "crypto_util",
    "log_config",
    "rpc_results",
    "signature",
    "string_util",
    "uref",
]