"""Result objects returned by the node's JSON-RPC calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _api_version(data: Optional[Mapping[str, Any]]) -> str:
    if data is None:
        return ""
    value = data.get("api_version")
    return "" if value is None else str(value)


@dataclass
class RpcResult:
    """Fields shared by every RPC result."""

    api_version: str = ""

    @classmethod
    def from_json(cls, data: Optional[Mapping[str, Any]]) -> RpcResult:
        """Read the API version, if present, from a JSON object."""
        return cls(api_version=_api_version(data))

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {"api_version": self.api_version}


@dataclass
class GetStateRootHashResult(RpcResult):
    """Result of the ``chain_get_state_root_hash`` call."""

    state_root_hash: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> GetStateRootHashResult:
        """Read the result from a JSON object; ``state_root_hash`` is required."""
        return cls(
            api_version=_api_version(data),
            state_root_hash=str(data["state_root_hash"]),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {**super().to_json(), "state_root_hash": self.state_root_hash}


@dataclass
class PutDeployResult(RpcResult):
    """Result of the ``account_put_deploy`` call."""

    deploy_hash: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PutDeployResult:
        """Read the result from a JSON object; ``deploy_hash`` is required."""
        return cls(
            api_version=_api_version(data),
            deploy_hash=str(data["deploy_hash"]),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {**super().to_json(), "deploy_hash": self.deploy_hash}