"""Execution-context identifier used to filter providers."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Network(BaseModel):
    """Network an agent is operating on.

    All fields are optional; providers decide which ones matter to them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    protocol_family: Optional[str] = Field(
        default=None,
        description="Protocol family (e.g., 'evm', 'svm')"
    )
    network_id: Optional[str] = Field(
        default=None,
        description="Network identifier (e.g., 'base-mainnet')"
    )
    chain_id: Optional[str] = Field(
        default=None,
        description="Chain identifier (e.g., '8453')"
    )

    def __str__(self) -> str:
        return self.network_id or self.chain_id or self.protocol_family or "unspecified"
