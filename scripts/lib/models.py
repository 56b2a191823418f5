#!/usr/bin/env python3
"""
Pydantic models for deployment results and on-chain auction state.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class DeploymentResult(BaseModel):
    """Outcome of a deploy call, owned by the deployment backend"""
    name: str = Field(..., description="Deployment name")
    address: str = Field(..., description="Deployed contract address")
    contract_id: str = Field(..., description="Artifact identifier the contract was deployed from")
    network: str = Field(..., description="Network the contract lives on")
    tx_hash: Optional[str] = Field(None, description="Deployment transaction hash")
    confirmations: int = Field(0, description="Confirmations observed for the deployment transaction")
    newly_deployed: bool = Field(True, description="False when an existing deployment was reused")


class DeploymentRecord(BaseModel):
    """Deployment as persisted under deployments/<network>/"""
    name: str
    address: str
    contract_id: str
    network: str
    tx_hash: Optional[str] = None
    confirmations: int = 0
    bytecode_hash: Optional[str] = None
    deployer: Optional[str] = None
    deployed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_result(self, newly_deployed: bool = False) -> DeploymentResult:
        return DeploymentResult(
            name=self.name,
            address=self.address,
            contract_id=self.contract_id,
            network=self.network,
            tx_hash=self.tx_hash,
            confirmations=self.confirmations,
            newly_deployed=newly_deployed,
        )


class AuctionSnapshot(BaseModel):
    """Four independent reads of the auction state (no consistency across reads)"""
    version: str = Field(..., description="Contract version string")
    bidding_open: bool = Field(..., description="Whether bids are still accepted")
    results_ready: bool = Field(..., description="Whether the auction has been finalized")
    participants: int = Field(..., description="Number of participants that placed a bid")
