#!/usr/bin/env python3
"""
Configuration for the SecretMinBidAuction deployment scripts.

Everything is read from the environment (or a local .env file) exactly once,
at the start of a run, and handed to the orchestration code as a frozen
settings object.

Variables:
 - FQN                  exact artifact identifier to try first
 - WAIT_CONFIRMATIONS   confirmations to wait for after each transaction (default 1)
 - CLOSE                "1"/"true" to close bidding after deploy
 - FINALIZE             "1"/"true" to finalize the auction after deploy
 - DEPLOYER_PRIVATE_KEY optional deployer key (falls back to accounts[0])
 - DEPLOYMENTS_DIR      where deployment records are kept (default "deployments")
 - EPHEMERAL_NETWORKS   comma-separated networks that never persist records
 - LOG_LEVEL            logging level (default INFO)
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

TRUTHY_VALUES = ("1", "true")


def is_truthy(value) -> bool:
    """Strict flag check: only "1" and "true" (any case) switch a step on"""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_VALUES


class DeploySettings(BaseSettings):
    """Deployment run settings with environment-based configuration"""

    # Artifact override
    fqn: Optional[str] = None

    # Confirmation count for deploy and lifecycle transactions
    wait_confirmations: int = Field(1, ge=0)

    # Lifecycle switches
    close: bool = False
    finalize: bool = False

    # Accounts
    deployer_private_key: Optional[str] = None

    # Deployment records
    deployments_dir: str = "deployments"
    ephemeral_networks: str = "development,anvil-local,hardhat"

    log_level: str = "INFO"

    @field_validator('fqn', 'deployer_private_key', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Handle empty strings for optional identifiers"""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator('wait_confirmations', mode='before')
    @classmethod
    def parse_wait_confirmations(cls, v):
        """Empty values fall back to a single confirmation"""
        if v is None or (isinstance(v, str) and not v.strip()):
            return 1
        if isinstance(v, str):
            return int(v.strip())
        return v

    @field_validator('close', 'finalize', mode='before')
    @classmethod
    def parse_flag(cls, v):
        return is_truthy(v)

    def ephemeral_network_list(self) -> List[str]:
        """Get ephemeral network names as a list"""
        return [name.strip() for name in self.ephemeral_networks.split(",") if name.strip()]

    def is_ephemeral(self, network_name: str) -> bool:
        return network_name in self.ephemeral_network_list()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "frozen": True,
    }


def get_settings(**overrides) -> DeploySettings:
    """Read the settings for one run"""
    return DeploySettings(**overrides)
