#!/usr/bin/env python3
"""
Pytest configuration for deployment script tests
"""

import logging

import pytest

from scripts.lib.backend import DeploymentBackend
from scripts.lib.config import DeploySettings
from scripts.lib.errors import ArtifactLookupError
from scripts.lib.models import DeploymentResult

DEPLOYER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
AUCTION_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


class FakeBackend(DeploymentBackend):
    """In-memory backend that records every call"""

    def __init__(self, artifacts=("SecretMinBidAuction",), state=None, network="sepolia"):
        self.artifacts = set(artifacts)
        self.state = {
            "version": "1.0.0",
            "biddingOpen": True,
            "resultsReady": False,
            "participantsCount": 0,
        }
        self.state.update(state or {})
        self.network = network
        self.failing_reads = set()
        self.lookups = []
        self.reads = []
        self.executed = []
        self.deployed = []

    def get_artifact(self, identifier):
        self.lookups.append(identifier)
        if identifier not in self.artifacts:
            raise ArtifactLookupError(identifier)
        return {"contractName": identifier.rsplit(":", 1)[-1]}

    def deploy(self, name, *, deployer, contract, args=(), wait_confirmations=1):
        """Later deploys of the same name reuse the first one"""
        reused = any(d["name"] == name for d in self.deployed)
        self.deployed.append({
            "name": name,
            "deployer": deployer,
            "contract": contract,
            "args": list(args),
            "wait_confirmations": wait_confirmations,
        })
        return DeploymentResult(
            name=name,
            address=AUCTION_ADDRESS,
            contract_id=contract,
            network=self.network,
            tx_hash="0x" + "ab" * 32,
            confirmations=wait_confirmations,
            newly_deployed=not reused,
        )

    def read(self, name, method, *args):
        self.reads.append(method)
        if method in self.failing_reads:
            raise ValueError(f"execution reverted: {method}")
        return self.state[method]

    def execute(self, name, method, *args, deployer, wait_confirmations=1):
        self.executed.append(method)
        if method == "closeBidding":
            self.state["biddingOpen"] = False
        elif method == "finalize":
            self.state["resultsReady"] = True
        return {"method": method, "from": deployer}

    def named_accounts(self):
        return {"deployer": DEPLOYER}

    def network_name(self):
        return self.network


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def make_settings():
    """Settings built from explicit values only (no environment, no .env)"""
    def _make(**values):
        return DeploySettings(_env_file=None, **values)
    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep deployment variables from the outer shell out of the tests"""
    for name in ("FQN", "WAIT_CONFIRMATIONS", "CLOSE", "FINALIZE", "DEPLOYER_PRIVATE_KEY",
                 "DEPLOYMENTS_DIR", "EPHEMERAL_NETWORKS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def root_logger():
    """Restore root logging after code that installs handlers"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
