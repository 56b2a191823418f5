#!/usr/bin/env python3
"""
Deployment backend abstraction.

The orchestration code only talks to a DeploymentBackend: artifact lookup,
deploy, read, execute, named accounts and the active network. BrownieBackend
implements it on top of the loaded brownie project; tests use an in-memory
implementation.
"""

import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from scripts.lib.config import DeploySettings
from scripts.lib.deployments import DeploymentStore
from scripts.lib.errors import ArtifactLookupError
from scripts.lib.models import DeploymentRecord, DeploymentResult

logger = logging.getLogger(__name__)


class DeploymentBackend(ABC):
    """Abstract base class for deployment backends"""

    @abstractmethod
    def get_artifact(self, identifier: str) -> Any:
        """Return the compiled artifact, raise ArtifactLookupError if unknown"""
        pass

    @abstractmethod
    def deploy(
        self,
        name: str,
        *,
        deployer: Any,
        contract: str,
        args: Sequence[Any] = (),
        wait_confirmations: int = 1,
    ) -> DeploymentResult:
        """Deploy (or reuse) a contract and wait for confirmations"""
        pass

    @abstractmethod
    def read(self, name: str, method: str, *args) -> Any:
        """Call a view method on a deployed contract"""
        pass

    @abstractmethod
    def execute(self, name: str, method: str, *args, deployer: Any, wait_confirmations: int = 1) -> Any:
        """Send a transaction to a deployed contract"""
        pass

    @abstractmethod
    def named_accounts(self) -> Dict[str, Any]:
        """Accounts by role, at least 'deployer'"""
        pass

    @abstractmethod
    def network_name(self) -> str:
        """Name of the active network"""
        pass


def bytecode_hash(bytecode: Optional[str]) -> Optional[str]:
    if not bytecode:
        return None
    return hashlib.sha256(bytecode.encode()).hexdigest()


class BrownieBackend(DeploymentBackend):
    """Backend over the brownie project loaded by `brownie run`"""

    def __init__(self, settings: DeploySettings, store: Optional[DeploymentStore] = None):
        from brownie import network

        self.settings = settings
        self.network = network.show_active()
        if store is None and not settings.is_ephemeral(self.network):
            store = DeploymentStore(settings.deployments_dir, self.network)
        self.store = store
        self._contracts = {}
        self._deployer = None

    def _project(self):
        from brownie import project

        loaded = project.get_loaded_projects()
        if not loaded:
            raise ArtifactLookupError("<project>", "no brownie project is loaded")
        return loaded[0]

    def get_artifact(self, identifier: str):
        containers = self._project().dict()

        if ":" not in identifier:
            if identifier in containers:
                return containers[identifier]
            raise ArtifactLookupError(identifier)

        source_path, contract_name = identifier.rsplit(":", 1)
        container = containers.get(contract_name)
        if container is None:
            raise ArtifactLookupError(identifier)
        if container._build.get("sourcePath") != source_path:
            raise ArtifactLookupError(
                identifier, f"compiled from {container._build.get('sourcePath')}"
            )
        return container

    def deploy(self, name, *, deployer, contract, args=(), wait_confirmations=1):
        container = self.get_artifact(contract)
        code_hash = bytecode_hash(container._build.get("bytecode"))

        if self.store is not None:
            record = self.store.load(name)
            if record is not None and record.bytecode_hash == code_hash:
                logger.info(f"reusing {name} at {record.address}")
                self._contracts[name] = container.at(record.address)
                return record.to_result(newly_deployed=False)

        deployed = container.deploy(
            *args, {"from": deployer, "required_confs": wait_confirmations}
        )
        self._contracts[name] = deployed

        tx = deployed.tx
        result = DeploymentResult(
            name=name,
            address=deployed.address,
            contract_id=contract,
            network=self.network,
            tx_hash=tx.txid if tx is not None else None,
            confirmations=tx.confirmations if tx is not None else 0,
        )

        if self.store is not None:
            self.store.save(DeploymentRecord(
                name=name,
                address=result.address,
                contract_id=contract,
                network=self.network,
                tx_hash=result.tx_hash,
                confirmations=result.confirmations,
                bytecode_hash=code_hash,
                deployer=str(deployer),
            ))
        return result

    def _contract(self, name: str):
        if name not in self._contracts:
            raise KeyError(f"No deployment named {name} on {self.network}")
        return self._contracts[name]

    def read(self, name, method, *args):
        return getattr(self._contract(name), method)(*args)

    def execute(self, name, method, *args, deployer, wait_confirmations=1):
        fn = getattr(self._contract(name), method)
        return fn(*args, {"from": deployer, "required_confs": wait_confirmations})

    def named_accounts(self):
        if self._deployer is None:
            from brownie import accounts

            if self.settings.deployer_private_key:
                self._deployer = accounts.add(self.settings.deployer_private_key)
            else:
                self._deployer = accounts[0]
        return {"deployer": self._deployer}

    def network_name(self):
        return self.network
