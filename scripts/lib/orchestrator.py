#!/usr/bin/env python3
"""
Deploy SecretMinBidAuction and optionally walk it through its lifecycle.

Resolve artifact -> deploy -> liveness probe -> close / finalize, strictly
in that order with no retries. Only the liveness probe recovers from
failures; everything else propagates to the caller.
"""

import logging
from typing import Dict, Tuple

from rich.console import Console

from scripts.lib.artifacts import CONTRACT_NAME, build_candidates, resolve_artifact
from scripts.lib.config import DeploySettings
from scripts.lib.lifecycle import StepOutcome, probe, step_lifecycle
from scripts.lib.models import DeploymentResult

logger = logging.getLogger(__name__)

console = Console()


def deploy_contract(backend, contract_id: str, deployer, wait_confirmations: int = 1) -> DeploymentResult:
    """Deploy the auction from the resolved artifact (constructor takes no arguments)"""
    logger.info(f"🔨 Deploying {CONTRACT_NAME}… (artifact: {contract_id})")
    return backend.deploy(
        CONTRACT_NAME,
        deployer=deployer,
        contract=contract_id,
        args=[],
        wait_confirmations=wait_confirmations,
    )


def run(backend, settings: DeploySettings) -> Tuple[DeploymentResult, Dict[str, StepOutcome]]:
    """
    Full deployment run.

    Safe to repeat on the same network: the backend reuses an unchanged
    deployment, and the probe and lifecycle steps run again against it.
    """
    network_name = backend.network_name()
    deployer = backend.named_accounts()["deployer"]

    candidates = build_candidates(settings.fqn)
    contract_id = resolve_artifact(backend, candidates)

    result = deploy_contract(backend, contract_id, deployer, settings.wait_confirmations)

    probe(backend, CONTRACT_NAME, result.address, network_name)

    outcomes = step_lifecycle(backend, settings, CONTRACT_NAME, deployer)

    console.print(f"{CONTRACT_NAME} contract: {result.address}")
    return result, outcomes
