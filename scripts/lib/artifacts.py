#!/usr/bin/env python3
"""
Artifact resolution for SecretMinBidAuction.

The contract may live under several source paths depending on how the
project was laid out when it was compiled, so a fixed list of identifiers is
tried in priority order: an explicit override first, then the bare contract
name, then the path-qualified variants.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from scripts.lib.errors import ArtifactNotFound

logger = logging.getLogger(__name__)

CONTRACT_NAME = "SecretMinBidAuction"

DEFAULT_CANDIDATES = (
    CONTRACT_NAME,
    f"contracts/{CONTRACT_NAME}.sol:{CONTRACT_NAME}",
    f"contracts/auction/{CONTRACT_NAME}.sol:{CONTRACT_NAME}",
    f"src/{CONTRACT_NAME}.sol:{CONTRACT_NAME}",
)


def build_candidates(override: Optional[str] = None, defaults: Sequence[str] = DEFAULT_CANDIDATES) -> List[str]:
    """Ordered candidate identifiers, override first"""
    candidates = []
    if override and override.strip():
        candidates.append(override.strip())
    candidates.extend(defaults)
    return candidates


def try_each(candidates: Sequence[str], attempt: Callable[[str], object]) -> Tuple[Optional[str], Dict[str, str]]:
    """
    Call attempt() on each candidate until one succeeds.

    Returns the winning candidate (or None) together with the failure reason
    of every candidate tried before it. Only lookup failures are collected;
    anything else propagates.
    """
    reasons = {}
    for candidate in candidates:
        try:
            attempt(candidate)
        except LookupError as e:
            reasons[candidate] = str(e)
            logger.debug(f"Artifact {candidate} not available: {e}")
            continue
        return candidate, reasons
    return None, reasons


def resolve_artifact(backend, candidates: Sequence[str], contract_name: str = CONTRACT_NAME) -> str:
    """Return the first candidate the backend knows an artifact for"""
    contract_id, reasons = try_each(candidates, backend.get_artifact)
    if contract_id is None:
        raise ArtifactNotFound(contract_name, candidates, reasons)
    return contract_id
