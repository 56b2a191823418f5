#!/usr/bin/env python3
"""
Exceptions raised by the deployment scripts.
"""

from typing import Dict, Optional, Sequence


class DeployScriptError(Exception):
    """Base class for deployment script failures"""


class ArtifactLookupError(DeployScriptError, LookupError):
    """A single artifact identifier could not be resolved"""

    def __init__(self, identifier: str, reason: str = "artifact not found"):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"{identifier}: {reason}")


class ArtifactNotFound(DeployScriptError):
    """None of the candidate identifiers resolved to a compiled artifact"""

    def __init__(
        self,
        contract_name: str,
        candidates: Sequence[str],
        reasons: Optional[Dict[str, str]] = None,
    ):
        self.contract_name = contract_name
        self.candidates = list(candidates)
        self.reasons = dict(reasons or {})
        super().__init__(
            f"Cannot find artifact for {contract_name}. "
            f"Make sure the contract is compiled and try one of: {', '.join(self.candidates)}"
        )
