#!/usr/bin/env python3
"""
Per-network deployment records.

Layout:
  <root>/<network>/<ContractName>.json   one record per deployment name
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from scripts.lib.models import DeploymentRecord

logger = logging.getLogger(__name__)


class DeploymentStore:
    def __init__(self, root, network: str):
        self.root = Path(root)
        self.network = network

    @property
    def network_dir(self) -> Path:
        return self.root / self.network

    def record_path(self, name: str) -> Path:
        return self.network_dir / f"{name}.json"

    def load(self, name: str) -> Optional[DeploymentRecord]:
        """Load a deployment record, None if missing or unreadable"""
        path = self.record_path(name)
        if not path.exists():
            return None
        try:
            with open(path, 'r') as f:
                return DeploymentRecord.model_validate(json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable deployment record {path}: {e}")
            return None

    def save(self, record: DeploymentRecord) -> Path:
        path = self.record_path(record.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(record.model_dump_json(indent=2))
        logger.debug(f"Saved deployment record {path}")
        return path
