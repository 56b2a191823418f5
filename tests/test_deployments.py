#!/usr/bin/env python3
"""
Tests for persisted deployment records
"""

import json

from scripts.lib.deployments import DeploymentStore
from scripts.lib.models import DeploymentRecord


def make_record(**overrides):
    values = dict(
        name="SecretMinBidAuction",
        address="0x5FbDB2315678afecb367f032d93F642f64180aa3",
        contract_id="SecretMinBidAuction",
        network="sepolia",
        tx_hash="0x" + "cd" * 32,
        confirmations=2,
        bytecode_hash="deadbeef",
    )
    values.update(overrides)
    return DeploymentRecord(**values)


class TestDeploymentStore:

    def test_missing_record(self, tmp_path):
        assert DeploymentStore(tmp_path, "sepolia").load("SecretMinBidAuction") is None

    def test_save_and_load(self, tmp_path):
        store = DeploymentStore(tmp_path, "sepolia")
        path = store.save(make_record())

        assert path == tmp_path / "sepolia" / "SecretMinBidAuction.json"
        loaded = store.load("SecretMinBidAuction")
        assert loaded.address == "0x5FbDB2315678afecb367f032d93F642f64180aa3"
        assert loaded.bytecode_hash == "deadbeef"
        assert loaded.confirmations == 2

    def test_records_are_per_network(self, tmp_path):
        DeploymentStore(tmp_path, "sepolia").save(make_record())
        assert DeploymentStore(tmp_path, "mainnet").load("SecretMinBidAuction") is None

    def test_corrupt_record_ignored(self, tmp_path, caplog):
        store = DeploymentStore(tmp_path, "sepolia")
        store.network_dir.mkdir(parents=True)
        store.record_path("SecretMinBidAuction").write_text("{not json")

        assert store.load("SecretMinBidAuction") is None
        assert any("unreadable deployment record" in m for m in caplog.messages)

    def test_incomplete_record_ignored(self, tmp_path):
        store = DeploymentStore(tmp_path, "sepolia")
        store.network_dir.mkdir(parents=True)
        store.record_path("SecretMinBidAuction").write_text(json.dumps({"name": "SecretMinBidAuction"}))

        assert store.load("SecretMinBidAuction") is None


def test_record_to_result():
    result = make_record().to_result()
    assert result.newly_deployed is False
    assert result.tx_hash == "0x" + "cd" * 32
    assert result.network == "sepolia"
