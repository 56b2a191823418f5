#!/usr/bin/env python3
"""
Deploy SecretMinBidAuction.

Usage:
  brownie run scripts/deploy_secret_min_bid_auction.py --network <network>

Optional environment:
  FQN=contracts/SecretMinBidAuction.sol:SecretMinBidAuction   exact artifact
  WAIT_CONFIRMATIONS=2                                        confirmations per tx
  CLOSE=1       close bidding after deploy (needs at least one bid)
  FINALIZE=1    finalize after deploy (needs bidding closed and participants)
"""

import os
import sys

from rich.console import Console
from rich.table import Table

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripts.lib.backend import BrownieBackend
from scripts.lib.config import get_settings
from scripts.lib.logging_utils import setup_logging
from scripts.lib.orchestrator import run

console = Console()


def display_deployment_summary(result, outcomes=None):
    """Display a summary of the deployment"""
    table = Table(title="🎯 SecretMinBidAuction Deployment")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Contract", result.name)
    table.add_row("Artifact", result.contract_id)
    table.add_row("Address", result.address)
    table.add_row("Network", result.network)
    table.add_row("Tx Hash", result.tx_hash or "-")
    table.add_row("Confirmations", str(result.confirmations))
    table.add_row("Newly Deployed", "yes" if result.newly_deployed else "no (reused)")
    for step, outcome in (outcomes or {}).items():
        table.add_row(f"Lifecycle: {step}", outcome.value.replace("_", " "))

    console.print(table)


def main():
    """Main deployment function"""
    settings = get_settings()
    setup_logging(settings.log_level)

    backend = BrownieBackend(settings)
    console.print("\n🚀 [bold magenta]SecretMinBidAuction Deployment[/bold magenta]")
    console.print(f"Network: [yellow]{backend.network_name()}[/yellow]")

    result, outcomes = run(backend, settings)
    display_deployment_summary(result, outcomes)
    return result


if __name__ == "__main__":
    try:
        main()
    except Exception:
        console.print_exception()
        sys.exit(1)
