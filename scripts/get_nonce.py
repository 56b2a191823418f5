#!/usr/bin/env python3
"""
Print the current (pending) nonce of the deployer account.

Usage:
  brownie run scripts/get_nonce.py --network <network>
"""

import os
import sys

from rich.console import Console

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripts.lib.backend import BrownieBackend
from scripts.lib.config import get_settings
from scripts.lib.nonce import fetch_pending_nonce

console = Console()


def main():
    from brownie import web3

    signer = BrownieBackend(get_settings()).named_accounts()["deployer"]
    nonce = fetch_pending_nonce(web3, signer.address)
    print("Current nonce:", nonce)
    return nonce


if __name__ == "__main__":
    try:
        main()
    except Exception:
        console.print_exception()
        sys.exit(1)
