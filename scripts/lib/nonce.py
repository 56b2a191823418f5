#!/usr/bin/env python3
"""
Nonce lookup for the active signer.
"""


def fetch_pending_nonce(web3, address: str) -> int:
    """Transaction count for address including pending transactions"""
    return int(web3.eth.get_transaction_count(address, "pending"))
