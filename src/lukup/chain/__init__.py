"""
Chain - On-chain interaction layer for the Lukup SDK.

Provides network descriptors, the contract artifact loader, a JSON-RPC client
and transaction utilities for EVM networks.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
