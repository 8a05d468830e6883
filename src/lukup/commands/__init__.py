"""
Commands - CLI command groups for Lukup.

- wallet:  create or import the local wallet
- content: call Content contract operations
"""
