"""
Wallet - signing identities for the Lukup SDK.

A WalletIdentity is a plain immutable record (signer + network).  It is built
by one of the factory functions in identity.py and never subclassed.
"""
