"""Application layer for beefysig.

Protocol-facing code depends on the ports; adapters provide the concrete
hashing and signing schemes.
"""
