"""
Boundary layer for external system integrations.

Handles all interactions with the remote secret store.
Provides adapters that implement the engine's PartStore protocol.
"""
