"""
Boundary layer for external system integrations.

Adapters for remote embedding tiers, the generative collaborator, vector
store backends and corpus persistence.
"""
