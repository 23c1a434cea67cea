"""Kernel capabilities – value object and immutable lookup table."""
from flagquery.kernel.capabilities.capability import Capability
from flagquery.kernel.capabilities.store import CapabilityLookup, CapabilityStore

__all__ = ["Capability", "CapabilityLookup", "CapabilityStore"]
