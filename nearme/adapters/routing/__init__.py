"""Routing adapters - Implementations of RoutingClientPort.

Available implementations:
- OSRMRoutingAdapter: Open Source Routing Machine over HTTP
"""

from .osrm_adapter import OSRMRoutingAdapter

__all__ = ["OSRMRoutingAdapter"]
