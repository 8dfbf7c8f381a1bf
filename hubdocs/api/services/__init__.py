"""Services backing the documentation routes."""

from .discovery import HubEndpoint, HubRegistry, get_default_registry, hub

__all__ = ["HubEndpoint", "HubRegistry", "get_default_registry", "hub"]
