from .context import context_modules_for
from .routing import InvalidInput, Scale, Tier, TierInputs, compute_tier, decide
from .server import TierRouterMCPServer, main

__all__ = [
    "TierRouterMCPServer",
    "InvalidInput",
    "Scale",
    "Tier",
    "TierInputs",
    "compute_tier",
    "context_modules_for",
    "decide",
    "main"
]
