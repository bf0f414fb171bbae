"""
Hazard scoring functions.
Import all hazard modules to register them.
"""
from .registry import (
    register_hazard,
    get_hazard_function,
    list_hazard_functions,
    has_hazard_function,
)

# Import hazard modules to trigger registration
from . import water, temperature, atmosphere

__all__ = [
    "register_hazard",
    "get_hazard_function",
    "list_hazard_functions",
    "has_hazard_function",
    "water",
    "temperature",
    "atmosphere",
]
