"""
Registry for hazard scoring functions.
Each function takes (HazardObservation, HazardDefinition) and returns a raw
risk value; the scorer clamps it to [0, 1] and converts it to a percent.
"""
from typing import Callable, Dict, List

from models import HazardEnum, HazardObservation
from ..hazard_thresholds import HazardDefinition

# Type alias
HazardFunction = Callable[[HazardObservation, HazardDefinition], float]

# Global registry
_HAZARD_FUNCTIONS: Dict[HazardEnum, HazardFunction] = {}


def register_hazard(hazard: HazardEnum):
    """Decorator to register a hazard scoring function"""
    def decorator(func: HazardFunction) -> HazardFunction:
        _HAZARD_FUNCTIONS[hazard] = func
        return func
    return decorator


def get_hazard_function(hazard: HazardEnum) -> HazardFunction:
    """Get a registered hazard function"""
    if hazard not in _HAZARD_FUNCTIONS:
        raise ValueError(f"No scoring function registered for hazard: {hazard}")
    return _HAZARD_FUNCTIONS[hazard]


def list_hazard_functions() -> List[HazardEnum]:
    """List all hazards with a registered function"""
    return list(_HAZARD_FUNCTIONS.keys())


def has_hazard_function(hazard: HazardEnum) -> bool:
    """Check if a hazard function is registered"""
    return hazard in _HAZARD_FUNCTIONS
