"""Engine modules for Planting Log integration.

Contains specialized computation engines:
- validation_engine: Form input validation and record building
"""

# Use relative imports within package to avoid mypy module resolution issues
from .validation_engine import (
    PlantingValidationError,
    ValidatedPlanting,
    ValidationEngine,
)

__all__ = [
    "PlantingValidationError",
    "ValidatedPlanting",
    "ValidationEngine",
]
