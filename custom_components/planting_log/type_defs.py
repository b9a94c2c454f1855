"""Type definitions for Planting Log data structures.

TypedDict is used for structures whose keys are fixed and persisted as JSON,
so they stay plain dicts at runtime and can be handed straight to the
Home Assistant Store.

IMPORTANT: This file must NOT import from coordinator.py or store.py to avoid
circular dependencies. Only import from typing.
"""

from typing import NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

RecordId = int  # Millisecond timestamp at creation
PlantingDate = str  # "DD/MM/YYYY", never parsed into a date


# =============================================================================
# Persisted Structures
# =============================================================================


class PlantingRecord(TypedDict):
    """One planting event as stored in the records blob."""

    id: RecordId
    crop: str
    planting_date: PlantingDate
    seed_quantity_kg: float
    soil: str  # "Fertile" | "Not Fertile"


# =============================================================================
# Boundary Structures
# =============================================================================


class SubmitResult(TypedDict):
    """Outcome of a submit from the form boundary.

    ``records`` is present when ``ok`` is True; ``error`` and
    ``error_message`` are present when it is False.
    """

    ok: bool
    records: NotRequired[list[PlantingRecord]]
    error: NotRequired[str]
    error_message: NotRequired[str]
