"""Validation Engine - Pure logic for planting form input and record building.

This engine provides stateless, pure Python functions for:
- Checking raw form values (required fields, date shape, seed quantity, crop)
- Deriving the soil condition label from the fertile-soil switch
- Building the persisted record from validated fields

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data.
State management belongs in PlantingRecordStore and the coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from ..type_defs import PlantingRecord

_PLANTING_DATE_RE = re.compile(const.PLANTING_DATE_PATTERN)
_SEED_QUANTITY_RE = re.compile(const.SEED_QUANTITY_PATTERN)

_REASON_MESSAGES: dict[str, str] = {
    const.ERROR_MISSING_FIELD: const.MSG_MISSING_FIELD,
    const.ERROR_BAD_DATE_FORMAT: const.MSG_BAD_DATE_FORMAT,
    const.ERROR_BAD_QUANTITY: const.MSG_BAD_QUANTITY,
}


class PlantingValidationError(Exception):
    """Raised when raw form values do not form a legal planting record.

    Attributes:
        reason: One of the const.ERROR_* validation reasons
        message: Human readable message for the form
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        """Initialize PlantingValidationError.

        Args:
            reason: Validation reason constant (e.g. const.ERROR_BAD_QUANTITY)
            message: Override for the default message of the reason
        """
        self.reason = reason
        self.message = message or _REASON_MESSAGES[reason]
        super().__init__(self.message)


@dataclass(frozen=True)
class ValidatedPlanting:
    """Typed form fields, ready to become a PlantingRecord.

    Attributes:
        crop: Crop tag, unchanged from input
        planting_date: Date string, unchanged from input
        seed_quantity_kg: Parsed seed quantity
        fertile_soil: Switch value, unchanged from input
    """

    crop: str
    planting_date: str
    seed_quantity_kg: float
    fertile_soil: bool = False


class ValidationEngine:
    """Pure logic engine for planting form validation.

    All methods are static - no instance state. Rules run in a fixed order
    and the first failing rule is the only one reported:

        1. planting date and seed quantity present
        2. planting date shaped DD/MM/YYYY
        3. seed quantity is a finite number greater than zero
        4. crop is one of const.CROP_OPTIONS
    """

    @staticmethod
    def validate(
        crop: str,
        planting_date: str,
        seed_quantity: str | float,
        fertile_soil: bool = False,
    ) -> ValidatedPlanting:
        """Validate raw form values.

        Args:
            crop: Crop tag from the picker
            planting_date: Free-form date text
            seed_quantity: Free-form quantity text (kilograms)
            fertile_soil: Fertile soil switch

        Returns:
            ValidatedPlanting with the parsed quantity

        Raises:
            PlantingValidationError: On the first rule that fails
        """
        # Exact-empty check, no trimming
        if planting_date in (None, "") or seed_quantity in (None, ""):
            raise PlantingValidationError(const.ERROR_MISSING_FIELD)

        if not ValidationEngine.is_valid_planting_date(planting_date):
            raise PlantingValidationError(const.ERROR_BAD_DATE_FORMAT)

        quantity = ValidationEngine.parse_seed_quantity(seed_quantity)
        if quantity is None:
            raise PlantingValidationError(const.ERROR_BAD_QUANTITY)

        if crop not in const.CROP_OPTIONS:
            raise PlantingValidationError(
                const.ERROR_UNKNOWN_CROP,
                const.MSG_UNKNOWN_CROP_FMT.format(
                    crop, ", ".join(const.CROP_OPTIONS)
                ),
            )

        return ValidatedPlanting(
            crop=crop,
            planting_date=planting_date,
            seed_quantity_kg=quantity,
            fertile_soil=bool(fertile_soil),
        )

    @staticmethod
    def is_valid_planting_date(planting_date: str) -> bool:
        """Return True if the text is shaped DD/MM/YYYY.

        Shape only: 31/13/9999 passes.
        """
        return (
            isinstance(planting_date, str)
            and _PLANTING_DATE_RE.fullmatch(planting_date) is not None
        )

    @staticmethod
    def parse_seed_quantity(seed_quantity: str | float) -> float | None:
        """Parse seed quantity text, returning None unless it is a positive number.

        Text must be a plain decimal (exponent allowed). Python-only spellings
        such as "1_000", "nan" or "inf" are rejected. Numbers passed by
        automations are taken as they are.
        """
        if isinstance(seed_quantity, bool):
            return None
        if isinstance(seed_quantity, (int, float)):
            quantity = float(seed_quantity)
        elif isinstance(seed_quantity, str) and _SEED_QUANTITY_RE.fullmatch(
            seed_quantity
        ):
            quantity = float(seed_quantity)
        else:
            return None
        if not math.isfinite(quantity) or quantity <= 0:
            return None
        return quantity

    @staticmethod
    def soil_label(fertile_soil: bool) -> str:
        """Return the display label for the soil switch."""
        return const.SOIL_FERTILE if fertile_soil else const.SOIL_NOT_FERTILE

    @staticmethod
    def build_record(fields: ValidatedPlanting, timestamp: int) -> PlantingRecord:
        """Build the persisted record for validated fields.

        Args:
            fields: Output of validate()
            timestamp: Creation time in milliseconds, used as the record id

        Returns:
            PlantingRecord dict
        """
        return {
            const.DATA_RECORD_ID: int(timestamp),
            const.DATA_RECORD_CROP: fields.crop,
            const.DATA_RECORD_PLANTING_DATE: fields.planting_date,
            const.DATA_RECORD_SEED_QUANTITY_KG: fields.seed_quantity_kg,
            const.DATA_RECORD_SOIL: ValidationEngine.soil_label(fields.fertile_soil),
        }
