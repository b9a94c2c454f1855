# File: sensor.py
"""Sensors for the Planting Log integration.

Sensors Defined in This File (1):

01. PlantingRecordsSensor - record count, with the history as attributes
"""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from . import const
from .coordinator import PlantingLogCoordinator
from .entity import PlantingLogCoordinatorEntity


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up sensors for Planting Log integration."""
    coordinator: PlantingLogCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]
    async_add_entities([PlantingRecordsSensor(coordinator, entry)])


class PlantingRecordsSensor(PlantingLogCoordinatorEntity, SensorEntity):
    """Number of planting records, newest first history in attributes."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_RECORDS
    _attr_icon = const.SENSOR_ICON_RECORDS
    _attr_native_unit_of_measurement = const.UNIT_RECORDS
    _attr_state_class = SensorStateClass.TOTAL
    # The full list can grow without bound; keep it out of the recorder.
    _unrecorded_attributes = frozenset({const.ATTR_RECORDS})

    def __init__(self, coordinator: PlantingLogCoordinator, entry: ConfigEntry) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}_{const.SENSOR_KEY_RECORDS}"

    @property
    def native_value(self) -> int:
        """Return the number of records."""
        return len(self.coordinator.records)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return the history and a few summary values."""
        records = self.coordinator.records
        total = sum(
            record[const.DATA_RECORD_SEED_QUANTITY_KG] for record in records
        )
        latest = records[0] if records else None
        return {
            const.ATTR_TOTAL_SEED_QUANTITY_KG: round(
                total, const.DATA_FLOAT_PRECISION
            ),
            const.ATTR_LATEST_CROP: latest[const.DATA_RECORD_CROP] if latest else None,
            const.ATTR_LATEST_PLANTING_DATE: (
                latest[const.DATA_RECORD_PLANTING_DATE] if latest else None
            ),
            const.ATTR_RECORDS: records,
        }
