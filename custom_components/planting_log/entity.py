"""Base entity classes for Planting Log integration."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from . import const
from .coordinator import PlantingLogCoordinator


class PlantingLogCoordinatorEntity(CoordinatorEntity[PlantingLogCoordinator]):
    """Base entity class for Planting Log entities.

    Groups every entity of the entry under one service device.
    """

    _attr_has_entity_name = True

    def __init__(self, coordinator: PlantingLogCoordinator) -> None:
        """Initialize the entity with its coordinator."""
        super().__init__(coordinator)
        entry_id = coordinator.config_entry.entry_id
        self._attr_device_info = DeviceInfo(
            identifiers={(const.DOMAIN, entry_id)},
            name=const.PLANTING_LOG_TITLE,
            entry_type=DeviceEntryType.SERVICE,
        )
