"""Diagnostics support for Planting Log integration.

The diagnostics JSON returns the raw planting history exactly as it is held
by the record store, plus the storage path, for troubleshooting and manual
recovery.
"""

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import PlantingLogCoordinator


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator: PlantingLogCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]

    return coordinator.as_diagnostics()
