# File: __init__.py
"""Initialization file for the Planting Log integration.

Handles setting up the integration, including loading the config entry,
loading the planting history from storage, and preparing the coordinator
that services and sensors read from.

Key Features:
- Config entry setup and unload support.
- One-shot history load at startup (corrupt history never blocks setup).
- Storage cleanup when the entry is removed.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import PlantingLogCoordinator
from .services import async_setup_services, async_unload_services
from .store import PlantingRecordStore


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Planting Log entry: %s", entry.entry_id)

    storage_manager = PlantingRecordStore(hass, const.STORAGE_KEY)
    coordinator = PlantingLogCoordinator(hass, entry, storage_manager)

    # First refresh runs the startup load; corrupt history is absorbed there.
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORAGE_MANAGER: storage_manager,
    }

    async_setup_services(hass)

    await hass.config_entries.async_forward_entry_setups(entry, const.PLATFORMS)

    const.LOGGER.info(
        "INFO: Planting Log setup complete for entry: %s (%s records)",
        entry.entry_id,
        len(coordinator.records),
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Planting Log entry: %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, const.PLATFORMS)

    if unload_ok:
        hass.data[const.DOMAIN].pop(entry.entry_id)
        if not hass.data[const.DOMAIN]:
            async_unload_services(hass)

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry by deleting its history blob."""
    const.LOGGER.info("INFO: Removing Planting Log entry: %s", entry.entry_id)

    storage_manager = PlantingRecordStore(hass, const.STORAGE_KEY)
    await storage_manager.async_delete_storage()

    const.LOGGER.info("INFO: Planting Log entry data cleared: %s", entry.entry_id)
