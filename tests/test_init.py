"""Tests for Planting Log setup, unload and removal."""

# pylint: disable=unused-argument  # init_integration is needed for setup only

from typing import Any

from homeassistant.config_entries import ConfigEntryState
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.planting_log import const
from custom_components.planting_log.coordinator import PlantingLogCoordinator
from custom_components.planting_log.store import PlantingRecordStore
from tests.helpers import storage_blob, stored_payload


async def test_setup_entry(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test setup stores the coordinator and store for the entry."""
    assert init_integration.state is ConfigEntryState.LOADED

    entry_data = hass.data[const.DOMAIN][init_integration.entry_id]
    assert isinstance(entry_data[const.COORDINATOR], PlantingLogCoordinator)
    assert isinstance(entry_data[const.STORAGE_MANAGER], PlantingRecordStore)
    assert entry_data[const.COORDINATOR].records == []


async def test_setup_with_corrupt_history_still_loads(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    mock_config_entry: MockConfigEntry,
) -> None:
    """Test a corrupt blob never blocks setup and starts an empty history."""
    hass_storage[const.STORAGE_KEY] = storage_blob({"unexpected": "shape"})
    mock_config_entry.add_to_hass(hass)

    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()

    assert mock_config_entry.state is ConfigEntryState.LOADED
    coordinator = hass.data[const.DOMAIN][mock_config_entry.entry_id][
        const.COORDINATOR
    ]
    assert coordinator.records == []

    # The next successful submit replaces the corrupt blob.
    result = await coordinator.async_submit("soy", "15/09/2025", "150")
    assert stored_payload(hass_storage) == result[const.RESULT_RECORDS]


async def test_unload_entry(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test unloading removes the entry data."""
    assert await hass.config_entries.async_unload(init_integration.entry_id)
    await hass.async_block_till_done()

    assert init_integration.state is ConfigEntryState.NOT_LOADED
    assert init_integration.entry_id not in hass.data[const.DOMAIN]


async def test_remove_entry_deletes_history(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    init_integration: MockConfigEntry,
) -> None:
    """Test removing the entry deletes the persisted history."""
    coordinator = hass.data[const.DOMAIN][init_integration.entry_id][
        const.COORDINATOR
    ]
    await coordinator.async_submit("soy", "15/09/2025", "150")
    assert stored_payload(hass_storage) is not None

    assert await hass.config_entries.async_remove(init_integration.entry_id)
    await hass.async_block_till_done()

    assert const.STORAGE_KEY not in hass_storage
