"""Tests for Planting Log diagnostics module.

Diagnostics export the raw history held by the record store.
"""

# pylint: disable=unused-argument  # Some fixtures needed for setup only

from typing import Any

from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.planting_log import const
from custom_components.planting_log.diagnostics import (
    async_get_config_entry_diagnostics,
)
from tests.helpers import storage_blob


async def test_config_entry_diagnostics_returns_raw_history(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    mock_config_entry: MockConfigEntry,
    stored_records: list[dict[str, Any]],
) -> None:
    """Test diagnostics return the stored records unchanged."""
    hass_storage[const.STORAGE_KEY] = storage_blob(stored_records)
    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()

    diagnostics = await async_get_config_entry_diagnostics(hass, mock_config_entry)

    assert diagnostics["records"] == stored_records
    assert diagnostics["storage_path"].endswith(const.STORAGE_KEY)


async def test_config_entry_diagnostics_empty(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test diagnostics on a fresh install."""
    diagnostics = await async_get_config_entry_diagnostics(hass, init_integration)

    assert diagnostics["records"] == []
