"""Shared fixtures for Planting Log tests."""

from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.planting_log.const import DOMAIN, PLANTING_LOG_TITLE

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title=PLANTING_LOG_TITLE,
        data={},
        entry_id="test_entry_id",
        unique_id="test_unique_id",
    )


@pytest.fixture
def tmp_config_dir(hass: HomeAssistant, tmp_path: Path) -> Generator[Path]:
    """Point the config directory, and so real storage files, at tmp_path."""
    with patch.object(hass.config, "config_dir", str(tmp_path)):
        yield tmp_path


@pytest.fixture
def stored_records() -> list[dict[str, Any]]:
    """Return a persisted history, newest first."""
    return [
        {
            "id": 1757980800000,
            "crop": "corn",
            "planting_date": "16/09/2025",
            "seed_quantity_kg": 80.5,
            "soil": "Not Fertile",
        },
        {
            "id": 1757894400000,
            "crop": "soy",
            "planting_date": "15/09/2025",
            "seed_quantity_kg": 150.0,
            "soil": "Fertile",
        },
    ]


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Planting Log integration with whatever is in hass_storage."""
    mock_config_entry.add_to_hass(hass)

    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()

    return mock_config_entry
