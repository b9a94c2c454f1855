# File: services.py
"""Defines custom services for the Planting Log integration.

These services are the form boundary for scripts, automations and dashboards:
one action submits a planting record, the other returns the full history.
"""

from __future__ import annotations

from typing import Optional

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
    callback,
)
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from homeassistant.helpers import config_validation as cv

from . import const
from .coordinator import PlantingLogCoordinator

# --- Service Schemas ---
# Date and quantity default to "" so that omitting them is reported by the
# validator as a missing field rather than a schema error.
RECORD_PLANTING_SCHEMA = vol.Schema(
    {
        vol.Optional(const.FIELD_CROP, default=const.DEFAULT_CROP): cv.string,
        vol.Optional(const.FIELD_PLANTING_DATE, default=""): cv.string,
        vol.Optional(const.FIELD_SEED_QUANTITY, default=""): cv.string,
        vol.Optional(const.FIELD_FERTILE_SOIL, default=False): cv.boolean,
    }
)

GET_RECORDS_SCHEMA = vol.Schema({})


def get_first_planting_log_entry(hass: HomeAssistant) -> Optional[str]:
    """Retrieve the first Planting Log config entry ID."""
    domain_entries = hass.data.get(const.DOMAIN)
    if not domain_entries:
        return None
    return next(iter(domain_entries.keys()), None)


def _get_coordinator(hass: HomeAssistant, service_name: str) -> PlantingLogCoordinator:
    entry_id = get_first_planting_log_entry(hass)
    if not entry_id:
        const.LOGGER.warning(
            "WARNING: %s: %s", service_name, const.MSG_NO_ENTRY_FOUND
        )
        raise HomeAssistantError(const.MSG_NO_ENTRY_FOUND)
    return hass.data[const.DOMAIN][entry_id][const.COORDINATOR]


@callback
def async_setup_services(hass: HomeAssistant) -> None:
    """Register Planting Log services."""
    if hass.services.has_service(const.DOMAIN, const.SERVICE_RECORD_PLANTING):
        return

    async def handle_record_planting(call: ServiceCall) -> ServiceResponse:
        """Handle submitting a planting record."""
        coordinator = _get_coordinator(hass, "Record Planting")

        result = await coordinator.async_submit(
            crop=call.data[const.FIELD_CROP],
            planting_date=call.data[const.FIELD_PLANTING_DATE],
            seed_quantity=call.data[const.FIELD_SEED_QUANTITY],
            fertile_soil=call.data[const.FIELD_FERTILE_SOIL],
        )

        if not result[const.RESULT_OK]:
            if result[const.RESULT_ERROR] == const.ERROR_WRITE_FAILED:
                raise HomeAssistantError(result[const.RESULT_ERROR_MESSAGE])
            raise ServiceValidationError(result[const.RESULT_ERROR_MESSAGE])

        if call.return_response:
            return {const.RESULT_RECORDS: result[const.RESULT_RECORDS]}
        return None

    async def handle_get_records(call: ServiceCall) -> ServiceResponse:
        """Handle returning the full planting history."""
        coordinator = _get_coordinator(hass, "Get Records")
        return {const.RESULT_RECORDS: coordinator.records}

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_RECORD_PLANTING,
        handle_record_planting,
        schema=RECORD_PLANTING_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_GET_RECORDS,
        handle_get_records,
        schema=GET_RECORDS_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )

    const.LOGGER.info("INFO: Planting Log services have been registered successfully")


@callback
def async_unload_services(hass: HomeAssistant) -> None:
    """Unregister Planting Log services when the last entry unloads."""
    for service in (const.SERVICE_RECORD_PLANTING, const.SERVICE_GET_RECORDS):
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Planting Log services have been unregistered")
