# File: config_flow.py
"""Config flow for the Planting Log integration.

A single confirmation step; only one Planting Log entry may exist because the
history lives under one fixed storage key.
"""

from typing import Any, Optional

import voluptuous as vol
from homeassistant import config_entries

from . import const


class PlantingLogConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Planting Log."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[dict[str, Any]] = None):
        """Confirm setup of the planting log."""

        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        if user_input is not None:
            return self.async_create_entry(title=const.PLANTING_LOG_TITLE, data={})

        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER, data_schema=vol.Schema({})
        )
