# File: coordinator.py
"""Coordinator for the Planting Log integration.

Sits between the record store and everything that presents the history
(service actions, the history sensor, diagnostics). It runs the one-shot
startup load, turns form submissions into validated, persisted records, and
pushes each new history snapshot to its listeners.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from homeassistant.components import persistent_notification
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator
from homeassistant.util import dt as dt_util

from . import const
from .engines.validation_engine import PlantingValidationError, ValidationEngine
from .store import CorruptDataError, WriteFailedError

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .store import PlantingRecordStore
    from .type_defs import PlantingRecord, SubmitResult


class PlantingLogCoordinator(DataUpdateCoordinator[list["PlantingRecord"]]):
    """Coordinator for Planting Log.

    Holds only snapshots of the history; PlantingRecordStore owns the
    authoritative list. No polling: data changes only on load and submit.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        storage_manager: PlantingRecordStore,
    ) -> None:
        """Initialize the PlantingLogCoordinator."""
        super().__init__(
            hass,
            const.LOGGER,
            config_entry=config_entry,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=None,
        )
        self.storage_manager = storage_manager
        # Single writer: one append in flight at a time
        self._submit_lock = asyncio.Lock()

    @property
    def records(self) -> list[PlantingRecord]:
        """Return the current history snapshot, newest first."""
        return list(self.data or [])

    async def _async_update_data(self) -> list[PlantingRecord]:
        """Load the history (first refresh or a manual refresh)."""
        return await self.async_on_app_start()

    # -------------------------------------------------------------------------------------
    # Boundary Operations
    # -------------------------------------------------------------------------------------

    async def async_on_app_start(self) -> list[PlantingRecord]:
        """Load the persisted history once at startup.

        A corrupt blob never fails setup: it is logged, reported through a
        persistent notification and treated as an empty history.
        """
        try:
            records = await self.storage_manager.async_load()
        except CorruptDataError as err:
            const.LOGGER.error(
                "ERROR: Planting history in %s is corrupt and was ignored: %s",
                self.storage_manager.get_storage_path(),
                err,
            )
            self._notify(
                const.MSG_CORRUPT_DATA, const.NOTIFICATION_ID_CORRUPT_DATA
            )
            return []

        const.LOGGER.debug("DEBUG: Startup load returned %s records", len(records))
        return records

    async def async_submit(
        self,
        crop: str,
        planting_date: str,
        seed_quantity: str | float,
        fertile_soil: bool = False,
    ) -> SubmitResult:
        """Validate a form submission and append it to the history.

        Returns:
            {"ok": True, "records": [...]} on success, otherwise
            {"ok": False, "error": reason, "error_message": message}. On any
            failure the history is unchanged and the caller keeps its form
            values for correction.
        """
        try:
            fields = ValidationEngine.validate(
                crop, planting_date, seed_quantity, fertile_soil
            )
        except PlantingValidationError as err:
            const.LOGGER.debug(
                "DEBUG: Planting submission rejected (%s): %s", err.reason, err.message
            )
            return {
                const.RESULT_OK: False,
                const.RESULT_ERROR: err.reason,
                const.RESULT_ERROR_MESSAGE: err.message,
            }

        async with self._submit_lock:
            timestamp = self._next_record_id()
            try:
                records = await self.storage_manager.async_append(fields, timestamp)
            except WriteFailedError as err:
                const.LOGGER.error(
                    "ERROR: Planting record was not saved: %s", err
                )
                self._notify(
                    const.MSG_WRITE_FAILED, const.NOTIFICATION_ID_WRITE_FAILED
                )
                return {
                    const.RESULT_OK: False,
                    const.RESULT_ERROR: err.reason,
                    const.RESULT_ERROR_MESSAGE: const.MSG_WRITE_FAILED,
                }

        const.LOGGER.info(
            "INFO: Recorded %s planting on %s (%s kg)",
            fields.crop,
            fields.planting_date,
            fields.seed_quantity_kg,
        )
        persistent_notification.async_dismiss(
            self.hass, const.NOTIFICATION_ID_WRITE_FAILED
        )
        self._notify(
            const.MSG_RECORD_SAVED,
            const.NOTIFICATION_ID_RECORD_SAVED,
            const.NOTIFICATION_TITLE_RECORD_SAVED,
        )
        self.async_set_updated_data(records)
        return {const.RESULT_OK: True, const.RESULT_RECORDS: list(records)}

    # -------------------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------------------

    def _next_record_id(self) -> int:
        """Return a millisecond timestamp greater than every existing record id."""
        now_ms = int(dt_util.utcnow().timestamp() * 1000)
        newest_id = max(
            (record[const.DATA_RECORD_ID] for record in self.storage_manager.records),
            default=0,
        )
        return max(now_ms, newest_id + 1)

    def _notify(
        self,
        message: str,
        notification_id: str,
        title: str = const.NOTIFICATION_TITLE_STORAGE_ERROR,
    ) -> None:
        """Raise a dismissible notification, replacing any with the same id."""
        persistent_notification.async_create(
            self.hass, message, title=title, notification_id=notification_id
        )

    def as_diagnostics(self) -> dict[str, Any]:
        """Return the raw history plus where it is stored."""
        return {
            "storage_path": self.storage_manager.get_storage_path(),
            const.ATTR_RECORDS: self.storage_manager.records,
        }
