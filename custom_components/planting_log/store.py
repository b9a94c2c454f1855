# File: store.py
"""Handles persistent data storage for the Planting Log integration.

Uses Home Assistant's Storage helper to save and load the planting history,
ensuring records are preserved across restarts. The whole history is one blob:
a JSON array of records, newest first, rewritten in full on every append.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store
from homeassistant.util import json as json_util
from homeassistant.util.file import WriteError
from homeassistant.util.json import SerializationError

from . import const
from .engines.validation_engine import ValidationEngine

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .engines.validation_engine import ValidatedPlanting
    from .type_defs import PlantingRecord


class PlantingStorageError(Exception):
    """Base class for planting history storage failures."""

    reason: str = ""


class CorruptDataError(PlantingStorageError):
    """Raised when the stored blob exists but cannot be read as a record list."""

    reason = const.ERROR_CORRUPT_DATA


class WriteFailedError(PlantingStorageError):
    """Raised when the record list could not be written to storage."""

    reason = const.ERROR_WRITE_FAILED


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _deserialize_record(raw: Any) -> PlantingRecord:
    """Convert one stored item into a PlantingRecord.

    Raises:
        CorruptDataError: If the item does not have exactly the record fields
            with the expected types.
    """
    if not isinstance(raw, dict):
        raise CorruptDataError(f"Record is not an object: {raw!r}")
    if set(raw) != const.DATA_RECORD_KEYS:
        raise CorruptDataError(f"Record has unexpected fields: {sorted(raw)}")

    record_id = raw[const.DATA_RECORD_ID]
    quantity = raw[const.DATA_RECORD_SEED_QUANTITY_KG]
    if not _is_number(record_id) or int(record_id) != record_id:
        raise CorruptDataError(f"Record id is not an integer: {record_id!r}")
    if not _is_number(quantity):
        raise CorruptDataError(f"Seed quantity is not a number: {quantity!r}")
    for key in (const.DATA_RECORD_CROP, const.DATA_RECORD_PLANTING_DATE):
        if not isinstance(raw[key], str):
            raise CorruptDataError(f"Record field '{key}' is not text")
    if raw[const.DATA_RECORD_SOIL] not in const.SOIL_LABELS:
        raise CorruptDataError(
            f"Unknown soil label: {raw[const.DATA_RECORD_SOIL]!r}"
        )

    return {
        const.DATA_RECORD_ID: int(record_id),
        const.DATA_RECORD_CROP: raw[const.DATA_RECORD_CROP],
        const.DATA_RECORD_PLANTING_DATE: raw[const.DATA_RECORD_PLANTING_DATE],
        const.DATA_RECORD_SEED_QUANTITY_KG: float(quantity),
        const.DATA_RECORD_SOIL: raw[const.DATA_RECORD_SOIL],
    }


def deserialize_records(raw: Any) -> list[PlantingRecord]:
    """Convert the stored blob payload into a record list.

    Raises:
        CorruptDataError: If the payload is not a list of valid records.
    """
    if not isinstance(raw, list):
        raise CorruptDataError(
            f"Stored history is a {type(raw).__name__}, expected a list"
        )
    return [_deserialize_record(item) for item in raw]


class PlantingHistoryStore(Store[list["PlantingRecord"]]):
    """Store whose async_save raises when the blob did not reach disk.

    Home Assistant's Store logs WriteError and SerializationError from the
    executor write and returns normally. The error is kept here and raised
    again once async_save returns.
    """

    _write_error: HomeAssistantError | None = None

    async def _async_write_data(self, path: str, data: dict) -> None:
        try:
            await super()._async_write_data(path, data)
        except (WriteError, SerializationError) as err:
            self._write_error = err
            raise

    async def async_save(self, data: list[PlantingRecord]) -> None:
        """Save the history, raising if the write failed."""
        self._write_error = None
        await super().async_save(data)
        if self._write_error is not None:
            err, self._write_error = self._write_error, None
            raise err


class PlantingRecordStore:
    """Owns the authoritative planting history and its persisted blob.

    Thin wrapper around Home Assistant's Store API. The in-memory list only
    changes after a successful load or a successful save, and every list
    handed out is a copy.

    Concurrent appends are not serialized here; the coordinator holds the
    single-writer lock.
    """

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.STORAGE_KEY
    ) -> None:
        """Initialize the store.

        Args:
            hass: Home Assistant core object.
            storage_key: Key to identify storage location (default: const.STORAGE_KEY).

        """
        self.hass = hass
        self._storage_key = storage_key
        self._store = PlantingHistoryStore(hass, const.STORAGE_VERSION, storage_key)
        self._records: list[PlantingRecord] = []  # Newest first.

    @property
    def records(self) -> list[PlantingRecord]:
        """Return a snapshot of the in-memory history."""
        return list(self._records)

    def get_storage_path(self) -> str:
        """Get the storage file path.

        Returns:
            str: The absolute path to the storage file.
        """
        return self._store.path

    async def async_load(self) -> list[PlantingRecord]:
        """Replace the in-memory history with the persisted blob.

        Returns:
            Snapshot of the loaded history; empty when nothing was stored yet.

        Raises:
            CorruptDataError: The blob exists but is not a readable record list.
                The in-memory history is reset to empty first.
        """
        const.LOGGER.debug(
            "DEBUG: PlantingRecordStore: Loading data from storage key '%s'",
            self._storage_key,
        )
        # Store renames undecodable files to .corrupt.<time> and reports no
        # data, so readability is checked before handing over to it.
        try:
            await self.hass.async_add_executor_job(
                json_util.load_json, self._store.path
            )
        except HomeAssistantError as err:
            unreadable: HomeAssistantError | None = err
        else:
            unreadable = None

        try:
            existing_data = await self._store.async_load()
        except (HomeAssistantError, ValueError) as err:
            self._records = []
            raise CorruptDataError(f"Stored history could not be decoded: {err}") from err

        if unreadable is not None:
            self._records = []
            raise CorruptDataError(
                f"Stored history could not be decoded: {unreadable}"
            ) from unreadable

        if existing_data is None:
            const.LOGGER.info("INFO: No existing planting history found. Starting empty")
            self._records = []
            return self.records

        try:
            records = deserialize_records(existing_data)
        except CorruptDataError:
            self._records = []
            raise

        self._records = records
        const.LOGGER.debug(
            "DEBUG: Loaded existing planting history: %s records", len(records)
        )
        return self.records

    async def async_append(
        self, fields: ValidatedPlanting, timestamp: int
    ) -> list[PlantingRecord]:
        """Prepend a new record and persist the whole history.

        Not idempotent: every call creates a distinct record.

        Args:
            fields: Validated form fields
            timestamp: Creation time in milliseconds, becomes the record id

        Returns:
            Snapshot of the updated history, newest first

        Raises:
            WriteFailedError: The blob could not be written. The in-memory
                history is left as it was before the call.
        """
        record = ValidationEngine.build_record(fields, timestamp)
        updated = [record, *self._records]

        try:
            await self._store.async_save(updated)
        except (WriteError, OSError) as err:
            const.LOGGER.error(
                "ERROR: Failed to save planting history due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                self._store.path,
            )
            raise WriteFailedError(str(err)) from err
        except (SerializationError, TypeError, ValueError) as err:
            const.LOGGER.error(
                "ERROR: Failed to save planting history due to invalid data: %s. "
                "Data contains values that cannot be converted to JSON",
                err,
            )
            raise WriteFailedError(str(err)) from err
        except HomeAssistantError as err:
            const.LOGGER.error(
                "ERROR: Failed to save planting history: %s", err
            )
            raise WriteFailedError(str(err)) from err

        self._records = updated
        const.LOGGER.debug(
            "DEBUG: Saved planting record %s (%s records total)",
            record[const.DATA_RECORD_ID],
            len(updated),
        )
        return self.records

    async def async_delete_storage(self) -> None:
        """Delete the storage file completely from disk.

        This clears the in-memory history and removes the blob using
        Home Assistant's Store API for proper file handling.
        """
        const.LOGGER.warning("WARNING: Clearing all Planting Log history")
        self._records = []

        try:
            await self._store.async_remove()
            const.LOGGER.info(
                "INFO: Storage file removed successfully: %s",
                self._store.path,
            )
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to remove storage file %s: %s. Check file permissions",
                self._store.path,
                err,
            )
