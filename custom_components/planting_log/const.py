# File: const.py
"""Constants for the Planting Log integration.

This file centralizes configuration keys, defaults, labels, domain names,
service names and storage identifiers for consistency across the integration.
"""

import logging

from homeassistant.const import Platform

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
PLANTING_LOG_TITLE = "Planting Log"

# Integration Domain
DOMAIN = "planting_log"

# Logger
LOGGER = logging.getLogger(__package__)

# Supported Platforms
PLATFORMS = [
    Platform.SENSOR,
]

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Storage and Versioning
STORAGE_MANAGER = "storage_manager"
STORAGE_KEY = "planting_log_records"
STORAGE_VERSION = 1

# ------------------------------------------------------------------------------------------------
# Crops
# ------------------------------------------------------------------------------------------------
CROP_SOY = "soy"
CROP_CORN = "corn"
CROP_WHEAT = "wheat"
CROP_COTTON = "cotton"

# Closed set, in picker order
CROP_OPTIONS = (CROP_SOY, CROP_CORN, CROP_WHEAT, CROP_COTTON)

DEFAULT_CROP = CROP_SOY

# ------------------------------------------------------------------------------------------------
# Soil Condition Labels
# ------------------------------------------------------------------------------------------------
SOIL_FERTILE = "Fertile"
SOIL_NOT_FERTILE = "Not Fertile"
SOIL_LABELS = (SOIL_FERTILE, SOIL_NOT_FERTILE)

# ------------------------------------------------------------------------------------------------
# Planting Record Keys (persisted)
# ------------------------------------------------------------------------------------------------
DATA_RECORD_ID = "id"
DATA_RECORD_CROP = "crop"
DATA_RECORD_PLANTING_DATE = "planting_date"
DATA_RECORD_SEED_QUANTITY_KG = "seed_quantity_kg"
DATA_RECORD_SOIL = "soil"

DATA_RECORD_KEYS = frozenset(
    {
        DATA_RECORD_ID,
        DATA_RECORD_CROP,
        DATA_RECORD_PLANTING_DATE,
        DATA_RECORD_SEED_QUANTITY_KG,
        DATA_RECORD_SOIL,
    }
)

# DD/MM/YYYY shape only, ASCII digits
PLANTING_DATE_PATTERN = r"[0-9]{2}/[0-9]{2}/[0-9]{4}"
PLANTING_DATE_FORMAT_HINT = "DD/MM/YYYY"

# Plain decimal or exponent notation, ASCII digits, optional surrounding spaces
SEED_QUANTITY_PATTERN = r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"

# ------------------------------------------------------------------------------------------------
# Submit Result Keys
# ------------------------------------------------------------------------------------------------
RESULT_OK = "ok"
RESULT_RECORDS = "records"
RESULT_ERROR = "error"
RESULT_ERROR_MESSAGE = "error_message"

# ------------------------------------------------------------------------------------------------
# Error Reasons
# ------------------------------------------------------------------------------------------------
ERROR_MISSING_FIELD = "missing_field"
ERROR_BAD_DATE_FORMAT = "bad_date_format"
ERROR_BAD_QUANTITY = "bad_quantity"
ERROR_UNKNOWN_CROP = "unknown_crop"
ERROR_WRITE_FAILED = "write_failed"
ERROR_CORRUPT_DATA = "corrupt_data"

# ------------------------------------------------------------------------------------------------
# User-Facing Messages
# ------------------------------------------------------------------------------------------------
MSG_MISSING_FIELD = "All required fields must be filled in."
MSG_BAD_DATE_FORMAT = f"Invalid date format. Use {PLANTING_DATE_FORMAT_HINT}."
MSG_BAD_QUANTITY = "Seed quantity must be a positive number."
MSG_UNKNOWN_CROP_FMT = "Unknown crop '{}'. Choose one of: {}."
MSG_WRITE_FAILED = "Could not save the planting record. Please try again."
MSG_CORRUPT_DATA = (
    "Stored planting history could not be read and was reset to an empty list."
)
MSG_RECORD_SAVED = "Planting record saved successfully!"
MSG_NO_ENTRY_FOUND = "No Planting Log entry found"

# ------------------------------------------------------------------------------------------------
# Persistent Notifications
# ------------------------------------------------------------------------------------------------
NOTIFICATION_TITLE_STORAGE_ERROR = "Planting Log storage problem"
NOTIFICATION_ID_CORRUPT_DATA = f"{DOMAIN}_corrupt_data"
NOTIFICATION_ID_WRITE_FAILED = f"{DOMAIN}_write_failed"
NOTIFICATION_TITLE_RECORD_SAVED = "Planting Log"
NOTIFICATION_ID_RECORD_SAVED = f"{DOMAIN}_record_saved"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_RECORD_PLANTING = "record_planting"
SERVICE_GET_RECORDS = "get_records"

# Service Fields
FIELD_CROP = "crop"
FIELD_PLANTING_DATE = "planting_date"
FIELD_SEED_QUANTITY = "seed_quantity"
FIELD_FERTILE_SOIL = "fertile_soil"

# ------------------------------------------------------------------------------------------------
# Sensors
# ------------------------------------------------------------------------------------------------
SENSOR_KEY_RECORDS = "planting_records"
SENSOR_ICON_RECORDS = "mdi:sprout"
UNIT_RECORDS = "records"

ATTR_RECORDS = "records"
ATTR_TOTAL_SEED_QUANTITY_KG = "total_seed_quantity_kg"
ATTR_LATEST_CROP = "latest_crop"
ATTR_LATEST_PLANTING_DATE = "latest_planting_date"

# Float precision for aggregated quantities
DATA_FLOAT_PRECISION = 2

# ------------------------------------------------------------------------------------------------
# Translation Keys
# ------------------------------------------------------------------------------------------------
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
TRANS_KEY_SENSOR_RECORDS = "planting_records"

# Config Flow Steps
CONFIG_FLOW_STEP_USER = "user"
