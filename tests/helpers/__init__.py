"""Test helpers for Planting Log integration tests.

This module re-exports all helpers for convenient imports:

    from tests.helpers import (
        # Storage
        storage_blob, stored_payload, write_storage_file,
        failing_write, yielding_write,

        # Validation
        assert_entity_exists, get_records_sensor_entity_id,
    )

See individual modules for full documentation:
- storage.py: Building and reading mocked Store blobs, write-layer fakes
- validation.py: Entity lookup and state assertions
"""

from tests.helpers.storage import (
    failing_write,
    storage_blob,
    stored_payload,
    write_storage_file,
    yielding_write,
)
from tests.helpers.validation import (
    assert_entity_exists,
    get_records_sensor_entity_id,
)

__all__ = [
    "assert_entity_exists",
    "failing_write",
    "get_records_sensor_entity_id",
    "storage_blob",
    "stored_payload",
    "write_storage_file",
    "yielding_write",
]
