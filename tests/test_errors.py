import asyncio
import json

from Common_module.errors import RecordValidationError, StorageFault
from main import parish_error_handler


def _render(exc):
    response = asyncio.run(parish_error_handler(None, exc))
    return response.status_code, json.loads(response.body)


def test_extra_fields_are_merged_into_body():
    status_code, body = _render(RecordValidationError("Missing required fields", extra={"fields": ["pastor"]}))

    assert status_code == 400
    assert body == {"status": "error", "message": "Missing required fields", "fields": ["pastor"]}


def test_extra_cannot_replace_status_or_message():
    exc = RecordValidationError("Bad year", extra={"status": "success", "message": "ok", "valid_years": ["2024"]})

    status_code, body = _render(exc)

    assert status_code == 400
    assert body["status"] == "error"
    assert body["message"] == "Bad year"
    assert body["valid_years"] == ["2024"]


def test_storage_fault_uses_generic_message():
    status_code, body = _render(StorageFault())

    assert status_code == 500
    assert body == {"status": "error", "message": "Internal server error"}
