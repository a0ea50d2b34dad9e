from __future__ import annotations

import base64
import json
import os
from typing import Any, Dict, List, Tuple, Union

from .exceptions import SerializationError, ValidationError

FormValue = Union[str, List[str]]


def to_json(params: Dict[str, Any]) -> bytes:
    """Serialize request params into a UTF-8 JSON body, keeping key order."""

    try:
        return json.dumps(params, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError("Failed to encode request payload as JSON.") from exc


def from_json(response_text: str) -> Any:
    """Decode a response body; an empty body decodes to an empty object."""

    if not response_text or not response_text.strip():
        return {}
    try:
        return json.loads(response_text)
    except ValueError as exc:
        raise SerializationError("Failed to parse API JSON response.") from exc


def form_value(value: Any) -> FormValue:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def form_fields(params: Dict[str, Any]) -> Dict[str, FormValue]:
    """Render params as multipart form fields, dropping ``None`` values."""

    return {key: form_value(value) for key, value in params.items() if value is not None}


def read_file_data(file_path: str, max_size_mb: int) -> Tuple[str, str]:
    """Return ``(file_name, base64 data)`` for a local file."""

    if not os.path.isfile(file_path):
        raise ValidationError(f"File not found: {file_path}")
    size = os.path.getsize(file_path)
    if size > max_size_mb * 1024 * 1024:
        raise ValidationError(f"File {file_path} is larger than {max_size_mb} MB.")
    with open(file_path, "rb") as file:
        data = base64.b64encode(file.read()).decode("utf-8")
    return os.path.basename(file_path), data


__all__ = ["to_json", "from_json", "form_value", "form_fields", "read_file_data"]
