"""Translation of raw responses into models, bytes, or typed errors."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from egnyte_sdk._internal.http import RawResponse
from egnyte_sdk.exceptions import EgnyteAPIError, EgnyteMalformedResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Keys the API uses for a human-readable error, in order of preference
MESSAGE_KEYS = ("errorMessage", "message", "msg", "detail", "error_description", "error")
MESSAGE_LIST_KEYS = ("errors", "formErrors", "inputErrors")


def map_response(response: RawResponse, model: type[ModelT] | TypeAdapter[Any]) -> Any:
    """Decode a success response into the expected shape.

    Args:
        response: Raw response from the request executor.
        model: A pydantic model class, or a module-level TypeAdapter for
            shapes that are not a single model (e.g. a union of models).

    Returns:
        The validated model instance.

    Raises:
        EgnyteAPIError: If the status is not 2xx.
        EgnyteMalformedResponseError: If the body is not JSON or does not
            match the model.
    """
    _raise_for_status(response)
    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate_json(response.content)
        return model.validate_json(response.content)
    except ValidationError as e:
        raise EgnyteMalformedResponseError(
            f"Unexpected response body for {_model_name(model)}: {e.error_count()} error(s)",
            status_code=response.status_code,
            body=response.text,
        ) from e


def map_empty_response(response: RawResponse) -> None:
    """Accept any success response, ignoring its body."""
    _raise_for_status(response)


def map_content_response(response: RawResponse) -> bytes:
    """Return the body of a success response as raw bytes."""
    _raise_for_status(response)
    return response.content


def _raise_for_status(response: RawResponse) -> None:
    if response.is_success:
        return

    text = response.text
    payload: Any = None
    try:
        payload = json.loads(text) if text.strip() else None
    except ValueError:
        payload = None

    message = _extract_message(payload) if payload is not None else None
    if message is None:
        message = text or f"HTTP {response.status_code}"

    raise EgnyteAPIError(
        message,
        status_code=response.status_code,
        payload=payload,
        headers=response.headers,
    )


def _extract_message(payload: Any) -> str | None:
    if isinstance(payload, str):
        return payload
    if not isinstance(payload, dict):
        return None
    for key in MESSAGE_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    for key in MESSAGE_LIST_KEYS:
        value = payload.get(key)
        if isinstance(value, list) and value:
            first = value[0]
            if isinstance(first, dict):
                return _extract_message(first) or json.dumps(first)
            return str(first)
    return None


def _model_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))
