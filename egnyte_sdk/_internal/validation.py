"""Argument guards run by every public operation before any request is sent."""

import re
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from egnyte_sdk._internal.http import DOMAIN_PATTERN
from egnyte_sdk.exceptions import EgnyteInvalidArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_not_empty(value: str | None, name: str) -> str:
    """Reject a required string argument that is None or empty.

    Args:
        value: The argument value.
        name: Parameter name reported in the error.

    Returns:
        The value, unchanged.

    Raises:
        EgnyteInvalidArgumentError: If the value is None or "".
    """
    if value is None or value == "":
        raise EgnyteInvalidArgumentError(name)
    return value


def require_not_none(value: Any, name: str) -> Any:
    """Reject a required collection argument that is None.

    An empty collection is accepted.
    """
    if value is None:
        raise EgnyteInvalidArgumentError(name, f"Argument '{name}' must not be None")
    return value


def require_domain(value: str | None, name: str = "domain") -> str:
    """Reject a tenant domain that is not a single DNS label, e.g. "acme".

    Anything else (dots, slashes, ports, "?") could move the request, and the
    bearer token with it, off the provider host.
    """
    require_not_empty(value, name)
    if not re.fullmatch(DOMAIN_PATTERN, value):
        raise EgnyteInvalidArgumentError(
            name, f"Argument '{name}' must be a domain name such as 'acme', got {value!r}"
        )
    return value


def require_path_segment(value: Any, name: str) -> str:
    """Reject a missing id and percent-encode it as exactly one URL path segment.

    "/", "?" and "#" are encoded; "." and ".." are rejected since URL
    normalization would resolve them against the parent path.

    Returns:
        The encoded segment.
    """
    text = require_not_empty(str(value) if value is not None else None, name)
    if text in (".", ".."):
        raise EgnyteInvalidArgumentError(name, f"Argument '{name}' is not a valid id: {text!r}")
    return quote(text, safe="")


def build_request(model: type[ModelT], **fields: Any) -> ModelT:
    """Construct a request model, reporting invalid fields as invalid arguments.

    The first failing field is reported by its wire name (alias), e.g.
    "displayName" rather than "display_name".

    Raises:
        EgnyteInvalidArgumentError: If the model rejects the fields.
    """
    try:
        return model(**fields)
    except ValidationError as e:
        errors = e.errors()
        loc = errors[0]["loc"] if errors else ()
        parameter = _wire_name(model, loc[0]) if loc else model.__name__
        detail = errors[0]["msg"] if errors else str(e)
        raise EgnyteInvalidArgumentError(
            parameter, f"Argument '{parameter}' is invalid: {detail}"
        ) from None


def _wire_name(model: type[BaseModel], field: int | str) -> str:
    info = model.model_fields.get(str(field))
    if info is not None and info.alias:
        return info.alias
    return str(field)
