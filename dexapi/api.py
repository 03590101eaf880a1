"""Shared HTTP and JSON helpers for PokeAPI access."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import requests
from pydantic import ValidationError

from . import config
from .errors import MalformedResource, NotFound, TransportFailure
from .logging import get_logger

logger = get_logger(__name__)

JsonDocument = Union[Dict[str, Any], List[Any]]

# Python type(s) accepted for each JSON type name used by the mappers.
_JSON_TYPES: Dict[str, Tuple[type, ...]] = {
    "object": (dict,),
    "array": (list,),
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
}


def _resource_url(path: str) -> str:
    """Join a resource path onto the configured base URL.

    Args:
        path: Resource path such as ``pokemon/bulbasaur``.

    Returns:
        Absolute URL with the trailing slash PokeAPI expects.
    """
    return f"{config.settings.base_url.rstrip('/')}/{path.strip('/')}/"


def _split_path(path: str) -> Tuple[str, str]:
    """Return the resource kind and identifier a path refers to."""
    parts = [part for part in path.strip("/").split("/") if part]
    kind = parts[0] if parts else "resource"
    identifier = parts[1] if len(parts) > 1 else ""
    return kind, identifier


def fetch(path: str, context: Optional[str] = None) -> JsonDocument:
    """Fetch and decode one PokeAPI resource.

    Args:
        path: Resource path relative to the base URL (e.g., "move/body-slam").
        context: Description used for error messages.

    Returns:
        Parsed JSON response data.

    Raises:
        NotFound: If the API answers 404 for the resource.
        TransportFailure: If the request fails or the body is not JSON.
    """
    url = _resource_url(path)
    context = context or path
    logger.debug("fetching resource", url=url)
    try:
        response = requests.get(url, timeout=config.settings.request_timeout)
    except requests.RequestException as exc:
        logger.warning("request failed", url=url, error=str(exc))
        raise TransportFailure(f"Failed to fetch {context}: {exc}") from exc

    if response.status_code == 404:
        logger.warning("resource not found", url=url, status=404)
        raise NotFound(*_split_path(path))
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        logger.warning("unexpected status", url=url, status=response.status_code)
        raise TransportFailure(f"Failed to fetch {context}: {exc}") from exc

    try:
        return response.json()
    except ValueError as exc:
        logger.warning("response is not JSON", url=url)
        raise TransportFailure(f"Failed to decode {context}: {exc}") from exc


def _normalize_identifier(kind: str, name_or_id: Union[str, int]) -> str:
    """Turn a user-supplied name or ID into a path segment.

    Raises:
        NotFound: If the name is blank or would address a different resource.
    """
    # PokeAPI names are lower case; IDs pass through unchanged.
    identifier = str(name_or_id).strip().lower()
    # A blank segment hits the list endpoint; a slash reaches another path.
    if not identifier or "/" in identifier:
        raise NotFound(kind, name_or_id)
    return identifier


def _check_id(kind: str, resource_id: int) -> int:
    """Reject IDs that can never exist before touching the network.

    Raises:
        NotFound: If the ID is zero, negative, or not an integer.
    """
    if isinstance(resource_id, bool) or not isinstance(resource_id, int) or resource_id <= 0:
        raise NotFound(kind, resource_id)
    return resource_id


def _check_type(value: Any, expected: str, key: str, context: str) -> Any:
    # bool is a subclass of int but never a valid JSON integer here.
    if expected in ("integer", "number") and isinstance(value, bool):
        raise MalformedResource(context, f"'{key}' should be {expected}, got boolean")
    if not isinstance(value, _JSON_TYPES[expected]):
        raise MalformedResource(
            context, f"'{key}' should be {expected}, got {type(value).__name__}"
        )
    return value


def _require(data: Any, key: str, expected: str, context: str) -> Any:
    """Return a required field, checking its JSON type.

    Args:
        data: JSON object the field is read from.
        key: Field name.
        expected: JSON type name ("object", "array", "string", ...).
        context: Description used for error messages.

    Returns:
        The field value.

    Raises:
        MalformedResource: If the field is missing, null, or of the wrong type.
    """
    if not isinstance(data, dict):
        raise MalformedResource(context, f"expected an object holding '{key}'")
    if data.get(key) is None:
        raise MalformedResource(context, f"missing required field '{key}'")
    return _check_type(data[key], expected, key, context)


def _optional(data: Any, key: str, expected: str, context: str) -> Any:
    """Return a nullable field, or None when it is null or missing."""
    if not isinstance(data, dict):
        raise MalformedResource(context, f"expected an object holding '{key}'")
    value = data.get(key)
    if value is None:
        return None
    return _check_type(value, expected, key, context)


def _named(ref: Any, context: str) -> str:
    """Extract the name of a ``{name, url}`` resource reference."""
    return _require(ref, "name", "string", context)


def _named_field(data: Any, key: str, context: str) -> str:
    """Extract the name of the required reference stored under ``key``."""
    return _named(_require(data, key, "object", context), context)


def _resource_id(url: str, context: str) -> int:
    """Extract the numeric ID at the end of a resource URL.

    Args:
        url: Resource URL such as ``https://pokeapi.co/api/v2/machine/120/``.
        context: Description used for error messages.

    Returns:
        The terminal path segment as an integer.
    """
    segment = url.rstrip("/").rsplit("/", 1)[-1]
    if not segment.isdigit():
        raise MalformedResource(context, f"no resource ID at the end of '{url}'")
    return int(segment)


def _objects(data: Any, key: str, context: str) -> List[Dict[str, Any]]:
    """Return a required array of JSON objects."""
    items = _require(data, key, "array", context)
    for item in items:
        if not isinstance(item, dict):
            raise MalformedResource(context, f"'{key}' should only hold objects")
    return items


@contextmanager
def _building(context: str) -> Iterator[None]:
    """Report value-object validation failures as malformed resources."""
    try:
        yield
    except ValidationError as exc:
        raise MalformedResource(context, str(exc)) from exc
