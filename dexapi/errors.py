"""Error taxonomy shared by every fetch-and-map operation."""

from __future__ import annotations


class PokedexError(ValueError):
    """Base class for every failure surfaced by dexapi."""


class NotFound(PokedexError):
    """The requested name or ID has no matching remote resource."""

    def __init__(self, kind: str, identifier: object) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Could not find {kind} with name/ID '{identifier}'")


class TransportFailure(PokedexError):
    """The HTTP call failed or returned a body that is not JSON."""


class MalformedResource(PokedexError):
    """The body is JSON but does not have the shape the mapper expects."""

    def __init__(self, context: str, detail: str) -> None:
        self.context = context
        self.detail = detail
        super().__init__(f"Malformed {context}: {detail}")


class UnknownEnumValue(PokedexError):
    """A string did not match any member of a closed enumeration."""

    def __init__(self, enum_name: str, value: object) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"'{value}' is not a known {enum_name}")
