"""Builders for localized name and flavor text collections."""

from __future__ import annotations

from enum import Enum
from typing import Any, List

from . import api
from .enums import Language, Version, VersionGroup
from .models import Flavor, Flavors, LocalizedName, LocalizedNames


class FlavorScope(Enum):
    """Which game tag each flavor entry carries."""

    VERSION = "version"
    VERSION_GROUP = "version_group"


def localized_names(entries: List[Any], key: str = "name", context: str = "names") -> LocalizedNames:
    """Build a localized collection from ``{language, <key>}`` objects.

    Args:
        entries: JSON array from PokeAPI (``names``, ``genera``, ...).
        key: Field holding the localized text.
        context: Description used for error messages.

    Returns:
        Entries in source order; duplicates per language are kept.
    """
    # Keep every entry in API order; lookups pick the first match.
    return LocalizedNames(
        tuple(
            LocalizedName(
                language=Language.from_api(api._named_field(entry, "language", context)),
                name=api._require(entry, key, "string", context),
            )
            for entry in entries
        )
    )


def flavors(
    entries: List[Any],
    key: str = "flavor_text",
    scope: FlavorScope = FlavorScope.VERSION,
    context: str = "flavor text",
) -> Flavors:
    """Build a flavor collection tagged by version or by version group.

    Args:
        entries: JSON array of flavor objects.
        key: Field holding the text.
        scope: Whether entries carry a ``version`` or a ``version_group``.
        context: Description used for error messages.

    Returns:
        Flavor entries in source order.
    """
    result: List[Flavor] = []
    for entry in entries:
        # Language and text are common to both scopes; only the game tag differs.
        language = Language.from_api(api._named_field(entry, "language", context))
        text = api._require(entry, key, "string", context)
        if scope is FlavorScope.VERSION:
            version = Version.from_api(api._named_field(entry, "version", context))
            result.append(Flavor(language=language, text=text, version=version))
        else:
            group = VersionGroup.from_api(api._named_field(entry, "version_group", context))
            result.append(Flavor(language=language, text=text, version_group=group))
    return Flavors(tuple(result))
