"""Ability lookup and mapping."""

from __future__ import annotations

from typing import Any, Union

from . import api
from .enums import Generation
from .lang import FlavorScope, flavors, localized_names
from .models import Ability


def _ability_from_json(data: Any) -> Ability:
    context = "ability data"
    with api._building(context):
        # Long and short effects share one array of entries.
        effect_entries = api._objects(data, "effect_entries", context)
        return Ability(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            is_main_series=api._require(data, "is_main_series", "boolean", context),
            generation=Generation.from_api(api._named_field(data, "generation", context)),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
            flavors=flavors(
                api._objects(data, "flavor_text_entries", context),
                scope=FlavorScope.VERSION_GROUP,
                context=context,
            ),
            effects=localized_names(effect_entries, key="effect", context=context),
            short_effects=localized_names(effect_entries, key="short_effect", context=context),
        )


def get_ability(name: Union[str, int]) -> Ability:
    """Return ability details with localized names and effect text.

    Args:
        name: Ability name (e.g., "levitate").

    Returns:
        The mapped Ability.

    Raises:
        NotFound: If no ability has that name.
    """
    # Blank names never reach the list endpoint.
    identifier = api._normalize_identifier("ability", name)
    data = api.fetch(f"ability/{identifier}", context=f"ability data for {identifier}")
    return _ability_from_json(data)


def get_ability_by_id(ability_id: int) -> Ability:
    """Return ability details for a numeric ability ID."""
    return get_ability(api._check_id("ability", ability_id))
