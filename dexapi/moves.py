"""Move lookup and mapping."""

from __future__ import annotations

from typing import Any, Dict, Union

from . import api
from .enums import Generation, MoveAilment, MoveCategory, MoveDamageClass, MoveTarget, PokemonType, VersionGroup
from .lang import FlavorScope, flavors, localized_names
from .models import ByVersionGroup, Move, StatChange


def _machines(data: Dict[str, Any], context: str) -> ByVersionGroup:
    pairs = []
    for entry in api._objects(data, "machines", context):
        group = VersionGroup.from_api(api._named_field(entry, "version_group", context))
        # Machine numbers are only exposed through the machine resource URL.
        machine = api._require(entry, "machine", "object", context)
        pairs.append((group, api._resource_id(api._require(machine, "url", "string", context), context)))
    return ByVersionGroup(tuple(pairs))


def _move_from_json(data: Any) -> Move:
    """Map a ``move`` resource onto a Move.

    Args:
        data: Decoded JSON body of ``move/<name>``.

    Returns:
        The mapped Move.
    """
    context = "move data"
    with api._building(context):
        # meta is null for a handful of moves (e.g. Z-moves).
        meta = api._optional(data, "meta", "object", context) or {}
        ailment = api._optional(meta, "ailment", "object", context)
        category = api._optional(meta, "category", "object", context)
        # Long and short effects share one array of entries.
        effect_entries = api._objects(data, "effect_entries", context)
        return Move(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            accuracy=api._optional(data, "accuracy", "integer", context),
            effect_chance=api._optional(data, "effect_chance", "integer", context),
            pp=api._optional(data, "pp", "integer", context),
            priority=api._require(data, "priority", "integer", context),
            power=api._optional(data, "power", "integer", context),
            move_type=PokemonType.from_api(api._named_field(data, "type", context)),
            damage_class=MoveDamageClass.from_api(api._named_field(data, "damage_class", context)),
            target=MoveTarget.from_api(api._named_field(data, "target", context)),
            ailment=MoveAilment.from_api(api._named(ailment, context)) if ailment else None,
            ailment_chance=api._optional(meta, "ailment_chance", "integer", context),
            category=MoveCategory.from_api(api._named(category, context)) if category else None,
            machines=_machines(data, context),
            stat_changes=tuple(
                StatChange(
                    stat=api._named_field(entry, "stat", context),
                    change=api._require(entry, "change", "integer", context),
                )
                for entry in api._objects(data, "stat_changes", context)
            ),
            generation=Generation.from_api(api._named_field(data, "generation", context)),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
            # Move flavor text is tagged per version group, not per version.
            flavors=flavors(
                api._objects(data, "flavor_text_entries", context),
                scope=FlavorScope.VERSION_GROUP,
                context=context,
            ),
            effects=localized_names(effect_entries, key="effect", context=context),
            short_effects=localized_names(effect_entries, key="short_effect", context=context),
        )


def get_move(name: Union[str, int]) -> Move:
    """Look up a move by name.

    Args:
        name: Move name (e.g., "body-slam").

    Returns:
        Move metadata including typing, machines, flavor text and localized names.

    Raises:
        NotFound: If no move has that name.
    """
    identifier = api._normalize_identifier("move", name)
    data = api.fetch(f"move/{identifier}", context=f"move data for {identifier}")
    return _move_from_json(data)


def get_move_by_id(move_id: int) -> Move:
    """Look up a move by its numeric ID."""
    return get_move(api._check_id("move", move_id))
