"""Pokemon lookup and mapping."""

from __future__ import annotations

from typing import Any, Dict, List, Union

from . import api
from .enums import MoveLearnMethod, PokemonType, SpriteType, StatType, Version, VersionGroup
from .errors import MalformedResource
from .models import (
    ByVersion,
    ItemHold,
    Pokemon,
    PokemonAbilitySlot,
    PokemonMoveEntry,
    Sprite,
    Stat,
    VersionGroupDetail,
)


def _types(data: Dict[str, Any], context: str) -> List[PokemonType]:
    # Slot 1 is the primary type; the array is not guaranteed to be sorted.
    entries = sorted(
        api._objects(data, "types", context),
        key=lambda entry: api._require(entry, "slot", "integer", context),
    )
    if not 1 <= len(entries) <= 2:
        raise MalformedResource(context, f"expected one or two types, got {len(entries)}")
    return [PokemonType.from_api(api._named_field(entry, "type", context)) for entry in entries]


def _stats(data: Dict[str, Any], context: str) -> List[Stat]:
    by_type: Dict[StatType, Stat] = {}
    for entry in api._objects(data, "stats", context):
        stat_type = StatType.from_api(api._named_field(entry, "stat", context))
        by_type.setdefault(
            stat_type,
            Stat(
                stat_type=stat_type,
                effort=api._require(entry, "effort", "integer", context),
                base_stat=api._require(entry, "base_stat", "integer", context),
            ),
        )
    missing = [stat_type.api_name for stat_type in StatType if stat_type not in by_type]
    if missing:
        raise MalformedResource(context, f"missing stats {', '.join(missing)}")
    # Keep enum order so every stat slot sits at a fixed index.
    return [by_type[stat_type] for stat_type in StatType]


def _sprites(data: Dict[str, Any], context: str) -> List[Sprite]:
    sprites = api._require(data, "sprites", "object", context)
    # Every slot is present; slots the game lacks carry no URL.
    return [
        Sprite(sprite_type=sprite_type, url=api._optional(sprites, sprite_type.value, "string", context))
        for sprite_type in SpriteType
    ]


def _held_items(data: Dict[str, Any], context: str) -> List[ItemHold]:
    items: List[ItemHold] = []
    for entry in api._objects(data, "held_items", context):
        # One rarity per version the item can be found in.
        rarities = ByVersion(
            tuple(
                (
                    Version.from_api(api._named_field(detail, "version", context)),
                    api._require(detail, "rarity", "integer", context),
                )
                for detail in api._objects(entry, "version_details", context)
            )
        )
        items.append(ItemHold(item=api._named_field(entry, "item", context), rarities=rarities))
    return items


def _moves(data: Dict[str, Any], context: str) -> List[PokemonMoveEntry]:
    moves: List[PokemonMoveEntry] = []
    for entry in api._objects(data, "moves", context):
        # A move can be learned differently in every version group.
        details = [
            VersionGroupDetail(
                version_group=VersionGroup.from_api(api._named_field(detail, "version_group", context)),
                learn_method=MoveLearnMethod.from_api(api._named_field(detail, "move_learn_method", context)),
                level_learned_at=api._require(detail, "level_learned_at", "integer", context),
            )
            for detail in api._objects(entry, "version_group_details", context)
        ]
        moves.append(
            PokemonMoveEntry(
                name=api._named_field(entry, "move", context),
                version_group_details=tuple(details),
            )
        )
    return moves


def _pokemon_from_json(data: Any) -> Pokemon:
    """Map a ``pokemon`` resource onto a Pokemon.

    Args:
        data: Decoded JSON body of ``pokemon/<name>``.

    Returns:
        The mapped Pokemon.

    Raises:
        MalformedResource: If a required field is missing or mistyped.
        UnknownEnumValue: If a type, stat, version or learn method is unknown.
    """
    context = "pokemon data"
    with api._building(context):
        # Resolve typing first so a bad type list fails before anything else.
        types = _types(data, context)
        return Pokemon(
            name=api._require(data, "name", "string", context),
            id=api._require(data, "id", "integer", context),
            order=api._require(data, "order", "integer", context),
            height=api._require(data, "height", "integer", context),
            weight=api._require(data, "weight", "integer", context),
            base_experience=api._optional(data, "base_experience", "integer", context),
            primary_type=types[0],
            secondary_type=types[1] if len(types) > 1 else None,
            held_items=tuple(_held_items(data, context)),
            game_indices=ByVersion(
                tuple(
                    (
                        Version.from_api(api._named_field(entry, "version", context)),
                        api._require(entry, "game_index", "integer", context),
                    )
                    for entry in api._objects(data, "game_indices", context)
                )
            ),
            moves=tuple(_moves(data, context)),
            abilities=tuple(
                PokemonAbilitySlot(
                    name=api._named_field(entry, "ability", context),
                    is_hidden=api._require(entry, "is_hidden", "boolean", context),
                    slot=api._require(entry, "slot", "integer", context),
                )
                for entry in api._objects(data, "abilities", context)
            ),
            species_name=api._named_field(data, "species", context),
            stats=tuple(_stats(data, context)),
            sprites=tuple(_sprites(data, context)),
        )


def get_pokemon(name: Union[str, int]) -> Pokemon:
    """Look up a Pokemon by name.

    Args:
        name: Pokemon name (e.g., "bulbasaur"); a dex number string also works.

    Returns:
        The Pokemon with typing, stats, sprites, moves and held items.

    Raises:
        NotFound: If no Pokemon has that name.
    """
    identifier = api._normalize_identifier("pokemon", name)
    data = api.fetch(f"pokemon/{identifier}", context=f"pokemon data for {identifier}")
    return _pokemon_from_json(data)


def get_pokemon_by_id(pokemon_id: int) -> Pokemon:
    """Look up a Pokemon by national dex number."""
    return get_pokemon(api._check_id("pokemon", pokemon_id))
