"""On-demand detail loaders for versions, version groups, generations and Pokedexes.

The enumerations in :mod:`dexapi.enums` are static identifiers; each loader
here fetches the details behind one of them. Nothing is cached, so every
call issues a fresh request.
"""

from __future__ import annotations

from typing import Any

from . import api
from .enums import Generation, MoveLearnMethod, PokedexType, PokemonType, Version, VersionGroup
from .lang import localized_names
from .models import GenerationDetails, PokedexDetails, PokedexEntry, VersionDetails, VersionGroupDetails


def _version_from_json(data: Any) -> VersionDetails:
    context = "version data"
    with api._building(context):
        return VersionDetails(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            version_group=VersionGroup.from_api(api._named_field(data, "version_group", context)),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
        )


def _version_group_from_json(data: Any) -> VersionGroupDetails:
    context = "version group data"
    with api._building(context):
        return VersionGroupDetails(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            order=api._require(data, "order", "integer", context),
            generation=Generation.from_api(api._named_field(data, "generation", context)),
            versions=tuple(
                Version.from_api(api._named(ref, context)) for ref in api._objects(data, "versions", context)
            ),
            move_learn_methods=tuple(
                MoveLearnMethod.from_api(api._named(ref, context))
                for ref in api._objects(data, "move_learn_methods", context)
            ),
            pokedexes=tuple(
                PokedexType.from_api(api._named(ref, context)) for ref in api._objects(data, "pokedexes", context)
            ),
            regions=tuple(api._named(ref, context) for ref in api._objects(data, "regions", context)),
        )


def _generation_from_json(data: Any) -> GenerationDetails:
    context = "generation data"
    with api._building(context):
        return GenerationDetails(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            main_region=api._named_field(data, "main_region", context),
            types=tuple(
                PokemonType.from_api(api._named(ref, context)) for ref in api._objects(data, "types", context)
            ),
            version_groups=tuple(
                VersionGroup.from_api(api._named(ref, context))
                for ref in api._objects(data, "version_groups", context)
            ),
            ability_names=tuple(api._named(ref, context) for ref in api._objects(data, "abilities", context)),
            move_names=tuple(api._named(ref, context) for ref in api._objects(data, "moves", context)),
            # Introduced species are listed under "pokemon_species".
            species_names=tuple(
                api._named(ref, context) for ref in api._objects(data, "pokemon_species", context)
            ),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
        )


def _pokedex_from_json(data: Any) -> PokedexDetails:
    context = "pokedex data"
    with api._building(context):
        # The national dex belongs to no region.
        region = api._optional(data, "region", "object", context)
        return PokedexDetails(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            is_main_series=api._require(data, "is_main_series", "boolean", context),
            region=api._named(region, context) if region else None,
            version_groups=tuple(
                VersionGroup.from_api(api._named(ref, context))
                for ref in api._objects(data, "version_groups", context)
            ),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
            descriptions=localized_names(
                api._objects(data, "descriptions", context), key="description", context=context
            ),
            entries=tuple(
                PokedexEntry(
                    entry_number=api._require(entry, "entry_number", "integer", context),
                    species_name=api._named_field(entry, "pokemon_species", context),
                )
                for entry in api._objects(data, "pokemon_entries", context)
            ),
        )


def load_version(version: Version) -> VersionDetails:
    """Fetch the details of a game version."""
    return _version_from_json(api.fetch(f"version/{version.api_name}", context=f"version {version.api_name}"))


def load_version_group(group: VersionGroup) -> VersionGroupDetails:
    """Fetch the details of a version group.

    Args:
        group: Version group to load (e.g., VersionGroup.DIAMOND_PEARL).

    Returns:
        ID, ordering, generation and the versions, learn methods, Pokedexes
        and regions the group covers.
    """
    data = api.fetch(f"version-group/{group.api_name}", context=f"version group {group.api_name}")
    return _version_group_from_json(data)


def load_generation(generation: Generation) -> GenerationDetails:
    """Fetch the details of a generation.

    Args:
        generation: Generation to load.

    Returns:
        Main region, introduced types, version groups and the names of the
        abilities, moves and species introduced in the generation.
    """
    data = api.fetch(f"generation/{generation.api_name}", context=f"generation {generation.api_name}")
    return _generation_from_json(data)


def load_pokedex(pokedex: PokedexType) -> PokedexDetails:
    """Fetch a regional or national Pokedex with its entries."""
    return _pokedex_from_json(api.fetch(f"pokedex/{pokedex.api_name}", context=f"pokedex {pokedex.api_name}"))
