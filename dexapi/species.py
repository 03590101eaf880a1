"""Species lookup and mapping."""

from __future__ import annotations

from typing import Any, Union

from . import api
from .enums import EggGroup, Generation, PokedexType
from .lang import FlavorScope, flavors, localized_names
from .models import ByPokedex, Species
from .pokemon import get_pokemon


def _species_from_json(data: Any) -> Species:
    """Map a ``pokemon-species`` resource onto a Species.

    Args:
        data: Decoded JSON body of ``pokemon-species/<name>``.

    Returns:
        Breeding, capture and Pokedex metadata for the species.
    """
    context = "species data"
    with api._building(context):
        # Base forms have no predecessor; a few species have no chain.
        evolves_from = api._optional(data, "evolves_from_species", "object", context)
        chain = api._optional(data, "evolution_chain", "object", context)
        return Species(
            id=api._require(data, "id", "integer", context),
            name=api._require(data, "name", "string", context),
            order=api._require(data, "order", "integer", context),
            base_happiness=api._optional(data, "base_happiness", "integer", context),
            capture_rate=api._require(data, "capture_rate", "integer", context),
            hatch_counter=api._optional(data, "hatch_counter", "integer", context),
            gender_rate=api._require(data, "gender_rate", "integer", context),
            is_baby=api._require(data, "is_baby", "boolean", context),
            is_legendary=api._require(data, "is_legendary", "boolean", context),
            is_mythical=api._require(data, "is_mythical", "boolean", context),
            forms_switchable=api._require(data, "forms_switchable", "boolean", context),
            has_gender_differences=api._require(data, "has_gender_differences", "boolean", context),
            egg_groups=tuple(
                EggGroup.from_api(api._named(group, context))
                for group in api._objects(data, "egg_groups", context)
            ),
            pokedex_numbers=ByPokedex(
                tuple(
                    (
                        PokedexType.from_api(api._named_field(entry, "pokedex", context)),
                        api._require(entry, "entry_number", "integer", context),
                    )
                    for entry in api._objects(data, "pokedex_numbers", context)
                )
            ),
            generation=Generation.from_api(api._named_field(data, "generation", context)),
            evolves_from_species=api._named(evolves_from, context) if evolves_from else None,
            # Only the chain ID is kept; the chain itself is a separate resource.
            evolution_chain_id=(
                api._resource_id(api._require(chain, "url", "string", context), context) if chain else None
            ),
            localized_names=localized_names(api._objects(data, "names", context), context=context),
            genera=localized_names(api._objects(data, "genera", context), key="genus", context=context),
            flavors=flavors(
                api._objects(data, "flavor_text_entries", context),
                scope=FlavorScope.VERSION,
                context=context,
            ),
        )


def get_species(name: Union[str, int]) -> Species:
    """Look up a species by name.

    Args:
        name: Species name (e.g., "pikachu"). Forms such as "pikachu-rock-star"
            are Pokemon, not species; use get_species_of for those.

    Returns:
        The mapped Species.

    Raises:
        NotFound: If no species has that name.
    """
    identifier = api._normalize_identifier("pokemon-species", name)
    data = api.fetch(f"pokemon-species/{identifier}", context=f"species data for {identifier}")
    return _species_from_json(data)


def get_species_by_id(species_id: int) -> Species:
    """Look up a species by national dex number."""
    return get_species(api._check_id("pokemon-species", species_id))


def get_species_of(pokemon_name: Union[str, int]) -> Species:
    """Resolve the species a Pokemon belongs to.

    Args:
        pokemon_name: Pokemon name or national dex number.

    Returns:
        The species referenced by the Pokemon.
    """
    # The Pokemon only stores the species name; fetch it on demand.
    pk = get_pokemon(pokemon_name)
    return get_species(pk.species_name)
