"""Expose FastMCP tools for PokeAPI lookups."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .abilities import get_ability as _get_ability
from .encounters import get_encounters as _get_encounters
from .enums import Generation, VersionGroup
from .logging import setup_logging
from .models import Ability, Encounter, GenerationDetails, Move, Pokemon, Species, VersionGroupDetails
from .moves import get_move as _get_move
from .pokemon import get_pokemon as _get_pokemon
from .species import get_species as _get_species
from .versions import load_generation as _load_generation
from .versions import load_version_group as _load_version_group

# Each decorated function becomes a structured tool discoverable by MCP hosts.
mcp = FastMCP("dexapi")


@mcp.tool()
def get_pokemon(name_or_dex: str) -> Pokemon:
    """Fetch a Pokemon with typing, stats, sprites, moves and held items.

    Args:
        name_or_dex: Pokemon name or national dex number.
    """
    # Full battle profile in a single call so clients avoid chaining tools.
    return _get_pokemon(name_or_dex)


@mcp.tool()
def get_move(name: str) -> Move:
    """Fetch a move with its power, accuracy, machines and flavor text.

    Args:
        name: Move name (e.g., "body-slam") or ID.
    """
    # Machine numbers and flavor text come straight from the move resource.
    return _get_move(name)


@mcp.tool()
def get_ability(name: str) -> Ability:
    """Fetch an ability with its localized names and effect text.

    Args:
        name: Ability name (e.g., "levitate") or ID.
    """
    # Effect text is returned in every language PokeAPI provides.
    return _get_ability(name)


@mcp.tool()
def get_species(name_or_dex: str) -> Species:
    """Fetch species data: egg groups, capture rate, Pokedex numbers, flavor text.

    Args:
        name_or_dex: Species name or national dex number.
    """
    # Breeders get egg groups and hatch data without a second lookup.
    return _get_species(name_or_dex)


@mcp.tool()
def find_encounters(name_or_dex: str) -> list[Encounter]:
    """Find wild encounter locations for a Pokemon.

    Args:
        name_or_dex: Pokemon name or national dex number.

    Returns:
        Encounter locations grouped by version and method.
    """
    # Useful for players planning hunts or resource runs in a specific game version.
    return _get_encounters(name_or_dex)


@mcp.tool()
def load_version_group(name: str) -> VersionGroupDetails:
    """Fetch the details of a version group.

    Args:
        name: PokeAPI version group identifier (e.g., "diamond-pearl").
    """
    # Unknown names fail here, before any request is made.
    return _load_version_group(VersionGroup.from_api(name))


@mcp.tool()
def load_generation(name: str) -> GenerationDetails:
    """Fetch the details of a generation.

    Args:
        name: PokeAPI generation identifier (e.g., "generation-vi").
    """
    # Unknown names fail here, before any request is made.
    return _load_generation(Generation.from_api(name))


if __name__ == "__main__":
    setup_logging()
    mcp.run()
