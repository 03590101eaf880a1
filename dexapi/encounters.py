"""Encounter lookup helpers for PokeAPI data."""

from __future__ import annotations

from typing import Any, List, Union

from . import api
from .enums import EncounterConditionValue, EncounterMethod, Version
from .errors import MalformedResource
from .models import Encounter, EncounterDetail, VersionDetail


def _encounters_from_json(data: Any) -> List[Encounter]:
    context = "encounter data"
    # The endpoint answers with a bare array, one item per location area.
    if not isinstance(data, list):
        raise MalformedResource(context, "expected an array of location areas")
    encounters: List[Encounter] = []
    with api._building(context):
        for entry in data:
            versions: List[VersionDetail] = []
            # Each game version lists its own methods, levels and chances.
            for version_detail in api._objects(entry, "version_details", context):
                details = [
                    EncounterDetail(
                        chance=api._require(detail, "chance", "integer", context),
                        min_level=api._require(detail, "min_level", "integer", context),
                        max_level=api._require(detail, "max_level", "integer", context),
                        method=EncounterMethod.from_api(api._named_field(detail, "method", context)),
                        condition_values=tuple(
                            EncounterConditionValue.from_api(api._named(value, context))
                            for value in api._objects(detail, "condition_values", context)
                        ),
                    )
                    for detail in api._objects(version_detail, "encounter_details", context)
                ]
                versions.append(
                    VersionDetail(
                        version=Version.from_api(api._named_field(version_detail, "version", context)),
                        max_chance=api._require(version_detail, "max_chance", "integer", context),
                        encounter_details=tuple(details),
                    )
                )
            encounters.append(
                Encounter(
                    location_area=api._named_field(entry, "location_area", context),
                    version_details=tuple(versions),
                )
            )
    return encounters


def get_encounters(pokemon_name: Union[str, int]) -> List[Encounter]:
    """Retrieve wild encounter locations for a Pokemon.

    Args:
        pokemon_name: Pokemon name or national dex number.

    Returns:
        One entry per location area, in API order. Pokemon that cannot be
        met in the wild yield an empty list.
    """
    # Encounters hang off the Pokemon resource, not the species.
    identifier = api._normalize_identifier("pokemon", pokemon_name)
    data = api.fetch(
        f"pokemon/{identifier}/encounters",
        context=f"encounter data for {identifier}",
    )
    return _encounters_from_json(data)


def get_encounters_by_id(pokemon_id: int) -> List[Encounter]:
    """Retrieve wild encounter locations for a national dex number."""
    return get_encounters(api._check_id("pokemon", pokemon_id))
