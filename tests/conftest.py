import copy
from typing import Any, Dict, List, Optional

import pytest

import dexapi.api as api
from dexapi.errors import NotFound

SPRITE_ROOT = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"


def ref(name: str, kind: str = "resource", resource_id: int = 1) -> Dict[str, str]:
    return {"name": name, "url": f"https://pokeapi.co/api/v2/{kind}/{resource_id}/"}


def name_entry(language: str, name: str) -> Dict[str, Any]:
    return {"language": ref(language, "language"), "name": name}


def stat_entries(hp: int, attack: int, defense: int, sp_atk: int, sp_def: int, speed: int) -> List[Dict[str, Any]]:
    values = {
        "hp": hp,
        "attack": attack,
        "defense": defense,
        "special-attack": sp_atk,
        "special-defense": sp_def,
        "speed": speed,
    }
    return [
        {"base_stat": value, "effort": 1 if name == "special-attack" else 0, "stat": ref(name, "stat")}
        for name, value in values.items()
    ]


def pokemon_payload(
    name: str,
    dex: int,
    types: List[str],
    stats: List[Dict[str, Any]],
    height: int,
    weight: int,
    base_experience: Optional[int],
    moves: Optional[List[Dict[str, Any]]] = None,
    species: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": dex,
        "name": name,
        "order": dex,
        "height": height,
        "weight": weight,
        "base_experience": base_experience,
        "is_default": True,
        "types": [{"slot": slot, "type": ref(type_name, "type")} for slot, type_name in enumerate(types, start=1)],
        "abilities": [],
        "held_items": [],
        "game_indices": [],
        "moves": moves or [],
        "species": ref(species or name, "pokemon-species", dex),
        "stats": stats,
        "sprites": {
            "back_default": f"{SPRITE_ROOT}/back/{dex}.png",
            "back_female": None,
            "back_shiny": f"{SPRITE_ROOT}/back/shiny/{dex}.png",
            "back_shiny_female": None,
            "front_default": f"{SPRITE_ROOT}/{dex}.png",
            "front_female": None,
            "front_shiny": f"{SPRITE_ROOT}/shiny/{dex}.png",
            "front_shiny_female": None,
            "other": {"official-artwork": {"front_default": None}},
        },
    }


def level_up(group: str, level: int) -> Dict[str, Any]:
    return {
        "level_learned_at": level,
        "move_learn_method": ref("level-up", "move-learn-method"),
        "version_group": ref(group, "version-group"),
    }


BULBASAUR = pokemon_payload(
    name="bulbasaur",
    dex=1,
    types=["grass", "poison"],
    stats=stat_entries(hp=45, attack=49, defense=49, sp_atk=65, sp_def=65, speed=45),
    height=7,
    weight=69,
    base_experience=64,
    moves=[
        {
            "move": ref("razor-wind", "move", 13),
            "version_group_details": [
                {
                    "level_learned_at": 0,
                    "move_learn_method": ref("egg", "move-learn-method"),
                    "version_group": ref("gold-silver", "version-group"),
                }
            ],
        },
        {
            "move": ref("leech-seed", "move", 73),
            "version_group_details": [
                level_up("omega-ruby-alpha-sapphire", 7),
                level_up("red-blue", 7),
            ],
        },
        {
            "move": ref("swords-dance", "move", 14),
            "version_group_details": [
                {
                    "level_learned_at": 0,
                    "move_learn_method": ref("machine", "move-learn-method"),
                    "version_group": ref("red-blue", "version-group"),
                }
            ],
        },
    ],
)
BULBASAUR["abilities"] = [
    {"ability": ref("overgrow", "ability", 65), "is_hidden": False, "slot": 1},
    {"ability": ref("chlorophyll", "ability", 34), "is_hidden": True, "slot": 3},
]
BULBASAUR["game_indices"] = [
    {"game_index": 153, "version": ref("red", "version")},
    {"game_index": 153, "version": ref("blue", "version")},
    {"game_index": 153, "version": ref("yellow", "version")},
    {"game_index": 1, "version": ref("gold", "version")},
]

PIKACHU = pokemon_payload(
    name="pikachu",
    dex=25,
    types=["electric"],
    stats=stat_entries(hp=35, attack=55, defense=40, sp_atk=50, sp_def=50, speed=90),
    height=4,
    weight=60,
    base_experience=112,
    moves=[{"move": ref("thunderbolt", "move", 85), "version_group_details": [level_up("red-blue", 26)]}],
)
PIKACHU["held_items"] = [
    {
        "item": ref("oran-berry", "item", 132),
        "version_details": [
            {"rarity": 50, "version": ref("ruby", "version")},
            {"rarity": 50, "version": ref("sapphire", "version")},
        ],
    },
    {
        "item": ref("light-ball", "item", 213),
        "version_details": [{"rarity": 5, "version": ref("ruby", "version")}],
    },
]

PIKACHU_ROCK_STAR = pokemon_payload(
    name="pikachu-rock-star",
    dex=10080,
    types=["electric"],
    stats=stat_entries(hp=35, attack=55, defense=40, sp_atk=50, sp_def=50, speed=90),
    height=4,
    weight=60,
    base_experience=None,
    species="pikachu",
)

BODY_SLAM = {
    "id": 34,
    "name": "body-slam",
    "accuracy": 100,
    "effect_chance": 30,
    "pp": 15,
    "priority": 0,
    "power": 85,
    "type": ref("normal", "type"),
    "damage_class": ref("physical", "move-damage-class"),
    "target": ref("selected-pokemon", "move-target"),
    "generation": ref("generation-i", "generation"),
    "meta": {
        "ailment": ref("paralysis", "move-ailment"),
        "ailment_chance": 30,
        "category": ref("damage+ailment", "move-category"),
        "crit_rate": 0,
        "drain": 0,
        "flinch_chance": 0,
        "healing": 0,
        "max_hits": None,
        "max_turns": None,
        "min_hits": None,
        "min_turns": None,
        "stat_chance": 0,
    },
    "machines": [
        {"machine": {"url": "https://pokeapi.co/api/v2/machine/120/"}, "version_group": ref("red-blue", "version-group")},
        {"machine": {"url": "https://pokeapi.co/api/v2/machine/121/"}, "version_group": ref("yellow", "version-group")},
    ],
    "stat_changes": [],
    "names": [
        name_entry("ja-Hrkt", "のしかかり"),
        name_entry("fr", "Plaquage"),
        name_entry("en", "Body Slam"),
    ],
    "flavor_text_entries": [
        {
            "flavor_text": "May cause\nparalysis.",
            "language": ref("en", "language"),
            "version_group": ref("gold-silver", "version-group"),
        },
        {
            "flavor_text": "Peut paralyser\nl'ennemi.",
            "language": ref("fr", "language"),
            "version_group": ref("x-y", "version-group"),
        },
        {
            "flavor_text": "A full-body slam that may\ncause paralysis.",
            "language": ref("en", "language"),
            "version_group": ref("ruby-sapphire", "version-group"),
        },
    ],
    "effect_entries": [
        {
            "effect": "Inflicts regular damage. Has a $effect_chance% chance to paralyze the target.",
            "short_effect": "Has a $effect_chance% chance to paralyze the target.",
            "language": ref("en", "language"),
        }
    ],
}

SWORDS_DANCE = {
    "id": 14,
    "name": "swords-dance",
    "accuracy": None,
    "effect_chance": None,
    "pp": 20,
    "priority": 0,
    "power": None,
    "type": ref("normal", "type"),
    "damage_class": ref("status", "move-damage-class"),
    "target": ref("user", "move-target"),
    "generation": ref("generation-i", "generation"),
    "meta": None,
    "machines": [],
    "stat_changes": [{"change": 2, "stat": ref("attack", "stat")}],
    "names": [name_entry("en", "Swords Dance")],
    "flavor_text_entries": [],
    "effect_entries": [],
}

LEVITATE = {
    "id": 26,
    "name": "levitate",
    "is_main_series": True,
    "generation": ref("generation-iii", "generation"),
    "names": [name_entry("de", "Schwebe"), name_entry("en", "Levitate")],
    "flavor_text_entries": [
        {
            "flavor_text": "Not hit by GROUND attacks.",
            "language": ref("en", "language"),
            "version_group": ref("ruby-sapphire", "version-group"),
        },
        {
            "flavor_text": "Gives full immunity to all\nGround-type moves.",
            "language": ref("en", "language"),
            "version_group": ref("x-y", "version-group"),
        },
    ],
    "effect_entries": [
        {
            "effect": "This Pokemon is immune to ground-type moves.",
            "short_effect": "Evades ground moves.",
            "language": ref("en", "language"),
        }
    ],
    "pokemon": [],
}

PIKACHU_SPECIES = {
    "id": 25,
    "name": "pikachu",
    "order": 26,
    "base_happiness": 70,
    "capture_rate": 190,
    "hatch_counter": 10,
    "gender_rate": 4,
    "is_baby": False,
    "is_legendary": False,
    "is_mythical": False,
    "forms_switchable": False,
    "has_gender_differences": True,
    "egg_groups": [ref("fairy", "egg-group"), ref("ground", "egg-group")],
    "pokedex_numbers": [
        {"entry_number": 25, "pokedex": ref("national", "pokedex")},
        {"entry_number": 25, "pokedex": ref("kanto", "pokedex")},
        {"entry_number": 163, "pokedex": ref("updated-hoenn", "pokedex")},
    ],
    "generation": ref("generation-i", "generation"),
    "evolves_from_species": ref("pichu", "pokemon-species", 172),
    "evolution_chain": {"url": "https://pokeapi.co/api/v2/evolution-chain/10/"},
    "names": [name_entry("ja", "ピカチュウ"), name_entry("en", "Pikachu")],
    "genera": [
        {"genus": "ねずみポケモン", "language": ref("ja", "language")},
        {"genus": "Mouse Pokémon", "language": ref("en", "language")},
    ],
    "flavor_text_entries": [
        {
            "flavor_text": "It’s in its nature to store electricity.",
            "language": ref("en", "language"),
            "version": ref("moon", "version"),
        },
        {
            "flavor_text": "When several of these POKéMON gather, their electricity could build and cause lightning storms.",
            "language": ref("en", "language"),
            "version": ref("red", "version"),
        },
    ],
}

STARLY_ENCOUNTERS = [
    {
        "location_area": ref("great-marsh-area-1", "location-area", 187),
        "version_details": [
            {
                "version": ref("diamond", "version"),
                "max_chance": 20,
                "encounter_details": [
                    {
                        "chance": 10,
                        "min_level": 26,
                        "max_level": 26,
                        "method": ref("walk", "encounter-method"),
                        "condition_values": [ref("time-morning", "encounter-condition-value")],
                    },
                    {
                        "chance": 10,
                        "min_level": 26,
                        "max_level": 26,
                        "method": ref("walk", "encounter-method"),
                        "condition_values": [ref("time-day", "encounter-condition-value")],
                    },
                ],
            },
            {
                "version": ref("pearl", "version"),
                "max_chance": 20,
                "encounter_details": [
                    {
                        "chance": 20,
                        "min_level": 26,
                        "max_level": 26,
                        "method": ref("walk", "encounter-method"),
                        "condition_values": [],
                    }
                ],
            },
        ],
    },
    {
        "location_area": ref("sinnoh-route-201-area", "location-area", 212),
        "version_details": [
            {
                "version": ref("platinum", "version"),
                "max_chance": 50,
                "encounter_details": [
                    {
                        "chance": 50,
                        "min_level": 2,
                        "max_level": 3,
                        "method": ref("walk", "encounter-method"),
                        "condition_values": [],
                    }
                ],
            }
        ],
    },
]

DIAMOND = {
    "id": 12,
    "name": "diamond",
    "version_group": ref("diamond-pearl", "version-group", 8),
    "names": [name_entry("en", "Diamond"), name_entry("fr", "Diamant")],
}

DIAMOND_PEARL = {
    "id": 8,
    "name": "diamond-pearl",
    "order": 10,
    "generation": ref("generation-iv", "generation", 4),
    "versions": [ref("diamond", "version", 12), ref("pearl", "version", 13)],
    "move_learn_methods": [
        ref("level-up", "move-learn-method"),
        ref("egg", "move-learn-method"),
        ref("tutor", "move-learn-method"),
        ref("machine", "move-learn-method"),
    ],
    "pokedexes": [ref("original-sinnoh", "pokedex", 5)],
    "regions": [ref("sinnoh", "region", 4)],
}

GENERATION_VI = {
    "id": 6,
    "name": "generation-vi",
    "main_region": ref("kalos", "region", 6),
    "types": [ref("fairy", "type", 18)],
    "version_groups": [ref("x-y", "version-group"), ref("omega-ruby-alpha-sapphire", "version-group")],
    "abilities": [ref("aroma-veil", "ability"), ref("flower-veil", "ability")],
    "moves": [ref("fairy-lock", "move"), ref("moonblast", "move"), ref("dazzling-gleam", "move")],
    "pokemon_species": [ref("chespin", "pokemon-species"), ref("sylveon", "pokemon-species")],
    "names": [name_entry("ja", "第六世代"), name_entry("en", "Generation VI")],
}

KANTO_DEX = {
    "id": 2,
    "name": "kanto",
    "is_main_series": True,
    "region": ref("kanto", "region", 1),
    "version_groups": [ref("red-blue", "version-group"), ref("yellow", "version-group")],
    "names": [name_entry("en", "Kanto")],
    "descriptions": [
        {"description": "Red/Blue/Yellow Kanto dex", "language": ref("en", "language")},
    ],
    "pokemon_entries": [
        {"entry_number": 1, "pokemon_species": ref("bulbasaur", "pokemon-species", 1)},
        {"entry_number": 2, "pokemon_species": ref("ivysaur", "pokemon-species", 2)},
    ],
}

RESOURCES: Dict[str, Any] = {
    "pokemon/bulbasaur": BULBASAUR,
    "pokemon/1": BULBASAUR,
    "pokemon/pikachu": PIKACHU,
    "pokemon/25": PIKACHU,
    "pokemon/pikachu-rock-star": PIKACHU_ROCK_STAR,
    "pokemon/starly/encounters": STARLY_ENCOUNTERS,
    "pokemon/396/encounters": STARLY_ENCOUNTERS,
    "pokemon/pikachu-rock-star/encounters": [],
    "move/body-slam": BODY_SLAM,
    "move/34": BODY_SLAM,
    "move/swords-dance": SWORDS_DANCE,
    "ability/levitate": LEVITATE,
    "ability/26": LEVITATE,
    "pokemon-species/pikachu": PIKACHU_SPECIES,
    "pokemon-species/25": PIKACHU_SPECIES,
    "version/diamond": DIAMOND,
    "version-group/diamond-pearl": DIAMOND_PEARL,
    "generation/generation-vi": GENERATION_VI,
    "pokedex/kanto": KANTO_DEX,
}


@pytest.fixture(autouse=True)
def requested_paths(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    """Serve canned PokeAPI payloads instead of touching the network.

    Returns the list of paths requested during the test.
    """
    requested: List[str] = []

    def fake_fetch(path: str, context: Optional[str] = None) -> Any:
        requested.append(path)
        if path in RESOURCES:
            # Hand out copies so no test can leak edits into another.
            return copy.deepcopy(RESOURCES[path])
        raise NotFound(*api._split_path(path))

    monkeypatch.setattr(api, "fetch", fake_fetch)
    return requested


@pytest.fixture
def payloads() -> Dict[str, Any]:
    # Mutable copies for tests that build malformed variants.
    return copy.deepcopy(RESOURCES)
