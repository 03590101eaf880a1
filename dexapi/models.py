"""Pydantic value objects built from PokeAPI resources."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .enums import (
    EggGroup,
    EncounterConditionValue,
    EncounterMethod,
    Generation,
    Language,
    MoveAilment,
    MoveCategory,
    MoveDamageClass,
    MoveLearnMethod,
    MoveTarget,
    PokedexType,
    PokemonType,
    SpriteType,
    StatType,
    Version,
    VersionGroup,
)


class Record(BaseModel):
    """Immutable base for every value object."""

    model_config = ConfigDict(frozen=True)


# --- Localized text ---


class LocalizedName(Record):
    """A name or text in one language."""

    language: Language
    name: str


class Flavor(Record):
    """Flavor text in one language, tagged with the game it comes from."""

    language: Language
    text: str
    version: Optional[Version] = None
    version_group: Optional[VersionGroup] = None


class _LanguageLookup:
    # Shared by the root models below; ``root`` is a tuple in source order.

    def __iter__(self) -> Iterator:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int):
        return self.root[index]


class LocalizedNames(_LanguageLookup, RootModel[Tuple[LocalizedName, ...]]):
    """Localized names of one resource."""

    model_config = ConfigDict(frozen=True)

    def get(self, language: Language) -> Optional[LocalizedName]:
        """Return the first entry in ``language``, or None."""
        for entry in self.root:
            if entry.language == language:
                return entry
        return None


class Flavors(_LanguageLookup, RootModel[Tuple[Flavor, ...]]):
    """Flavor text entries of one resource."""

    model_config = ConfigDict(frozen=True)

    def get(
        self,
        language: Language,
        version: Optional[Version] = None,
        version_group: Optional[VersionGroup] = None,
    ) -> Optional[Flavor]:
        """Return the first entry in ``language``, optionally for one game.

        Args:
            language: Language to look up.
            version: Only consider entries tagged with this version.
            version_group: Only consider entries tagged with this version group.

        Returns:
            The first matching flavor in source order, or None.
        """
        for entry in self.root:
            if entry.language != language:
                continue
            if version is not None and entry.version != version:
                continue
            if version_group is not None and entry.version_group != version_group:
                continue
            return entry
        return None


# --- Read-only numeric indexes ---


class _PairLookup:
    # Mapping-style reads over ``root``, a tuple of (key, number) pairs.

    def __getitem__(self, key):
        for entry_key, value in self.root:
            if entry_key == key:
                return value
        raise KeyError(key)

    def get(self, key, default: Optional[int] = None) -> Optional[int]:
        for entry_key, value in self.root:
            if entry_key == key:
                return value
        return default

    def __contains__(self, key) -> bool:
        return any(entry_key == key for entry_key, _ in self.root)

    def __iter__(self) -> Iterator:
        return (entry_key for entry_key, _ in self.root)

    def __len__(self) -> int:
        return len(self.root)

    def items(self) -> Tuple:
        return self.root

    def as_dict(self) -> Dict:
        """Return a fresh, independent dict copy."""
        return dict(self.root)


class ByVersion(_PairLookup, RootModel[Tuple[Tuple[Version, int], ...]]):
    """Numbers keyed by game version, in source order."""

    model_config = ConfigDict(frozen=True)


class ByVersionGroup(_PairLookup, RootModel[Tuple[Tuple[VersionGroup, int], ...]]):
    """Numbers keyed by version group, in source order."""

    model_config = ConfigDict(frozen=True)


class ByPokedex(_PairLookup, RootModel[Tuple[Tuple[PokedexType, int], ...]]):
    """Numbers keyed by Pokedex, in source order."""

    model_config = ConfigDict(frozen=True)


# --- Pokemon ---


class Stat(Record):
    stat_type: StatType
    effort: int
    base_stat: int


class Sprite(Record):
    sprite_type: SpriteType
    url: Optional[str] = Field(description="Sprite image URL (None if the game has none)")


class ItemHold(Record):
    """An item a wild Pokemon may hold, with its rarity per version."""

    item: str
    rarities: ByVersion = Field(description="Rarity per version")


class VersionGroupDetail(Record):
    """How a move is learned in one version group."""

    version_group: VersionGroup
    learn_method: MoveLearnMethod
    level_learned_at: int


class PokemonMoveEntry(Record):
    """A move a Pokemon can learn, across version groups."""

    name: str
    version_group_details: Tuple[VersionGroupDetail, ...]


class PokemonAbilitySlot(Record):
    name: str
    is_hidden: bool
    slot: int


class Pokemon(Record):
    """A Pokemon as returned by the ``pokemon`` endpoint."""

    name: str
    id: int
    order: int
    height: int = Field(description="Height in decimeters")
    weight: int = Field(description="Weight in hectograms")
    base_experience: Optional[int]
    primary_type: PokemonType
    secondary_type: Optional[PokemonType] = None
    held_items: Tuple[ItemHold, ...]
    game_indices: ByVersion
    moves: Tuple[PokemonMoveEntry, ...]
    abilities: Tuple[PokemonAbilitySlot, ...]
    species_name: str
    # One entry per StatType / SpriteType, in enum order.
    stats: Tuple[Stat, ...]
    sprites: Tuple[Sprite, ...]

    @property
    def types(self) -> Tuple[PokemonType, ...]:
        if self.secondary_type is None:
            return (self.primary_type,)
        return (self.primary_type, self.secondary_type)

    def get_move(self, name: str) -> Optional[PokemonMoveEntry]:
        """Return the learnable move called ``name``, or None."""
        for move in self.moves:
            if move.name == name:
                return move
        return None

    def get_stat(self, stat_type: StatType) -> Optional[Stat]:
        for stat in self.stats:
            if stat.stat_type == stat_type:
                return stat
        return None

    def get_sprite(self, sprite_type: SpriteType) -> Optional[Sprite]:
        for sprite in self.sprites:
            if sprite.sprite_type == sprite_type:
                return sprite
        return None


# --- Moves and abilities ---


class StatChange(Record):
    stat: str
    change: int


class Move(Record):
    """A move as returned by the ``move`` endpoint."""

    id: int
    name: str
    accuracy: Optional[int]
    effect_chance: Optional[int]
    pp: Optional[int]
    priority: int = Field(ge=-8, le=8)
    power: Optional[int]
    move_type: PokemonType
    damage_class: MoveDamageClass
    target: MoveTarget
    # Taken from the nullable ``meta`` block.
    ailment: Optional[MoveAilment] = None
    ailment_chance: Optional[int] = None
    category: Optional[MoveCategory] = None
    machines: ByVersionGroup = Field(
        description="Machine resource ID per version group"
    )
    stat_changes: Tuple[StatChange, ...]
    generation: Generation
    localized_names: LocalizedNames
    flavors: Flavors
    effects: LocalizedNames
    short_effects: LocalizedNames


class Ability(Record):
    id: int
    name: str
    is_main_series: bool
    generation: Generation
    localized_names: LocalizedNames
    flavors: Flavors
    effects: LocalizedNames
    short_effects: LocalizedNames


# --- Species ---


class GenderRatio(Record):
    """Gender ratio percentages for a species."""

    female_percent: float
    male_percent: float


class Species(Record):
    """A species as returned by the ``pokemon-species`` endpoint."""

    id: int
    name: str
    order: int
    base_happiness: Optional[int]
    capture_rate: int
    hatch_counter: Optional[int]
    gender_rate: int = Field(description="Eighths female, -1 for genderless")
    is_baby: bool
    is_legendary: bool
    is_mythical: bool
    forms_switchable: bool
    has_gender_differences: bool
    egg_groups: Tuple[EggGroup, ...]
    pokedex_numbers: ByPokedex = Field(description="Entry number per Pokedex")
    generation: Generation
    evolves_from_species: Optional[str] = None
    evolution_chain_id: Optional[int] = None
    localized_names: LocalizedNames
    genera: LocalizedNames
    flavors: Flavors

    @property
    def hatch_steps(self) -> Optional[int]:
        # Hatch steps formula comes from the games: (counter + 1) * 255.
        if self.hatch_counter is None:
            return None
        return (self.hatch_counter + 1) * 255

    def gender_ratio(self) -> GenderRatio:
        """Convert the gender rate into percentages."""
        if self.gender_rate == -1:
            return GenderRatio(female_percent=0.0, male_percent=0.0)
        female = (self.gender_rate / 8.0) * 100.0
        return GenderRatio(female_percent=round(female, 2), male_percent=round(100.0 - female, 2))


# --- Encounters ---


class EncounterDetail(Record):
    chance: int
    min_level: int
    max_level: int
    method: EncounterMethod
    condition_values: Tuple[EncounterConditionValue, ...]


class VersionDetail(Record):
    """Encounter details for a single game version."""

    version: Version
    max_chance: int
    encounter_details: Tuple[EncounterDetail, ...]


class Encounter(Record):
    """Where a Pokemon can be met in the wild."""

    location_area: str
    version_details: Tuple[VersionDetail, ...]


# --- Versions, version groups, generations, Pokedexes ---


class VersionDetails(Record):
    id: int
    name: str
    version_group: VersionGroup
    localized_names: LocalizedNames


class VersionGroupDetails(Record):
    id: int
    name: str
    order: int
    generation: Generation
    versions: Tuple[Version, ...]
    move_learn_methods: Tuple[MoveLearnMethod, ...]
    pokedexes: Tuple[PokedexType, ...]
    regions: Tuple[str, ...]


class GenerationDetails(Record):
    id: int
    name: str
    main_region: str
    types: Tuple[PokemonType, ...]
    version_groups: Tuple[VersionGroup, ...]
    ability_names: Tuple[str, ...]
    move_names: Tuple[str, ...]
    species_names: Tuple[str, ...]
    localized_names: LocalizedNames


class PokedexEntry(Record):
    entry_number: int
    species_name: str


class PokedexDetails(Record):
    id: int
    name: str
    is_main_series: bool
    region: Optional[str] = None
    version_groups: Tuple[VersionGroup, ...]
    localized_names: LocalizedNames
    descriptions: LocalizedNames
    entries: Tuple[PokedexEntry, ...]
