"""Closed enumerations of PokeAPI identifiers.

Each member's value is the name PokeAPI uses (``omega-ruby-alpha-sapphire``,
``ja-Hrkt``, ``damage+ailment``) and its name is the normalized form
(``OMEGA_RUBY_ALPHA_SAPPHIRE``, ``JA_HRKT``, ``DAMAGE_AND_AILMENT``).
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownEnumValue


def normalize(api_name: str) -> str:
    """Convert an API name into the enum member name it maps to.

    Args:
        api_name: Hyphenated lower-case name as returned by PokeAPI.

    Returns:
        Upper-case name with hyphens replaced by underscores.
    """
    return api_name.strip().replace("+", "_and_").replace("-", "_").upper()


class ApiEnum(str, Enum):
    """String enum whose values are PokeAPI names."""

    @classmethod
    def from_api(cls, api_name: str):
        """Resolve an API name to a member.

        Raises:
            UnknownEnumValue: If no member matches after normalization.
        """
        if not isinstance(api_name, str):
            raise UnknownEnumValue(cls.__name__, api_name)
        member = cls.__members__.get(normalize(api_name))
        if member is None:
            raise UnknownEnumValue(cls.__name__, api_name)
        return member

    @property
    def api_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class PokemonType(ApiEnum):
    NORMAL = "normal"
    FIGHTING = "fighting"
    FLYING = "flying"
    POISON = "poison"
    GROUND = "ground"
    ROCK = "rock"
    BUG = "bug"
    GHOST = "ghost"
    STEEL = "steel"
    FIRE = "fire"
    WATER = "water"
    GRASS = "grass"
    ELECTRIC = "electric"
    PSYCHIC = "psychic"
    ICE = "ice"
    DRAGON = "dragon"
    DARK = "dark"
    FAIRY = "fairy"
    STELLAR = "stellar"
    UNKNOWN = "unknown"
    SHADOW = "shadow"


class StatType(ApiEnum):
    """The six stats every Pokemon carries a base value for."""

    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special-attack"
    SPECIAL_DEFENSE = "special-defense"
    SPEED = "speed"


class SpriteType(ApiEnum):
    """Default sprite slots of the ``sprites`` object; values are its keys."""

    BACK_DEFAULT = "back_default"
    BACK_FEMALE = "back_female"
    BACK_SHINY = "back_shiny"
    BACK_SHINY_FEMALE = "back_shiny_female"
    FRONT_DEFAULT = "front_default"
    FRONT_FEMALE = "front_female"
    FRONT_SHINY = "front_shiny"
    FRONT_SHINY_FEMALE = "front_shiny_female"


class Language(ApiEnum):
    JA_HRKT = "ja-Hrkt"
    ROOMAJI = "roomaji"
    KO = "ko"
    ZH_HANT = "zh-Hant"
    FR = "fr"
    DE = "de"
    ES = "es"
    IT = "it"
    EN = "en"
    CS = "cs"
    JA = "ja"
    ZH_HANS = "zh-Hans"
    PT_BR = "pt-BR"


class Generation(ApiEnum):
    GENERATION_I = "generation-i"
    GENERATION_II = "generation-ii"
    GENERATION_III = "generation-iii"
    GENERATION_IV = "generation-iv"
    GENERATION_V = "generation-v"
    GENERATION_VI = "generation-vi"
    GENERATION_VII = "generation-vii"
    GENERATION_VIII = "generation-viii"
    GENERATION_IX = "generation-ix"


class Version(ApiEnum):
    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    GOLD = "gold"
    SILVER = "silver"
    CRYSTAL = "crystal"
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    EMERALD = "emerald"
    FIRERED = "firered"
    LEAFGREEN = "leafgreen"
    DIAMOND = "diamond"
    PEARL = "pearl"
    PLATINUM = "platinum"
    HEARTGOLD = "heartgold"
    SOULSILVER = "soulsilver"
    BLACK = "black"
    WHITE = "white"
    COLOSSEUM = "colosseum"
    XD = "xd"
    BLACK_2 = "black-2"
    WHITE_2 = "white-2"
    X = "x"
    Y = "y"
    OMEGA_RUBY = "omega-ruby"
    ALPHA_SAPPHIRE = "alpha-sapphire"
    SUN = "sun"
    MOON = "moon"
    ULTRA_SUN = "ultra-sun"
    ULTRA_MOON = "ultra-moon"
    LETS_GO_PIKACHU = "lets-go-pikachu"
    LETS_GO_EEVEE = "lets-go-eevee"
    SWORD = "sword"
    SHIELD = "shield"
    THE_ISLE_OF_ARMOR = "the-isle-of-armor"
    THE_CROWN_TUNDRA = "the-crown-tundra"
    BRILLIANT_DIAMOND = "brilliant-diamond"
    SHINING_PEARL = "shining-pearl"
    LEGENDS_ARCEUS = "legends-arceus"
    RED_JAPAN = "red-japan"
    GREEN_JAPAN = "green-japan"
    BLUE_JAPAN = "blue-japan"
    SCARLET = "scarlet"
    VIOLET = "violet"
    THE_TEAL_MASK = "the-teal-mask"
    THE_INDIGO_DISK = "the-indigo-disk"
    LEGENDS_ZA = "legends-za"
    MEGA_DIMENSION = "mega-dimension"


class VersionGroup(ApiEnum):
    RED_BLUE = "red-blue"
    YELLOW = "yellow"
    GOLD_SILVER = "gold-silver"
    CRYSTAL = "crystal"
    RUBY_SAPPHIRE = "ruby-sapphire"
    EMERALD = "emerald"
    FIRERED_LEAFGREEN = "firered-leafgreen"
    DIAMOND_PEARL = "diamond-pearl"
    PLATINUM = "platinum"
    HEARTGOLD_SOULSILVER = "heartgold-soulsilver"
    BLACK_WHITE = "black-white"
    COLOSSEUM = "colosseum"
    XD = "xd"
    BLACK_2_WHITE_2 = "black-2-white-2"
    X_Y = "x-y"
    OMEGA_RUBY_ALPHA_SAPPHIRE = "omega-ruby-alpha-sapphire"
    SUN_MOON = "sun-moon"
    ULTRA_SUN_ULTRA_MOON = "ultra-sun-ultra-moon"
    LETS_GO_PIKACHU_LETS_GO_EEVEE = "lets-go-pikachu-lets-go-eevee"
    SWORD_SHIELD = "sword-shield"
    THE_ISLE_OF_ARMOR = "the-isle-of-armor"
    THE_CROWN_TUNDRA = "the-crown-tundra"
    BRILLIANT_DIAMOND_AND_SHINING_PEARL = "brilliant-diamond-and-shining-pearl"
    LEGENDS_ARCEUS = "legends-arceus"
    RED_GREEN_JAPAN = "red-green-japan"
    BLUE_JAPAN = "blue-japan"
    SCARLET_VIOLET = "scarlet-violet"
    THE_TEAL_MASK = "the-teal-mask"
    THE_INDIGO_DISK = "the-indigo-disk"
    LEGENDS_ZA = "legends-za"
    MEGA_DIMENSION = "mega-dimension"


class PokedexType(ApiEnum):
    NATIONAL = "national"
    KANTO = "kanto"
    ORIGINAL_JOHTO = "original-johto"
    HOENN = "hoenn"
    ORIGINAL_SINNOH = "original-sinnoh"
    EXTENDED_SINNOH = "extended-sinnoh"
    UPDATED_JOHTO = "updated-johto"
    ORIGINAL_UNOVA = "original-unova"
    UPDATED_UNOVA = "updated-unova"
    CONQUEST_GALLERY = "conquest-gallery"
    KALOS_CENTRAL = "kalos-central"
    KALOS_COASTAL = "kalos-coastal"
    KALOS_MOUNTAIN = "kalos-mountain"
    UPDATED_HOENN = "updated-hoenn"
    ORIGINAL_ALOLA = "original-alola"
    ORIGINAL_MELEMELE = "original-melemele"
    ORIGINAL_AKALA = "original-akala"
    ORIGINAL_ULAULA = "original-ulaula"
    ORIGINAL_PONI = "original-poni"
    UPDATED_ALOLA = "updated-alola"
    UPDATED_MELEMELE = "updated-melemele"
    UPDATED_AKALA = "updated-akala"
    UPDATED_ULAULA = "updated-ulaula"
    UPDATED_PONI = "updated-poni"
    LETSGO_KANTO = "letsgo-kanto"
    GALAR = "galar"
    ISLE_OF_ARMOR = "isle-of-armor"
    CROWN_TUNDRA = "crown-tundra"
    HISUI = "hisui"
    PALDEA = "paldea"
    KITAKAMI = "kitakami"
    BLUEBERRY = "blueberry"
    LUMIOSE_CITY = "lumiose-city"
    HYPERSPACE = "hyperspace"


class MoveLearnMethod(ApiEnum):
    LEVEL_UP = "level-up"
    EGG = "egg"
    TUTOR = "tutor"
    MACHINE = "machine"
    STADIUM_SURFING_PIKACHU = "stadium-surfing-pikachu"
    LIGHT_BALL_EGG = "light-ball-egg"
    COLOSSEUM_PURIFICATION = "colosseum-purification"
    XD_SHADOW = "xd-shadow"
    XD_PURIFICATION = "xd-purification"
    FORM_CHANGE = "form-change"
    ZYGARDE_CUBE = "zygarde-cube"


class MoveAilment(ApiEnum):
    UNKNOWN = "unknown"
    NONE = "none"
    PARALYSIS = "paralysis"
    SLEEP = "sleep"
    FREEZE = "freeze"
    BURN = "burn"
    POISON = "poison"
    CONFUSION = "confusion"
    INFATUATION = "infatuation"
    TRAP = "trap"
    NIGHTMARE = "nightmare"
    TORMENT = "torment"
    DISABLE = "disable"
    YAWN = "yawn"
    HEAL_BLOCK = "heal-block"
    NO_TYPE_IMMUNITY = "no-type-immunity"
    LEECH_SEED = "leech-seed"
    EMBARGO = "embargo"
    PERISH_SONG = "perish-song"
    INGRAIN = "ingrain"
    SILENCE = "silence"
    TAR_SHOT = "tar-shot"


class MoveTarget(ApiEnum):
    SPECIFIC_MOVE = "specific-move"
    SELECTED_POKEMON_ME_FIRST = "selected-pokemon-me-first"
    ALLY = "ally"
    USERS_FIELD = "users-field"
    USER_OR_ALLY = "user-or-ally"
    OPPONENTS_FIELD = "opponents-field"
    USER = "user"
    RANDOM_OPPONENT = "random-opponent"
    ALL_OTHER_POKEMON = "all-other-pokemon"
    SELECTED_POKEMON = "selected-pokemon"
    ALL_OPPONENTS = "all-opponents"
    ENTIRE_FIELD = "entire-field"
    USER_AND_ALLIES = "user-and-allies"
    ALL_POKEMON = "all-pokemon"
    ALL_ALLIES = "all-allies"
    FAINTING_POKEMON = "fainting-pokemon"


class MoveCategory(ApiEnum):
    """Move meta categories; combined ones use ``+`` in the API."""

    DAMAGE = "damage"
    AILMENT = "ailment"
    NET_GOOD_STATS = "net-good-stats"
    HEAL = "heal"
    DAMAGE_AND_AILMENT = "damage+ailment"
    SWAGGER = "swagger"
    DAMAGE_AND_LOWER = "damage+lower"
    DAMAGE_AND_RAISE = "damage+raise"
    DAMAGE_AND_HEAL = "damage+heal"
    OHKO = "ohko"
    WHOLE_FIELD_EFFECT = "whole-field-effect"
    FIELD_EFFECT = "field-effect"
    FORCE_SWITCH = "force-switch"
    UNIQUE = "unique"


class MoveDamageClass(ApiEnum):
    STATUS = "status"
    PHYSICAL = "physical"
    SPECIAL = "special"


class EggGroup(ApiEnum):
    MONSTER = "monster"
    WATER1 = "water1"
    BUG = "bug"
    FLYING = "flying"
    GROUND = "ground"
    FAIRY = "fairy"
    PLANT = "plant"
    HUMANSHAPE = "humanshape"
    WATER3 = "water3"
    MINERAL = "mineral"
    INDETERMINATE = "indeterminate"
    WATER2 = "water2"
    DITTO = "ditto"
    DRAGON = "dragon"
    NO_EGGS = "no-eggs"


class EncounterMethod(ApiEnum):
    WALK = "walk"
    OLD_ROD = "old-rod"
    GOOD_ROD = "good-rod"
    SUPER_ROD = "super-rod"
    SURF = "surf"
    ROCK_SMASH = "rock-smash"
    HEADBUTT = "headbutt"
    DARK_GRASS = "dark-grass"
    GRASS_SPOTS = "grass-spots"
    CAVE_SPOTS = "cave-spots"
    BRIDGE_SPOTS = "bridge-spots"
    SUPER_ROD_SPOTS = "super-rod-spots"
    SURF_SPOTS = "surf-spots"
    YELLOW_FLOWERS = "yellow-flowers"
    PURPLE_FLOWERS = "purple-flowers"
    RED_FLOWERS = "red-flowers"
    ROUGH_TERRAIN = "rough-terrain"
    GIFT = "gift"
    GIFT_EGG = "gift-egg"
    ONLY_ONE = "only-one"
    POKEFLUTE = "pokeflute"
    HEADBUTT_LOW = "headbutt-low"
    HEADBUTT_NORMAL = "headbutt-normal"
    HEADBUTT_HIGH = "headbutt-high"
    SQUIRT_BOTTLE = "squirt-bottle"
    WAILMER_PAIL = "wailmer-pail"
    SEAWEED = "seaweed"
    ROAMING_GRASS = "roaming-grass"
    ROAMING_WATER = "roaming-water"
    DEVON_SCOPE = "devon-scope"
    ISLAND_SCAN = "island-scan"
    SOS_ENCOUNTER = "sos-encounter"
    BUBBLING_SPOTS = "bubbling-spots"
    BERRY_PILES = "berry-piles"
    NPC_TRADE = "npc-trade"
    SOS_FROM_BUBBLING_SPOT = "sos-from-bubbling-spot"
    ROAMING_OVERWORLD = "roaming-overworld"
    FISHING = "fishing"
    OVERWORLD = "overworld"
    OVERWORLD_SPECIAL = "overworld-special"
    OVERWORLD_FLYING = "overworld-flying"
    OVERWORLD_WATER = "overworld-water"
    SEWERS = "sewers"
    TALL_GRASS = "tall-grass"


class EncounterConditionValue(ApiEnum):
    SWARM_YES = "swarm-yes"
    SWARM_NO = "swarm-no"
    TIME_MORNING = "time-morning"
    TIME_DAY = "time-day"
    TIME_NIGHT = "time-night"
    TIME_EVENING = "time-evening"
    RADAR_ON = "radar-on"
    RADAR_OFF = "radar-off"
    SLOT2_NONE = "slot2-none"
    SLOT2_RUBY = "slot2-ruby"
    SLOT2_SAPPHIRE = "slot2-sapphire"
    SLOT2_EMERALD = "slot2-emerald"
    SLOT2_FIRERED = "slot2-firered"
    SLOT2_LEAFGREEN = "slot2-leafgreen"
    RADIO_OFF = "radio-off"
    RADIO_HOENN = "radio-hoenn"
    RADIO_SINNOH = "radio-sinnoh"
    SEASON_SPRING = "season-spring"
    SEASON_SUMMER = "season-summer"
    SEASON_AUTUMN = "season-autumn"
    SEASON_WINTER = "season-winter"
    STARTER_BULBASAUR = "starter-bulbasaur"
    STARTER_SQUIRTLE = "starter-squirtle"
    STARTER_CHARMANDER = "starter-charmander"
    STARTER_CHESPIN = "starter-chespin"
    STARTER_FENNEKIN = "starter-fennekin"
    STARTER_FROAKIE = "starter-froakie"
    TV_OPTION_BLUE = "tv-option-blue"
    TV_OPTION_RED = "tv-option-red"
    STORY_PROGRESS_AWAKENED_BEASTS = "story-progress-awakened-beasts"
    STORY_PROGRESS_BEAT_RED = "story-progress-beat-red"
    STORY_PROGRESS_LANDMARK_INSIDE = "story-progress-landmark-inside"
    STORY_PROGRESS_HALL_OF_FAME = "story-progress-hall-of-fame"
    STORY_PROGRESS_NATIONAL_DEX = "story-progress-national-dex"
    STORY_PROGRESS_NONE = "story-progress-none"
    STORY_PROGRESS_BEAT_GALACTIC_CORONET = "story-progress-beat-galactic-coronet"
    STORY_PROGRESS_OAK_ETERNA_CITY = "story-progress-oak-eterna-city"
    STORY_PROGRESS_VERMILION_COPYCAT = "story-progress-vermilion-copycat"
    STORY_PROGRESS_MET_OAK_PALLET_TOWN = "story-progress-met-oak-pallet-town"
    STORY_PROGRESS_GOT_ALL_KANTO_BADGES = "story-progress-got-all-kanto-badges"
    STORY_PROGRESS_SINJOH_PROJECT = "story-progress-sinjoh-project"
    STORY_PROGRESS_BEAT_ELITE_FOUR_ROUND_TWO = "story-progress-beat-elite-four-round-two"
    OTHER_NONE = "other-none"
    OTHER_SNORLAX_LAX = "other-snorlax-lax"
    ITEM_NONE = "item-none"
    ITEM_RED_GEM = "item-red-gem"
    ITEM_BLUE_GEM = "item-blue-gem"
    ITEM_GREEN_GEM = "item-green-gem"
    ITEM_TIME_OF_DAY = "item-time-of-day"
    WEATHER_CLEAR = "weather-clear"
    WEATHER_RAIN = "weather-rain"
    WEATHER_SNOW = "weather-snow"
    WEATHER_SANDSTORM = "weather-sandstorm"
    WEATHER_FOG = "weather-fog"
