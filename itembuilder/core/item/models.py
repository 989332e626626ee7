"""호스트 아이템 모델: Material / Enchantment / ItemFlag / ItemMeta / ItemStack

플러그인 서버가 제공하는 아이템 객체 모델의 인-프로세스 구현.
ItemBuilder는 이 모듈만 경계로 사용한다.
"""

from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_STACK_SIZE = 64


class Material(str, Enum):
    """아이템 종류. value는 네임스페이스 없는 키."""

    AIR = "air"

    # 블록
    STONE = "stone"
    COBBLESTONE = "cobblestone"
    DIRT = "dirt"
    GRASS_BLOCK = "grass_block"
    SAND = "sand"
    GRAVEL = "gravel"
    OAK_LOG = "oak_log"
    OAK_PLANKS = "oak_planks"
    GLASS = "glass"
    OBSIDIAN = "obsidian"
    BEDROCK = "bedrock"
    CHEST = "chest"
    CRAFTING_TABLE = "crafting_table"
    FURNACE = "furnace"
    TNT = "tnt"
    OAK_SIGN = "oak_sign"
    WHITE_BANNER = "white_banner"
    WHITE_WOOL = "white_wool"

    # 재료
    STICK = "stick"
    COAL = "coal"
    IRON_INGOT = "iron_ingot"
    GOLD_INGOT = "gold_ingot"
    DIAMOND = "diamond"
    EMERALD = "emerald"
    NETHERITE_INGOT = "netherite_ingot"
    REDSTONE = "redstone"
    LAPIS_LAZULI = "lapis_lazuli"
    STRING = "string"
    FEATHER = "feather"
    PAPER = "paper"
    BOOK = "book"
    NETHER_STAR = "nether_star"
    EXPERIENCE_BOTTLE = "experience_bottle"

    # 투척 / 소모
    ENDER_PEARL = "ender_pearl"
    SNOWBALL = "snowball"
    EGG = "egg"
    HONEY_BOTTLE = "honey_bottle"
    ARMOR_STAND = "armor_stand"
    BUCKET = "bucket"
    WATER_BUCKET = "water_bucket"
    LAVA_BUCKET = "lava_bucket"
    MILK_BUCKET = "milk_bucket"
    POTION = "potion"
    APPLE = "apple"
    GOLDEN_APPLE = "golden_apple"
    BREAD = "bread"
    COOKED_BEEF = "cooked_beef"
    MUSHROOM_STEW = "mushroom_stew"
    CAKE = "cake"

    # 도구 / 무기
    WOODEN_SWORD = "wooden_sword"
    STONE_SWORD = "stone_sword"
    IRON_SWORD = "iron_sword"
    GOLDEN_SWORD = "golden_sword"
    DIAMOND_SWORD = "diamond_sword"
    NETHERITE_SWORD = "netherite_sword"
    IRON_PICKAXE = "iron_pickaxe"
    DIAMOND_PICKAXE = "diamond_pickaxe"
    NETHERITE_PICKAXE = "netherite_pickaxe"
    DIAMOND_AXE = "diamond_axe"
    DIAMOND_SHOVEL = "diamond_shovel"
    DIAMOND_HOE = "diamond_hoe"
    BOW = "bow"
    CROSSBOW = "crossbow"
    TRIDENT = "trident"
    ARROW = "arrow"
    SHIELD = "shield"
    FISHING_ROD = "fishing_rod"
    SHEARS = "shears"
    FLINT_AND_STEEL = "flint_and_steel"

    # 방어구
    IRON_HELMET = "iron_helmet"
    IRON_CHESTPLATE = "iron_chestplate"
    IRON_LEGGINGS = "iron_leggings"
    IRON_BOOTS = "iron_boots"
    DIAMOND_HELMET = "diamond_helmet"
    DIAMOND_CHESTPLATE = "diamond_chestplate"
    DIAMOND_LEGGINGS = "diamond_leggings"
    DIAMOND_BOOTS = "diamond_boots"
    ELYTRA = "elytra"

    # 기타
    WRITABLE_BOOK = "writable_book"
    ENCHANTED_BOOK = "enchanted_book"
    TOTEM_OF_UNDYING = "totem_of_undying"
    SADDLE = "saddle"
    COMPASS = "compass"
    CLOCK = "clock"
    NAME_TAG = "name_tag"
    PLAYER_HEAD = "player_head"

    @property
    def key(self) -> str:
        """네임스페이스 키 ("minecraft:stone")."""
        return f"minecraft:{self.value}"

    @property
    def max_stack_size(self) -> int:
        return _MAX_STACK_SIZES.get(self, DEFAULT_MAX_STACK_SIZE)

    @property
    def is_air(self) -> bool:
        return self is Material.AIR

    @classmethod
    def from_name(cls, name: str) -> Optional[Material]:
        """멤버 이름으로 조회 (대소문자 구분). 없으면 None."""
        return cls.__members__.get(name)


_MAX_STACK_SIZES: dict[Material, int] = {
    # 16
    Material.OAK_SIGN: 16,
    Material.WHITE_BANNER: 16,
    Material.ENDER_PEARL: 16,
    Material.SNOWBALL: 16,
    Material.EGG: 16,
    Material.HONEY_BOTTLE: 16,
    Material.ARMOR_STAND: 16,
    Material.BUCKET: 16,
    # 1
    Material.WATER_BUCKET: 1,
    Material.LAVA_BUCKET: 1,
    Material.MILK_BUCKET: 1,
    Material.POTION: 1,
    Material.MUSHROOM_STEW: 1,
    Material.CAKE: 1,
    Material.WOODEN_SWORD: 1,
    Material.STONE_SWORD: 1,
    Material.IRON_SWORD: 1,
    Material.GOLDEN_SWORD: 1,
    Material.DIAMOND_SWORD: 1,
    Material.NETHERITE_SWORD: 1,
    Material.IRON_PICKAXE: 1,
    Material.DIAMOND_PICKAXE: 1,
    Material.NETHERITE_PICKAXE: 1,
    Material.DIAMOND_AXE: 1,
    Material.DIAMOND_SHOVEL: 1,
    Material.DIAMOND_HOE: 1,
    Material.BOW: 1,
    Material.CROSSBOW: 1,
    Material.TRIDENT: 1,
    Material.SHIELD: 1,
    Material.FISHING_ROD: 1,
    Material.SHEARS: 1,
    Material.FLINT_AND_STEEL: 1,
    Material.IRON_HELMET: 1,
    Material.IRON_CHESTPLATE: 1,
    Material.IRON_LEGGINGS: 1,
    Material.IRON_BOOTS: 1,
    Material.DIAMOND_HELMET: 1,
    Material.DIAMOND_CHESTPLATE: 1,
    Material.DIAMOND_LEGGINGS: 1,
    Material.DIAMOND_BOOTS: 1,
    Material.ELYTRA: 1,
    Material.WRITABLE_BOOK: 1,
    Material.ENCHANTED_BOOK: 1,
    Material.TOTEM_OF_UNDYING: 1,
    Material.SADDLE: 1,
}


class Enchantment(str, Enum):
    """인챈트 식별자. value는 네임스페이스 키."""

    PROTECTION = "minecraft:protection"
    FIRE_PROTECTION = "minecraft:fire_protection"
    FEATHER_FALLING = "minecraft:feather_falling"
    BLAST_PROTECTION = "minecraft:blast_protection"
    PROJECTILE_PROTECTION = "minecraft:projectile_protection"
    RESPIRATION = "minecraft:respiration"
    AQUA_AFFINITY = "minecraft:aqua_affinity"
    THORNS = "minecraft:thorns"
    DEPTH_STRIDER = "minecraft:depth_strider"
    FROST_WALKER = "minecraft:frost_walker"
    BINDING_CURSE = "minecraft:binding_curse"
    SOUL_SPEED = "minecraft:soul_speed"
    SWIFT_SNEAK = "minecraft:swift_sneak"
    SHARPNESS = "minecraft:sharpness"
    SMITE = "minecraft:smite"
    BANE_OF_ARTHROPODS = "minecraft:bane_of_arthropods"
    KNOCKBACK = "minecraft:knockback"
    FIRE_ASPECT = "minecraft:fire_aspect"
    LOOTING = "minecraft:looting"
    SWEEPING_EDGE = "minecraft:sweeping_edge"
    EFFICIENCY = "minecraft:efficiency"
    SILK_TOUCH = "minecraft:silk_touch"
    UNBREAKING = "minecraft:unbreaking"
    FORTUNE = "minecraft:fortune"
    POWER = "minecraft:power"
    PUNCH = "minecraft:punch"
    FLAME = "minecraft:flame"
    INFINITY = "minecraft:infinity"
    LUCK_OF_THE_SEA = "minecraft:luck_of_the_sea"
    LURE = "minecraft:lure"
    LOYALTY = "minecraft:loyalty"
    IMPALING = "minecraft:impaling"
    RIPTIDE = "minecraft:riptide"
    CHANNELING = "minecraft:channeling"
    MULTISHOT = "minecraft:multishot"
    QUICK_CHARGE = "minecraft:quick_charge"
    PIERCING = "minecraft:piercing"
    MENDING = "minecraft:mending"
    VANISHING_CURSE = "minecraft:vanishing_curse"

    @property
    def key(self) -> str:
        return self.value

    @property
    def max_level(self) -> int:
        return _MAX_LEVELS.get(self, 1)


_MAX_LEVELS: dict[Enchantment, int] = {
    Enchantment.PROTECTION: 4,
    Enchantment.FIRE_PROTECTION: 4,
    Enchantment.FEATHER_FALLING: 4,
    Enchantment.BLAST_PROTECTION: 4,
    Enchantment.PROJECTILE_PROTECTION: 4,
    Enchantment.RESPIRATION: 3,
    Enchantment.THORNS: 3,
    Enchantment.DEPTH_STRIDER: 3,
    Enchantment.FROST_WALKER: 2,
    Enchantment.SOUL_SPEED: 3,
    Enchantment.SWIFT_SNEAK: 3,
    Enchantment.SHARPNESS: 5,
    Enchantment.SMITE: 5,
    Enchantment.BANE_OF_ARTHROPODS: 5,
    Enchantment.KNOCKBACK: 2,
    Enchantment.FIRE_ASPECT: 2,
    Enchantment.LOOTING: 3,
    Enchantment.SWEEPING_EDGE: 3,
    Enchantment.EFFICIENCY: 5,
    Enchantment.UNBREAKING: 3,
    Enchantment.FORTUNE: 3,
    Enchantment.POWER: 5,
    Enchantment.PUNCH: 2,
    Enchantment.LUCK_OF_THE_SEA: 3,
    Enchantment.LURE: 3,
    Enchantment.LOYALTY: 3,
    Enchantment.IMPALING: 5,
    Enchantment.RIPTIDE: 3,
    Enchantment.QUICK_CHARGE: 3,
    Enchantment.PIERCING: 4,
}


class ItemFlag(str, Enum):
    """툴팁 표시 숨김 플래그"""

    HIDE_ENCHANTS = "hide_enchants"
    HIDE_ATTRIBUTES = "hide_attributes"
    HIDE_UNBREAKABLE = "hide_unbreakable"
    HIDE_DESTROYS = "hide_destroys"
    HIDE_PLACED_ON = "hide_placed_on"
    HIDE_ADDITIONAL_TOOLTIP = "hide_additional_tooltip"
    HIDE_DYE = "hide_dye"
    HIDE_ARMOR_TRIM = "hide_armor_trim"


class ItemMeta:
    """아이템 메타데이터 (이름, 설명, 인챈트, 플래그 등).

    컬렉션을 반환하는 접근자는 모두 복사본을 반환한다.
    """

    def __init__(self) -> None:
        self._display_name: Optional[str] = None
        self._lore: Optional[list[str]] = None
        self._custom_model_data: Optional[int] = None
        self._unbreakable: bool = False
        self._enchants: dict[Enchantment, int] = {}
        self._flags: set[ItemFlag] = set()

    # === 표시 이름 ===

    def has_display_name(self) -> bool:
        return self._display_name is not None

    @property
    def display_name(self) -> Optional[str]:
        return self._display_name

    def set_display_name(self, name: Optional[str]) -> None:
        """None이면 제거."""
        self._display_name = name

    # === 설명(lore) ===

    def has_lore(self) -> bool:
        return bool(self._lore)

    @property
    def lore(self) -> Optional[list[str]]:
        return list(self._lore) if self._lore is not None else None

    def set_lore(self, lore: Optional[list[str]]) -> None:
        """None 또는 빈 리스트면 제거."""
        self._lore = list(lore) if lore else None

    # === 커스텀 모델 데이터 ===

    def has_custom_model_data(self) -> bool:
        return self._custom_model_data is not None

    @property
    def custom_model_data(self) -> int:
        """미설정이면 0."""
        return self._custom_model_data if self._custom_model_data is not None else 0

    def set_custom_model_data(self, data: Optional[int]) -> None:
        self._custom_model_data = data

    # === 파괴 불가 ===

    @property
    def unbreakable(self) -> bool:
        return self._unbreakable

    def set_unbreakable(self, unbreakable: bool) -> None:
        self._unbreakable = unbreakable

    # === 인챈트 ===

    @property
    def enchants(self) -> dict[Enchantment, int]:
        return dict(self._enchants)

    def has_enchants(self) -> bool:
        return bool(self._enchants)

    def has_enchant(self, enchantment: Enchantment) -> bool:
        return enchantment in self._enchants

    def get_enchant_level(self, enchantment: Enchantment) -> int:
        """없으면 0."""
        return self._enchants.get(enchantment, 0)

    def add_enchant(
        self,
        enchantment: Enchantment,
        level: int,
        ignore_level_restriction: bool = False,
    ) -> bool:
        """인챈트 추가. 반환: 메타가 변경되었는지.

        ignore_level_restriction=False 이면 max_level 초과 레벨은 거부.
        """
        if level < 1:
            raise ValueError(f"Enchantment level must be positive: {level}")
        if not ignore_level_restriction and level > enchantment.max_level:
            logger.debug(
                "Rejected %s level %d (max %d)",
                enchantment.name,
                level,
                enchantment.max_level,
            )
            return False
        changed = self._enchants.get(enchantment) != level
        self._enchants[enchantment] = level
        return changed

    def remove_enchant(self, enchantment: Enchantment) -> bool:
        return self._enchants.pop(enchantment, None) is not None

    # === 플래그 ===

    @property
    def item_flags(self) -> frozenset[ItemFlag]:
        return frozenset(self._flags)

    def has_item_flag(self, flag: ItemFlag) -> bool:
        return flag in self._flags

    def add_item_flags(self, *flags: ItemFlag) -> None:
        self._flags.update(flags)

    def remove_item_flags(self, *flags: ItemFlag) -> None:
        self._flags.difference_update(flags)

    # === 공통 ===

    def is_empty(self) -> bool:
        return not (
            self.has_display_name()
            or self.has_lore()
            or self.has_custom_model_data()
            or self._unbreakable
            or self._enchants
            or self._flags
        )

    def clone(self) -> ItemMeta:
        return copy.deepcopy(self)

    def _state(self) -> tuple:
        return (
            self._display_name,
            tuple(self._lore) if self._lore else None,
            self._custom_model_data,
            self._unbreakable,
            self._enchants,
            self._flags,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemMeta):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        enchants = {e.name: lv for e, lv in self._enchants.items()}
        flags = sorted(f.name for f in self._flags)
        return (
            f"ItemMeta(display_name={self._display_name!r}, lore={self._lore!r}, "
            f"custom_model_data={self._custom_model_data!r}, "
            f"unbreakable={self._unbreakable!r}, "
            f"enchants={enchants!r}, flags={flags!r})"
        )


class ItemStack:
    """아이템 스택 = Material + 수량 + (선택) 메타.

    메타는 항상 복사되어 저장/반환된다.
    """

    def __init__(self, material: Material, amount: int = 1) -> None:
        self._type = material
        self._amount = amount
        self._meta: Optional[ItemMeta] = None

    @property
    def type(self) -> Material:
        return self._type

    @property
    def amount(self) -> int:
        return self._amount

    def set_amount(self, amount: int) -> None:
        self._amount = amount

    @property
    def max_stack_size(self) -> int:
        return self._type.max_stack_size

    def has_item_meta(self) -> bool:
        """비어있지 않은 메타가 붙어 있을 때만 True."""
        return self._meta is not None and not self._meta.is_empty()

    def get_item_meta(self) -> Optional[ItemMeta]:
        """메타 복사본. 없으면 새 빈 메타, AIR면 None."""
        if self._type.is_air:
            return None
        if self._meta is None:
            return ItemMeta()
        return self._meta.clone()

    def set_item_meta(self, meta: Optional[ItemMeta]) -> bool:
        """메타 부착 (복사본 저장). None이면 제거. AIR는 거부."""
        if meta is None:
            self._meta = None
            return True
        if self._type.is_air:
            logger.debug("Refused to attach meta to AIR")
            return False
        self._meta = meta.clone()
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemStack):
            return NotImplemented
        own = self._meta if self.has_item_meta() else None
        theirs = other._meta if other.has_item_meta() else None
        return (
            self._type is other._type
            and self._amount == other._amount
            and own == theirs
        )

    def __repr__(self) -> str:
        return f"ItemStack({self._type.name} x {self._amount}, meta={self._meta!r})"
