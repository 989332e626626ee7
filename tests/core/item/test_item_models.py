"""호스트 아이템 모델 테스트: Material, Enchantment, ItemMeta, ItemStack"""

from __future__ import annotations

import pytest

from itembuilder.core.item.models import (
    Enchantment,
    ItemFlag,
    ItemMeta,
    ItemStack,
    Material,
)


# ── Material ──────────────────────────────────────────────────


class TestMaterial:
    def test_from_name_existing(self) -> None:
        assert Material.from_name("STONE") is Material.STONE
        assert Material.from_name("DIAMOND_SWORD") is Material.DIAMOND_SWORD

    def test_from_name_case_sensitive(self) -> None:
        assert Material.from_name("stone") is None
        assert Material.from_name("Stone") is None

    def test_from_name_unknown(self) -> None:
        assert Material.from_name("NOT_A_BLOCK") is None
        assert Material.from_name("") is None

    def test_max_stack_size(self) -> None:
        assert Material.STONE.max_stack_size == 64
        assert Material.ENDER_PEARL.max_stack_size == 16
        assert Material.DIAMOND_SWORD.max_stack_size == 1
        assert Material.WATER_BUCKET.max_stack_size == 1

    def test_key_and_air(self) -> None:
        assert Material.STONE.key == "minecraft:stone"
        assert Material.AIR.is_air
        assert not Material.STONE.is_air


# ── Enchantment ───────────────────────────────────────────────


class TestEnchantment:
    def test_max_level(self) -> None:
        assert Enchantment.SHARPNESS.max_level == 5
        assert Enchantment.PROTECTION.max_level == 4
        assert Enchantment.MENDING.max_level == 1

    def test_key(self) -> None:
        assert Enchantment.UNBREAKING.key == "minecraft:unbreaking"


# ── ItemMeta ──────────────────────────────────────────────────


class TestItemMeta:
    def test_new_meta_is_empty(self) -> None:
        meta = ItemMeta()
        assert meta.is_empty()
        assert not meta.has_display_name()
        assert not meta.has_lore()
        assert meta.lore is None
        assert meta.custom_model_data == 0
        assert not meta.has_custom_model_data()

    def test_display_name_set_and_clear(self) -> None:
        meta = ItemMeta()
        meta.set_display_name("Sword")
        assert meta.has_display_name()
        assert meta.display_name == "Sword"
        meta.set_display_name(None)
        assert not meta.has_display_name()

    def test_empty_lore_is_cleared(self) -> None:
        meta = ItemMeta()
        meta.set_lore([])
        assert not meta.has_lore()
        assert meta.lore is None

    def test_lore_is_copied(self) -> None:
        source = ["a", "b"]
        meta = ItemMeta()
        meta.set_lore(source)
        source.append("c")
        assert meta.lore == ["a", "b"]

        returned = meta.lore
        returned.append("x")
        assert meta.lore == ["a", "b"]

    def test_add_enchant_respects_max_level(self) -> None:
        meta = ItemMeta()
        assert meta.add_enchant(Enchantment.SHARPNESS, 10) is False
        assert not meta.has_enchant(Enchantment.SHARPNESS)

    def test_add_enchant_ignore_restriction(self) -> None:
        meta = ItemMeta()
        assert meta.add_enchant(Enchantment.SHARPNESS, 10, ignore_level_restriction=True)
        assert meta.get_enchant_level(Enchantment.SHARPNESS) == 10

    def test_add_enchant_rejects_non_positive(self) -> None:
        meta = ItemMeta()
        with pytest.raises(ValueError):
            meta.add_enchant(Enchantment.SHARPNESS, 0, ignore_level_restriction=True)

    def test_remove_enchant(self) -> None:
        meta = ItemMeta()
        meta.add_enchant(Enchantment.UNBREAKING, 3)
        assert meta.remove_enchant(Enchantment.UNBREAKING)
        assert not meta.remove_enchant(Enchantment.UNBREAKING)
        assert meta.get_enchant_level(Enchantment.UNBREAKING) == 0

    def test_flags_are_a_set(self) -> None:
        meta = ItemMeta()
        meta.add_item_flags(ItemFlag.HIDE_ENCHANTS, ItemFlag.HIDE_ENCHANTS)
        assert meta.item_flags == frozenset({ItemFlag.HIDE_ENCHANTS})
        meta.remove_item_flags(ItemFlag.HIDE_ENCHANTS)
        assert not meta.has_item_flag(ItemFlag.HIDE_ENCHANTS)

    def test_clone_is_independent(self) -> None:
        meta = ItemMeta()
        meta.set_display_name("A")
        meta.add_enchant(Enchantment.LURE, 2)
        clone = meta.clone()
        assert clone == meta
        clone.set_display_name("B")
        clone.add_enchant(Enchantment.LURE, 3)
        assert meta.display_name == "A"
        assert meta.get_enchant_level(Enchantment.LURE) == 2


# ── ItemStack ─────────────────────────────────────────────────


class TestItemStack:
    def test_defaults(self) -> None:
        item = ItemStack(Material.STONE)
        assert item.type is Material.STONE
        assert item.amount == 1
        assert item.max_stack_size == 64
        assert not item.has_item_meta()

    def test_get_item_meta_without_meta_is_fresh(self) -> None:
        item = ItemStack(Material.STONE)
        meta = item.get_item_meta()
        assert meta is not None
        assert meta.is_empty()

    def test_air_has_no_meta(self) -> None:
        item = ItemStack(Material.AIR)
        assert item.get_item_meta() is None
        assert item.set_item_meta(ItemMeta()) is False

    def test_meta_is_copied_in_and_out(self) -> None:
        item = ItemStack(Material.STONE)
        meta = ItemMeta()
        meta.set_display_name("Rock")
        item.set_item_meta(meta)

        meta.set_display_name("Changed")
        assert item.get_item_meta().display_name == "Rock"

        fetched = item.get_item_meta()
        fetched.set_display_name("Changed again")
        assert item.get_item_meta().display_name == "Rock"

    def test_empty_meta_does_not_count(self) -> None:
        item = ItemStack(Material.STONE)
        item.set_item_meta(ItemMeta())
        assert not item.has_item_meta()
        assert item == ItemStack(Material.STONE)

    def test_equality(self) -> None:
        a = ItemStack(Material.STONE, 3)
        b = ItemStack(Material.STONE, 3)
        assert a == b
        b.set_amount(4)
        assert a != b
