"""ItemBuilder: 아이템 초안(draft)을 편집하고 ItemStack으로 만든다

규칙:
- 잘못된 입력은 예외 없이 흡수한다 (무시 또는 보정)
  - 홀수 길이 치환 인자 → 아무것도 하지 않음
  - 해석 불가 Material 이름 → 기존 값 유지
  - 인챈트 레벨 < 1 → 1
  - build 수량 < 1 → 1, max_stack_size 초과 → max_stack_size
- 컬렉션 접근자는 복사본을 반환한다
- build()는 초안을 변경하지 않는다 (반복 호출 가능)
"""

from __future__ import annotations

from typing import Optional, Union

from itembuilder.config import settings
from itembuilder.core.item.chat_color import strip_color, translate_alternate_color_codes
from itembuilder.core.item.models import Enchantment, ItemFlag, ItemStack, Material
from itembuilder.core.logging import get_logger

logger = get_logger(__name__)


class ItemBuilder:
    """아이템 초안 빌더

    사용 패턴:
        item = (
            ItemBuilder(Material.DIAMOND_SWORD, "&bExcalibur", ["&7Forged in fire"], color=True)
            .add_enchant(Enchantment.SHARPNESS, 10)
            .add_flag(ItemFlag.HIDE_ENCHANTS)
            .build()
        )
    """

    def __init__(
        self,
        material: Material,
        display_name: Optional[str] = None,
        lore: Optional[list[str]] = None,
        color: bool = False,
    ) -> None:
        self._material: Material = material
        self._display_name: Optional[str] = display_name
        self._lore: Optional[list[str]] = list(lore) if lore is not None else None
        self._custom_model_data: int = 0
        self._unbreakable: bool = False
        self._enchants: dict[Enchantment, int] = {}
        self._flags: list[ItemFlag] = []

        if color:
            self.color_display_name()
            self.color_lore()

    @classmethod
    def from_item(
        cls,
        item: ItemStack,
        color: bool = False,
        copy_meta: Optional[bool] = None,
    ) -> ItemBuilder:
        """기존 ItemStack에서 초안 생성. Material은 항상 복사.

        copy_meta=False (기본, settings.ITEM_BUILDER_COPY_EXISTING_META):
            스냅샷에 메타가 있으면 메타 복사를 건너뛴다. 메타가 없을 때만
            get_item_meta()가 주는 빈 메타에서 복사한다.
        copy_meta=True: 스냅샷의 메타가 있으면 그대로 복사한다.
        """
        if copy_meta is None:
            copy_meta = settings.ITEM_BUILDER_COPY_EXISTING_META

        builder = cls(item.type)

        if item.has_item_meta() and not copy_meta:
            logger.debug("Skipping meta copy for %s", item.type.name)
            return builder
        meta = item.get_item_meta()
        if meta is None:
            return builder

        builder._display_name = meta.display_name if meta.has_display_name() else None
        builder._lore = meta.lore if meta.has_lore() else None
        builder._custom_model_data = meta.custom_model_data
        builder._unbreakable = meta.unbreakable
        builder._enchants.update(meta.enchants)
        builder._flags.extend(f for f in ItemFlag if meta.has_item_flag(f))

        if color:
            builder.color_display_name()
            builder.color_lore()
        return builder

    def copy(self) -> ItemBuilder:
        """같은 초안을 가진 독립 빌더"""
        other = ItemBuilder(self._material, self._display_name, self._lore)
        other._custom_model_data = self._custom_model_data
        other._unbreakable = self._unbreakable
        other._enchants.update(self._enchants)
        other._flags.extend(self._flags)
        return other

    # === 빌드 ===

    def build(self, amount: int = 1) -> ItemStack:
        """초안으로 새 ItemStack 생성. 수량은 1 ~ max_stack_size로 보정."""
        max_stack = self._material.max_stack_size
        clamped = min(max_stack, max(1, amount))
        if clamped != amount:
            logger.debug("Clamped amount %d → %d for %s", amount, clamped, self._material.name)

        item = ItemStack(self._material)
        meta = item.get_item_meta()
        if meta is None:
            # AIR: 메타를 가질 수 없음
            item.set_amount(clamped)
            return item

        meta.set_display_name(self._display_name)
        meta.set_lore(self._lore)
        meta.set_custom_model_data(self._custom_model_data)
        meta.set_unbreakable(self._unbreakable)
        for enchantment, level in self._enchants.items():
            meta.add_enchant(enchantment, level, ignore_level_restriction=True)
        meta.add_item_flags(*self._flags)

        item.set_item_meta(meta)
        item.set_amount(clamped)
        return item

    # === 표시 이름 텍스트 ===

    def color_display_name(self) -> ItemBuilder:
        """'&' 색상 코드 변환. 이름이 없으면 무시."""
        if self._display_name is None:
            return self
        self._display_name = self._translate(self._display_name)
        return self

    def replace_display_name(self, *targets_and_replacements: str) -> ItemBuilder:
        """(대상, 치환) 쌍을 순서대로 적용. 각 치환은 이전 결과 위에서 수행."""
        if self._display_name is None:
            return self
        if not self._valid_pairs(targets_and_replacements):
            return self
        self._display_name = self._replace_all(self._display_name, targets_and_replacements)
        return self

    def color_and_replace_display_name(self, *targets_and_replacements: str) -> ItemBuilder:
        """치환 후 색상 코드 변환"""
        if self._display_name is None:
            return self
        if not self._valid_pairs(targets_and_replacements):
            return self
        replaced = self._replace_all(self._display_name, targets_and_replacements)
        self._display_name = self._translate(replaced)
        return self

    def plain_display_name(self) -> Optional[str]:
        """색상 코드를 제거한 이름. 이름이 없으면 None."""
        if self._display_name is None:
            return None
        return strip_color(self._display_name)

    # === 설명(lore) 텍스트 ===

    def color_lore(self) -> ItemBuilder:
        """각 줄 색상 코드 변환. lore가 없거나 비어 있으면 무시."""
        if not self._lore:
            return self
        self._lore = [self._translate(line) for line in self._lore]
        return self

    def replace_lore(self, *targets_and_replacements: str) -> ItemBuilder:
        if not self._lore:
            return self
        if not self._valid_pairs(targets_and_replacements):
            return self
        self._lore = [
            self._replace_all(line, targets_and_replacements) for line in self._lore
        ]
        return self

    def color_and_replace_lore(self, *targets_and_replacements: str) -> ItemBuilder:
        """각 줄에 (대상, 치환) 쌍마다 치환 후 색상 변환.

        쌍이 없으면 아무것도 변환하지 않는다.
        """
        if not self._lore:
            return self
        if not self._valid_pairs(targets_and_replacements):
            return self
        pairs = list(zip(targets_and_replacements[::2], targets_and_replacements[1::2]))
        lore = []
        for line in self._lore:
            for target, replacement in pairs:
                line = self._translate(line.replace(target, replacement))
            lore.append(line)
        self._lore = lore
        return self

    def add_lore_line(self, line: str) -> ItemBuilder:
        """lore 끝에 한 줄 추가. lore가 없으면 새로 만든다."""
        if self._lore is None:
            self._lore = []
        self._lore.append(line)
        return self

    # === 인챈트 ===

    def has_enchant(self, enchantment: Enchantment) -> bool:
        return enchantment in self._enchants

    def get_enchantments(self) -> list[Enchantment]:
        """인챈트 목록 (복사본)"""
        return list(self._enchants.keys())

    def get_enchant_level(self, enchantment: Enchantment) -> int:
        """없으면 0."""
        return self._enchants.get(enchantment, 0)

    def add_enchant(self, enchantment: Enchantment, level: int) -> ItemBuilder:
        """추가 또는 덮어쓰기. 레벨 최소 1, 최대 레벨 제한 없음."""
        if level < 1:
            logger.debug("Clamped %s level %d → 1", enchantment.name, level)
            level = 1
        self._enchants[enchantment] = level
        return self

    def remove_enchant(self, enchantment: Enchantment) -> ItemBuilder:
        self._enchants.pop(enchantment, None)
        return self

    def clear_enchants(self) -> ItemBuilder:
        self._enchants.clear()
        return self

    # === 플래그 ===

    def has_flag(self, flag: ItemFlag) -> bool:
        return flag in self._flags

    def flags(self) -> list[ItemFlag]:
        """플래그 목록 (복사본, 중복 포함)"""
        return list(self._flags)

    def add_flag(self, flag: ItemFlag) -> ItemBuilder:
        self._flags.append(flag)
        return self

    def add_flags(self, *flags: ItemFlag) -> ItemBuilder:
        self._flags.extend(flags)
        return self

    def remove_flag(self, flag: ItemFlag) -> ItemBuilder:
        """첫 번째 항목만 제거. 없으면 무시."""
        if flag in self._flags:
            self._flags.remove(flag)
        return self

    def remove_flags(self, *flags: ItemFlag) -> ItemBuilder:
        for flag in flags:
            self.remove_flag(flag)
        return self

    def clear_flags(self) -> ItemBuilder:
        self._flags.clear()
        return self

    # === 필드 접근자 ===

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, value: Union[Material, str]) -> None:
        """Material 또는 멤버 이름. 해석 불가 이름은 무시."""
        if isinstance(value, Material):
            self._material = value
            return
        resolved = Material.from_name(value)
        if resolved is None:
            logger.debug("Unknown material name ignored: %r", value)
            return
        self._material = resolved

    @property
    def display_name(self) -> Optional[str]:
        return self._display_name

    @display_name.setter
    def display_name(self, value: Optional[str]) -> None:
        self._display_name = value

    @property
    def lore(self) -> Optional[list[str]]:
        """복사본. 미설정이면 None (빈 리스트와 구분)."""
        return list(self._lore) if self._lore is not None else None

    @lore.setter
    def lore(self, value: Optional[list[str]]) -> None:
        self._lore = list(value) if value is not None else None

    @property
    def custom_model_data(self) -> int:
        return self._custom_model_data

    @custom_model_data.setter
    def custom_model_data(self, value: int) -> None:
        self._custom_model_data = value

    @property
    def unbreakable(self) -> bool:
        return self._unbreakable

    @unbreakable.setter
    def unbreakable(self, value: bool) -> None:
        self._unbreakable = value

    # === 내부 ===

    @staticmethod
    def _translate(text: str) -> str:
        return translate_alternate_color_codes(settings.ITEM_BUILDER_ALT_COLOR_CHAR, text)

    @staticmethod
    def _valid_pairs(targets_and_replacements: tuple[str, ...]) -> bool:
        if len(targets_and_replacements) % 2 != 0:
            logger.debug(
                "Ignored odd-length replacement list (%d args)",
                len(targets_and_replacements),
            )
            return False
        return True

    @staticmethod
    def _replace_all(text: str, targets_and_replacements: tuple[str, ...]) -> str:
        pairs = zip(targets_and_replacements[::2], targets_and_replacements[1::2])
        for target, replacement in pairs:
            text = text.replace(target, replacement)
        return text

    def __repr__(self) -> str:
        return (
            f"ItemBuilder(material={self._material.name}, "
            f"display_name={self._display_name!r}, lore={self._lore!r})"
        )
