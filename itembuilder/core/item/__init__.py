"""아이템 시스템 Core: 순수 Python, 호스트 아이템 모델 + 빌더"""

from .models import Material, Enchantment, ItemFlag, ItemMeta, ItemStack
from .chat_color import ChatColor, translate_alternate_color_codes, strip_color
from .builder import ItemBuilder

__all__ = [
    "Material",
    "Enchantment",
    "ItemFlag",
    "ItemMeta",
    "ItemStack",
    "ChatColor",
    "translate_alternate_color_codes",
    "strip_color",
    "ItemBuilder",
]
