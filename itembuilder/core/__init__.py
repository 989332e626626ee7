"""ItemBuilder Core"""
__version__ = "0.1.0"

from itembuilder.core.item import (
    ChatColor,
    Enchantment,
    ItemBuilder,
    ItemFlag,
    ItemMeta,
    ItemStack,
    Material,
)

__all__ = [
    "ChatColor",
    "Enchantment",
    "ItemBuilder",
    "ItemFlag",
    "ItemMeta",
    "ItemStack",
    "Material",
]
