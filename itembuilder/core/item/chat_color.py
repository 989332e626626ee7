"""채팅 색상 코드: '&c' 같은 대체 코드를 렌더링용 '§c'로 변환"""

from __future__ import annotations

import re
from enum import Enum

COLOR_CHAR = "§"

# 0-9a-f 색상, k-o 서식, r 리셋, x 16진 색상 접두
ALL_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

_STRIP_COLOR_PATTERN = re.compile(f"(?i){COLOR_CHAR}[0-9A-FK-ORX]")


class ChatColor(str, Enum):
    """색상/서식 코드. value는 코드 문자 한 글자."""

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"

    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_format(self) -> bool:
        return self.value in "klmno"

    @property
    def is_color(self) -> bool:
        return not self.is_format and self is not ChatColor.RESET

    def __str__(self) -> str:
        return COLOR_CHAR + self.value


def translate_alternate_color_codes(alt_char: str, text: str) -> str:
    """alt_char + 코드 → '§' + 소문자 코드.

    코드가 아닌 문자가 뒤따르는 alt_char는 그대로 둔다.
    좌→우, 겹치지 않게 처리 ("&&c" → "&§c").
    """
    pattern = re.escape(alt_char) + "([" + re.escape(ALL_CODES) + "])"
    return re.sub(pattern, lambda m: COLOR_CHAR + m.group(1).lower(), text)


def strip_color(text: str) -> str:
    """'§' 코드 제거"""
    return _STRIP_COLOR_PATTERN.sub("", text)
