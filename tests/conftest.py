"""Shared test fixtures."""

import pytest

from itembuilder.config import settings
from itembuilder.core.item.builder import ItemBuilder
from itembuilder.core.item.models import Material


@pytest.fixture(autouse=True)
def _default_builder_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """.env / 환경 변수와 무관하게 기본값으로 고정"""
    monkeypatch.setattr(settings, "ITEM_BUILDER_ALT_COLOR_CHAR", "&")
    monkeypatch.setattr(settings, "ITEM_BUILDER_COPY_EXISTING_META", False)


@pytest.fixture()
def named_builder() -> ItemBuilder:
    """이름 + lore가 있는 칼 초안 (색상 미변환)"""
    return ItemBuilder(
        Material.DIAMOND_SWORD,
        "&bExcalibur of {owner}",
        ["&7Owner: {owner}", "&7Kills: {kills}"],
    )
