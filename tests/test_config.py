"""Settings 테스트"""

import pytest
from pydantic import ValidationError

from itembuilder.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ITEM_BUILDER_ALT_COLOR_CHAR", raising=False)
        monkeypatch.delenv("ITEM_BUILDER_COPY_EXISTING_META", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_LEVEL == "INFO"
        assert s.ITEM_BUILDER_ALT_COLOR_CHAR == "&"
        assert s.ITEM_BUILDER_COPY_EXISTING_META is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ITEM_BUILDER_COPY_EXISTING_META", "true")
        monkeypatch.setenv("ITEM_BUILDER_ALT_COLOR_CHAR", "$")
        s = Settings(_env_file=None)
        assert s.ITEM_BUILDER_COPY_EXISTING_META is True
        assert s.ITEM_BUILDER_ALT_COLOR_CHAR == "$"

    @pytest.mark.parametrize("alt_char", ["", "&&"])
    def test_alt_color_char_must_be_single_char(
        self, monkeypatch: pytest.MonkeyPatch, alt_char: str
    ) -> None:
        monkeypatch.setenv("ITEM_BUILDER_ALT_COLOR_CHAR", alt_char)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
