"""
ColorAlphabet — Алфавит цветовых символов и валидация color identity строк

Единственный источник истины для допустимых символов и их канонического порядка.
Из алфавита один раз при импорте выводятся:
- REGEX — регулярное выражение для проверки color identity строк
- FULL — полная color identity строка (все символы алфавита по порядку)

Color identity строка валидна тогда и только тогда, когда каждый символ алфавита
встречается в ней не более одного раза и в порядке алфавита. Пустая строка валидна.
"""

import re
from typing import Any, Final, TypeAlias

from pydantic import BaseModel, Field, PrivateAttr, field_validator


# Color identity строка: подпоследовательность алфавита
ColorIdentityString: TypeAlias = str


# =============================================================================
# АЛФАВИТ
# =============================================================================


class ColorAlphabet(BaseModel):
    """
    Упорядоченный набор различных односимвольных цветовых символов.

    Immutable модель (frozen=True). Порядок символов задаёт канонический порядок
    во всех color identity строках, построенных над этим алфавитом.
    """

    symbols: tuple[str, ...] = Field(
        ..., min_length=1, description="Цветовые символы в каноническом порядке"
    )

    model_config = {"frozen": True}

    # Вычисляются один раз при создании алфавита
    _regex: re.Pattern[str] = PrivateAttr()
    _full: ColorIdentityString = PrivateAttr()

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Каждый символ — ровно один знак, повторы запрещены"""
        for symbol in v:
            if len(symbol) != 1:
                raise ValueError(f"color symbol must be a single character, got {symbol!r}")
        if len(set(v)) != len(v):
            raise ValueError(f"color symbols must be distinct, got {v}")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._regex = self.build_regex()
        self._full = self.build_full()

    @property
    def regex(self) -> re.Pattern[str]:
        """Скомпилированный шаблон этого алфавита (общий для всех проверок)"""
        return self._regex

    @property
    def full(self) -> ColorIdentityString:
        """Полная color identity строка этого алфавита"""
        return self._full

    def pattern(self) -> str:
        """
        Шаблон регулярного выражения вида ^s1?s2?...sK?$.

        Символы экранируются, поэтому метасимволы regex допустимы в алфавите.
        """
        return "^" + "".join(f"{re.escape(s)}?" for s in self.symbols) + "$"

    def build_regex(self) -> re.Pattern[str]:
        """Скомпилированное регулярное выражение для color identity строк"""
        return re.compile(self.pattern())

    def build_full(self) -> ColorIdentityString:
        """Полная color identity строка: все символы алфавита по порядку"""
        return "".join(self.symbols)

    def is_valid(self, raw: Any) -> bool:
        """
        Проверка произвольного входа на соответствие формату color identity строки.

        Используется fullmatch: строка с завершающим переводом строки невалидна.

        Args:
            raw: Любой вход

        Returns:
            True если raw — строка в каноническом формате этого алфавита
        """
        if not isinstance(raw, str):
            return False
        return self._regex.fullmatch(raw) is not None

    def __len__(self) -> int:
        return len(self.symbols)


# =============================================================================
# КОНСТАНТЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Цветовые символы в каноническом порядке
COLOR_SYMBOLS: Final[tuple[str, ...]] = ("w", "u", "b", "r", "g")

DEFAULT_ALPHABET: Final[ColorAlphabet] = ColorAlphabet(symbols=COLOR_SYMBOLS)

# Регулярное выражение для проверки color identity строк
REGEX: Final[re.Pattern[str]] = DEFAULT_ALPHABET.regex

# Полная color identity содержит все возможные цветовые символы
FULL: Final[ColorIdentityString] = DEFAULT_ALPHABET.full


def is_valid(raw: Any, alphabet: ColorAlphabet = DEFAULT_ALPHABET) -> bool:
    """
    Проверка строки на соответствие формату color identity.

    Args:
        raw: Любой вход
        alphabet: Алфавит (default: DEFAULT_ALPHABET)

    Returns:
        True если raw — валидная color identity строка
    """
    return alphabet.is_valid(raw)
