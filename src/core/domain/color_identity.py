"""
ColorIdentity — Color identity с изменяемым состоянием

Обёртка над чистыми функциями src.core.math.set_algebra и src.core.math.enumeration.
Состояние объекта — всегда каноническая color identity строка:
- при создании состояние валидируется
- add/subtract заменяют состояние результатом алгебры (он канонический по построению)
  и возвращают self для цепочек вызовов: ci.add("w").subtract("u")

Вся логика алгебры живёт в чистых функциях; методы только делегируют.
"""

import logging
from typing import ClassVar, List, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.alphabet import DEFAULT_ALPHABET, ColorAlphabet, ColorIdentityString
from src.core.math import enumeration, set_algebra

logger = logging.getLogger(__name__)


class ColorIdentityParseError(ValueError):
    """Входная строка не является валидной color identity строкой."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f'Not a valid ColorIdentityString: "{raw}"')


class ColorIdentity(BaseModel):
    """
    Color identity с состоянием.

    Методы экземпляра изменяют или сравнивают текущее состояние. Для операций
    над строками без создания объектов используйте функции src.core.math.

    Алфавит задаётся классовой переменной ALPHABET; подкласс может связать
    другой алфавит.
    """

    ALPHABET: ClassVar[ColorAlphabet] = DEFAULT_ALPHABET

    state: ColorIdentityString = Field(..., description="Каноническая color identity строка")

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: str) -> str:
        """Состояние должно быть канонической строкой алфавита класса"""
        if not cls.ALPHABET.is_valid(v):
            raise ValueError(f"state {v!r} is not a valid color identity string")
        return v

    # -------------------------------------------------------------------------
    # Разбор
    # -------------------------------------------------------------------------

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """True если raw — валидная color identity строка"""
        return cls.ALPHABET.is_valid(raw)

    @classmethod
    def parse(cls, raw: object) -> "ColorIdentity":
        """
        Разбор строки в ColorIdentity.

        Args:
            raw: Входная строка

        Returns:
            ColorIdentity с состоянием raw (без нормализации)

        Raises:
            ColorIdentityParseError: Если raw не является валидной color identity строкой
        """
        if not cls.is_valid(raw):
            logger.debug("Rejected color identity input: %r", raw)
            raise ColorIdentityParseError(raw)
        return cls.model_construct(state=raw)

    @staticmethod
    def _state_of(other: Union["ColorIdentity", ColorIdentityString]) -> ColorIdentityString:
        """Состояние ColorIdentity или сама строка, без повторной валидации"""
        return other.state if isinstance(other, ColorIdentity) else other

    # -------------------------------------------------------------------------
    # Изменяющие операции
    # -------------------------------------------------------------------------

    def add(self, other: Union["ColorIdentity", ColorIdentityString]) -> "ColorIdentity":
        """Добавляет другую identity к текущей. Возвращает self."""
        self.state = set_algebra.add(self.state, self._state_of(other), self.ALPHABET)
        return self

    def subtract(self, other: Union["ColorIdentity", ColorIdentityString]) -> "ColorIdentity":
        """Вычитает другую identity из текущей. Возвращает self."""
        self.state = set_algebra.subtract(self.state, self._state_of(other))
        return self

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def contains(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.contains(self.state, self._state_of(other))

    def eq(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.eq(self.state, self._state_of(other))

    def neq(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.neq(self.state, self._state_of(other))

    def gt(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        """Сравнение по количеству символов, не по вложенности"""
        return set_algebra.gt(self.state, self._state_of(other))

    def gte(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.gte(self.state, self._state_of(other))

    def lt(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.lt(self.state, self._state_of(other))

    def lte(self, other: Union["ColorIdentity", ColorIdentityString]) -> bool:
        return set_algebra.lte(self.state, self._state_of(other))

    # -------------------------------------------------------------------------
    # Перечисление
    # -------------------------------------------------------------------------

    def components(self) -> List[ColorIdentityString]:
        return enumeration.components(self.state)

    def sub_color_identities(self) -> List[ColorIdentityString]:
        return enumeration.sub_color_identities(self.state)

    def value(self) -> ColorIdentityString:
        """Текущая каноническая color identity строка"""
        return self.state

    def __str__(self) -> str:
        return self.state


def parse(raw: object) -> ColorIdentity:
    """Разбор строки в ColorIdentity (алфавит по умолчанию)."""
    return ColorIdentity.parse(raw)
