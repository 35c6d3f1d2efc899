"""
Set Algebra — Операции над color identity строками

Чистые функции над каноническими color identity строками:
- Объединение (add) и разность (subtract)
- Проверка вхождения (contains)
- Равенство (eq/neq)
- Сравнение по мощности (gt/gte/lt/lte)

ПРЕДУСЛОВИЕ: все входы — уже канонические color identity строки.
Функции не валидируют входы; результат для неканонического входа не определён.
Канонические входы всегда дают канонический результат.

ВАЖНО: gt/gte/lt/lte сравнивают только количество символов, а не вложенность
множеств. Две разные identity одинаковой длины не больше и не меньше друг друга:
gt("wu", "rg") == lt("wu", "rg") == eq("wu", "rg") == False.
"""

from src.core.domain.alphabet import DEFAULT_ALPHABET, ColorAlphabet, ColorIdentityString


# =============================================================================
# ОБЪЕДИНЕНИЕ / РАЗНОСТЬ
# =============================================================================


def add(
    base: ColorIdentityString,
    other: ColorIdentityString,
    alphabet: ColorAlphabet = DEFAULT_ALPHABET,
) -> ColorIdentityString:
    """
    Объединение двух color identity строк.

    Обход идёт по алфавиту, а не по входам: так результат сразу получается
    в каноническом порядке.

    Args:
        base: Базовая identity
        other: Identity, добавляемая к base
        alphabet: Алфавит (default: DEFAULT_ALPHABET)

    Returns:
        Символы, присутствующие в base или other

    Examples:
        >>> add("wu", "brg")
        'wubrg'
        >>> add("wu", "u")
        'wu'
    """
    return "".join(c for c in alphabet.full if c in base or c in other)


def subtract(base: ColorIdentityString, other: ColorIdentityString) -> ColorIdentityString:
    """
    Разность color identity строк: base без символов other.

    Порядок base сохраняется (он уже канонический).

    Examples:
        >>> subtract("wubrg", "wu")
        'brg'
    """
    return "".join(c for c in base if c not in other)


# =============================================================================
# ВХОЖДЕНИЕ / РАВЕНСТВО
# =============================================================================


def contains(base: ColorIdentityString, search: ColorIdentityString) -> bool:
    """
    True если все символы search присутствуют в base (search ⊆ base).

    Пустая search содержится в любой identity.
    """
    return all(c in base for c in search)


def eq(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    """Равенство строк (для канонической формы совпадает с равенством множеств)"""
    return base == other


def neq(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    return not eq(base, other)


# =============================================================================
# СРАВНЕНИЕ ПО МОЩНОСТИ
# =============================================================================


def gt(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    """
    True если в base строго больше символов, чем в other.

    Сравнивается только мощность: gt("wub", "rg") == True, хотя множества не пересекаются.
    """
    return len(base) > len(other)


def gte(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    """gt или eq"""
    return gt(base, other) or eq(base, other)


def lt(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    return gt(other, base)


def lte(base: ColorIdentityString, other: ColorIdentityString) -> bool:
    return gte(other, base)
