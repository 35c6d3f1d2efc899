"""
Enumeration — Перечисление компонент и под-identity

- components: пустая identity и по одной identity на каждый символ base
- sub_color_identities: все подмножества символов base (булеан), 2^n элементов

Входы, как и в set_algebra, должны быть каноническими color identity строками.
"""

from typing import List

from src.core.domain.alphabet import ColorIdentityString


def components(base: ColorIdentityString) -> List[ColorIdentityString]:
    """
    Компоненты identity: ["", s1, s2, ..., sn] в порядке символов base.

    Args:
        base: Каноническая color identity строка

    Returns:
        Список из len(base) + 1 элементов, первый элемент всегда ""

    Examples:
        >>> components("")
        ['']
        >>> components("wu")
        ['', 'w', 'u']
    """
    return ["", *base]


def sub_color_identities(base: ColorIdentityString) -> List[ColorIdentityString]:
    """
    Все под-identity base (включая пустую и саму base).

    На каждом шаге текущий набор удваивается: новый символ дописывается к копии
    каждого уже построенного элемента. Символы base идут в каноническом порядке,
    поэтому каждая построенная строка тоже каноническая.

    Args:
        base: Каноническая color identity строка

    Returns:
        2^len(base) различных строк, отсортированных лексикографически

    Examples:
        >>> sub_color_identities("wu")
        ['', 'u', 'w', 'wu']
    """
    result: List[ColorIdentityString] = [""]
    for symbol in base:
        result = result + [r + symbol for r in result]
    return sorted(result)
