"""
cid — Короткая форма разбора color identity

Принимает строку или фрагменты с подстановками и передаёт собранную строку
в ColorIdentity.parse. Собственной валидации нет.
"""

from typing import Sequence, Union

from src.core.domain.color_identity import ColorIdentity


def cid(templates: Union[str, Sequence[str]], *args: object) -> ColorIdentity:
    """
    Разбор color identity из строки или из фрагментов с подстановками.

    После i-го фрагмента подставляется str(args[i]); отсутствующая подстановка
    или None заменяется пустой строкой, лишние args игнорируются.

    Args:
        templates: Строка или последовательность литеральных фрагментов
        *args: Значения подстановок (строки, ColorIdentity, ...)

    Returns:
        ColorIdentity собранной строки

    Raises:
        ColorIdentityParseError: Если собранная строка невалидна

    Examples:
        >>> cid(["w", "rg"], "ub").value()
        'wubrg'
        >>> cid("wu").value()
        'wu'
    """
    parts = (templates,) if isinstance(templates, str) else tuple(templates)
    joined = "".join(
        f"{part}{args[i] if i < len(args) and args[i] is not None else ''}"
        for i, part in enumerate(parts)
    )
    return ColorIdentity.parse(joined)
