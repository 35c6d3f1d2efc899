"""
JSON Schema Contract Validators

Валидация внешних данных, несущих color identity строку, по JSON Schema контракту.
Использует библиотеку jsonschema (Draft 2020-12).

Схема строится из алфавита (ColorAlphabet), а не хранится отдельным файлом:
шаблон в схеме и REGEX в src.core.domain всегда совпадают.

jsonschema применяет pattern через re.search, а "$" в Python совпадает и перед
завершающим "\\n". Поэтому схема отдельно запрещает перевод строки (not/pattern)
и принимает ровно те строки, что и ColorAlphabet.is_valid.
"""

from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.alphabet import DEFAULT_ALPHABET, ColorAlphabet


# =============================================================================
# SCHEMA BUILDER
# =============================================================================


def build_color_identity_schema(alphabet: ColorAlphabet = DEFAULT_ALPHABET) -> Dict[str, Any]:
    """
    JSON Schema для color identity строки над алфавитом.

    Args:
        alphabet: Алфавит (default: DEFAULT_ALPHABET)

    Returns:
        Схема как dict

    Raises:
        ValueError: Если построенная схема некорректна (meta-validation)
    """
    schema: Dict[str, Any] = {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "color_identity",
        "description": "Color symbols, each optional, in canonical alphabet order",
        "type": "string",
        "pattern": alphabet.regex.pattern,
        "not": {"pattern": "\n"},
        "maxLength": len(alphabet),
    }

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for color_identity: {e}")

    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка значения по готовой схеме (Draft 2020-12).

    Схема передаётся словарём, а не загружается из файла.
    """

    def __init__(self, schema: Dict[str, Any]):
        self.schema = schema
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Проверка значения из внешнего payload (ожидается color identity строка).

        Raises:
            ValidationError: Наиболее релевантная ошибка (type, pattern, not, maxLength)
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Все нарушения для значения; e.validator называет нарушенное правило схемы.

        Для "uw" это только "pattern", для "wubrgw" — "pattern" и "maxLength".
        """
        return self.validator.iter_errors(data)


class ColorIdentityValidator(ContractValidator):
    """Валидатор для color_identity контракта."""

    def __init__(self, alphabet: ColorAlphabet = DEFAULT_ALPHABET):
        self.alphabet = alphabet
        super().__init__(build_color_identity_schema(alphabet))


# Глобальный экземпляр для алфавита по умолчанию
_DEFAULT_VALIDATOR = ColorIdentityValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_color_identity(data: Any) -> None:
    """
    Валидация color identity данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _DEFAULT_VALIDATOR.validate(data)


def is_valid_color_identity(data: Any) -> bool:
    return _DEFAULT_VALIDATOR.is_valid(data)
