"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора color identity:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений типа, pattern и maxLength
- Согласованность с ColorAlphabet.is_valid
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    ColorIdentityValidator,
    ContractValidator,
    build_color_identity_schema,
    is_valid_color_identity,
    validate_color_identity,
)
from src.core.domain import FULL, REGEX, ColorAlphabet, is_valid
from src.core.math import sub_color_identities


INVALID_SAMPLES = [
    " ", "w ", " w", "uw", "ww", "x", "W", "wubrgw", "invalid input", "w\n", "\n", "wu\n",
]


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    """Тесты построения схемы"""

    def test_schema_is_valid_json_schema(self) -> None:
        schema = build_color_identity_schema()
        Draft202012Validator.check_schema(schema)

    def test_schema_derived_from_alphabet(self) -> None:
        schema = build_color_identity_schema()
        assert schema["type"] == "string"
        assert schema["pattern"] == REGEX.pattern
        assert schema["not"] == {"pattern": "\n"}
        assert schema["maxLength"] == len(FULL)

    def test_custom_alphabet_schema(self) -> None:
        schema = build_color_identity_schema(ColorAlphabet(symbols=("x", "y")))
        assert schema["pattern"] == "^x?y?$"
        assert schema["maxLength"] == 2


# =============================================================================
# VALIDATION
# =============================================================================


class TestColorIdentityValidator:
    """Тесты для ColorIdentityValidator"""

    def test_accepts_all_canonical_strings(self) -> None:
        for s in sub_color_identities(FULL):
            validate_color_identity(s)
            assert is_valid_color_identity(s)

    @pytest.mark.parametrize("raw", INVALID_SAMPLES)
    def test_rejects_invalid_strings(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            validate_color_identity(raw)
        assert not is_valid_color_identity(raw)

    @pytest.mark.parametrize("raw", [None, 5, ["w"], {"color_identity": "w"}])
    def test_rejects_non_strings(self, raw) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_color_identity(raw)
        assert exc_info.value.validator == "type"

    @pytest.mark.parametrize("raw", [*sub_color_identities(FULL), *INVALID_SAMPLES])
    def test_agrees_with_alphabet(self, raw: str) -> None:
        assert is_valid_color_identity(raw) == is_valid(raw)

    def test_iter_errors_reports_pattern(self) -> None:
        validator = ColorIdentityValidator()
        errors = list(validator.iter_errors("uw"))
        assert [e.validator for e in errors] == ["pattern"]

    @pytest.mark.parametrize("raw", ["w\n", "\n"])
    def test_trailing_newline_rejected(self, raw: str) -> None:
        """Завершающий перевод строки отклоняет правило not, а не pattern"""
        validator = ColorIdentityValidator()
        assert [e.validator for e in validator.iter_errors(raw)] == ["not"]
        assert not is_valid(raw)

    def test_iter_errors_reports_max_length(self) -> None:
        validator = ColorIdentityValidator()
        validators = {e.validator for e in validator.iter_errors("wubrgw")}
        assert "maxLength" in validators

    def test_custom_alphabet_validator(self) -> None:
        alphabet = ColorAlphabet(symbols=("x", "y", "z"))
        validator = ColorIdentityValidator(alphabet)
        assert validator.alphabet is alphabet
        assert validator.is_valid("xz")
        assert not validator.is_valid("wu")

    def test_base_validator_with_arbitrary_schema(self) -> None:
        validator = ContractValidator({"type": "string", "maxLength": 1})
        assert validator.is_valid("w")
        assert not validator.is_valid("wu")
