"""Testes dos predicados de FieldRule."""

from __future__ import annotations

import math

import pytest

from app.validation import MISSING, FieldRule, RuleKind, Violation
from app.validation.rules import (
    has_max_length,
    has_min_length,
    is_boolean,
    is_email,
    is_non_negative,
    is_number,
    is_present,
    is_string,
    is_string_list,
    is_url,
    is_uuid4,
)


class TestPresence:
    """presence: falha para ausente, None ou string vazia."""

    @pytest.mark.parametrize("value", [MISSING, None, ""])
    def test_absent_values_fail(self, value: object) -> None:
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", 0, False, [], " "])
    def test_other_values_pass(self, value: object) -> None:
        assert is_present(value) is True


class TestUuid4:
    """uuid4: formato 8-4-4-4-12 com nibbles de versão/variante."""

    def test_valid_v4(self) -> None:
        assert is_uuid4("123e4567-e89b-42d3-a456-426614174000") is True

    def test_uppercase_is_accepted(self) -> None:
        assert is_uuid4("123E4567-E89B-42D3-A456-426614174000") is True

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            # versão 1
            "123e4567-e89b-12d3-a456-426614174000",
            # versão 4 com variante errada (c)
            "123e4567-e89b-42d3-c456-426614174000",
            # sem hífens
            "123e4567e89b42d3a456426614174000",
            "",
            MISSING,
            12345,
        ],
    )
    def test_invalid_values(self, value: object) -> None:
        assert is_uuid4(value) is False


class TestUrl:
    """url: absoluta, esquema reconhecido e host."""

    @pytest.mark.parametrize(
        "value",
        ["https://example.com/a.png", "http://cdn.example.com:8080/x?y=1", "ftp://files.example.com/a"],
    )
    def test_valid_urls(self, value: str) -> None:
        assert is_url(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "not a url",
            "/relative/path.png",
            "example.com/a.png",
            "mailto:someone@example.com",
            " https://example.com/a.png",
            "",
            None,
            42,
        ],
    )
    def test_invalid_urls(self, value: object) -> None:
        assert is_url(value) is False


class TestNumbers:
    """number e non_negative."""

    @pytest.mark.parametrize("value", [0, 30, 12.5, -5])
    def test_finite_numbers(self, value: float) -> None:
        assert is_number(value) is True

    @pytest.mark.parametrize("value", ["30", True, None, MISSING, math.inf, math.nan])
    def test_non_numbers(self, value: object) -> None:
        assert is_number(value) is False

    def test_negative_fails_non_negative(self) -> None:
        assert is_non_negative(-5) is False
        assert is_non_negative(-0.01) is False

    def test_non_negative_ignores_non_numbers(self) -> None:
        assert is_non_negative("30") is True
        assert is_non_negative(MISSING) is True

    def test_zero_is_non_negative(self) -> None:
        assert is_non_negative(0) is True

    def test_integer_beyond_float_range_is_a_number(self) -> None:
        huge = 10**400
        assert is_number(huge) is True
        assert is_non_negative(huge) is True
        assert is_non_negative(-huge) is False


class TestOtherKinds:
    """string, string_list e boolean."""

    def test_string(self) -> None:
        assert is_string("") is True
        assert is_string(1) is False

    def test_string_list(self) -> None:
        assert is_string_list([]) is True
        assert is_string_list(["a", "b"]) is True
        assert is_string_list(["a", 1]) is False
        assert is_string_list("ab") is False

    def test_boolean(self) -> None:
        assert is_boolean(False) is True
        assert is_boolean(0) is False
        assert is_boolean("true") is False


class TestEmail:
    """email: endereço sintaticamente válido, sem checagem de entrega."""

    @pytest.mark.parametrize("value", ["ana@clinica.com.br", "joao.silva+agenda@salao.io"])
    def test_valid_addresses(self, value: str) -> None:
        assert is_email(value) is True

    @pytest.mark.parametrize("value", ["ana", "ana@", "@clinica.com", "ana clinica@x.com", "", None, 42])
    def test_invalid_addresses(self, value: object) -> None:
        assert is_email(value) is False


class TestLength:
    """min_length e max_length contam caracteres de texto."""

    def test_bounds_are_inclusive(self) -> None:
        assert has_min_length("abc", 3) is True
        assert has_min_length("ab", 3) is False
        assert has_max_length("abc", 3) is True
        assert has_max_length("abcd", 3) is False

    def test_non_strings_are_left_to_string_rule(self) -> None:
        assert has_min_length(MISSING, 3) is True
        assert has_max_length(12345, 3) is True

    def test_field_rule_uses_its_limit(self) -> None:
        rule = FieldRule("password", RuleKind.MIN_LENGTH, "curta", limit=8)
        assert rule.check("12345678") is True
        assert rule.check("1234567") is False


class TestFieldRule:
    """FieldRule é imutável e respeita `optional`."""

    def test_is_frozen(self) -> None:
        rule = FieldRule("name", RuleKind.STRING, "O nome deve ser um texto")
        with pytest.raises(AttributeError):
            rule.field = "other"  # type: ignore[misc]

    def test_optional_skips_missing_and_none(self) -> None:
        rule = FieldRule("ids", RuleKind.STRING_LIST, "lista", optional=True)
        assert rule.check(MISSING) is True
        assert rule.check(None) is True
        assert rule.check("x") is False

    def test_required_rule_evaluates_missing(self) -> None:
        rule = FieldRule("ids", RuleKind.STRING_LIST, "lista")
        assert rule.check(MISSING) is False

    def test_violation_as_dict(self) -> None:
        assert Violation("avatar", "URL inválida").as_dict() == {
            "field": "avatar",
            "message": "URL inválida",
        }
