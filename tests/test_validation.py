"""Tests for the shared validation helpers."""

from __future__ import annotations

import math

import pytest

from calc_api.core.errors import InvalidInputError
from calc_api.services.validation import (
    NOT_A_NUMBER,
    OUT_OF_RANGE,
    UNSUPPORTED_VALUE,
    Validator,
    parse_number,
    run_validated,
)


class TestParseNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [("100", 100.0), (" 50.5 ", 50.5), ("-3", -3.0), (7, 7.0), (2.5, 2.5), ("1e2", 100.0)],
    )
    def test_parses_finite_numbers(self, raw, expected) -> None:
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "nan", "inf", "-Infinity", True, [], math.nan])
    def test_rejects_non_finite_or_non_numeric(self, raw) -> None:
        assert parse_number(raw) is None


class TestValidator:
    def test_valid_result_carries_parsed_values(self) -> None:
        v = Validator()
        v.number("prix", "12.5", "bad prix", minimum=0)
        v.choice("devise", "eur", ["EUR", "USD"], "bad devise")
        result = v.result()

        assert result.is_valid
        assert result.errors == ()
        assert dict(result.values) == {"prix": 12.5, "devise": "EUR"}

    def test_collects_every_violation(self) -> None:
        v = Validator()
        v.number("a", "abc", "a invalide")
        v.number("b", "-1", "b invalide", minimum=0)
        v.choice("c", "JPY", ["EUR"], "c invalide")
        result = v.result()

        assert not result.is_valid
        assert [(e.field, e.code) for e in result.errors] == [
            ("a", NOT_A_NUMBER),
            ("b", OUT_OF_RANGE),
            ("c", UNSUPPORTED_VALUE),
        ]
        assert result.message == "a invalide, b invalide, c invalide"
        assert dict(result.values) == {}

    def test_one_error_per_field(self) -> None:
        v = Validator()
        v.number("taux", "150", "taux invalide", minimum=0, maximum=100)
        assert v.result().messages == ["taux invalide"]

    def test_inclusive_and_exclusive_bounds(self) -> None:
        v = Validator()
        v.number("inclusive", "100", "inclusive", minimum=0, maximum=100)
        v.number("exclusive_max", "100", "exclusive_max", maximum=100, exclusive_maximum=True)
        v.number("exclusive_min", "0", "exclusive_min", minimum=0, exclusive_minimum=True)
        assert v.result().messages == ["exclusive_max", "exclusive_min"]

    def test_out_of_range_value_is_returned_for_cross_checks(self) -> None:
        v = Validator()
        assert v.number("x", "-5", "x", minimum=0) == -5.0

    def test_choice_rejects_missing_value(self) -> None:
        v = Validator()
        assert v.choice("devise", None, ["EUR"], "manquante") is None
        assert v.result().messages == ["manquante"]

    def test_check_appends_custom_code(self) -> None:
        v = Validator()
        v.check("montant", False, "trop grand", "exceeds_price")
        v.check("montant", True, "jamais", "never")
        assert [e.code for e in v.result().errors] == ["exceeds_price"]


class TestRunValidated:
    def test_runs_compute_with_values(self) -> None:
        v = Validator()
        v.number("a", "2", "a")
        v.number("b", "3", "b")
        assert run_validated(v.result(), lambda a, b: a * b) == 6.0

    def test_raises_with_all_errors_and_skips_compute(self) -> None:
        v = Validator()
        v.number("a", "x", "a invalide")
        v.number("b", "y", "b invalide")
        called = []

        with pytest.raises(InvalidInputError) as exc_info:
            run_validated(v.result(), lambda a, b: called.append(1))

        assert called == []
        assert exc_info.value.message == "a invalide, b invalide"
        assert exc_info.value.codes == [NOT_A_NUMBER, NOT_A_NUMBER]
