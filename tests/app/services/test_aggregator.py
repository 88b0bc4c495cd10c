"""Testes do agregador de valores e contagens."""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.dashboard import Period
from app.services.aggregator import compute_totals, count, parse_amount, sum_amounts


class TestParseAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("10.50", Decimal("10.50")),
            ("5", Decimal("5")),
            ("  7.25 ", Decimal("7.25")),
            ("12.5abc", Decimal("12.5")),
            ("-3", Decimal("-3")),
            (".5", Decimal("0.5")),
            ("1e2", Decimal("100")),
            ("", Decimal("0")),
            (None, Decimal("0")),
            ("abc", Decimal("0")),
            ("NaN", Decimal("0")),
            ("Infinity", Decimal("0")),
            ("R$ 10", Decimal("0")),
        ],
    )
    def test_values(self, raw: str | None, expected: Decimal) -> None:
        assert parse_amount(raw) == expected

    def test_comma_stops_parsing(self) -> None:
        assert parse_amount("10,50") == Decimal("10")

    @pytest.mark.parametrize(
        "raw",
        ["1e1000000", "1e30", "12345678901234567890123456789", "-1e15", "0e999999"],
    )
    def test_out_of_range_values_are_zero(self, raw: str) -> None:
        assert parse_amount(raw) == Decimal("0")

    def test_largest_accepted_value(self) -> None:
        assert parse_amount("999999999999999.99") == Decimal("999999999999999.99")


class TestSums:
    def test_malformed_amounts_contribute_zero(self, make_atendimento) -> None:
        records = [
            make_atendimento("a1", amount="10.50"),
            make_atendimento("a2", amount=""),
            make_atendimento("a3", amount="abc"),
            make_atendimento("a4", amount="5"),
        ]
        assert sum_amounts(records) == Decimal("15.50")
        assert count(records) == 4

    def test_empty_list(self) -> None:
        assert sum_amounts([]) == Decimal("0")
        assert count([]) == 0

    def test_keeps_full_precision(self, make_atendimento) -> None:
        records = [make_atendimento("a1", amount="0.1"), make_atendimento("a2", amount="0.2")]
        assert sum_amounts(records) == Decimal("0.3")

    def test_huge_amounts_do_not_break_the_sum(self, make_atendimento) -> None:
        records = [
            make_atendimento("a1", amount="1e1000000"),
            make_atendimento("a2", amount="12345678901234567890123456789"),
            make_atendimento("a3", amount="7"),
        ]
        assert sum_amounts(records) == Decimal("7")


class TestComputeTotals:
    def _records(self, make_atendimento):
        return [
            make_atendimento("hoje", date="2026-10-21T09:00:00", amount="50"),
            make_atendimento("domingo", date="2026-10-18T10:00:00", amount="30"),
            make_atendimento("inicio_mes", date="2026-10-02T10:00:00", amount="20"),
            make_atendimento("marco", date="2026-03-10T10:00:00", amount="100"),
            make_atendimento("ano_passado", date="2025-12-31T10:00:00", amount="999"),
            make_atendimento("futuro", date="2026-10-22T10:00:00", amount="1000"),
            make_atendimento("sem_data", date="??", amount="7"),
        ]

    @pytest.mark.parametrize(
        ("period", "amount", "period_count"),
        [
            (Period.DAY, Decimal("50"), 1),
            (Period.WEEK, Decimal("80"), 2),
            (Period.MONTH, Decimal("100"), 3),
            (Period.YEAR, Decimal("200"), 4),
        ],
    )
    def test_period_amounts(self, make_atendimento, fixed_now, tz, period, amount, period_count) -> None:
        totals = compute_totals(self._records(make_atendimento), period, fixed_now, tz)
        assert totals.period_amount == amount
        assert totals.period_count == period_count

    def test_week_count_ignores_period(self, make_atendimento, fixed_now, tz) -> None:
        records = self._records(make_atendimento)
        week_counts = {compute_totals(records, period, fixed_now, tz).week_count for period in Period}
        assert week_counts == {2}

    def test_count_includes_undated_records(self, make_atendimento, fixed_now, tz) -> None:
        totals = compute_totals(self._records(make_atendimento), Period.YEAR, fixed_now, tz)
        assert totals.count == 7
