"""
Tests for numeric date expressions (no language active).

All fixtures pin "today" to 2025-06-15.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from humandate import HumanDateParser, fixed_clock


class TestNormalization:
    """Test input normalization and the unrecognized outcome."""

    @pytest.mark.parametrize("text", [None, "", " ", "\t\n"])
    def test_blank_input(self, numeric_parser: HumanDateParser, text) -> None:
        assert numeric_parser.resolve(text) is None

    @pytest.mark.parametrize("text", [
        "abc",
        "32-13-25",
        "1*2*2025",
        "32",
        "00",
        "2/13",
        "0/5",
        "1-2/2025",
        "1/2-25",
        "1/1/999",
        "12345",
        "1234567",
        "3213",
        "+",
        "+-3",
        "3+",
        "+3d",
        "today",
    ])
    def test_unrecognized(self, numeric_parser: HumanDateParser, text: str) -> None:
        assert numeric_parser.resolve(text) is None

    def test_surrounding_whitespace_ignored(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("  15  ") == date(2025, 6, 15)

    def test_callable(self, numeric_parser: HumanDateParser) -> None:
        """The parser can be used as a plain function."""
        assert numeric_parser("15") == numeric_parser.resolve("15")

    def test_non_ascii_digits_rejected(self, numeric_parser: HumanDateParser) -> None:
        """Only ASCII digits are accepted."""
        assert numeric_parser.resolve("١٥") is None


class TestOffsets:
    """Test zero and signed day offsets."""

    @pytest.mark.parametrize("text", ["0", "+0", "-0"])
    def test_zero_is_today(self, numeric_parser: HumanDateParser, today: date, text: str) -> None:
        assert numeric_parser.resolve(text) == today

    def test_day_offsets(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("+3") == date(2025, 6, 18)
        assert numeric_parser.resolve("-5") == date(2025, 6, 10)
        assert numeric_parser.resolve("+20") == date(2025, 7, 5)
        assert numeric_parser.resolve("-365") == date(2024, 6, 15)

    def test_leading_zeros(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("+007") == date(2025, 6, 22)

    def test_magnitude_bounded(self, numeric_parser: HumanDateParser, today: date) -> None:
        """Offsets longer than six digits are not recognized."""
        assert numeric_parser.resolve("+999999") == today + timedelta(days=999999)
        assert numeric_parser.resolve("+1000000") is None

    def test_out_of_calendar_range(self, numeric_parser: HumanDateParser) -> None:
        """A recognized offset landing before year 1 is unrecognized, not an error."""
        assert numeric_parser.resolve("-999999") is None

    def test_offset_past_calendar_end(self) -> None:
        parser = HumanDateParser(clock=fixed_clock(date(9999, 12, 31)))
        assert parser.resolve("+1") is None
        assert parser.resolve("-0") == date(9999, 12, 31)

    def test_other_errors_propagate(self, numeric_parser: HumanDateParser, monkeypatch) -> None:
        """Only calendar range failures are reported as unrecognized."""
        def broken(year: int, month: int, day: int) -> date:
            raise ValueError("broken handler")

        monkeypatch.setattr("humandate.parser.roll_forward", broken)
        with pytest.raises(ValueError, match="broken handler"):
            numeric_parser.resolve("7/12")


class TestBareDay:
    """Test standalone day values."""

    @pytest.mark.parametrize("text,expected", [
        ("1", date(2025, 6, 1)),
        ("7", date(2025, 6, 7)),
        ("07", date(2025, 6, 7)),
        ("15", date(2025, 6, 15)),
        ("30", date(2025, 6, 30)),
    ])
    def test_day_in_month(self, numeric_parser: HumanDateParser, text: str, expected: date) -> None:
        assert numeric_parser.resolve(text) == expected

    def test_overflow_uses_epoch_days(self, numeric_parser: HumanDateParser) -> None:
        """31 in a 30-day month is day 31 since 1970-01-01."""
        assert numeric_parser.resolve("31") == date(1970, 2, 1)

    def test_31_in_long_month(self) -> None:
        parser = HumanDateParser(clock=fixed_clock(date(2025, 7, 10)))
        assert parser.resolve("31") == date(2025, 7, 31)

    def test_february(self) -> None:
        parser = HumanDateParser(clock=fixed_clock(date(2025, 2, 3)))
        assert parser.resolve("28") == date(2025, 2, 28)
        assert parser.resolve("29") == date(1970, 1, 30)


class TestDayMonth:
    """Test day-month with a separator."""

    @pytest.mark.parametrize("text,expected", [
        ("7/12", date(2025, 12, 7)),
        ("01-1", date(2025, 1, 1)),
        ("3.09", date(2025, 9, 3)),
        ("7·8", date(2025, 8, 7)),
        ("31/12", date(2025, 12, 31)),
    ])
    def test_day_month(self, numeric_parser: HumanDateParser, text: str, expected: date) -> None:
        assert numeric_parser.resolve(text) == expected

    def test_day_rolls_into_next_month(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("31/04") == date(2025, 5, 1)
        assert numeric_parser.resolve("30-2") == date(2025, 3, 2)


class TestDayMonthYear:
    """Test day-month-year with separators."""

    @pytest.mark.parametrize("text", ["1.2.25", "1/2/25", "1-2-25", "1·2·25"])
    def test_two_digit_year_all_separators(self, numeric_parser: HumanDateParser, text: str) -> None:
        assert numeric_parser.resolve(text) == date(2025, 2, 1)

    @pytest.mark.parametrize("text", ["1.2.2025", "1/2/2025", "1-2-2025", "1·2·2025"])
    def test_four_digit_year_all_separators(self, numeric_parser: HumanDateParser, text: str) -> None:
        assert numeric_parser.resolve(text) == date(2025, 2, 1)

    def test_one_digit_year(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("5/5/5") == date(2005, 5, 5)

    def test_four_digit_year_kept(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("07/12/1999") == date(1999, 12, 7)

    def test_mixed_separators_rejected(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("1-2/2025") is None
        assert numeric_parser.resolve("1.2-25") is None

    def test_three_digit_year_rejected(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("1/2/202") is None

    def test_day_rolls_into_next_month(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("29/02/25") == date(2025, 3, 1)
        assert numeric_parser.resolve("29/02/2024") == date(2024, 2, 29)

    def test_year_below_100_pivots_by_value(self, numeric_parser: HumanDateParser) -> None:
        """Any year value below 100 is a 2000s year, whatever its digit count."""
        assert numeric_parser.resolve("1/1/0000") == date(2000, 1, 1)
        assert numeric_parser.resolve("1/1/0025") == date(2025, 1, 1)
        assert numeric_parser.resolve("31.12.0099") == date(2099, 12, 31)

    def test_year_100_kept(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("01/01/0100") == date(100, 1, 1)


class TestCompact:
    """Test digit-only forms."""

    def test_ddmm(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("1001") == date(2025, 1, 10)
        assert numeric_parser.resolve("0712") == date(2025, 12, 7)

    def test_ddmm_rolls_forward(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("3104") == date(2025, 5, 1)

    def test_ddmmyy(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("120424") == date(2024, 4, 12)
        assert numeric_parser.resolve("071225") == date(2025, 12, 7)

    def test_ddmmyyyy(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("12032025") == date(2025, 3, 12)
        assert numeric_parser.resolve("01011999") == date(1999, 1, 1)

    def test_year_zero_unrecognized(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("31120000") is None

    def test_invalid_parts(self, numeric_parser: HumanDateParser) -> None:
        assert numeric_parser.resolve("0013") is None
        assert numeric_parser.resolve("3213") is None
        assert numeric_parser.resolve("712") is None


class TestClock:
    """Test the injected clock."""

    def test_clock_read_per_call(self) -> None:
        days = iter([date(2025, 6, 15), date(2025, 7, 1)])
        parser = HumanDateParser(clock=lambda: next(days))
        assert parser.resolve("+1") == date(2025, 6, 16)
        assert parser.resolve("+1") == date(2025, 7, 2)

    def test_idempotent(self, numeric_parser: HumanDateParser) -> None:
        results = {numeric_parser.resolve("0712") for _ in range(5)}
        assert results == {date(2025, 12, 7)}

    def test_concurrent_resolution(self, numeric_parser: HumanDateParser) -> None:
        """Many threads can resolve against one parser."""
        inputs = ["15", "+3", "1001", "7/12/25"] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(numeric_parser.resolve, inputs))
        assert results == [numeric_parser.resolve(text) for text in inputs]
