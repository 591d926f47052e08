from fractions import Fraction

import pytest

from rational_errors import InvalidArgument
from rational import RationalNumber, make


class TestNormalization:
    @pytest.mark.parametrize("n", [-7, -1, 0, 1, 5, 123456])
    def test_zero_denominator_rejected(self, n):
        with pytest.raises(InvalidArgument):
            make(n, 0)

    @pytest.mark.parametrize("d", [-9, -1, 1, 2, 17])
    def test_zero_is_unique(self, d):
        r = make(0, d)
        assert r == make(0, 1)
        assert (r.numerator, r.denominator) == (0, 1)

    @pytest.mark.parametrize("n, d", [(1, -2), (-3, -4), (0, -5), (10, -4)])
    def test_negative_denominator_moves_sign(self, n, d):
        r = make(n, d)
        assert r == make(-n, -d)
        assert r.denominator > 0

    def test_reduces_to_lowest_terms(self):
        r = make(4, 6)
        assert r == make(2, 3)
        assert (r.numerator, r.denominator) == (2, 3)
        assert make(-10, -4) == make(5, 2)

    @pytest.mark.parametrize("n, d", [(1, 2), (-3, 4), (7, 1), (0, 1), (-13, 17), (22, 7)])
    def test_canonical_pairs_are_unchanged(self, n, d):
        r = make(n, d)
        assert (r.numerator, r.denominator) == (n, d)

    def test_default_denominator(self):
        assert make(5) == make(5, 1)
        assert RationalNumber() == make(0, 1)

    def test_accepts_rational_numerator(self):
        assert make(Fraction(1, 2), 3) == make(1, 6)
        assert make(make(2, 3), -2) == make(-1, 3)

    @pytest.mark.parametrize("n, d", [(1.5, 1), (1, 2.0), ("1", 2), (None, 1), (1, None)])
    def test_non_integral_parts_rejected(self, n, d):
        with pytest.raises(InvalidArgument):
            RationalNumber(n, d)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            make(1, 0)

    def test_rejection_is_logged(self, debug_log):
        with pytest.raises(InvalidArgument):
            make(3, 0)
        assert any("zero denominator" in rec.getMessage() for rec in debug_log.records)


class TestValueSurface:
    def test_accessors_are_read_only(self, half):
        with pytest.raises(AttributeError):
            half.numerator = 3
        with pytest.raises(AttributeError):
            half.denominator = 5
        with pytest.raises(AttributeError):
            half.extra = 1
        assert half == make(1, 2)

    def test_string_rendering(self):
        assert str(make(-4, 6)) == "-2/3"
        assert str(make(3)) == "3/1"
        assert make(0, 9).to_string() == "0/1"
        assert repr(make(2, -4)) == "RationalNumber(-1, 2)"

    def test_predicates_and_conversions(self, half, zero):
        assert zero.is_zero()
        assert not half.is_zero()
        assert make(6, 3).is_int()
        assert not half.is_int()
        assert make(7, 2).to_int() == 3
        assert make(-7, 2).to_int() == -4
        assert float(make(1, 4)) == 0.25
