import logging
import operator
from functools import reduce

import numpy as np
import suite
import foldy
from foldy import IntegerRange, from_range

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def brute_force(values, identity=0):
    values = list(values)
    return reduce(operator.add, values) if values else identity


class _CapturedLog(logging.Handler):
    """collects messages from the aggregation logger while in a with block"""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []
        self._logger = logging.getLogger("foldy.aggregation")

    def emit(self, record):
        self.messages.append(record.getMessage())

    def __enter__(self):
        self._previous_level = self._logger.level
        self._logger.setLevel(logging.DEBUG)
        self._logger.addHandler(self)
        return self

    def __exit__(self, *exc_info):
        self._logger.removeHandler(self)
        self._logger.setLevel(self._previous_level)


# closed form

@test("inclusive range sums with the closed form")
def test_range_inclusive():
    assert_that(foldy.sum(IntegerRange(1, 5)) == 15, "1..5 should be 15")


@test("exclusive range drops the last value")
def test_range_exclusive():
    assert_that(foldy.sum(IntegerRange(1, 5, exclude_end=True)) == 10, "1...5 should be 10")


@test("single and empty ranges")
def test_range_degenerate():
    assert_that(foldy.sum(IntegerRange(5, 5)) == 5, "5..5 should be 5")
    assert_that(foldy.sum(IntegerRange(5, 5, exclude_end=True)) == 0, "5...5 should be 0")


@test("empty and reversed ranges sum to 0 whatever the identity")
def test_range_empty_ignores_identity():
    assert_that(foldy.sum(IntegerRange(5, 1)) == 0, "5..1 has no elements")
    assert_that(foldy.sum(IntegerRange(5, 5, exclude_end=True), 100) == 0, "5...5 with identity 100")
    assert_that(foldy.sum(IntegerRange(5, 1), "x") == 0, "identity is not used by the closed form")
    assert_that(foldy.sum(range(5, 5), 100) == 0, "empty builtin range with identity 100")
    assert_that(foldy.sum(range(5, 1), "x") == 0, "reversed builtin range")


@test("closed form matches brute force for many ranges")
def test_range_matches_brute_force():
    for first in range(-6, 7):
        for last in range(-6, 7):
            for exclude_end in (False, True):
                r = IntegerRange(first, last, exclude_end)
                expected = brute_force(list(r))
                assert_that(foldy.sum(r) == expected, f"mismatch for {r!r}")


@test("negative ranges")
def test_range_negative():
    assert_that(foldy.sum(IntegerRange(-3, 3)) == 0, "symmetric range cancels")
    assert_that(foldy.sum(IntegerRange(-5, -1)) == -15, "all negative")


@test("huge range sums without iterating")
def test_range_huge():
    n = 10 ** 12
    assert_that(foldy.sum(IntegerRange(1, n)) == n * (n + 1) // 2, "closed form for 1..10^12")
    assert_that(foldy.sum(from_range(1, n, exclude_end=True)) == (n - 1) * n // 2, "through the enumerable too")


@test("range result is an exact int")
def test_range_result_type():
    assert_that(type(foldy.sum(IntegerRange(1, 4))) is int, "no float from division")


# fallbacks

@test("range with transform folds instead")
def test_range_transform():
    assert_that(foldy.sum(IntegerRange(1, 4), 0, lambda x: x * 2) == 20, "2 + 4 + 6 + 8")
    assert_that(foldy.sum(IntegerRange(1, 3), '', str) == '123', "transform to strings")


@test("float bounds fall back to folding")
def test_range_float_bounds():
    r = IntegerRange(1.0, 4.0)
    assert_that(not r.has_integer_bounds, "floats are not integer bounds")
    assert_that(foldy.sum(r) == 10.0, "1.0 + 2.0 + 3.0 + 4.0")
    assert_that(list(IntegerRange(0.5, 3)) == [0.5, 1.5, 2.5], "steps by one from the start")


@test("numpy integer bounds fall back to folding")
def test_range_numpy_bounds():
    r = IntegerRange(np.int64(1), np.int64(4))
    assert_that(not r.has_integer_bounds, "numpy ints are not exact ints")
    assert_that(foldy.sum(r) == 10, "should still add up")


@test("bool bounds are not integer bounds")
def test_range_bool_bounds():
    assert_that(not IntegerRange(False, 3).has_integer_bounds, "bool should not count as int")


# builtin range

@test("builtin ranges sum in closed form for any step")
def test_builtin_range():
    assert_that(foldy.sum(range(1, 6)) == 15, "range(1, 6)")
    assert_that(foldy.sum(range(0, 10, 3)) == 18, "0 + 3 + 6 + 9")
    assert_that(foldy.sum(range(10, 0, -2)) == 30, "10 + 8 + 6 + 4 + 2")
    assert_that(foldy.sum(range(5, 5)) == 0, "empty range")
    assert_that(foldy.sum(range(10 ** 15)) == (10 ** 15 - 1) * 10 ** 15 // 2, "huge builtin range")


@test("builtin range with transform folds")
def test_builtin_range_transform():
    assert_that(foldy.sum(range(4), 0, lambda x: x ** 2) == 14, "0 + 1 + 4 + 9")


# the range value itself

@test("integer range iteration and membership")
def test_integer_range_basics():
    r = IntegerRange(1, 4, exclude_end=True)
    assert_that(list(r) == [1, 2, 3], "should iterate 1, 2, 3")
    assert_that(len(r) == 3, "should have three values")
    assert_that(3 in r and 4 not in r, "end is excluded")
    assert_that(4 in IntegerRange(1, 4), "end is included")
    assert_that(repr(r) == "IntegerRange(1...4)", "exclusive repr")
    assert_that(repr(IntegerRange(1, 4)) == "IntegerRange(1..4)", "inclusive repr")


@test("integer range converts to and from builtin range")
def test_integer_range_conversion():
    assert_that(IntegerRange(1, 4).to_range() == range(1, 5), "inclusive end adds one")
    assert_that(IntegerRange.from_range(range(2, 6)) == IntegerRange(2, 6, exclude_end=True), "step-1 range")
    assert_raises(ValueError, lambda: IntegerRange.from_range(range(0, 10, 2)), "step 2 cannot map")
    assert_raises(TypeError, lambda: IntegerRange(0.5, 2).to_range(), "float bounds cannot map")


@test("integer range is an immutable value")
def test_integer_range_value():
    assert_that(IntegerRange(1, 5) == IntegerRange(1, 5), "equal by bounds")
    assert_that(len({IntegerRange(1, 5), IntegerRange(1, 5)}) == 1, "hashable")
    assert_raises(AttributeError, lambda: setattr(IntegerRange(1, 5), 'first', 2), "frozen")


@test("membership of non-int items is decided by the bounds")
def test_integer_range_non_int_membership():
    huge = IntegerRange(1, 10 ** 12)
    assert_that(2.5 not in huge, "fractional values are never members")
    assert_that(foldy.exclude(huge, 2.5), "exclude answers without scanning")
    assert_that(2.0 in huge, "integral floats match like builtin range")
    assert_that(True in IntegerRange(0, 3), "bool compares as an int")
    assert_that('a' not in huge, "incomparable items are not members")
    assert_that(float('inf') not in huge and float('nan') not in huge, "inf and nan are outside")
    assert_that(10 ** 12 + 1 not in huge and 0 not in huge, "just outside either end")


# logging

@test("sum logs which path it took")
def test_sum_logs_path():
    with _CapturedLog() as log:
        foldy.sum(IntegerRange(1, 5))
        foldy.sum(range(3), 0, str)
        foldy.sum([1, 2])
    assert_that(any("closed form" in m for m in log.messages), "closed form is logged")
    assert_that(any("falls back" in m for m in log.messages), "builtin range fallback is logged")
    assert_that(any("by folding" in m for m in log.messages), "generic fold is logged")


if __name__ == "__main__":
    suite.run(title="foldy range sum test suite")
