import numpy as np
import suite
from faker import Faker
from rangeq import get_first, get_first_or_default, normalize_window, NOT_FOUND, UNSET

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Faker.seed(42)
fake = Faker()

# helper data
numbers = [10, 20, 30, 40, 50]
strict_values = [{'p': 1}, {'p': '1'}, {'p': 1}]
own_attributes = [{'a': 1}, {'b': 2}, {'a': 0}]
ranked = [{'rank': i} for i in range(5)]


# default arguments

@test("default search returns the first element")
def test_default_returns_first():
    assert_that(get_first(numbers) == 10, "should return numbers[0]")
    assert_that(get_first(own_attributes) is own_attributes[0], "should return the element itself")


@test("single element sequence has an empty default window")
def test_single_element_default_window():
    # start 0, end 0: nothing is visited
    assert_that(get_first([7]) is NOT_FOUND, "one element gives a zero-length window")


@test("empty sequence is never searched")
def test_empty_sequence():
    assert_that(get_first([]) is NOT_FOUND, "empty list should give NOT_FOUND")
    assert_that(get_first([], 'p', 1) is NOT_FOUND, "matcher should not change that")
    assert_that(get_first([], start_index=-1) is NOT_FOUND, "-1 start should not change that")
    assert_that(get_first((), start_index=0, end_index=0) is NOT_FOUND, "explicit range should not change that")


# matcher semantics

@test("strict equality does not coerce strings to numbers")
def test_strict_equality_types():
    assert_that(get_first(strict_values, 'p', 1) is strict_values[0], "should match the int at index 0")
    assert_that(get_first(strict_values, 'p', '1') is strict_values[1], "should match the string at index 1")
    assert_that(get_first(strict_values, 'p', 1, 1) is NOT_FOUND, "string '1' must not match int 1")


@test("bool and float values never match ints")
def test_strict_equality_bool_float():
    flags = [{'f': 1}, {'f': True}, {'f': 0}]
    assert_that(get_first(flags, 'f', True) is flags[1], "True should skip the int 1")
    floats = [{'x': 1.0}, {'x': 1}, {'x': 2}]
    assert_that(get_first(floats, 'x', 1) is floats[1], "1 should skip the float 1.0")


@test("None is a searchable value")
def test_none_value():
    values = [{'v': 0}, {'v': None}, {'v': 1}]
    assert_that(get_first(values, 'v', None) is values[1], "should find the explicit None")


@test("property name alone tests own attribute presence")
def test_own_attribute_presence():
    assert_that(get_first(own_attributes, 'a') is own_attributes[0], "index 0 has 'a'")
    assert_that(get_first(own_attributes, 'b') is own_attributes[1], "index 1 has 'b'")
    assert_that(get_first(own_attributes, 'c') is NOT_FOUND, "nobody has 'c'")


@test("falsy attribute values still count as present")
def test_falsy_attribute_present():
    result = get_first(own_attributes, 'a', UNSET, -1)
    assert_that(result is own_attributes[2], "backward scan should hit {'a': 0} first")


@test("empty property name matches everything")
def test_empty_property_name():
    assert_that(get_first(numbers, '') == 10, "'' should behave like no matcher")
    assert_that(get_first(numbers, None, 99) == 10, "a value without a name is ignored")


# range handling

@test("equal start and end visit nothing")
def test_zero_width_window():
    assert_that(get_first(numbers, start_index=1, end_index=1) is NOT_FOUND, "abs(1 - 1) is zero")
    assert_that(get_first(ranked, 'rank', 1, 1, 1) is NOT_FOUND, "even when index 1 would match")


@test("out of bounds windows give NOT_FOUND without raising")
def test_out_of_bounds():
    short = [1, 2, 3]
    assert_that(get_first(short, start_index=5, end_index=10) is NOT_FOUND, "past the end")
    assert_that(get_first(short, start_index=0, end_index=3) is NOT_FOUND, "end equal to length")
    assert_that(get_first(short, start_index=-2) is NOT_FOUND, "only -1 is rewritten")
    assert_that(get_first(short, start_index=1, end_index=-1) is NOT_FOUND, "negative end")


@test("end index is excluded in forward scans")
def test_forward_end_excluded():
    assert_that(get_first(ranked, 'rank', 3, 0, 3) is NOT_FOUND, "index 3 is the boundary")
    assert_that(get_first(ranked, 'rank', 2, 0, 3) is ranked[2], "index 2 is inside")
    assert_that(get_first(ranked, 'rank', 4) is NOT_FOUND, "default end is the last index")


@test("backward scans start at start_index and stop before end_index")
def test_backward_scan():
    assert_that(get_first(ranked, start_index=4, end_index=1) is ranked[4], "first visited is index 4")
    assert_that(get_first(ranked, 'rank', 2, 4, 1) is ranked[2], "index 2 is inside")
    assert_that(get_first(ranked, 'rank', 1, 4, 1) is NOT_FOUND, "index 1 is the boundary")


@test("explicit -1 start scans backward from the last element")
def test_minus_one_start():
    tagged = [{'p': 'a'}, {'q': 'b'}, {'p': 'c'}, {'q': 'd'}]
    assert_that(get_first(tagged, 'p', UNSET, -1) is tagged[2], "last element with 'p' before index 0")
    assert_that(get_first(ranked, start_index=-1, end_index=2) is ranked[4], "-1 with an explicit end")
    assert_that(get_first(ranked, 'rank', 0, -1) is NOT_FOUND, "index 0 closes the default window")


@test("normalize_window computes the end default before rewriting -1")
def test_normalize_window_order():
    window = normalize_window(5)
    assert_that((window.start, window.end) == (0, 4), f"defaults wrong: {window}")
    window = normalize_window(5, -1)
    assert_that((window.start, window.end) == (4, 0), f"-1 handling wrong: {window}")
    assert_that(window.step == -1 and window.count == 4, f"direction wrong: {window}")
    window = normalize_window(5, -3)
    assert_that((window.start, window.end) == (-3, 0), f"other negatives are kept: {window}")
    assert_that(list(normalize_window(5, 3, 1).indices()) == [3, 2], "visited indices wrong")


# results and contract

@test("get_first_or_default substitutes the default")
def test_get_first_or_default():
    assert_that(get_first_or_default(numbers, 'missing') is None, "default is None")
    assert_that(get_first_or_default(numbers, 'missing', default=-1) == -1, "custom default")
    assert_that(get_first_or_default(numbers, start_index=2) == 30, "found values pass through")


@test("NOT_FOUND is falsy and distinct from falsy elements")
def test_not_found_sentinel():
    falsy = [0, '', None, False]
    assert_that(get_first(falsy) == 0 and get_first(falsy) is not NOT_FOUND, "0 is a real result")
    assert_that(not NOT_FOUND, "sentinel should be falsy")
    assert_that(repr(NOT_FOUND) == 'NOT_FOUND', "sentinel should have a readable repr")


@test("search never mutates the sequence")
def test_no_mutation():
    data = [{'k': i} for i in range(6)]
    snapshot = [dict(item) for item in data]
    get_first(data, 'k', 3, -1)
    get_first(data, 'k', 99)
    assert_that(data == snapshot, "sequence should be unchanged")


@test("non-indexable input raises TypeError")
def test_non_indexable_input():
    with assert_raises(TypeError, "None should be rejected"):
        get_first(None)
    with assert_raises(TypeError, "sets are unordered"):
        get_first({1, 2, 3})
    with assert_raises(TypeError, "generators are not indexable"):
        get_first(x for x in range(3))


@test("numpy arrays are searched along the first axis")
def test_numpy_array():
    arr = np.array([3, 1, 2])
    assert_that(get_first(arr) == 3, "should return arr[0]")
    assert_that(get_first(arr, start_index=-1) == 2, "should return arr[-1]")
    with assert_raises(TypeError, "0-d arrays are not sequences"):
        get_first(np.array(5))


@test("finds generated records by exact value")
def test_generated_records():
    records = [fake.simple_profile() for _ in range(20)]
    needle = dict(records[12], username='needle-in-haystack')
    records[12] = needle
    assert_that(get_first(records, 'username', 'needle-in-haystack') is needle, "forward scan should find it")
    assert_that(get_first(records, 'username', 'needle-in-haystack', -1) is needle, "backward scan should find it")
    assert_that(get_first(records, 'username', 'needle-in-haystack', 0, 12) is NOT_FOUND, "12 is the boundary")
    assert_that(get_first(records, 'mail') is records[0], "every profile has a mail field")


if __name__ == "__main__":
    suite.main(title="rangeq search test suite")
