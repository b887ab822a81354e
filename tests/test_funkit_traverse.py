import pytest

from funkit.funkit_traverse import fold, map, filter, each
from funkit.funkit_datatypes import ArityError, ShapeError, TypeMismatchError, UnsupportedError


def add_ints(a: int, b: int) -> int:
    return a + b

# --- fold ---

def test_fold_int_list():
    assert fold(lambda a, b: a + b, [1, 2, 3]) == 6


def test_fold_string_list_with_initial():
    assert fold(lambda a, b: a + b, ["a", "b", "c"], "") == "abc"


def test_fold_empty_is_none():
    assert fold(lambda a, b: a + b, []) is None
    assert fold(lambda a, b: a + b, "") is None


def test_fold_initial_is_the_last_input():
    # ((a - b) - c) - initial, not ((initial - a) - b) - c
    assert fold(lambda a, b: a - b, [10, 1, 2], 3) == 4
    assert fold(lambda a, b: a + b, ["a", "b"], "z") == "abz"


def test_fold_initial_alone():
    assert fold(lambda a, b: a + b, [], 5) == 5


def test_fold_initial_type_must_match_elements():
    with pytest.raises(TypeMismatchError):
        fold(lambda a, b: a + b, [1.0, 2.0], 1)
    assert fold(lambda a, b: a + b, [1.0, 2.0], 1.0) == 4.0


def test_fold_character_sequence():
    assert fold(lambda a, b: b + a, "abc") == "cba"


def test_fold_fails_for_wrong_element_type():
    with pytest.raises(TypeMismatchError):
        fold(add_ints, ["a", "b", "c"])


def test_fold_fails_for_wrong_result_type():
    def join(a: str, b: str) -> int:
        return len(a + b)
    with pytest.raises(TypeMismatchError):
        fold(join, ["a", "b"])


def test_fold_requires_binary_function():
    with pytest.raises(ArityError):
        fold(lambda a: a, [1, 2])


def test_fold_requires_a_result():
    def nothing(a, b) -> None:
        pass
    with pytest.raises(ShapeError):
        fold(nothing, [1, 2])


def test_fold_rejects_mappings():
    with pytest.raises(UnsupportedError):
        fold(lambda a, b: a, {"a": 1})


def test_fold_does_not_modify_input():
    items = [1, 2]
    fold(lambda a, b: a + b, items, 3)
    assert items == [1, 2]

# --- map ---

def test_map_doubles_each_element():
    assert map([1, 2, 3], lambda a: a * 2) == [2, 4, 6]


def test_map_converts_type():
    def to_float(a: int) -> float:
        return float(a)
    assert map([1, 2, 3], to_float) == [1.0, 2.0, 3.0]


def test_map_keeps_tuples():
    assert map((1, 2), lambda a: a + 1) == (2, 3)


def test_map_fails_for_function_without_result():
    def nothing(a) -> None:
        pass
    with pytest.raises(ShapeError):
        map([1, 2, 3], nothing)


def test_map_fails_for_wrong_arity():
    with pytest.raises(ArityError):
        map([1, 2, 3], lambda a, b: a)
    with pytest.raises(ArityError):
        map({"a": 1}, lambda a: a)


def test_map_upcases_characters():
    assert map("abc", str.upper) == "ABC"


def test_map_characters_must_stay_characters():
    with pytest.raises(TypeMismatchError) as exc:
        map("ab", lambda c: c * 2)
    assert exc.value.position == 0


def test_map_characters_rejects_non_str_visitor():
    def code(c: int) -> int:
        return c
    with pytest.raises(TypeMismatchError):
        map("ab", code)


def test_map_transforms_mapping_entries():
    data = {"abc": 1, "def": 2, "ghi": 3}
    result = map(data, lambda k, v: (k.upper(), v * 2))
    assert result == {"ABC": 2, "DEF": 4, "GHI": 6}
    assert data == {"abc": 1, "def": 2, "ghi": 3}


def test_map_mapping_requires_pairs():
    with pytest.raises(ShapeError):
        map({"a": 1}, lambda k, v: v)

    def single(k, v) -> int:
        return v
    with pytest.raises(ShapeError):
        map({"a": 1}, single)


def test_map_mapping_with_annotated_pair():
    def swap(k: str, v: int) -> tuple[int, str]:
        return v, k
    assert map({"a": 1, "b": 2}, swap) == {1: "a", 2: "b"}


def test_map_mapping_key_collision_keeps_one_entry():
    result = map({"a": 1, "A": 2}, lambda k, v: (k.lower(), v))
    assert list(result) == ["a"]
    assert result["a"] in (1, 2)


def test_map_rejects_unsupported_containers():
    with pytest.raises(UnsupportedError):
        map({1, 2}, lambda a: a)

# --- filter ---

def test_filter_even_elements():
    assert filter([1, 2, 3], lambda a: a % 2 == 0) == [2]


def test_filter_by_type():
    assert filter([1, 2.3, "abc"], lambda a: isinstance(a, str)) == ["abc"]


def test_filter_keeps_order():
    assert filter((5, 1, 4, 2), lambda a: a > 1) == (5, 4, 2)


def test_filter_string_by_character():
    assert filter("aBcdEFg", str.islower) == "acdg"


def test_filter_mapping_by_key_and_value():
    data = {"a": 1, "b": 10, "c": 100}
    assert filter(data, lambda k, v: k == "b" and v == 10) == {"b": 10}
    assert filter(data, lambda k, v: k == "b") == {"b": 10}


def test_filter_predicate_must_return_bool():
    def not_a_predicate(a) -> str:
        return "yes"
    with pytest.raises(ShapeError):
        filter([1], not_a_predicate)


def test_filter_wrong_arity():
    with pytest.raises(ArityError):
        filter({"a": 1}, lambda v: True)

# --- each ---

def test_each_visits_in_order():
    seen = []
    assert each([1, 2, 3], seen.append) is None
    assert seen == [1, 2, 3]


def test_each_visits_tuples_of_records():
    records = [(1, "a"), (2, "b"), (3, "c")]
    seen = []
    each(records, lambda r: seen.append(r))
    assert seen == records


def test_each_visits_each_character():
    seen = []
    each("asdf", seen.append)
    assert "".join(seen) == "asdf"


def test_each_visits_every_mapping_entry():
    data = {"a": 1, "b": 10, "c": 100}
    seen = {}
    each(data, lambda k, v: seen.__setitem__(k, v))
    assert seen == data


def test_each_wrong_arity():
    with pytest.raises(ArityError):
        each([1], lambda k, v: None)
