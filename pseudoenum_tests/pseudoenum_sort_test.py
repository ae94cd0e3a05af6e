import suite
from dgen import from_schema
from pseudoenum import (
    S, sort_by, sort_by_keys, sort_by_descending, MaterializedSequence,
    natural_order, reverse_order, true_first, MissingArgumentError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_dgen': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']}
}


def _watched(items, seen):
    """generator source that records how far it has been consumed"""
    for item in items:
        seen.append(item)
        yield item


# sort_by() tests

@test("sort_by orders by absolute value")
def test_sort_by_absolute_value():
    cases = [
        ([5, 7, 8, 9], [5, 7, 8, 9]),
        ([-5, -17, -8, -9], [-5, -8, -9, -17]),
        ([5, 7, -88, 9], [5, 7, 9, -88]),
    ]
    for source, expected in cases:
        result = sort_by(source, abs)
        assert_that(result == expected, f"{source} should sort to {expected}, got {result}")


@test("sort_by uses an explicit comparer")
def test_sort_by_true_first_comparer():
    cases = [
        ([4, 7, 8, 9], [4, 8, 7, 9]),
        ([-5, -17, -8, -9], [-8, -5, -17, -9]),
        ([5, 7, -88, 9], [-88, 5, 7, 9]),
    ]
    for source, expected in cases:
        result = sort_by(source, lambda x: x % 2 == 0, true_first).to.list()
        assert_that(result == expected, f"{source} should sort to {expected}, got {result}")


@test("sort_by with a reversed comparer sorts descending")
def test_sort_by_reverse_comparer():
    result = sort_by([3, 1, 2], lambda x: x, reverse_order())
    assert_that(result == [3, 2, 1], f"unexpected order: {result}")
    result = sort_by(["bb", "a", "ccc"], len, reverse_order(natural_order))
    assert_that(result == ["ccc", "bb", "a"], f"unexpected order: {result}")


@test("sort_by is stable for equal keys")
def test_sort_by_stable():
    source = [("x", 1), ("y", 1), ("z", 0), ("w", 1)]
    result = sort_by(source, lambda t: t[1]).to.list()
    assert_that(result == [("z", 0), ("x", 1), ("y", 1), ("w", 1)], f"ties should keep source order: {result}")

    same = sort_by(["c", "a", "b"], lambda s: 0)
    assert_that(same == ["c", "a", "b"], "all-equal keys should leave the order untouched")


@test("sort_by consumes the source eagerly")
def test_sort_by_is_eager():
    seen = []
    result = sort_by(_watched([3, 1, 2], seen), lambda x: x)
    assert_that(seen == [3, 1, 2], "source should be fully consumed at call time")
    assert_that(isinstance(result, MaterializedSequence), "should return a materialized sequence")
    assert_that(result == [1, 2, 3], f"unexpected order: {result}")


@test("sort_by validates arguments before touching the source")
def test_sort_by_missing_arguments():
    seen = []
    error = assert_raises(MissingArgumentError, lambda: sort_by(None, abs), "None source")
    assert_that(error.argument == "source", "source should be reported")

    error = assert_raises(MissingArgumentError, lambda: sort_by(_watched([1], seen), None), "None key")
    assert_that(error.argument == "key_selector", "key selector should be reported")

    error = assert_raises(MissingArgumentError, lambda: sort_by(_watched([1], seen), abs, None), "None comparer")
    assert_that(error.argument == "comparer", "comparer should be reported")
    assert_that(seen == [], "no element should have been consumed")


@test("sort_by on an empty source never calls the key selector")
def test_sort_by_empty_source():
    calls = []
    result = sort_by([], lambda x: calls.append(x))
    assert_that(len(result) == 0, "result should be empty")
    assert_that(calls == [], "key selector should not run")


@test("sort_by is idempotent")
def test_sort_by_idempotent():
    people = from_schema(person_schema, seed=42).take(30)
    once = sort_by(people, lambda p: p['age'])
    twice = sort_by(once, lambda p: p['age'])
    assert_that(once == twice, "sorting a sorted sequence should change nothing")


@test("sort_by puts the smallest key first and the largest last")
def test_sort_by_first_and_last_keys():
    people = from_schema(person_schema, seed=7).take(25)
    ordered = people.sort_by(lambda p: p['name'])
    assert_that(ordered[0]['name'] <= ordered[-1]['name'], "first key should not exceed last key")
    ages = people.sort_by(lambda p: p['age']).transform(lambda p: p['age']).to.list()
    assert_that(ages == sorted(ages), "ages should be ascending")


@test("sort_by lets comparer errors through")
def test_sort_by_comparer_error():
    def broken(left, right):
        raise RuntimeError("cannot compare")

    error = assert_raises(RuntimeError, lambda: sort_by([2, 1], lambda x: x, broken))
    assert_that(str(error) == "cannot compare", "error should be the comparer's own")


@test("materialized result is repeatable and indexable")
def test_materialized_result():
    result = sort_by([3, 1, 2], lambda x: x)
    assert_that(list(result) == list(result) == [1, 2, 3], "two passes should agree")
    assert_that(len(result) == 3, "length should be known")
    assert_that(result[1] == 2, "indexing should work")
    assert_that(isinstance(result[1:], MaterializedSequence) and result[1:] == [2, 3], "slices stay materialized")


# sort_by_keys() tests

@test("sort_by_keys lets the second key dominate")
def test_sort_by_keys_fixtures():
    cases = [
        ([4, 7, 8, 9], [4, 7, 8, 9]),
        ([-5, -17, -8, -9], [-17, -5, -8, -9]),
        ([5, -17, -8, -9], [5, -17, -8, -9]),
        ([5, 7, -88, 9], [5, 7, 9, -88]),
    ]
    for source, expected in cases:
        result = sort_by_keys(source, abs, lambda x: str(-x)).to.list()
        assert_that(result == expected, f"{source} should sort to {expected}, got {result}")


@test("sort_by_keys uses the first key only to break ties")
def test_sort_by_keys_tie_break():
    source = [("b", 2), ("a", 1), ("c", 1), ("a", 2)]
    result = sort_by_keys(source, lambda t: t[0], lambda t: t[1]).to.list()
    assert_that(result == [("a", 1), ("c", 1), ("a", 2), ("b", 2)], f"unexpected order: {result}")


@test("sort_by_keys orders by the second key whatever the first key says")
def test_sort_by_keys_second_key_dominant():
    people = from_schema(person_schema, seed=99).take(40)
    ordered = people.sort_by_keys(lambda p: p['age'], lambda p: p['department']).to.list()
    for left, right in zip(ordered, ordered[1:]):
        assert_that(left['department'] <= right['department'], "departments should be ascending")
        if left['department'] == right['department']:
            assert_that(left['age'] <= right['age'], "ages break ties within a department")


@test("sort_by_keys validates every argument immediately")
def test_sort_by_keys_missing_arguments():
    error = assert_raises(MissingArgumentError, lambda: sort_by_keys(None, abs, str))
    assert_that(error.argument == "source", "source should be reported")
    error = assert_raises(MissingArgumentError, lambda: sort_by_keys([1], None, str))
    assert_that(error.argument == "first_key_selector", "first key should be reported")
    error = assert_raises(MissingArgumentError, lambda: sort_by_keys([1], abs, None))
    assert_that(error.argument == "second_key_selector", "second key should be reported")


# sort_by_descending() tests

@test("sort_by_descending reverses the ascending order")
def test_sort_by_descending_basic():
    assert_that(sort_by_descending([5, -17, -8, -9], abs) == [-17, -9, -8, 5], "largest magnitude first")
    assert_that(S([1, 3, 2]).sort_by_descending(lambda x: x) == [3, 2, 1], "fluent form should match")


@test("sort_by_descending reverses the order of tied elements")
def test_sort_by_descending_ties():
    source = [("a", 1), ("b", 1), ("c", 2)]
    result = sort_by_descending(source, lambda t: t[1]).to.list()
    assert_that(result == [("c", 2), ("b", 1), ("a", 1)], f"ties come out reversed: {result}")


@test("sort_by_descending validates immediately")
def test_sort_by_descending_missing_arguments():
    error = assert_raises(MissingArgumentError, lambda: sort_by_descending(None, abs))
    assert_that(error.argument == "source", "source should be reported")
    error = assert_raises(MissingArgumentError, lambda: sort_by_descending([1], None))
    assert_that(error.argument == "key_selector", "key selector should be reported")


if __name__ == "__main__":
    suite.run(title="pseudoenum sort operators test suite")
