from raidprobe.multimap import from_multi_iter


def test_groups_values_by_key_in_order():
    result = from_multi_iter([("a", 1), ("b", 2), ("a", 3), ("a", 4)])
    assert result == {"a": [1, 3, 4], "b": [2]}


def test_empty_input_gives_empty_mapping():
    assert from_multi_iter([]) == {}


def test_accepts_generator():
    result = from_multi_iter((n % 2, n) for n in range(5))
    assert result == {0: [0, 2, 4], 1: [1, 3]}


def test_total_value_count_preserved():
    pairs = [(k, v) for k in "xyz" for v in range(3)]
    result = from_multi_iter(pairs)
    assert sum(len(values) for values in result.values()) == len(pairs)
    assert set(result) == {"x", "y", "z"}