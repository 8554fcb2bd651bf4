from firststeps.arrays import sum_all, sum_rest, total


def test_total_any_size_collection():
    assert total([1, 2, 3]) == 6


def test_total_empty():
    assert total([]) == 0


def test_sum_all():
    assert sum_all([1, 2], [0, 9]) == [3, 9]


def test_sum_all_without_arguments():
    assert sum_all() == []


def test_sum_rest_of_some_slices():
    assert sum_rest([1, 2], [0, 9]) == [2, 9]


def test_sum_rest_empty_slices_safely():
    assert sum_rest([], [0, 9]) == [0, 9]