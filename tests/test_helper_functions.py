import numpy as np
import pytest

from windles.helper_functions import nearest_index_linear, nearest_index_bisect, nearest_search_dict


coords = np.array([-10.0, 10.0, 30.0, 50.0, 70.0, 90.0, 110.0])

### (value, start, end, expected index) ###
cases = [
    (  31.0, 1, 6, 2),
    (  40.0, 1, 6, 2),   # tie between 30 and 50 goes to the lower index
    (  60.0, 0, 7, 3),   # tie between 50 and 70
    (-100.0, 1, 6, 1),   # below the range
    ( 500.0, 1, 6, 5),   # above the range, 110 is outside [s, e)
    (  90.0, 1, 6, 5),
    (  10.0, 1, 6, 1),
]


@pytest.mark.parametrize("search", [nearest_index_linear, nearest_index_bisect], ids=["linear","bisect"])
@pytest.mark.parametrize("val,s,e,expected", cases)
def test_nearest_index(search, val, s, e, expected):
    assert search(val, coords, s, e) == expected


def test_searches_agree_on_random_values():
    rng = np.random.default_rng(3)
    arr = np.cumsum(rng.uniform(0.5, 3.0, 40))
    for val in rng.uniform(arr[0]-5.0, arr[-1]+5.0, 200):
        assert nearest_index_linear(val, arr, 2, 38) == nearest_index_bisect(val, arr, 2, 38)


def test_search_dict():
    assert set(nearest_search_dict) == {"linear", "bisect"}
