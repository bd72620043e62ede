"""
Small numerical helpers shared by the turbine and inflow classes.
"""

import numpy as np


def nearest_index_linear(val, arr, s, e):
    '''
    Returns the index in [s, e) whose coordinate is closest to ``val``.

    The range is scanned upward and an index only replaces the current
    best when its distance is strictly smaller, so ties go to the lower
    index.
    '''
    idx = s
    md = abs(arr[s] - val)
    for i in range(s+1, e):
        d = abs(arr[i] - val)
        if d < md:
            md = d
            idx = i
    return idx


def nearest_index_bisect(val, arr, s, e):
    '''
    Same result as :func:`nearest_index_linear` for a strictly increasing
    ``arr[s:e]``, found with a binary search.
    '''
    coords = np.asarray(arr[s:e], dtype=float)
    pos = int(np.searchsorted(coords, val))

    if pos <= 0:
        return s
    if pos >= len(coords):
        return e-1

    ### Equal distances resolve to the lower of the two neighbours ###
    if abs(coords[pos] - val) < abs(coords[pos-1] - val):
        return s+pos
    return s+pos-1


nearest_search_dict = {
    "linear": nearest_index_linear,
    "bisect": nearest_index_bisect,
}
