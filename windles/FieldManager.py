"""
The FieldManager holds the velocity arrays that the turbines read from
and write into.
"""

import numpy as np


class Fields(object):
    """
    Fields owns the momentum fields of the flow as flat arrays indexed the
    same way as the grid. Turbines borrow them by reference through ``mp``
    and update them in place.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid the fields live on.
        names (list): names of the momentum fields.
    """
    def __init__(self, grid, names=("u","v","w")):
        self.grid = grid
        self.mp = {}
        for name in names:
            self.mp[name] = np.zeros(grid.ncells)

    def field3d(self, name):
        """
        returns a (k, j, i) view of a field, writes go through to the flat array
        """
        g = self.grid
        return self.mp[name].reshape((g.kcells, g.jcells, g.icells))

    def interior(self, name):
        """
        returns a view of the interior cells of a field without the ghost cells
        """
        g = self.grid
        return self.field3d(name)[g.kstart:g.kend, g.jstart:g.jend, g.istart:g.iend]
