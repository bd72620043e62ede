"""
The DomainManager submodule contains the structured grid that the
turbines are discretized on.

"""

import numpy as np

from windles.ParameterManager import windles_parameters


class StructuredGrid(object):
    """
    A StructuredGrid is a collocated, cell centred box grid with ghost
    cells on each side. Fields living on it are flat arrays addressed with
    ``i + j*jstride + k*kstride``.

    Example:
        In the .yaml file you need to define::

            domain:
                #                     # Description              | Units
                xsize: 1000.0         # x-extent of the domain   | m
                ysize: 1000.0         # y-extent of the domain   | m
                zsize: 500.0          # z-extent of the domain   | m
                itot: 40              # interior cells in x      | -
                jtot: 40              # interior cells in y      | -
                ktot: 20              # interior cells in z      | -

        The horizontal spacing is uniform. Setting ``z_levels`` to a list of
        ``ktot`` increasing heights produces a stretched vertical grid.

    Args:
        params (:class:`windles.ParameterManager.Parameters`): optional parameter object.
    """
    def __init__(self, params=None):
        if params is None:
            params = windles_parameters
        self.params = params
        self.fprint = params.fprint

        self.load_parameters()
        self.compute_parameters()

        self.fprint("Grid Size: {:d} x {:d} x {:d}".format(self.itot,self.jtot,self.ktot))
        self.fprint("Spacing: dx = {: 1.2f}, dy = {: 1.2f}".format(self.dx,self.dy))

    def load_parameters(self):
        domain = self.params["domain"]
        self.xsize = float(domain["xsize"])
        self.ysize = float(domain["ysize"])
        self.zsize = float(domain["zsize"])
        self.itot = int(domain["itot"])
        self.jtot = int(domain["jtot"])
        self.ktot = int(domain["ktot"])
        self.igc = int(domain["igc"])
        self.jgc = int(domain["jgc"])
        self.kgc = int(domain["kgc"])
        self.z_levels = domain["z_levels"]

        if min(self.itot,self.jtot,self.ktot) < 1:
            raise ValueError("domain:itot, jtot and ktot must be at least 1")
        if min(self.igc,self.jgc,self.kgc) < 0:
            raise ValueError("domain:igc, jgc and kgc cannot be negative")
        if self.z_levels is not None and len(self.z_levels) != self.ktot:
            raise ValueError("domain:z_levels needs exactly ktot={:d} values".format(self.ktot))

    def compute_parameters(self):
        ### Index bounds of the interior ###
        self.istart = self.igc
        self.jstart = self.jgc
        self.kstart = self.kgc
        self.iend = self.itot+self.igc
        self.jend = self.jtot+self.jgc
        self.kend = self.ktot+self.kgc

        ### Total cells including ghost cells ###
        self.icells = self.itot+2*self.igc
        self.jcells = self.jtot+2*self.jgc
        self.kcells = self.ktot+2*self.kgc
        self.ncells = self.icells*self.jcells*self.kcells

        self.jstride = self.icells
        self.kstride = self.icells*self.jcells

        self.dx = self.xsize/self.itot
        self.dy = self.ysize/self.jtot

        ### Cell centre coordinates ###
        self.x = (np.arange(self.icells)-self.igc+0.5)*self.dx
        self.y = (np.arange(self.jcells)-self.jgc+0.5)*self.dy
        self.z = self.compute_heights()

    def compute_heights(self):
        if self.z_levels is None:
            dz = self.zsize/self.ktot
            return (np.arange(self.kcells)-self.kgc+0.5)*dz

        levels = np.asarray(self.z_levels,dtype=float)
        if np.any(np.diff(levels) <= 0.0):
            raise ValueError("domain:z_levels must be strictly increasing")

        z = np.zeros(self.kcells)
        z[self.kstart:self.kend] = levels

        if self.ktot > 1:
            dz_top = levels[-1]-levels[-2]
        else:
            dz_top = 2.0*levels[-1]

        ### Mirror the bottom ghost levels about the surface and extrapolate at the top ###
        for n in range(1,self.kgc+1):
            z[self.kstart-n] = -z[min(self.kstart+n-1,self.kend-1)]
            z[self.kend+n-1] = z[self.kend-1]+n*dz_top
        return z

    def index(self, i, j, k):
        """
        returns the flattened index of cell (i,j,k)
        """
        return i + j*self.jstride + k*self.kstride

    def get_grid_data(self):
        return self
