# import windles function
from . import GenericTurbine

# Other imports
import numpy as np


class ActuatorDisk(GenericTurbine):
    """
    A simple actuator disk. The rotor is represented by the horizontal cells
    at hub height whose centres fall inside the rotor radius, each carrying
    a normalized Gaussian weight. Every step the disk averaged velocity
    along the yaw axis sets the thrust and power, and the thrust is removed
    from the velocity fields over the same cells.

    Example:
        In the .yaml file you need to define::

            turbine:
                #                     # Description              | Units
                diam: 126.0           # rotor diameter           | m
                hhub: 90.0            # hub height               | m
                ct: 0.75              # thrust coefficient       | -
                cp: 0.45              # power coefficient        | -
                tsr: 8.0              # tip speed ratio          | -
                swdynyaw: false       # track the upstream flow  | -
                yawperiod: 0.0        # yaw update period        | s
                turbstarttime: 0.0    # forcing start time       | s

    Note:
        The filter width is 1.5 times the x spacing, which assumes a uniform
        horizontal grid.
    """

    def __init__(self, i, x, y, grid, fields, config, hhub_in=-1.0, device=None, params=None):
        # Init turbine
        super(ActuatorDisk, self).__init__(i, x, y, grid, fields, config, hhub_in, device, params)

    def compute_parameters(self):
        # Runtime state
        self.yaw      = 0.0
        self.next_yaw = self.turbstarttime
        self.area     = np.pi*self.diam*self.diam*0.25
        self.power    = 0.0
        self.umean    = 0.0
        self.thrust   = 0.0

        # Footprint, filled by create()
        self.k_hub   = None
        self.indices = np.zeros(0, dtype=np.int64)
        self.weights = np.zeros(0)

    def create(self):
        """
        Locates the hub level and collects the cells covered by the disk
        together with their normalized Gaussian weights.
        """
        gd = self.grid.get_grid_data()

        ### Determine vertical index closest to hub height ###
        self.k_hub = self.nearest_index(self.hhub, gd.z, gd.kstart, gd.kend)

        ### Gaussian filter width based on grid spacing ###
        Delta  = 1.5*gd.dx
        radius = 0.5*self.diam

        ### Distance of every interior cell centre to the turbine, j outer and i inner ###
        jj, ii = np.meshgrid(np.arange(gd.jstart, gd.jend), np.arange(gd.istart, gd.iend), indexing="ij")
        dx = gd.x[ii] - self.x
        dy = gd.y[jj] - self.y
        r2 = dx*dx + dy*dy
        inside = np.sqrt(r2) <= radius

        self.indices = (ii[inside] + jj[inside]*gd.jstride + self.k_hub*gd.kstride).astype(np.int64)
        weights = np.exp(-6.0*r2[inside]/(Delta*Delta))

        ### Normalise weights so they sum to one ###
        wsum = np.sum(weights)
        if wsum > 0.0:
            weights = weights/wsum
        self.weights = weights

        self.fprint("Turbine {:d}: ({: 1.2f}, {: 1.2f}, {: 1.2f}), k_hub = {:d}, cells = {:d}".format(
            self.index, self.x, self.y, self.hhub, self.k_hub, len(self.indices)))

    @property
    def footprint(self):
        """
        list of (flattened index, weight) pairs covered by the disk
        """
        return list(zip(self.indices.tolist(), self.weights.tolist()))

    def update_yaw(self, u, v):
        """
        Relaxes the yaw toward the flow direction sampled one diameter upstream.
        """
        gd = self.grid.get_grid_data()

        ### find cell one diameter upstream of current yaw ###
        xref = self.x - self.diam*np.cos(self.yaw)
        yref = self.y - self.diam*np.sin(self.yaw)

        iu = self.nearest_index(xref, gd.x, gd.istart, gd.iend)
        ju = self.nearest_index(yref, gd.y, gd.jstart, gd.jend)
        idx = iu + ju*gd.jstride + self.k_hub*gd.kstride

        target = np.arctan2(v[idx], u[idx])
        self.yaw += (target - self.yaw)*0.2

        self.next_yaw += self.yawperiod

    def exec(self, stats, time):
        """
        Updates the yaw, thrust and power, and applies the disk forcing in place.

        Args:
            stats (:class:`windles.StatsManager.TurbineStats`): statistics sink, may be None.
            time (float): the simulation time.
        """
        # Skip forcing until turbine start time
        if time < self.turbstarttime:
            return

        u = self.fields.mp["u"]
        v = self.fields.mp["v"]

        if self.swdynyaw and time >= self.next_yaw:
            self.update_yaw(u, v)

        cos_yaw = np.cos(self.yaw)
        sin_yaw = np.sin(self.yaw)

        ### Calculate disk-averaged incoming velocity ###
        idx = self.indices
        self.umean = float(np.sum(self.weights*(u[idx]*cos_yaw + v[idx]*sin_yaw)))

        ### Compute thrust force and power from disk-averaged velocity ###
        self.thrust = 0.5*self.ct*self.umean*abs(self.umean)
        self.power  = self.cp*0.5*self.umean**3*self.area

        ### Apply actuator disk forcing to all covered cells ###
        f = self.thrust*self.weights
        u[idx] -= f*cos_yaw
        v[idx] -= f*sin_yaw

        if stats is not None:
            stats.exec_turbine(self, time)

    def debug_output(self):
        self.tag_output("k_hub_{:d}".format(self.index), int(self.k_hub))
        self.tag_output("ncells_{:d}".format(self.index), len(self.indices))
