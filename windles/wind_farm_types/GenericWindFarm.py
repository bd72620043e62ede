from windles.ParameterManager import windles_parameters, TurbineConfig, FarmConfig
from windles.DeviceManager import device_dict
from windles.turbine_types import turbine_dict
import numpy as np
import warnings
import os
import matplotlib.pyplot as plt


class TurbineBoundaryError(ValueError):
    """
    Raised when a turbine disk would cross a horizontal domain edge.
    """
    pass


class LayoutFileError(IOError):
    """
    Raised when the layout file cannot be opened or read.
    """
    pass


class GenericWindFarm(object):
    """
    A GenericWindFarm contains on the basic functions and attributes required by all wind farm objects.
    It owns the turbines, runs them in creation order each step and sums their power.

    The farm is the only object that sequences writes into the shared velocity
    fields. Turbines are executed one after another, so their footprints are
    assumed not to overlap; :meth:`check_footprint_overlap` warns when they do.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields.
        params (:class:`windles.ParameterManager.Parameters`): optional parameter object.
        device (:class:`windles.DeviceManager.GenericDevice`): optional acceleration backend.
    """
    def __init__(self, grid, fields, params=None, device=None):
        """
        Store anything needed prior to setup
        """
        if params is None:
            params = windles_parameters

        # Store windles Objects
        self.grid = grid
        self.fields = fields
        self.params = params
        self.fprint = self.params.fprint
        self.tag_output = self.params.tag_output
        self.debug_mode = self.params.debug_mode

        # Build the configuration once
        self.turbine_type = self.params["turbine"]["type"]
        self.turbine_config = TurbineConfig.from_parameters(self.params)
        self.farm_config = FarmConfig.from_parameters(self.params)
        self.diam = self.farm_config.diam

        if device is None:
            device = device_dict[self.params["device"]["type"]]()
        self.device = device

        # Init blank turbine list
        self.turbines = []
        self.farm_power = 0.0

    @property
    def numturbs(self):
        return len(self.turbines)

    def setup(self):
        """
        This function builds the wind farm as well as sets up the turbines.
        Any existing turbines are discarded first. A failing candidate aborts
        the setup, turbines accepted before it remain in the list.
        """
        tab = self.params.current_tab
        try:
            self.fprint("Generating {}".format(self.name),special="header")
            self.turbines = []
            self.load_parameters()
            locations = self.initialize_turbine_locations()
            self.fprint("Number of Candidates: {:d}".format(len(locations)))
            self.fprint("Type of Turbines: {}".format(self.turbine_type))

            self.fprint("Setting Up Turbines: ",special="header")
            for x, y, hhub_in in locations:
                self.add_turbine(x, y, hhub_in)
            self.fprint("Turbines Set up",special="footer")

            self.check_footprint_overlap()
            self.debug_output()
            self.fprint("{} Generated".format(self.name),special="footer")
        finally:
            self.params.current_tab = tab

    def load_parameters(self):
        """
        This function will report any layout specific parameters
        """
        pass

    def initialize_turbine_locations(self):
        """
        This function will compute the candidate locations of the turbines in the farm
        It must return a list of (x, y, hub_height_override) tuples
        """
        raise NotImplementedError(type(self))

    def check_boundary(self, x, y):
        """
        raises a TurbineBoundaryError if the disk would cross a horizontal domain edge
        """
        gd = self.grid.get_grid_data()
        r = 0.5*self.diam
        if x - r < 0.0 or x + r > gd.xsize or y - r < 0.0 or y + r > gd.ysize:
            raise TurbineBoundaryError(
                "Turbine near boundary: ({: 1.2f}, {: 1.2f}) with diameter {: 1.2f} does not fit in [0, {: 1.2f}] x [0, {: 1.2f}]".format(
                    x, y, self.diam, gd.xsize, gd.ysize))

    def add_turbine(self, x, y, hhub_in=-1.0):
        """
        validates a candidate, then creates the turbine and its footprint
        """
        self.check_boundary(x, y)

        turbine_method = turbine_dict[self.turbine_type]
        turb = turbine_method(len(self.turbines), x, y, self.grid, self.fields,
                              self.turbine_config, hhub_in, self.device, self.params)
        self.turbines.append(turb)
        turb.create()
        return turb

    def check_footprint_overlap(self):
        """
        returns the pairs of turbines whose footprints share cells and warns about them
        """
        overlaps = []
        for a in range(self.numturbs):
            for b in range(a+1,self.numturbs):
                shared = np.intersect1d(self.turbines[a].indices, self.turbines[b].indices)
                if len(shared) > 0:
                    overlaps.append((a,b))

        if overlaps:
            warnings.warn("Turbine footprints overlap for pairs {}. Forcing depends on execution order.".format(overlaps))
        return overlaps

    def exec(self, stats, time):
        """
        Runs every turbine in order and sums the power
        """
        self.farm_power = 0.0
        for turb in self.turbines:
            turb.exec(stats, time)
            self.farm_power += turb.get_power()

        if stats is not None:
            stats.exec_farm(self, time)

    def get_farm_power(self):
        return self.farm_power

    def prepare_device(self):
        for turb in self.turbines:
            turb.prepare_device()

    def clear_device(self):
        for turb in self.turbines:
            turb.clear_device()

    def get_hub_locations(self):
        """
        returns a nx3 numpy array containing the x, y, and z location of the turbine hubs
        """
        temp = np.zeros((self.numturbs,3))
        for i,turb in enumerate(self.turbines):
            temp[i] = [turb.x,turb.y,turb.hhub]
        return temp

    def get_yaw_angles(self):
        """
        returns a nx1 numpy array containing the yaw angle of the turbines
        """
        temp = np.zeros(self.numturbs)
        for i,turb in enumerate(self.turbines):
            temp[i] = turb.yaw
        return temp

    def get_powers(self):
        """
        returns a nx1 numpy array containing the latest power of each turbine
        """
        temp = np.zeros(self.numturbs)
        for i,turb in enumerate(self.turbines):
            temp[i] = turb.get_power()
        return temp

    def debug_output(self):
        """
        This function computes and save any output needed for regression tests
        """
        if self.debug_mode and self.numturbs > 0:

            # Get useful values
            x, y, z = self.get_hub_locations().T
            yaw = self.get_yaw_angles()

            # tag global statistics
            self.tag_output("numturbs", self.numturbs)
            self.tag_output("min_x", np.min(x))
            self.tag_output("max_x", np.max(x))
            self.tag_output("avg_x", np.mean(x))
            self.tag_output("min_y", np.min(y))
            self.tag_output("max_y", np.max(y))
            self.tag_output("avg_y", np.mean(y))
            self.tag_output("min_z", np.min(z))
            self.tag_output("max_z", np.max(z))
            self.tag_output("avg_z", np.mean(z))
            self.tag_output("min_yaw", np.min(yaw))
            self.tag_output("max_yaw", np.max(yaw))
            self.tag_output("avg_yaw", np.mean(yaw))

            # iterate through all turbines
            for turb in self.turbines:
                turb.debug_output()

    def plot_farm(self,show=False,filename="wind_farm",folder=None):
        """
        This function plots the locations of each wind turbine and
        saves the output to output/.../plots/

        :Keyword Arguments:
            * **show** (*bool*): Default: False, Set True to display the plot as well.
        """
        if self.numturbs == 0:
            return None

        ### Create the path names ###
        if folder is None:
            folder = self.params.folder
        folder_string = os.path.join(folder,"plots")
        file_string = os.path.join(folder_string,filename+".pdf")
        os.makedirs(folder_string, exist_ok=True)

        ### Collect turbine data
        gd = self.grid.get_grid_data()
        x, y, z = self.get_hub_locations().T
        yaw = self.get_yaw_angles()
        rr = 0.5*self.diam

        ### Generate and Save Plot ###
        fig, ax = plt.subplots()
        ax.plot([0,gd.xsize,gd.xsize,0,0],[0,0,gd.ysize,gd.ysize,0],c="k")

        ### Plot Blades
        for i in range(self.numturbs):
            blade_n = [np.cos(yaw[i]),np.sin(yaw[i])]
            blade_x = np.array([x[i]+rr*blade_n[1],x[i]-rr*blade_n[1]])
            blade_y = np.array([y[i]-rr*blade_n[0],y[i]+rr*blade_n[0]])
            ax.plot(blade_x,blade_y,c='k',linewidth=2,zorder=1)

        ### Plot Hub Locations
        p=ax.scatter(x,y,c=z,cmap="coolwarm",edgecolors=(0, 0, 0, 1),s=20,zorder=2)
        ax.set_xlim(0,gd.xsize)
        ax.set_ylim(0,gd.ysize)
        ax.set_aspect("equal")
        clb = fig.colorbar(p)
        clb.ax.set_ylabel('Hub Height')

        ### Annotate ###
        for i in range(self.numturbs):
            ax.annotate(i, (x[i],y[i]),(5,0),textcoords='offset pixels')

        ax.set_title("Location of the Turbines")
        fig.savefig(file_string, transparent=True)

        if show:
            plt.show()
        plt.close(fig)

        return file_string
