# import windles data
from windles.ParameterManager import windles_parameters
from windles.DeviceManager import NullDevice
from windles.helper_functions import nearest_search_dict


class GenericTurbine(object):
    """
    A GenericTurbine contains on the basic functions and attributes required by all turbine objects.

    Args:
        i (int): index of the turbine in the farm.
        x (float): x location of the hub.
        y (float): y location of the hub.
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields, borrowed by reference.
        config (:class:`windles.ParameterManager.TurbineConfig`): the turbine parameters.
        hhub_in (float): hub height override, used when positive.
        device (:class:`windles.DeviceManager.GenericDevice`): optional acceleration backend.
        params (:class:`windles.ParameterManager.Parameters`): optional parameter object used for output.
    """
    def __init__(self, i, x, y, grid, fields, config, hhub_in=-1.0, device=None, params=None):
        """
        Store anything needed prior to setup
        """
        if params is None:
            params = windles_parameters

        # Store windles objects
        self.params = params
        self.fprint = self.params.fprint
        self.tag_output = self.params.tag_output
        self.grid = grid
        self.fields = fields
        self.device = device if device is not None else NullDevice()

        # Store turbine properties
        self.index = i
        self.x = float(x)
        self.y = float(y)
        self.config = config
        self.hhub_in = hhub_in

        # complete the setup
        self.setup()

    def setup(self):
        """
        This function takes the init data and set it up
        """
        self.load_parameters()
        self.compute_parameters()

    def load_parameters(self):
        """
        copies the static turbine parameters from the config
        """
        self.diam           = self.config.diam
        self.hhub           = self.config.hhub
        self.ct             = self.config.ct
        self.cp             = self.config.cp
        self.tsr            = self.config.tsr
        self.swdynyaw       = self.config.swdynyaw
        self.yawperiod      = self.config.yawperiod
        self.turbstarttime  = self.config.turbstarttime
        self.swturbstats    = self.config.swturbstats
        self.turbstatperiod = self.config.turbstatperiod

        # Allow override of hub height from the layout file
        if self.hhub_in is not None and self.hhub_in > 0.0:
            self.hhub = float(self.hhub_in)

        if self.config.nearest_search not in nearest_search_dict:
            raise ValueError("Unknown nearest search: {}".format(self.config.nearest_search))
        self.nearest_index = nearest_search_dict[self.config.nearest_search]

    def compute_parameters(self):
        """
        This function will compute any additional parameters
        """
        pass

    def create(self):
        """
        precomputes anything that depends on the grid
        """
        raise NotImplementedError(type(self))

    def exec(self, stats, time):
        """
        applies the turbine to the flow at the given time
        """
        raise NotImplementedError(type(self))

    def get_power(self):
        return self.power

    def prepare_device(self):
        self.device.prepare_turbine(self)

    def clear_device(self):
        self.device.clear_turbine(self)

    def debug_output(self):
        """
        This function computes and save any output needed for regression tests
        """
        pass
