"""
This is the init file for windles. It handle importing all the
submodules and initializing the parameters.
"""

from windles.ParameterManager import windles_parameters, Parameters, TurbineConfig, FarmConfig
from windles.DomainManager import StructuredGrid
from windles.FieldManager import Fields
from windles.BoundaryManager import UniformInflow, PowerInflow, inflow_dict
from windles.DeviceManager import GenericDevice, NullDevice, HostMirrorDevice, device_dict
from windles.StatsManager import TurbineStats
from windles.turbine_types import GenericTurbine, ActuatorDisk, turbine_dict
from windles.wind_farm_types import (GenericWindFarm, GridWindFarm, ImportedWindFarm,
                                     TurbineBoundaryError, LayoutFileError, farm_dict,
                                     build_wind_farm)
from windles.SolverManager import UnsteadySolver


def initialize(loc,updated_parameters=[]):
    """
    This function initializes the windles parameters.

    Args:
        loc (str): This string is the location of the .yaml parameters file.

    """

    windles_parameters.Load(loc,updated_parameters=updated_parameters)
