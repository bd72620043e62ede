from windles.ParameterManager import windles_parameters

### import the wind farm types
from .GenericWindFarm  import GenericWindFarm, TurbineBoundaryError, LayoutFileError
from .GridWindFarm     import GridWindFarm
from .ImportedWindFarm import ImportedWindFarm

farm_dict = {
    "grid":     GridWindFarm,
    "imported": ImportedWindFarm,
}


def build_wind_farm(grid, fields, params=None, device=None):
    """
    Picks the layout from windfarm:layoutfile. A non-empty path reads the
    turbines from file, otherwise they are placed on a grid. The returned
    farm still needs :meth:`GenericWindFarm.setup`.
    """
    if params is None:
        params = windles_parameters

    if params["windfarm"]["layoutfile"]:
        farm_type = "imported"
    else:
        farm_type = "grid"
    return farm_dict[farm_type](grid, fields, params, device)
