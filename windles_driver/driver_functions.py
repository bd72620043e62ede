import argparse
import windles


def DefaultParameters():
    """
    return the default parameters list
    """
    return windles.windles_parameters.defaults

def BlankParameters():
    """
    returns a nested dictionary that matches the first level of the parameters dictionary
    """
    params = {}
    params["general"] = {}
    params["domain"] = {}
    params["inflow"] = {}
    params["turbine"] = {}
    params["windfarm"] = {}
    params["solver"] = {}
    params["device"] = {}
    return params


def Initialize(params_loc=None, argv=None):
    """
    This function initialized the windles parameters.

    Parameters
    ----------
        params_loc : str
            the location of the parameter yaml file.

    Returns
    -------
        params : windles.Parameters
            an overloaded dict containing all parameters.
    """
    parser = argparse.ArgumentParser(usage="windles run [options] params", formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("params", nargs='?', help='path to yaml file containing the windles parameters')
    parser.add_argument('-p', dest='updated_parameters', action='append',default=[], help='use this to override a parameter in the yaml file')
    args, unknown = parser.parse_known_args(argv)

    if params_loc is None:
        ### Check if parameters was provided ###
        if args.params is None:
            params_loc = "params.yaml"
            print("Using default parameter location: ./params.yaml")
        else:
            params_loc = args.params
            print("Using parameter location: "+params_loc)

    ### Initialize windles ###
    windles.initialize(params_loc,updated_parameters=args.updated_parameters)

    params=windles.windles_parameters

    return params

def BuildDomain(params):
    """
    This function build the grid, the velocity fields and the inflow.

    Parameters
    ----------
    params : ``windles.Parameters``
        an overloaded dict containing all parameters.

    Returns
    -------
    grid : ``windles.StructuredGrid``
        the grid the turbines are placed on.
    fields : ``windles.Fields``
        the velocity fields.
    inflow : ``windles.GenericInflow``
        the inflow that initialized the fields.
    """
    grid = windles.StructuredGrid(params)
    fields = windles.Fields(grid)
    inflow = windles.inflow_dict[params["inflow"]["type"]](grid, fields, params)
    return grid, fields, inflow

def BuildFarm(params, grid, fields):
    """
    This function builds the wind farm and places the turbines.
    """
    farm = windles.build_wind_farm(grid, fields, params)
    farm.setup()
    if params["general"]["plot_farm"]:
        farm.plot_farm()
    return farm

def BuildSolver(params, grid, fields, inflow, farm):
    return windles.UnsteadySolver(grid, fields, inflow, farm, params)

def SetupSimulation(params_loc=None, argv=None):
    params = Initialize(params_loc, argv)
    grid, fields, inflow = BuildDomain(params)
    farm = BuildFarm(params, grid, fields)
    solver = BuildSolver(params, grid, fields, inflow, farm)

    return params, solver
