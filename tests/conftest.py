import matplotlib
matplotlib.use("Agg")

import pytest

import windles


###############################################################
######################## Setup Objects ########################
###############################################################

def build_params(**updates):
    """
    returns a fresh Parameters object for a 1000 x 1000 x 300 m box with
    20 m cells and a 100 m rotor at 90 m
    """
    params = windles.Parameters()
    params["domain"].update({
        "xsize": 1000.0, "ysize": 1000.0, "zsize": 300.0,
        "itot": 50, "jtot": 50, "ktot": 15,
    })
    params["turbine"].update({
        "diam": 100.0, "hhub": 90.0, "ct": 0.75, "cp": 0.45, "tsr": 8.0,
    })
    for section, values in updates.items():
        params[section].update(values)
    return params


@pytest.fixture
def params():
    return build_params()


@pytest.fixture
def grid(params):
    return windles.StructuredGrid(params)


@pytest.fixture
def fields(grid):
    fields = windles.Fields(grid)
    fields.mp["u"][:] = 8.0
    return fields


def make_turbine(params, grid, fields, x=500.0, y=500.0, hhub_in=-1.0, device=None):
    config = windles.TurbineConfig.from_parameters(params)
    turb = windles.ActuatorDisk(0, x, y, grid, fields, config, hhub_in, device, params)
    turb.create()
    return turb


def write_layout(path, lines):
    path.write_text("\n".join(lines)+"\n")
    return str(path)
