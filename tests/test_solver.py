import os
import sys

import numpy as np
import pandas
import pytest
import yaml

import windles
from windles_driver import driver, driver_functions

from conftest import build_params, write_layout


###############################################################
########################## Time Loop ##########################
###############################################################

def build_case(tmp_path, **solver):
    params = build_params(solver=solver, turbine={"swturbstats": True, "turbstatperiod": 2.0})
    params["windfarm"]["layoutfile"] = write_layout(tmp_path/"layout.txt", ["300 500 -1", "700 500 -1"])
    grid, fields, inflow = driver_functions.BuildDomain(params)
    farm = driver_functions.BuildFarm(params, grid, fields)
    return params, driver_functions.BuildSolver(params, grid, fields, inflow, farm)


def test_solve_steps(tmp_path):
    params, solver = build_case(tmp_path, start_time=0.0, end_time=10.0, dt=1.0, relax_time=5.0)
    history = solver.Solve()

    assert len(history) == 11
    assert solver.time_history[-1] == pytest.approx(10.0)
    assert all(p > 0.0 for p in history)
    assert len(solver.stats.farm_dataframe()) == 6


def test_solve_reaches_steady_power(tmp_path):
    params, solver = build_case(tmp_path, end_time=200.0, dt=1.0, relax_time=2.0)
    history = np.array(solver.Solve())
    assert history[-1] == pytest.approx(history[-2], rel=1e-6)
    assert history[-1] < history[0]


class RecordingDevice(windles.HostMirrorDevice):
    def __init__(self):
        super(RecordingDevice, self).__init__()
        self.calls = []

    def prepare_turbine(self, turb):
        super(RecordingDevice, self).prepare_turbine(turb)
        self.calls.append(("prepare", turb.index))

    def clear_turbine(self, turb):
        super(RecordingDevice, self).clear_turbine(turb)
        self.calls.append(("clear", turb.index))


def test_solve_prepares_and_clears_device(tmp_path):
    params, solver = build_case(tmp_path, end_time=2.0)
    device = RecordingDevice()
    for turb in solver.farm.turbines:
        turb.device = device

    solver.Solve()
    assert device.calls == [("prepare", 0), ("prepare", 1), ("clear", 0), ("clear", 1)]
    assert device.buffers == {}


def test_solver_rejects_bad_dt(tmp_path):
    with pytest.raises(ValueError):
        build_case(tmp_path, dt=0.0)


###############################################################
############################ Driver ###########################
###############################################################

def test_blank_parameters_match_defaults():
    assert set(driver_functions.BlankParameters()) == set(driver_functions.DefaultParameters())


def test_run_action(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", sys.stdout)
    monkeypatch.setattr(sys, "stderr", sys.stderr)
    monkeypatch.setattr(windles, "windles_parameters", windles.Parameters())
    monkeypatch.setattr(windles.ParameterManager, "windles_parameters", windles.windles_parameters)

    loc = tmp_path/"driver_case.yaml"
    loc.write_text(yaml.dump({
        "general": {"output_folder": str(tmp_path/"output"), "log_to_file": False, "plot_farm": True},
        "domain": {"itot": 50, "jtot": 50, "ktot": 15, "zsize": 300.0},
        "turbine": {"diam": 100.0, "hhub": 90.0, "ct": 0.75, "cp": 0.45, "tsr": 8.0,
                    "swturbstats": True, "turbstatperiod": 5.0},
        "windfarm": {"nturbrows": 1, "nturbcols": 2, "spacingx": 4.0,
                     "farmlocx": 300.0, "farmlocy": 500.0},
        "solver": {"end_time": 20.0},
    }))

    runtime = driver.run_action(str(loc), argv=["-p", "solver:dt:2.0"])
    assert runtime >= 0.0

    folder = os.path.join(str(tmp_path/"output"), "driver_case")
    turb = pandas.read_csv(os.path.join(folder, "data", "turbine_stats.csv"))
    assert sorted(set(turb["time"])) == [0.0, 6.0, 10.0, 16.0, 20.0]
    assert sorted(set(turb["x"])) == [300.0, 700.0]
    assert os.path.isfile(os.path.join(folder, "plots", "wind_farm.pdf"))
    assert os.path.isfile(os.path.join(folder, "input_files", "driver_case.yaml"))
