"""
The SolverManager contains the host time loop used to run a wind farm
against a prescribed inflow when no flow solver is attached.
"""

import time

from windles.ParameterManager import windles_parameters
from windles.StatsManager import TurbineStats


class UnsteadySolver(object):
    """
    Marches from solver:start_time to solver:end_time in steps of solver:dt.
    Each step the velocity is relaxed toward the inflow and the farm is
    applied. The device backend is prepared before and cleared after the loop.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields.
        inflow (:class:`windles.BoundaryManager.GenericInflow`): the inflow used for relaxation.
        farm (:class:`windles.wind_farm_types.GenericWindFarm`): a farm that has been set up.
    """
    def __init__(self, grid, fields, inflow, farm, params=None):
        if params is None:
            params = windles_parameters
        self.params = params
        self.fprint = params.fprint
        self.grid = grid
        self.fields = fields
        self.inflow = inflow
        self.farm = farm

        self.start_time     = float(params["solver"]["start_time"])
        self.end_time       = float(params["solver"]["end_time"])
        self.dt             = float(params["solver"]["dt"])
        self.relax_time     = float(params["solver"]["relax_time"])
        self.print_interval = int(params["solver"]["print_interval"])

        if self.dt <= 0.0:
            raise ValueError("solver:dt must be positive")

        self.stats = TurbineStats(params)
        self.time_history = []
        self.power_history = []

    def Solve(self):
        self.fprint("Solving",special="header")
        self.fprint("Time: [{: 1.2f}, {: 1.2f}], dt = {: 1.4f}".format(self.start_time,self.end_time,self.dt))
        tick = time.time()

        nsteps = int(round((self.end_time-self.start_time)/self.dt))
        self.farm.prepare_device()
        try:
            for n in range(nsteps+1):
                simTime = self.start_time+n*self.dt

                self.inflow.RelaxVelocity(self.dt,self.relax_time)
                self.farm.exec(self.stats,simTime)

                self.time_history.append(simTime)
                self.power_history.append(self.farm.get_farm_power())

                if self.print_interval > 0 and n % self.print_interval == 0:
                    self.fprint("Time: {: 10.2f} s, Farm Power: {: 1.6e}".format(simTime,self.farm.get_farm_power()))
        finally:
            self.farm.clear_device()

        if self.params.folder is not None:
            self.stats.save()

        self.fprint("Solve Complete: {:1.2f} s".format(time.time()-tick))
        self.fprint("Solving Finished",special="footer")
        return self.power_history
