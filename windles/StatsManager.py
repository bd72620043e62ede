"""
The StatsManager collects turbine and farm statistics during the time
loop and writes them to the data folder.
"""

import os

import pandas

from windles.ParameterManager import windles_parameters


class TurbineStats(object):
    """
    Statistics sink passed to the turbine and farm ``exec`` calls.

    A turbine with ``swturbstats`` enabled is sampled at its start time and
    then every ``turbstatperiod`` seconds. The next sample time advances by
    the period, so the cadence does not drift with the time step. A period
    of zero samples every call. Whenever a turbine was sampled during a
    step the farm total is recorded as well.
    """
    def __init__(self, params=None):
        if params is None:
            params = windles_parameters
        self.params = params
        self.fprint = params.fprint

        self.next_sample = {}
        self.turbine_rows = []
        self.farm_rows = []
        self.last_sample_time = None

    def exec_turbine(self, turb, time):
        if not turb.swturbstats:
            return

        next_time = self.next_sample.setdefault(turb.index, turb.turbstarttime)
        if time < next_time:
            return

        self.turbine_rows.append({
            "time":   time,
            "turbine": turb.index,
            "x":      turb.x,
            "y":      turb.y,
            "yaw":    turb.yaw,
            "umean":  turb.umean,
            "thrust": turb.thrust,
            "power":  turb.power,
        })
        self.next_sample[turb.index] = next_time + turb.turbstatperiod
        self.last_sample_time = time

    def exec_farm(self, farm, time):
        if self.last_sample_time is None or self.last_sample_time != time:
            return

        self.farm_rows.append({
            "time":       time,
            "numturbs":   len(farm.turbines),
            "farm_power": farm.get_farm_power(),
        })

    def turbine_dataframe(self):
        return pandas.DataFrame(self.turbine_rows, columns=["time","turbine","x","y","yaw","umean","thrust","power"])

    def farm_dataframe(self):
        return pandas.DataFrame(self.farm_rows, columns=["time","numturbs","farm_power"])

    def save(self, folder=None):
        """
        writes turbine_stats.csv and farm_stats.csv into <folder>/data/
        """
        if folder is None:
            folder = self.params.folder
        if folder is None:
            raise ValueError("No output folder, load the parameters first or pass a folder")

        folder_string = os.path.join(folder, "data")
        os.makedirs(folder_string, exist_ok=True)

        self.turbine_dataframe().to_csv(os.path.join(folder_string, "turbine_stats.csv"), index=False)
        self.farm_dataframe().to_csv(os.path.join(folder_string, "farm_stats.csv"), index=False)
        self.fprint("Saved {:d} turbine samples to {}".format(len(self.turbine_rows), folder_string))
