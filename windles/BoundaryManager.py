"""
The BoundaryManager submodule contains the inflow profiles used to
initialize the velocity fields and to relax them back toward the
undisturbed state between turbine updates.
"""

import numpy as np

from windles.ParameterManager import windles_parameters


class GenericInflow(object):
    """
    A GenericInflow fills ``u`` and ``v`` from a vertical speed profile
    rotated by the inflow angle. Subclasses define :meth:`speed_profile`.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields to fill.
    """
    def __init__(self, grid, fields, params=None):
        if params is None:
            params = windles_parameters
        self.params = params
        self.fprint = params.fprint
        self.grid = grid
        self.fields = fields

        self.HH_vel = float(params["inflow"]["HH_vel"])
        self.inflow_angle = float(params["inflow"]["inflow_angle"])
        self.power = float(params["inflow"]["power"])
        self.vel_height = params["inflow"]["vel_height"]
        if self.vel_height is None:
            self.vel_height = params["turbine"]["hhub"]
        if self.vel_height is None:
            self.vel_height = 0.5*grid.zsize
        self.vel_height = float(self.vel_height)

        self.fprint("Setting Up Inflow",special="header")
        self.fprint("Type: {}".format(self.name))
        self.fprint("Reference Velocity: {: 1.2f} m/s at {: 1.2f} m".format(self.HH_vel,self.vel_height))
        self.fprint("Inflow Angle: {: 1.4f} rad".format(self.inflow_angle))

        self.PrepareVelocity()
        self.fprint("Inflow Setup",special="footer")

    def speed_profile(self, z):
        raise NotImplementedError(type(self))

    def PrepareVelocity(self):
        """
        computes the reference velocities and copies them into the fields
        """
        g = self.grid
        speed = self.speed_profile(g.z)

        ### Expand the profile over the flat k-major layout ###
        speed_flat = np.repeat(speed, g.kstride)

        self.u_ref = speed_flat*np.cos(self.inflow_angle)
        self.v_ref = speed_flat*np.sin(self.inflow_angle)

        self.fields.mp["u"][:] = self.u_ref
        self.fields.mp["v"][:] = self.v_ref
        if "w" in self.fields.mp:
            self.fields.mp["w"][:] = 0.0

    def RelaxVelocity(self, dt, relax_time):
        """
        nudges u and v back toward the inflow with time scale relax_time
        """
        if relax_time <= 0.0:
            return
        factor = min(dt/relax_time, 1.0)
        u = self.fields.mp["u"]
        v = self.fields.mp["v"]
        u += factor*(self.u_ref-u)
        v += factor*(self.v_ref-v)


class UniformInflow(GenericInflow):
    def __init__(self, grid, fields, params=None):
        self.name = "Uniform Inflow"
        super(UniformInflow, self).__init__(grid, fields, params)

    def speed_profile(self, z):
        return np.full(len(z), self.HH_vel)


class PowerInflow(GenericInflow):
    """
    PowerInflow sets the horizontal speed with a power law

    .. math::

        u=u_{ref} \\left( \\frac{z}{z_{ref}} \\right)^{p}.

    Levels at or below the ground have zero velocity.
    """
    def __init__(self, grid, fields, params=None):
        self.name = "Power Law Inflow"
        super(PowerInflow, self).__init__(grid, fields, params)

    def speed_profile(self, z):
        scaled_depth = np.clip(np.asarray(z,dtype=float),0.0,None)/self.vel_height
        return self.HH_vel*np.power(scaled_depth,self.power)


inflow_dict = {
    "uniform": UniformInflow,
    "power":   PowerInflow,
}
