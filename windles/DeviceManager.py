"""
The DeviceManager contains the optional acceleration backends. A backend
may keep a device resident copy of each turbine's footprint, prepared
before the time loop and released after it. The turbine computation never
depends on a backend doing anything.
"""


class GenericDevice(object):
    """
    Interface for an acceleration backend.
    """
    name = "generic"

    def prepare_turbine(self, turb):
        """
        allocate and fill whatever the backend needs for this turbine
        """
        raise NotImplementedError(type(self))

    def clear_turbine(self, turb):
        """
        release everything prepare_turbine allocated
        """
        raise NotImplementedError(type(self))


class NullDevice(GenericDevice):
    """
    The default backend, all calls are no-ops.
    """
    name = "none"

    def prepare_turbine(self, turb):
        pass

    def clear_turbine(self, turb):
        pass


class HostMirrorDevice(GenericDevice):
    """
    Keeps a contiguous host copy of every prepared turbine's footprint.
    Stands in for a device mirror so the prepare/clear lifecycle can be
    exercised without an accelerator.
    """
    name = "host_mirror"

    def __init__(self):
        self.buffers = {}

    def prepare_turbine(self, turb):
        self.buffers[turb.index] = {
            "indices": turb.indices.copy(),
            "weights": turb.weights.copy(),
        }

    def clear_turbine(self, turb):
        self.buffers.pop(turb.index, None)


device_dict = {
    "none":        NullDevice,
    "host_mirror": HostMirrorDevice,
}
