### Import the turbine types
from .GenericTurbine import GenericTurbine
from .ActuatorDisk   import ActuatorDisk

### Create the turbine dictionary ###
turbine_dict = {
    "disk":  ActuatorDisk,
    "disks": ActuatorDisk,
}
