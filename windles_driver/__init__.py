from . import driver, driver_functions
