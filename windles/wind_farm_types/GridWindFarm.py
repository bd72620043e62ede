from . import GenericWindFarm


class GridWindFarm(GenericWindFarm):
    """
    A GridWindFarm produces turbines on a regular, optionally staggered,
    grid. The params.yaml file determines how this grid is set up.

    Example:
        In the .yaml file you need to define::

            windfarm:
                #                     # Description              | Units
                nturbrows: 3          # Number of rows           | -
                nturbcols: 4          # Number of columns        | -
                spacingx: 5.0         # x spacing                | D
                spacingy: 4.0         # y spacing                | D
                swstaggered: true     # shift odd rows by half   | -
                farmlocx: 200.0       # x of the first turbine   | m
                farmlocy: 200.0       # y of the first turbine   | m

        Row r, column c is placed at
        (farmlocx + c*spacingx*D + offset, farmlocy + r*spacingy*D) where the
        offset is 0.5*spacingx*D on odd rows of a staggered farm.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields.
    """
    def __init__(self, grid, fields, params=None, device=None):

        self.name = "Grid Farm"
        super(GridWindFarm, self).__init__(grid, fields, params, device)

    def load_parameters(self):
        fc = self.farm_config

        # Output some useful data
        self.fprint("Grid Size: {:d} x {:d}".format(fc.nturbrows,fc.nturbcols))
        self.fprint("Spacing: {: 1.2f} D x {: 1.2f} D".format(fc.spacingx,fc.spacingy))
        self.fprint("Farm Location: ({: 1.2f}, {: 1.2f})".format(fc.farmlocx,fc.farmlocy))
        if fc.swstaggered:
            self.fprint("Staggered: odd rows shifted by {: 1.2f} m".format(0.5*fc.spacingx*self.diam))

    def initialize_turbine_locations(self):
        fc = self.farm_config
        D = self.diam

        locations = []
        for r in range(fc.nturbrows):
            y = fc.farmlocy + r*fc.spacingy*D
            offset = 0.5*fc.spacingx*D if (fc.swstaggered and r % 2 == 1) else 0.0
            for c in range(fc.nturbcols):
                x = fc.farmlocx + c*fc.spacingx*D + offset
                locations.append((x, y, -1.0))

        return locations
