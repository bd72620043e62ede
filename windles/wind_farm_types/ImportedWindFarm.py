from . import GenericWindFarm, LayoutFileError
import shutil
import pandas


class ImportedWindFarm(GenericWindFarm):
    """
    A ImportedWindFarm produces turbines located based on a text file.
    The params.yaml file determines where the file is.

    Example:
        In the .yaml file you need to define::

            windfarm:
                layoutfile: "inputs/layout.txt"

        Each line of "layout.txt" holds three whitespace separated numbers::

            100.0  200.0  80.0
            300.0  200.0  -1

        which are the x and y location of the hub and a hub height override.
        An override at or below zero uses turbine:hhub. Lines starting with
        "#" are ignored.

    Args:
        grid (:class:`windles.DomainManager.StructuredGrid`): the grid.
        fields (:class:`windles.FieldManager.Fields`): the velocity fields.
    """
    def __init__(self, grid, fields, params=None, device=None):

        self.name = "Imported Farm"
        super(ImportedWindFarm, self).__init__(grid, fields, params, device)

    def load_parameters(self):

        ### Get wind farm file location ###
        self.path = self.farm_config.layoutfile
        self.fprint("Layout File: {}".format(self.path))

    def read_layout(self):
        """
        returns the layout as a DataFrame with columns x, y and hhub
        """
        try:
            f = open(self.path, 'r')
        except OSError as e:
            raise LayoutFileError("Cannot open layout file "+self.path) from e

        with f:
            try:
                layout = pandas.read_csv(f, sep=r"\s+", header=None, comment="#", dtype=float)
            except pandas.errors.EmptyDataError:
                return pandas.DataFrame(columns=["x","y","hhub"], dtype=float)
            except (ValueError, pandas.errors.ParserError) as e:
                raise LayoutFileError("Cannot read layout file {}: {}".format(self.path, e)) from e

        ### Exactly three columns, extra fields on a later line fail in the parser ###
        if layout.shape[1] != 3 or layout.isnull().values.any():
            raise LayoutFileError("Every line of layout file {} needs x, y and hub height".format(self.path))
        layout.columns = ["x","y","hhub"]

        return layout

    def initialize_turbine_locations(self):
        layout = self.read_layout()

        ### Copy Files to input folder ###
        if self.params.folder is not None:
            shutil.copy(self.path, self.params.folder+"input_files/")

        return list(zip(layout["x"].tolist(), layout["y"].tolist(), layout["hhub"].tolist()))
