"""
The ParameterManager controls the handles importing
the parameters from the params.yaml file and builds the
validated turbine and farm configurations. These
functions don't need to be accessed by the end user.
"""

import os
import sys
import ast
import copy
import shutil
import difflib
import datetime
import inspect
from dataclasses import dataclass

import yaml


### Copies everything written to a stream into the log file
class Logger(object):
    def __init__(self, filename, std):
        self.terminal = std
        self.log = open(filename, "a")

    def __getattr__(self, name):
        return getattr(self.terminal, name)

    def write(self, message):
        self.terminal.write(message)
        self.log.write(message)

    def flush(self):
        self.terminal.flush()
        self.log.flush()


class Parameters(dict):
    """
    Parameters is a subclass of pythons *dict* that adds
    function specific to windles.
    """
    def __init__(self):
        super(Parameters, self).__init__()
        self.current_tab = 0
        self.tagged_output = {}
        self.folder = None
        self.windles_path = os.path.dirname(os.path.realpath(__file__))
        with open(self.windles_path+"/default_parameters.yaml") as f:
            self.defaults = yaml.load(f,Loader=yaml.SafeLoader)
        self.update(copy.deepcopy(self.defaults))

        ### Create Instances of the general options ###
        for key, value in self["general"].items():
            setattr(self,key,value)

    def TerminalUpdate(self,dic,keys,value):
        if len(keys) > 1:
            next_dic = dic.setdefault(keys[0],{})
            self.TerminalUpdate(next_dic,keys[1:],value)
        elif len(keys) == 1:
            current_value = self.defaults_lookup(keys[0],dic)
            if isinstance(current_value,bool):
                dic[keys[0]] = value.lower() in ["true","1","yes"]
            elif isinstance(current_value,int):
                dic[keys[0]] = int(value)
            elif isinstance(current_value,float):
                dic[keys[0]] = float(value)
            elif isinstance(current_value,list):
                dic[keys[0]] = ast.literal_eval(value)
            elif current_value is None and value and value[0] in "[-.0123456789":
                dic[keys[0]] = ast.literal_eval(value)
            else:
                dic[keys[0]] = value

    def defaults_lookup(self,key,dic):
        """
        finds the current value of a key so a terminal update can be cast to the same type
        """
        if key in dic:
            return dic[key]
        for group in self.defaults.values():
            if isinstance(group,dict) and key in group:
                return group[key]
        return ""

    def CheckParameters(self,updates,defaults,out_string=""):
        default_keys = defaults.keys()
        for key in updates.keys():
            if key not in default_keys:
                suggestion = difflib.get_close_matches(key, default_keys, n=1)
                if suggestion:
                    raise KeyError(out_string + key + " is not a valid parameter, did you mean: "+suggestion[0])
                else:
                    raise KeyError(out_string + key + " is not a valid parameter")
            elif isinstance(updates[key],dict):
                in_string =out_string + key + ":"
                self.CheckParameters(updates[key],defaults[key],out_string=in_string)

    def NestedUpdate(self,dic,subdic=None):
        if subdic is None:
            target_dic = self
        else:
            target_dic = subdic

        for key, value in dic.items():
            if isinstance(value,dict):
                target_dic[key] = self.NestedUpdate(value,subdic=target_dic[key])
            else:
                target_dic[key] = value
        return target_dic

    def Load(self, loc,updated_parameters=[]):
        """
        This function loads the parameters from the .yaml file.
        It should only be assessed once from the :meth:`windles.initialize` function.

        Args:
            loc (str): This string is the location of the .yaml parameters file.

        """

        ### Load the yaml file (requires PyYaml)
        if isinstance(loc,dict):
            self.fprint("Loading from dictionary")
            yaml_file = copy.deepcopy(loc)
        else:
            self.fprint("Loading: "+loc)
            with open(loc) as f:
                yaml_file = yaml.load(f,Loader=yaml.SafeLoader) or {}

        ### update any parameters if supplied ###
        for p in updated_parameters:
            keys_list = p.split(":")
            self.TerminalUpdate(yaml_file,keys_list[:-1],keys_list[-1])

        ### Check for incorrect parameters ###
        self.CheckParameters(yaml_file,self.defaults)
        self.fprint("Parameter Check Passed")

        ### Set the parameters ###
        self.update(self.NestedUpdate(yaml_file))

        ### Create Instances of the general options ###
        for key, value in self["general"].items():
            setattr(self,key,value)

        ### set default name ###
        if self.name is None:
            if isinstance(loc,str):
                _, yaml_name = os.path.split(loc)
                self.name = yaml_name.split(".")[0]
            else:
                self.name = "windles_run"

        ### Set up the folder Structure ###
        timestamp=datetime.datetime.today().strftime('%Y%m%d_%H%M%S')
        fancytimestamp=datetime.datetime.today().strftime('%Y/%m/%d_%H:%M:%S')
        if self.preappend_datetime:
            self.name = timestamp+"-"+self.name
        self["general"]["name"]=self.name
        self.folder = os.path.join(self.output_folder,self.name)+"/"

        # Create all needed directories ahead of time
        for sub in ['data','input_files','plots']:
            os.makedirs(self.folder+sub, exist_ok=True)

        ### Setup the logger ###
        if self.log_to_file:
            self.log = self.folder+"log.txt"
            open(self.log, "w").close()
            sys.stdout = Logger(self.log, sys.stdout)
            sys.stderr = Logger(self.log, sys.stderr)

        ### Copy params file to output folder ###
        if isinstance(loc,str):
            shutil.copy(loc,self.folder+"input_files/")

        ### Print some more stuff
        self.fprint("General Parameter Information", special="header")
        self.fprint("Run Name: {0}".format(self.name))
        self.fprint("Run Time Stamp: {0}".format(fancytimestamp))
        self.fprint("Output Folder: {0}".format(self.folder))
        if updated_parameters:
            self.fprint("Updated Parameter:")
            for i,p in enumerate(updated_parameters):
                self.fprint("{:d}: {:}".format(i,p),offset=1)
        self.fprint("Parameters Setup", special="footer")

    def Read(self):
        """
        This function reads the current state of the parameters object
        and prints it in a easy to read way.
        """
        for group in self:
            print(group)
            max_length = 0
            for key in self[group]:
                max_length = max(max_length,len(key))
            for key in self[group]:
                print("    "+key+":  "+" "*(max_length-len(key))+repr(self[group][key]))

    def fprint(self,string,tab=None,offset=0,special=None):
        """
        This is just a fancy print function that will tab according to where
        we are in the solve

        Args:
            string (str): the string for printing

        :Keyword Arguments:
            * **tab** (*int*): the tab level

        """
        ### Check if tab length has been overridden
        if tab is None:
            tab = self.current_tab

        ### Check if we are starting or ending a section
        if special=="header":
            self.current_tab += 1
            self.fprint("",tab=tab)
        elif special =="footer":
            self.current_tab -= 1
            tab -= 1
            self.fprint("",tab=tab+1)

        ### Apply Offset if provided ###
        tab += offset

        ### Create Tabbed string ###
        tabbed = "|    "*tab

        ### Apply Tabbed string ###
        if isinstance(string,str):
            string = tabbed+string
        else:
            string = tabbed+repr(string)

        ### Print ###
        print(string)
        sys.stdout.flush()

        if special=="header":
            self.fprint("",tab=tab+1)

    def tag_output(self, key, value):
        """
        records a regression value under the name of the calling module
        """
        if not isinstance(value,int):
            value = float(value)

        caller = inspect.currentframe().f_back
        the_module = caller.f_globals["__name__"].split(".")[-1]
        self.tagged_output.setdefault(the_module,{})[key] = value

        if self.folder is not None:
            with open(self.folder+"tagged_output.yaml","w") as file:
                yaml.dump(self.tagged_output, file, sort_keys=False)


@dataclass(frozen=True)
class TurbineConfig:
    """
    Static turbine parameters shared by every turbine in the farm.
    Built once from the [turbine] section.
    """
    diam: float
    hhub: float
    ct: float
    cp: float
    tsr: float
    swdynyaw: bool = False
    yawperiod: float = 0.0
    turbstarttime: float = 0.0
    swturbstats: bool = False
    turbstatperiod: float = 0.0
    nearest_search: str = "linear"

    @classmethod
    def from_parameters(cls, params):
        section = params["turbine"]

        missing = [key for key in ["diam","hhub","ct","cp","tsr"] if section.get(key) is None]
        if missing:
            raise ValueError("Missing required turbine parameters: "+", ".join(missing))

        config = cls(
            diam           = float(section["diam"]),
            hhub           = float(section["hhub"]),
            ct             = float(section["ct"]),
            cp             = float(section["cp"]),
            tsr            = float(section["tsr"]),
            swdynyaw       = bool(section["swdynyaw"]),
            yawperiod      = float(section["yawperiod"]),
            turbstarttime  = float(section["turbstarttime"]),
            swturbstats    = bool(section["swturbstats"]),
            turbstatperiod = float(section["turbstatperiod"]),
            nearest_search = section["nearest_search"],
        )
        config.validate()
        return config

    def validate(self):
        if self.diam <= 0.0:
            raise ValueError("turbine:diam must be positive, got {}".format(self.diam))
        if self.hhub <= 0.0:
            raise ValueError("turbine:hhub must be positive, got {}".format(self.hhub))
        if self.yawperiod < 0.0:
            raise ValueError("turbine:yawperiod cannot be negative")
        if self.turbstatperiod < 0.0:
            raise ValueError("turbine:turbstatperiod cannot be negative")


@dataclass(frozen=True)
class FarmConfig:
    """
    Layout parameters from the [windfarm] section plus the shared rotor diameter.
    """
    diam: float
    nturbrows: int = 1
    nturbcols: int = 1
    spacingx: float = 0.0
    spacingy: float = 0.0
    swstaggered: bool = False
    farmlocx: float = 0.0
    farmlocy: float = 0.0
    layoutfile: str = ""

    @classmethod
    def from_parameters(cls, params):
        section = params["windfarm"]
        if params["turbine"].get("diam") is None:
            raise ValueError("Missing required turbine parameters: diam")

        config = cls(
            diam        = float(params["turbine"]["diam"]),
            nturbrows   = int(section["nturbrows"]),
            nturbcols   = int(section["nturbcols"]),
            spacingx    = float(section["spacingx"]),
            spacingy    = float(section["spacingy"]),
            swstaggered = bool(section["swstaggered"]),
            farmlocx    = float(section["farmlocx"]),
            farmlocy    = float(section["farmlocy"]),
            layoutfile  = section["layoutfile"] or "",
        )
        config.validate()
        return config

    def validate(self):
        if self.nturbrows < 0 or self.nturbcols < 0:
            raise ValueError("windfarm:nturbrows and windfarm:nturbcols cannot be negative")


windles_parameters = Parameters()
