import os
import sys

import pytest
import yaml

import windles
from windles.ParameterManager import TurbineConfig, FarmConfig

from conftest import build_params


def test_defaults_loaded():
    params = windles.Parameters()
    assert params["windfarm"]["nturbrows"] == 1
    assert params["windfarm"]["layoutfile"] == ""
    assert params["turbine"]["swdynyaw"] is False
    assert params["turbine"]["diam"] is None
    assert params.debug_mode is False
    assert params.folder is None


def test_defaults_are_not_shared():
    a = windles.Parameters()
    b = windles.Parameters()
    a["windfarm"]["nturbrows"] = 7
    assert b["windfarm"]["nturbrows"] == 1
    assert a.defaults["windfarm"]["nturbrows"] == 1


def test_unknown_parameter_suggests_match():
    params = windles.Parameters()
    with pytest.raises(KeyError, match="did you mean: spacingx"):
        params.CheckParameters({"windfarm": {"spacingxx": 2.0}}, params.defaults)


def test_unknown_section():
    params = windles.Parameters()
    with pytest.raises(KeyError, match="not a valid parameter"):
        params.CheckParameters({"nonsense_section_name": {}}, params.defaults)


def test_terminal_update_casts_to_default_type():
    params = windles.Parameters()
    updates = {}
    params.TerminalUpdate(updates, ["windfarm","nturbrows"], "3")
    params.TerminalUpdate(updates, ["windfarm","swstaggered"], "true")
    params.TerminalUpdate(updates, ["windfarm","spacingx"], "5")
    params.TerminalUpdate(updates, ["turbine","diam"], "126.0")
    params.TerminalUpdate(updates, ["windfarm","layoutfile"], "layout.txt")

    assert updates["windfarm"]["nturbrows"] == 3
    assert updates["windfarm"]["swstaggered"] is True
    assert isinstance(updates["windfarm"]["spacingx"], float)
    assert updates["turbine"]["diam"] == 126.0
    assert updates["windfarm"]["layoutfile"] == "layout.txt"


def test_load_from_yaml(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", sys.stdout)
    monkeypatch.setattr(sys, "stderr", sys.stderr)

    loc = tmp_path/"case.yaml"
    loc.write_text(yaml.dump({
        "general": {"output_folder": str(tmp_path/"output"), "log_to_file": False},
        "turbine": {"diam": 126.0, "hhub": 90.0, "ct": 0.75, "cp": 0.45, "tsr": 8.0},
        "windfarm": {"nturbrows": 2},
    }))

    params = windles.Parameters()
    params.Load(str(loc), updated_parameters=["windfarm:nturbcols:3"])

    assert params.name == "case"
    assert params["windfarm"]["nturbrows"] == 2
    assert params["windfarm"]["nturbcols"] == 3
    assert params["windfarm"]["spacingx"] == 0.0
    assert os.path.isdir(params.folder+"data")
    assert os.path.isfile(params.folder+"input_files/case.yaml")


def test_load_writes_log(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", sys.stdout)
    monkeypatch.setattr(sys, "stderr", sys.stderr)

    params = windles.Parameters()
    params.Load({"general": {"output_folder": str(tmp_path), "name": "logged"}})
    params.fprint("hello log")
    sys.stdout.flush()

    with open(params.folder+"log.txt") as f:
        assert "hello log" in f.read()


def test_logger_tees_both_streams(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", sys.stdout)
    monkeypatch.setattr(sys, "stderr", sys.stderr)

    params = windles.Parameters()
    params.Load({"general": {"output_folder": str(tmp_path), "name": "teed"}})
    print("to stdout")
    print("to stderr", file=sys.stderr)
    sys.stdout.flush()
    sys.stderr.flush()

    assert isinstance(sys.stdout, windles.ParameterManager.Logger)
    assert sys.stdout.isatty() == sys.stdout.terminal.isatty()
    with open(params.folder+"log.txt") as f:
        text = f.read()
    assert "to stdout" in text
    assert "to stderr" in text


def test_load_rejects_bad_key(tmp_path):
    params = windles.Parameters()
    with pytest.raises(KeyError):
        params.Load({"general": {"output_folder": str(tmp_path)}, "turbine": {"diameter": 1.0}})


def test_tag_output(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", sys.stdout)
    params = windles.Parameters()
    params.Load({"general": {"output_folder": str(tmp_path), "name": "tagged", "log_to_file": False}})
    params.tag_output("value", 2.5)

    with open(params.folder+"tagged_output.yaml") as f:
        tagged = yaml.load(f, Loader=yaml.SafeLoader)
    assert tagged["test_parameters"]["value"] == 2.5
    assert params.tagged_output == {"test_parameters": {"value": 2.5}}


def test_fprint_indentation(capsys):
    params = windles.Parameters()
    params.fprint("Section", special="header")
    params.fprint("inside")
    params.fprint("Done", special="footer")
    out = capsys.readouterr().out
    assert "|    inside" in out
    assert params.current_tab == 0


###############################################################
##################### Configuration Objects ###################
###############################################################

def test_turbine_config_from_parameters():
    config = TurbineConfig.from_parameters(build_params())
    assert config.diam == 100.0
    assert config.hhub == 90.0
    assert config.swdynyaw is False
    assert config.yawperiod == 0.0
    assert config.turbstarttime == 0.0
    assert config.nearest_search == "linear"


def test_turbine_config_requires_values():
    params = windles.Parameters()
    params["turbine"].update({"diam": 100.0, "hhub": 90.0})
    with pytest.raises(ValueError, match="ct, cp, tsr"):
        TurbineConfig.from_parameters(params)


@pytest.mark.parametrize("key,value", [("diam", 0.0), ("hhub", -5.0), ("yawperiod", -1.0), ("turbstatperiod", -1.0)])
def test_turbine_config_validation(key, value):
    params = build_params(turbine={key: value})
    with pytest.raises(ValueError):
        TurbineConfig.from_parameters(params)


def test_farm_config_from_parameters():
    params = build_params(windfarm={"nturbrows": 2, "nturbcols": 3, "spacingx": 5, "swstaggered": True})
    config = FarmConfig.from_parameters(params)
    assert config.diam == 100.0
    assert config.nturbrows == 2
    assert config.nturbcols == 3
    assert config.spacingx == 5.0
    assert config.swstaggered is True
    assert config.layoutfile == ""


def test_farm_config_rejects_negative_counts():
    with pytest.raises(ValueError):
        FarmConfig.from_parameters(build_params(windfarm={"nturbrows": -1}))
