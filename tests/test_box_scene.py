import os
import sys
import pytest
import matplotlib

matplotlib.use("Agg")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import box_scene
from data_types import Fidelity


def test_parse_defaults():
    args = box_scene.parse_scene_cli(["walk"])
    assert args.layout == "walk"
    assert args.fidelity is Fidelity.FULL
    assert args.size == [3.0, 3.0, 3.0]
    assert args.edge_radius == 0.5


def test_unknown_fidelity_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        box_scene.parse_scene_cli(["single", "--fidelity", "ultra"])
    assert excinfo.value.code == 1
    assert "Unknown fidelity" in capsys.readouterr().out


def test_bad_cell_size_exits():
    with pytest.raises(SystemExit):
        box_scene.parse_scene_cli(["map", "--cell-size", "0"])


def test_single_box_summary(capsys):
    box_scene.main(["single", "--fidelity", "PARTIAL"])
    out = capsys.readouterr().out
    assert "24 vertices, 60 indices, 2 boundary loops" in out


def test_large_radius_warns(capsys):
    box_scene.main(["single", "-r", "2.0"])
    assert "Warning:" in capsys.readouterr().out


def test_map_scene(capsys):
    box_scene.main(["map", "--fidelity", "basic"])
    out = capsys.readouterr().out
    assert "Placed 149 boxes at 149 distinct lattice points" in out


def test_walk_scene(capsys):
    box_scene.main(["walk", "--length", "20", "--seed", "5"])
    assert "Placed 20 boxes" in capsys.readouterr().out
