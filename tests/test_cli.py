import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import csv

import matplotlib
matplotlib.use("Agg")
import pytest

from mazepaths.cli import run_maze, run_sweep


def test_default_scenario_report(capsys):
    assert run_maze.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("maze:\n")
    assert "shortest path length: 13" in out
    assert out.endswith("number of shortest paths: 20\n")

def test_list_scenarios(capsys):
    assert run_maze.main(["--list"]) == 0
    assert capsys.readouterr().out.split() == ["corner", "detour", "islands", "lattice"]

def test_max_paths_refusal(capsys):
    assert run_maze.main(["--scenario", "detour", "--max-paths", "5"]) == 1
    assert "exceed --max-paths 5" in capsys.readouterr().err

def test_file_without_markers(tmp_path, capsys):
    p = tmp_path / "maze.txt"
    p.write_text("2 0\n0 0\n")
    assert run_maze.main(["--file", str(p)]) == 1
    assert "DESTINATION" in capsys.readouterr().err

def test_unknown_scenario_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        run_maze.main(["--scenario", "spiral"])
    assert exc.value.code == 2

def test_random_maze_with_plots(tmp_path, capsys):
    outdir = tmp_path / "png"
    assert run_maze.main(["--random", "6x7", "--seed", "1", "--plots", str(outdir)]) == 0
    out = capsys.readouterr().out
    assert "number of shortest paths:" in out
    assert out.count("Saved: ") == 3
    assert len(os.listdir(outdir)) == 3

def test_sweep_writes_one_row_per_maze(tmp_path, capsys):
    assert run_sweep.main(["--sizes", "5x5,6x8", "--densities", "0.1,20%",
                           "--num-envs", "3", "--outdir", str(tmp_path), "--quiet"]) == 0
    files = [f for f in os.listdir(tmp_path) if f.endswith(".csv")]
    assert len(files) == 1
    with open(tmp_path / files[0], newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 * 3
    for row in rows:
        if row["reachable"] == "1":
            assert int(row["num_paths"]) >= 1 and int(row["distance"]) >= 1
        else:
            assert row["num_paths"] == "0" and row["distance"] == "-1"

def test_make_figs_from_sweep(tmp_path, capsys):
    from mazepaths.cli import make_figs
    csv_dir, fig_dir = tmp_path / "csv", tmp_path / "figs"
    assert run_sweep.main(["--sizes", "6x6", "--densities", "0.1,0.3", "--num-envs", "4",
                           "--outdir", str(csv_dir), "--quiet"]) == 0
    assert make_figs.main(["--csv", str(csv_dir / "sweep_*.csv"), "--outdir", str(fig_dir)]) == 0
    assert "sweep_reachability.png" in os.listdir(fig_dir)

def test_make_figs_without_csv(tmp_path):
    from mazepaths.cli import make_figs
    assert make_figs.main(["--csv", str(tmp_path / "none_*.csv")]) == 1
