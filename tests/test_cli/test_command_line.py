"""
Tests for the kmeans-cluster command line entry point.
"""

import json

import pytest

from kmeans_clustering.cli import build_parser, main

POINTS = [[1, 1], [1.5, 2], [1, 1.5], [8, 8], [8.5, 9], [9, 8], [1, 9], [2, 9.5], [1.5, 8.5]]


@pytest.fixture
def points_file(tmp_path):
    path = tmp_path / "points.json"
    path.write_text(json.dumps(POINTS), encoding="utf-8")
    return path


def test_parser_defaults_follow_config():
    args = build_parser().parse_args(["points.json", "-k", "3"])
    assert args.clusters == 3
    assert args.max_iterations == 100
    assert args.tolerance == 1e-6
    assert args.runs == 10
    assert args.seed is None
    assert args.output is None


def test_parser_requires_k():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["points.json"])


def test_main_prints_clusters(points_file, capsys):
    assert main([str(points_file), "-k", "3", "--seed", "0"]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["k"] == 3
    assert len(result["clusters"]) == 3
    assert sum(len(c["points"]) for c in result["clusters"]) == len(POINTS)
    assert result["inertia"] >= 0


def test_main_is_reproducible_with_seed(points_file, capsys):
    main([str(points_file), "-k", "2", "--seed", "5"])
    first = capsys.readouterr().out
    main([str(points_file), "-k", "2", "--seed", "5"])
    assert capsys.readouterr().out == first


def test_main_single_run(points_file, capsys):
    assert main([str(points_file), "-k", "2", "--runs", "1", "--seed", "1"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["k"] == 2


def test_main_writes_output_file(points_file, tmp_path, capsys):
    out = tmp_path / "clusters.json"
    assert main([str(points_file), "-k", "3", "--seed", "0", "-o", str(out)]) == 0

    assert capsys.readouterr().out == ""
    result = json.loads(out.read_text(encoding="utf-8"))
    assert result["k"] == 3


def test_main_reads_csv(tmp_path, capsys):
    path = tmp_path / "points.csv"
    path.write_text("\n".join(f"{x},{y}" for x, y in POINTS) + "\n", encoding="utf-8")

    assert main([str(path), "-k", "3", "--seed", "2"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert sum(len(c["points"]) for c in result["clusters"]) == len(POINTS)


def test_main_invalid_k(points_file, capsys):
    assert main([str(points_file), "-k", "20"]) == 2
    err = capsys.readouterr().err
    assert "error:" in err
    assert "Invalid number of clusters" in err


def test_main_invalid_runs(points_file, capsys):
    assert main([str(points_file), "-k", "2", "--runs", "0"]) == 2
    assert "num_runs" in capsys.readouterr().err


def test_main_unsupported_format(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("1 2\n", encoding="utf-8")
    assert main([str(path), "-k", "1"]) == 2
    assert "Unsupported dataset format" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json"), "-k", "1"]) == 2
    assert "error:" in capsys.readouterr().err


def test_main_unknown_log_level(points_file, capsys):
    """Test that an unknown --log-level exits with status 2 instead of a traceback."""
    assert main([str(points_file), "-k", "1", "--log-level", "bogus"]) == 2
    assert "Unknown log level" in capsys.readouterr().err


def test_main_unwritable_output(points_file, tmp_path, capsys):
    """Test that an --output path that cannot be opened exits with status 2."""
    out = tmp_path / "missing_dir" / "clusters.json"
    assert main([str(points_file), "-k", "2", "--seed", "0", "-o", str(out)]) == 2
    assert "error:" in capsys.readouterr().err
    assert not out.exists()


def test_main_negative_seed(points_file, capsys):
    """Test that a negative --seed is reported as a usage error."""
    assert main([str(points_file), "-k", "2", "--seed", "-1"]) == 2
    assert "seed" in capsys.readouterr().err
