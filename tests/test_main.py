from main import run_cli


def test_cli_summary(tmp_path, single_triangle_stl, capsys):
    path = tmp_path / "tri.stl"
    path.write_bytes(single_triangle_stl)

    assert run_cli([str(path), "--unit", "millimeter"]) == 0
    out = capsys.readouterr().out
    assert "Name: unit" in out
    assert "Triangles: 1" in out
    assert "Vertices: 3" in out


def test_cli_rejects_ascii_stl(tmp_path, caplog):
    path = tmp_path / "ascii.stl"
    path.write_bytes(b"solid cube\nfacet normal 0 0 1\nendsolid cube\n" + b" " * 60)

    assert run_cli([str(path)]) == 1
    assert "ASCII STL is not supported" in caplog.text


def test_cli_missing_file(tmp_path):
    assert run_cli([str(tmp_path / "missing.stl")]) == 1
