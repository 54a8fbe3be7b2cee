import xml.etree.ElementTree as ET

import pytest

from hdlab.output import OutputType, Point3D, write_polyline, write_to_file


def _read(path):
    root = ET.parse(path).getroot()
    piece = root.find("PolyData/Piece")
    coords = [float(v) for v in piece.find("Points/DataArray").text.split()]
    arrays = {a.get("Name"): a for a in piece.find("Lines").findall("DataArray")}
    conn = [int(v) for v in (arrays["connectivity"].text or "").split()]
    offs = [int(v) for v in (arrays["offsets"].text or "").split()]
    return root, piece, coords, conn, offs


def test_polyline_round_trip(tmp_path):
    pts = [Point3D(0.0, 1.5, 0.0), Point3D(0.25, -2.0, 0.0), Point3D(0.5, 3.0, 1.0)]
    path = write_polyline(tmp_path / "line.vtp", pts)
    root, piece, coords, conn, offs = _read(path)
    assert root.get("type") == "PolyData"
    assert piece.get("NumberOfPoints") == "3"
    assert piece.get("NumberOfLines") == "2"
    assert coords == [v for p in pts for v in (p.x, p.y, p.z)]
    assert conn == [0, 1, 1, 2]
    assert offs == [2, 4]


def test_single_point_has_no_lines(tmp_path):
    path = write_polyline(tmp_path / "p.vtp", [Point3D(1.0, 2.0)])
    _, piece, coords, conn, offs = _read(path)
    assert piece.get("NumberOfLines") == "0"
    assert coords == [1.0, 2.0, 0.0]
    assert conn == [] and offs == []


def test_write_to_file_vtp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    x = [0.0, 1.0, 2.0]
    u = [5.0, 6.0, 7.0]
    path = write_to_file(OutputType.VTP, 7, x, u)
    assert path.name == "file0007.vtp"
    _, _, coords, _, _ = _read(tmp_path / "file0007.vtp")
    assert coords[0::3] == x
    assert coords[1::3] == u
    assert coords[2::3] == [0.0, 0.0, 0.0]


def test_write_to_file_none_writes_nothing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert write_to_file(OutputType.NONE, 1, [0.0], [1.0]) is None
    assert list(tmp_path.iterdir()) == []
    assert capsys.readouterr().out == ""


def test_write_to_file_print(capsys):
    write_to_file(OutputType.PRINT, 3, [0.0, 1.0], [0.5, 2.0])
    out = capsys.readouterr().out
    assert out.startswith("nt = 3\n")
    assert "u [ 0.5, 2.0 ]" in out


def test_vtp_length_mismatch(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        write_to_file(OutputType.VTP, 0, [0.0, 1.0], [1.0])