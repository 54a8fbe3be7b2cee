"""File and console output of simulation states."""

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path


class OutputType(Enum):
    """Where a simulation state goes."""

    NONE = "none"
    PRINT = "print"
    VTP = "vtp"


@dataclass
class Point3D:
    """A point written to a polyline file."""

    x: float
    y: float
    z: float = 0.0


def write_polyline(fname: str | PathLike, points: Iterable[Point3D]) -> Path:
    """Write the points as one polyline to an ASCII VTK XML PolyData file."""
    pts = list(points)
    segments = range(1, len(pts))

    root = ET.Element(
        "VTKFile", type="PolyData", version="0.1", byte_order="LittleEndian"
    )
    poly = ET.SubElement(root, "PolyData")
    piece = ET.SubElement(
        poly,
        "Piece",
        NumberOfPoints=str(len(pts)),
        NumberOfVerts="0",
        NumberOfLines=str(len(segments)),
        NumberOfStrips="0",
        NumberOfPolys="0",
    )
    coords = ET.SubElement(
        ET.SubElement(piece, "Points"),
        "DataArray",
        type="Float64",
        NumberOfComponents="3",
        format="ascii",
    )
    coords.text = " ".join(repr(float(v)) for p in pts for v in (p.x, p.y, p.z))

    lines = ET.SubElement(piece, "Lines")
    conn = ET.SubElement(
        lines, "DataArray", type="Int64", Name="connectivity", format="ascii"
    )
    conn.text = " ".join(f"{i - 1} {i}" for i in segments)
    offsets = ET.SubElement(
        lines, "DataArray", type="Int64", Name="offsets", format="ascii"
    )
    offsets.text = " ".join(str(2 * i) for i in segments)

    tree = ET.ElementTree(root)
    ET.indent(tree)
    path = Path(fname)
    tree.write(path, encoding="utf-8", xml_declaration=True)
    return path


def write_to_file(
    otype: OutputType, nt: int, x: Sequence[float], u: Sequence[float]
) -> Path | None:
    """Emit the state u(x) of time step ``nt``; returns the file written, if any."""
    if otype is OutputType.NONE:
        return None
    if otype is OutputType.PRINT:
        print(f"nt = {nt}")
        print("u [ " + ", ".join(f"{v:.4}" for v in u) + " ]\n")
        return None
    if len(x) != len(u):
        raise ValueError("x and u must have the same length")
    return write_polyline(
        f"file{nt:04}.vtp", (Point3D(xi, ui, 0.0) for xi, ui in zip(x, u))
    )