import argparse
import logging
import sys
from pathlib import Path

from stlmesh.config import DecodeConfig, UnitScale
from stlmesh.errors import STLError
from stlmesh.stl_loader import load_stl

logger = logging.getLogger("stlmesh")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode a binary STL file.")
    parser.add_argument("path", help="Binary STL file")
    parser.add_argument(
        "--unit",
        choices=[u.name.lower() for u in UnitScale],
        default="meter",
        help="Unit the file is authored in (default: meter)",
    )
    parser.add_argument(
        "--no-orientation-fix",
        action="store_true",
        help="Skip the +90 degree X rotation for 3D-print (Z-up) files",
    )
    parser.add_argument("--show", action="store_true", help="Open a PyVista viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def looks_like_ascii_stl(path: str) -> bool:
    with open(path, "rb") as f:
        return f.read(5).lower() == b"solid"


def summarize(decoded, path: str) -> str:
    lines = [f"File: {Path(path).name}"]
    if decoded.name:
        lines.append(f"Name: {decoded.name}")
    lines.append(f"Triangles: {decoded.triangle_count:,}")
    lines.append(f"Vertices: {decoded.vertices.shape[0]:,}")
    if decoded.triangle_count:
        points = decoded.transformed_vertices()
        mins = points.min(axis=0)
        maxs = points.max(axis=0)
        dims = maxs - mins
        lines.append(f"Bounding box: {dims[0]:.4f} x {dims[1]:.4f} x {dims[2]:.4f}")
    return "\n".join(lines)


def run_cli(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DecodeConfig(
        correct_for_print_orientation=not args.no_orientation_fix,
        unit_scale=UnitScale.from_name(args.unit),
    )

    try:
        decoded = load_stl(args.path, config)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except STLError as e:
        logger.error("Cannot decode %s: %s", args.path, e)
        if looks_like_ascii_stl(args.path):
            logger.warning("%s starts with 'solid'; ASCII STL is not supported", args.path)
        return 1

    print(summarize(decoded, args.path))

    if args.show:
        from stlmesh.loader import to_polydata
        from visualization.pv_display import show_mesh

        show_mesh(to_polydata(decoded), title=f"stlmesh – {Path(args.path).name}")

    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
