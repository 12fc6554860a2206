from __future__ import annotations

import argparse

from .config import GearDefaults


def build_parser() -> argparse.ArgumentParser:
    defaults = GearDefaults()
    parser = argparse.ArgumentParser(prog="gearmesh", description="Procedural spur gear GLB generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also append INFO logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate gears from config")
    gen.add_argument("--config", required=True, help="Path to gears.json")
    gen.add_argument("--gear", default="", help="Generate only selected gear name")
    gen.add_argument("--force", action="store_true", help="Force regenerate even if outputs exist")

    build = sub.add_parser("build", help="Build a single gear from command line parameters")
    build.add_argument("--inner-radius", type=float, default=defaults.inner_radius)
    build.add_argument("--outer-radius", type=float, default=defaults.outer_radius)
    build.add_argument("--width", type=float, default=defaults.width)
    build.add_argument("--teeth", type=float, default=defaults.teeth)
    build.add_argument("--tooth-depth", type=float, default=defaults.tooth_depth)
    build.add_argument("--out", default="gear.glb", help="Output .glb path")

    sub.add_parser("list", help="List available generators")
    return parser
