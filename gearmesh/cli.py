from __future__ import annotations

import logging
import os
from pathlib import Path

from .core.args import build_parser
from .core.config import GearDefaults, GearEntry, load_gear_config
from .core.errors import GearMeshError
from .core.pipeline import run_gear_pipeline
from .generators.registry import get_generator, list_generators
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _should_regenerate(gear_name: str, output_root: str, source_config: str, force: bool) -> bool:
    if force:
        return True
    glb_path = Path(output_root) / f"{gear_name}.glb"
    if not glb_path.exists():
        return True
    return os.path.getmtime(source_config) > os.path.getmtime(glb_path)


def _generate(args) -> int:
    config = load_gear_config(args.config)
    generated = 0
    skipped = 0

    for entry in config.gears:
        if args.gear and entry.name != args.gear:
            continue
        if not _should_regenerate(entry.name, config.defaults.output_root, config.source_path, args.force):
            print(f"SKIP {entry.name}: up-to-date")
            skipped += 1
            continue

        print(f"GENERATE {entry.name} [{entry.generator}]")
        try:
            generator = get_generator(entry.generator)
        except KeyError as exc:
            raise GearMeshError(str(exc.args[0])) from exc
        result = run_gear_pipeline(generator, entry, config.defaults)
        print(f"DONE {result['gear']} -> {result['glb']} ({result['triangles']} tris)")
        generated += 1

    print(f"SUMMARY generated={generated} skipped={skipped}")
    return 0


def _build(args) -> int:
    out = Path(args.out)
    defaults = GearDefaults(output_root=str(out.parent))
    entry = GearEntry(
        name=out.stem,
        inner_radius=args.inner_radius,
        outer_radius=args.outer_radius,
        width=args.width,
        teeth=args.teeth,
        tooth_depth=args.tooth_depth,
    )
    result = run_gear_pipeline(get_generator("spur"), entry, defaults)
    print(f"DONE {result['gear']} -> {result['glb']} ({result['triangles']} tris)")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    if args.command == "list":
        print("Generators:")
        for name in list_generators():
            print(f" - {name} ({get_generator(name).category})")
        return 0

    try:
        if args.command == "generate":
            return _generate(args)
        return _build(args)
    except GearMeshError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
