"""Command-line batch front end.

Usage:
    iconforge generate icons/ -t vue-sfc -o src/components/icons
    iconforge css icons/ -o dist --types
    iconforge sprite icons/ --sprite public/sprite.svg
    iconforge module icons/ --output src/svg-data.ts
    iconforge usages arrow-left src/
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from iconforge.config import settings
from iconforge.css.sheet import CssSheetOptions, generate_and_save
from iconforge.errors import UnsupportedOptionError, UnsupportedTargetError
from iconforge.generators import generate_batch, resolve_target
from iconforge.models.export_options import BodyMode, ComponentExportOptions, ExportStyle, NamingConvention
from iconforge.models.icon import IconAsset
from iconforge.sprite.icons_module import write_icons_module
from iconforge.sprite.persistence import add_to_sprite
from iconforge.svg.normalizer import extract_name
from iconforge.usage.scanner import scan_directory
from iconforge.utils.files import atomic_write_text, read_text

logger = logging.getLogger(__name__)


def load_icons(source: str) -> list[IconAsset]:
    """Icons from one ``.svg`` file or every ``.svg`` directly inside a folder."""
    if os.path.isdir(source):
        files = sorted(Path(source).glob("*.svg"))
    else:
        files = [Path(source)]
    icons = []
    for path in files:
        markup = read_text(path)
        if markup is None:
            print(f"  Skipped (unreadable): {path}")
            continue
        icons.append(IconAsset.from_svg(extract_name(str(path.resolve())), markup))
    return icons


def _require_icons(source: str) -> list[IconAsset]:
    if not os.path.exists(source):
        print(f"File not found: {source}")
        sys.exit(1)
    icons = load_icons(source)
    if not icons:
        print("No .svg files found.")
        sys.exit(1)
    return icons


def cmd_generate(args: argparse.Namespace) -> int:
    icons = _require_icons(args.input)
    try:
        options = ComponentExportOptions(
            target=resolve_target(args.target),
            typescript=not args.js,
            naming=NamingConvention(args.naming) if args.naming else None,
            export_style=ExportStyle(args.export) if args.export else None,
            forward_ref=args.forward_ref,
            memo=args.memo,
            sprite_path=args.sprite_path,
            default_size=settings.default_size,
            default_color=settings.default_color,
            body_mode=BodyMode(args.body),
        )
        components = generate_batch(icons, options, max_workers=settings.scan_max_workers)
    except (UnsupportedTargetError, UnsupportedOptionError) as e:
        print(f"  ERROR: {e}")
        return 2

    out_dir = Path(args.output)
    for component in components:
        atomic_write_text(out_dir / component.filename, component.source_text)
        print(f"  → Saved: {out_dir / component.filename}")
    print(f"Done: {len(components)} {options.target.value} components → {out_dir}")
    return 0


def cmd_css(args: argparse.Namespace) -> int:
    icons = _require_icons(args.input)
    options = CssSheetOptions(
        prefix=args.prefix,
        filename=args.filename,
        generate_types=args.types,
        minify=args.minify,
    )
    result = generate_and_save(icons, args.output, options)
    stats = result.stats
    print(
        f"Done: {stats.total_icons} icons ({stats.mono_color_icons} mono, "
        f"{stats.multi_color_icons} multi), {stats.total_size} bytes → {args.output}"
    )
    return 0


def cmd_sprite(args: argparse.Namespace) -> int:
    icons = _require_icons(args.input)
    failed = 0
    for icon in icons:
        status = add_to_sprite(icon, args.sprite, types_filename=settings.types_filename)
        print(f"  [{icon.name}] {status.value}")
        if not status.ok:
            failed += 1
    print(f"Done: {len(icons) - failed}/{len(icons)} symbols → {args.sprite}")
    return 1 if failed else 0


def cmd_module(args: argparse.Namespace) -> int:
    icons = _require_icons(args.input)
    path = write_icons_module(icons, args.output, types_filename=settings.types_filename)
    print(f"Done: {len(icons)} icons → {path}")
    return 0


def cmd_usages(args: argparse.Namespace) -> int:
    matches = scan_directory(
        args.root,
        args.name,
        exclude=args.exclude or (),
        max_workers=settings.scan_max_workers,
    )
    for m in matches:
        print(f"{m.file}:{m.line}:{m.column}: {m.line_text.strip()}")
    print(f"{len(matches)} references to {args.name!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconforge", description="SVG icon tooling")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Framework components from SVG files")
    gen.add_argument("input", help="SVG file or folder of SVGs")
    gen.add_argument("-t", "--target", default=settings.default_target, help="Target framework")
    gen.add_argument("-o", "--output", default=os.path.join(settings.output_directory, "components"))
    gen.add_argument("--js", action="store_true", help="Emit JavaScript instead of TypeScript")
    gen.add_argument("--naming", choices=[n.value for n in NamingConvention])
    gen.add_argument("--export", choices=[s.value for s in ExportStyle])
    gen.add_argument("--forward-ref", action="store_true")
    gen.add_argument("--memo", action="store_true")
    gen.add_argument("--body", choices=[m.value for m in BodyMode], default=BodyMode.SPRITE.value)
    gen.add_argument("--sprite-path", default=settings.sprite_filename, help="URL of the sprite in the app")
    gen.set_defaults(func=cmd_generate)

    css = sub.add_parser("css", help="CSS icon sheet")
    css.add_argument("input", help="SVG file or folder of SVGs")
    css.add_argument("-o", "--output", default=settings.output_directory)
    css.add_argument("--prefix", default=settings.css_class_prefix)
    css.add_argument("--filename", default="icons")
    css.add_argument("--types", action="store_true", help="Also write a .css.d.ts file")
    css.add_argument("--minify", action="store_true")
    css.set_defaults(func=cmd_css)

    sprite = sub.add_parser("sprite", help="Add or update sprite symbols")
    sprite.add_argument("input", help="SVG file or folder of SVGs")
    sprite.add_argument("--sprite", default=os.path.join(settings.output_directory, settings.sprite_filename))
    sprite.set_defaults(func=cmd_sprite)

    module = sub.add_parser("module", help="Icon-list module (ts, js or json)")
    module.add_argument("input", help="SVG file or folder of SVGs")
    module.add_argument(
        "-o", "--output", default=os.path.join(settings.output_directory, settings.icons_module_filename)
    )
    module.set_defaults(func=cmd_module)

    usages = sub.add_parser("usages", help="Find references to an icon")
    usages.add_argument("name", help="Icon name")
    usages.add_argument("root", nargs="?", default=".", help="Directory to scan")
    usages.add_argument("--exclude", action="append", help="Glob to skip (repeatable)")
    usages.set_defaults(func=cmd_usages)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else getattr(logging, settings.iconforge_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
