"""
svgnative — convert SVG files into react-native-svg components.

Usage:
  svgnative icon.svg                           # prints the component
  svgnative icon.svg -o Icon.tsx --flavor themed
  svgnative icons/ -o components/              # batch process a folder
  svgnative icon.svg --flavor themed --fill-tags Path,Circle
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys

from svgnative.config import settings
from svgnative.engine.context import is_failure
from svgnative.engine.flavors import get_registry
from svgnative.engine.pipeline import convert

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def component_name_for(path: str) -> str | None:
    """arrow-left.svg → ArrowLeft; None when the file name has no usable words."""
    stem = os.path.splitext(os.path.basename(path))[0]
    words = _WORD_RE.findall(stem)
    if not words:
        return None
    name = "".join(w[:1].upper() + w[1:] for w in words)
    if name[0].isdigit():
        name = "Svg" + name
    return name


def process_file(input_path, output_path=None, flavor="generic", name=None, fill_tags=None):
    """Convert a single SVG file. Returns True on success."""
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"  ERROR: cannot read {input_path}: {e}", file=sys.stderr)
        return False

    code = convert(
        raw,
        flavor,
        component_name=name or component_name_for(input_path),
        fill_tags=fill_tags,
    )

    if is_failure(code):
        print(f"  ERROR: {code}", file=sys.stderr)
        return False

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(code + "\n")
        print(f"  → Saved: {output_path}", file=sys.stderr)
    else:
        print(code)

    return True


def build_parser() -> argparse.ArgumentParser:
    flavors = [f.id for f in get_registry().all()]
    parser = argparse.ArgumentParser(description="SVG to react-native-svg component converter")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("-f", "--flavor", choices=flavors, default=settings.default_flavor, help="Output flavor")
    parser.add_argument("-n", "--name", help="Component name (single file only)")
    parser.add_argument(
        "--fill-tags",
        help="Comma-separated component tags whose fill becomes the fill prop (e.g. Path,Circle)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.svgnative_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    fill_tags = None
    if args.fill_tags:
        fill_tags = [t.strip() for t in args.fill_tags.split(",") if t.strip()]
    elif args.flavor == "themed":
        fill_tags = settings.themed_fill_tags

    if os.path.isdir(args.input):
        svg_files = [f for f in os.listdir(args.input) if f.lower().endswith(".svg")]
        if not svg_files:
            print("No .svg files found in folder.", file=sys.stderr)
            return 1

        extension = get_registry().get(args.flavor).file_extension
        out_dir = args.output or args.input.rstrip("/\\") + "_components"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...", file=sys.stderr)
        success = 0
        taken: set[str] = set()
        for fname in sorted(svg_files):
            print(f"[{fname}]", file=sys.stderr)
            in_path = os.path.join(args.input, fname)
            name = component_name_for(fname)
            base = name or os.path.splitext(fname)[0]
            stem, n = base, 2
            while stem.lower() in taken:
                stem, n = f"{base}{n}", n + 1
            taken.add(stem.lower())
            if stem != base:
                print(f"  NOTE: {base}{extension} already written, using {stem}{extension}", file=sys.stderr)
                if name:
                    name = stem
            out_path = os.path.join(out_dir, stem + extension)
            if process_file(in_path, out_path, args.flavor, name, fill_tags):
                success += 1

        print(f"Done: {success}/{len(svg_files)} converted → {out_dir}", file=sys.stderr)
        return 0 if success == len(svg_files) else 1

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    print(f"[{os.path.basename(args.input)}]", file=sys.stderr)
    ok = process_file(args.input, args.output, args.flavor, args.name, fill_tags)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
