#!/usr/bin/env python3
"""
Dark File Loader - Main Entry Point

Resolves source assets into content-addressed output files with support for:
- Name templates and output/public path prefixes
- Dark mode variants (<stem>_dark<ext>) checked for matching size
"""
import logging
import os
import sys
from argparse import ArgumentParser
from pathlib import Path

from dark_file_loader import (
    setup_logging,
    get_config,
    load_options_file,
    process_files_concurrent,
    strip_dark_suffix,
    LoaderError,
)
from dark_file_loader.config import OPTION_ALIASES

log = logging.getLogger(__name__)


def collect_sources(paths: list[Path]) -> list[Path]:
    """Expand directories into files. Dark variants found in directories are left
    to their light counterpart when it exists, explicitly listed files are always kept."""
    sources = []
    for path in paths:
        if path.is_dir():
            for child in sorted(p for p in path.rglob("*") if p.is_file()):
                base_name, is_dark = strip_dark_suffix(child.stem)
                if is_dark and child.with_name(base_name + child.suffix).is_file():
                    log.debug(f"SKIP {child}: emitted with {base_name}{child.suffix}")
                    continue
                sources.append(child)
        else:
            sources.append(path)
    # Deduplicate, keep order
    return list(dict.fromkeys(sources))


def main(argv=None):
    """Main entry point.

    Args:
        argv: Optional list of command-line arguments. If None, uses sys.argv.
              Example: ['src/img', '-r', '.', '-o', 'dist', '--name', '[name].[contenthash:8].[ext]']
    """
    parser = ArgumentParser(description="Emit content-addressed assets and the modules referencing them.")
    parser.add_argument("files", type=Path, nargs="+",
        help="Source files or directories to resolve")
    parser.add_argument("-r", "--root", type=Path, default=Path("."),
        help="Project root; source filenames are recorded relative to it")
    parser.add_argument("-o", "--output", type=Path, default=Path("dist"),
        help="Output directory for emitted assets")
    parser.add_argument("-m", "--module-dir", type=Path, default=None,
        help="Output directory for generated modules (default: <output>/modules)")
    parser.add_argument("--config", type=Path, default=None,
        help="YAML file with loader options")
    parser.add_argument("-j", "--jobs", type=int, default=os.cpu_count() or 4,
        help="Number of concurrent jobs (default: CPU count)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    # Loader options, override the config file
    parser.add_argument("--name", type=str, default=None,
        help="Name template (default: [contenthash].[ext])")
    parser.add_argument("--output-path", type=str, default=None,
        help="Prefix joined with the name to form the output path")
    parser.add_argument("--public-path", type=str, default=None,
        help="Public URL prefix instead of the runtime public path")
    parser.add_argument("--context", type=str, default=None,
        help="Base directory for [path] (default: root)")
    parser.add_argument("--reg-exp", type=str, default=None,
        help="Pattern whose groups fill [0], [1], ... in the name")
    parser.add_argument("--no-emit", action="store_true",
        help="Generate modules without writing assets")
    parser.add_argument("--commonjs", action="store_true",
        help="Generate module.exports instead of export default")
    parser.add_argument("--no-size-check", action="store_true",
        help="Pair dark variants without comparing image sizes")

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.debug)

    # Configure global state
    config = get_config()
    config.debug = args.debug
    config.root_dir = args.root
    config.output_dir = args.output
    config.module_dir = args.module_dir

    try:
        options = {OPTION_ALIASES.get(k, k): v for k, v in load_options_file(args.config).items()}
    except LoaderError as e:
        log.error(str(e))
        return 2

    overrides = {
        "name": args.name,
        "output_path": args.output_path,
        "public_path": args.public_path,
        "context": args.context,
        "reg_exp": args.reg_exp,
    }
    options.update({k: v for k, v in overrides.items() if v is not None})
    if args.no_emit:
        options["emit_file"] = False
    if args.commonjs:
        options["es_module"] = False
    if args.no_size_check:
        options["validate_dark_size"] = False

    sources = collect_sources(args.files)
    if not sources:
        log.warning("No source files found for the given inputs.")
        return 0

    log.debug(f"Found {len(sources)} source files to resolve.")

    try:
        result = process_files_concurrent(sources, options, max_workers=args.jobs)
    except LoaderError as e:
        log.error(str(e))
        return 2

    log.info(f"Resolved {len(result.succeeded)} files, {len(result.failed)} failed.")
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
