# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ClassML command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from classml.codec.document import DOCUMENT_SUFFIXES, document_stem, load_document
from classml.codec.structured import DecodeError
from classml.model.classifier import Classifier
from classml.views.notation import render_classifiers
from classml.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ClassML CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="classml",
        description="ClassML - canonical notation for UML classifiers",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        parents=[common],
        help="Initialize a new ClassML workspace",
        description=f"Create a {CONFIG_FILE_NAME} workspace configuration in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        parents=[common],
        help="Render classifier documents to notation",
        description="Decode classifier documents and print their textual notation.",
    )
    render_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="YAML or JSON classifier documents",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the notation to this file instead of standard output",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Check that all workspace documents decode",
        description="Decode every classifier document in the workspace and report errors.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the ClassML workspace (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        parents=[common],
        help="Render all workspace documents",
        description="Render every classifier document in the workspace to the output directory.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the ClassML workspace (default: current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _configure_logging("DEBUG" if args.verbose else "WARNING")
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_DEFAULT_OUTPUT_DIR = ".classml-out"
_OUTPUT_SUFFIX = ".txt"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _configure_logging(level: str) -> None:
    """Route package log records to standard error at *level*."""
    logging.basicConfig(format="%(levelname)s: %(name)s: %(message)s")
    logging.getLogger("classml").setLevel(level)


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: workspace already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_content = (
        "# ClassML Workspace Configuration\n"
        "# Classifier documents (*.classml.yaml, *.classml.json) below source-directory\n"
        "# are rendered into output-directory by 'classml build'.\n"
        "\n"
        f"output-directory: {_DEFAULT_OUTPUT_DIR}\n"
        "source-directory: .\n"
        "log-level: WARNING\n"
    )
    config_file.write_text(config_content, encoding="utf-8")
    print(f"Initialized ClassML workspace at '{config_file}'.")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    classifiers: list[Classifier] = []
    for path in args.files:
        try:
            classifiers.extend(load_document(path))
        except DecodeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    notation = render_classifiers(classifiers)
    if args.output is None:
        if notation:
            print(notation)
        return 0

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(notation + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{args.output}': {exc}", file=sys.stderr)
        return 1
    logger.info("Wrote %d classifier(s) to %s", len(classifiers), args.output)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    workspace = _load_workspace(Path(args.directory), args.verbose)
    if workspace is None:
        return 1
    directory, config = workspace

    documents = _find_documents(directory, config)
    if not documents:
        print("No classifier documents found in the workspace.")
        return 0

    print(f"Checking {len(documents)} classifier document(s)...")
    has_errors = False
    for path in documents:
        try:
            load_document(path)
        except DecodeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    workspace = _load_workspace(Path(args.directory), args.verbose)
    if workspace is None:
        return 1
    directory, config = workspace

    documents = _find_documents(directory, config)
    if not documents:
        print("No classifier documents found in the workspace.")
        return 0

    source_dir = (directory / config.source_directory).resolve()
    output_dir = (directory / config.output_directory).resolve()
    targets: dict[Path, Path] = {}
    for path in documents:
        relative = path.relative_to(source_dir)
        target = output_dir / relative.parent / f"{document_stem(path)}{_OUTPUT_SUFFIX}"
        if target in targets:
            print(
                f"Error: '{targets[target]}' and '{path}' would both be rendered to '{target}'.",
                file=sys.stderr,
            )
            return 1
        targets[target] = path

    print(f"Rendering {len(documents)} classifier document(s)...")
    for target, path in targets.items():
        try:
            classifiers = load_document(path)
        except DecodeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render_classifiers(classifiers) + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot write '{target}': {exc}", file=sys.stderr)
            return 1
        logger.info("Rendered %s -> %s", path, target)

    print(f"Notation written to '{output_dir}'.")
    return 0


def _load_workspace(directory: Path, verbose: bool) -> tuple[Path, WorkspaceConfig] | None:
    """Resolve *directory* and load its workspace configuration, reporting failures."""
    directory = directory.resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no ClassML workspace found at '{directory}'. Run 'classml init' to initialize a workspace.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_workspace_config(config_file)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    if not verbose:
        _configure_logging(config.log_level)
    return directory, config


def _find_documents(directory: Path, config: WorkspaceConfig) -> list[Path]:
    """Return all classifier documents under the source directory, outside the output directory."""
    source_dir = (directory / config.source_directory).resolve()
    output_dir = (directory / config.output_directory).resolve()
    return sorted(
        f
        for f in source_dir.rglob("*")
        if f.is_file() and f.name.endswith(DOCUMENT_SUFFIXES) and output_dir not in f.parents
    )
