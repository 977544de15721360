"""Command line surface for inspecting a freshly bootstrapped sandbox."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from sandbox_core.app import SandboxApp
from sandbox_core.capabilities.log import LogLevel
from sandbox_core.config import ConfigResolver
from sandbox_core.errors import AddressingError
from sandbox_core.files import FileSystemError, FileType

CLI_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sandbox",
        description="Bootstrap the in-memory sandbox environment and inspect it.",
    )
    parser.add_argument("--version", action="version", version=f"sandbox v{CLI_VERSION}")
    parser.add_argument("--user-data-dir", dest="user_data_dir", help="root for derived resources")
    parser.add_argument("--session-id", dest="session_id", help="session identifier")
    parser.add_argument("--machine-id", dest="machine_id", help="machine identifier")
    parser.add_argument("--log-level", dest="log_level", help="trace/debug/info/warn/error/critical/off")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    status_cmd = subparsers.add_parser("status", help="show the bootstrapped environment")
    status_cmd.set_defaults(func=_handle_status)

    tree_cmd = subparsers.add_parser("tree", help="list every node in the virtual store")
    tree_cmd.set_defaults(func=_handle_tree)

    cat_cmd = subparsers.add_parser("cat", help="print a seeded workspace file")
    cat_cmd.add_argument("path", help="path relative to the workspace root")
    cat_cmd.set_defaults(func=_handle_cat)

    caps_cmd = subparsers.add_parser("capabilities", help="list bound capabilities")
    caps_cmd.set_defaults(func=_handle_capabilities)

    resources_cmd = subparsers.add_parser("resources", help="list derived resource locations")
    resources_cmd.add_argument("--format", choices=["text", "json"], default="text")
    resources_cmd.set_defaults(func=_handle_resources)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0

    overrides = {
        key: value
        for key in ("user_data_dir", "session_id", "machine_id", "log_level")
        if (value := getattr(args, key, None))
    }
    configuration = ConfigResolver(overrides=overrides).resolve()
    try:
        level = LogLevel.parse(configuration.log_level)
    except ValueError as exc:
        print(f"[sandbox] error: {exc}")
        return 2
    logging.basicConfig(level=min(level, logging.CRITICAL))
    app = SandboxApp(configuration)
    app.bootstrap()
    return func(app, args)


def _handle_status(app: SandboxApp, _: argparse.Namespace) -> int:
    for key, value in app.status().items():
        print(f"{key:<18} {value}")
    return 0


def _handle_tree(app: SandboxApp, _: argparse.Namespace) -> int:
    for path, file_type in app.store.walk():
        suffix = "/" if file_type is FileType.DIRECTORY else ""
        print(f"{path}{suffix}")
    return 0


def _handle_cat(app: SandboxApp, args: argparse.Namespace) -> int:
    try:
        resource = app.workspace.uri.join_path(args.path)
        data = app.store.read_file(resource)
    except (AddressingError, FileSystemError) as exc:
        print(f"[sandbox:cat] error: {exc}")
        return 1
    print(data.decode("utf-8"))
    return 0


def _handle_capabilities(app: SandboxApp, _: argparse.Namespace) -> int:
    for binding in app.registry.bindings():
        print(f"{binding.capability.__name__:<26} {type(binding.instance).__name__}")
    return 0


def _handle_resources(app: SandboxApp, args: argparse.Namespace) -> int:
    resources = {name: str(resource) for name, resource in app.environment.derived_resources().items()}
    if args.format == "json":
        print(json.dumps(resources, indent=2))
        return 0
    for name, resource in resources.items():
        print(f"{name:<30} {resource}")
    return 0
