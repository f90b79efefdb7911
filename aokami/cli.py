"""Command line entry point: download servers, run the data generator, transform output."""

from __future__ import annotations

import argparse
import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any

import requests

from aokami.download import download_server, get_versions, make_session
from aokami.transform import get_output_path, transform_blocks, transform_registries
from aokami.types import ReleaseType
from aokami.versions import find_latest_version

_PROGRAM_VERSION = "0.1.0"
_GENERATOR_MAIN_CLASS = "-DbundlerMainClass=net.minecraft.data.Main"


def get_work_dir(name: str, create: bool) -> Path:
    """Resolve ``name`` against the current directory, creating it if asked."""
    work_dir = Path.cwd() / name
    if create and not work_dir.exists():
        work_dir.mkdir(parents=True)
    return work_dir


def build_java_command(jar: str, initial_args: str) -> tuple[str, list[str]]:
    """Java executable and arguments that run the data generator bundled in ``jar``."""
    java_home = os.environ.get("JAVA_HOME")
    if java_home is None:
        raise RuntimeError("JAVA_HOME is not set")
    return f"{java_home}/bin/java", [_GENERATOR_MAIN_CLASS, "-jar", jar, initial_args]


def _comma_list(value: str) -> list[str]:
    return value.split(",")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``aokami`` command."""
    parser = argparse.ArgumentParser(prog="aokami")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_PROGRAM_VERSION}")
    parser.add_argument("-o", "--output-dir", default="output")
    parser.add_argument("-v", "--versions-dir", default="versions")
    commands = parser.add_subparsers(dest="command", required=True)

    download = commands.add_parser("download", help="download a server jar")
    download.add_argument("-v", "--version", default="latest")
    download.add_argument(
        "-t", "--type", default=ReleaseType.RELEASE.value, choices=[t.value for t in ReleaseType]
    )

    generate = commands.add_parser("generate", help="run the data generator")
    generate.add_argument("-v", "--version", default="latest")
    generate.add_argument("-g", "--generator-args", default="--all")

    transform = commands.add_parser("transform", help="transform generated data")
    transforms = transform.add_subparsers(dest="transform_command", required=True)

    registry = transforms.add_parser("registry", help="collect registries into one file")
    registry.add_argument("-o", "--output-file", default="registries.json")
    registry.add_argument("-r", "--registries", type=_comma_list, action="extend", default=[])

    blocks = transforms.add_parser("blocks", help="map blocks to default state ids")
    blocks.add_argument("-o", "--output-file", default="blocks.json")
    return parser


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def _download(args: argparse.Namespace, versions_dir: Path) -> None:
    session = make_session()
    versions = get_versions(session)
    entry = versions.find(args.version, ReleaseType(args.type))
    if entry is None:
        print("Failed to find a version to download.", file=sys.stderr)
        return
    print(f"Downloading server for {entry.id} ({entry.version_type})...")
    download_server(session, versions_dir, entry.url)


def _generate(args: argparse.Namespace, versions_dir: Path, output_dir: Path) -> None:
    target_version = args.version
    if target_version == "latest":
        target_version = find_latest_version(versions_dir)
        print(f"Selected version: {target_version}")
    jar = versions_dir / f"{target_version}.jar"
    java_path, java_args = build_java_command(str(jar), args.generator_args)
    completed = subprocess.run([java_path, *java_args], cwd=output_dir)
    code = completed.returncode if completed.returncode >= 0 else 0
    print(f"Generation done with status {code}")


def _transform(args: argparse.Namespace, output_dir: Path) -> None:
    generated = output_dir / "generated"
    target = get_output_path(output_dir) / args.output_file
    if args.transform_command == "registry":
        registries = transform_registries(generated / "data", args.registries)
        _write_json(target, registries)
        print(f"Transformed {len(registries)} registries. Written into {target}.")
    else:
        blocks = transform_blocks(generated / "reports" / "blocks.json")
        _write_json(target, blocks)
        print(f"Transformed {len(blocks)} blocks. Written into {target}.")


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        versions_dir = get_work_dir(args.versions_dir, True)
        output_dir = get_work_dir(args.output_dir, True)
        if args.command == "download":
            _download(args, versions_dir)
        elif args.command == "generate":
            _generate(args, versions_dir, output_dir)
        else:
            _transform(args, output_dir)
    except (OSError, ValueError, RuntimeError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())