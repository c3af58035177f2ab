"""Copy built plugin libraries into the directories named by a deployment file."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import tomllib
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG = ".deployment.toml"
PLUGIN_GLOB = "libinexor_rgf_plugin_*.*"
LIBRARY_SUFFIXES = (".so", ".dll")


@dataclass(frozen=True)
class Deployment:
    """Where plugin libraries are to be copied."""

    target_dirs: list[str]


def load_deployment(path: str | os.PathLike[str] = DEFAULT_CONFIG) -> Deployment:
    """Read a deployment file.

    Raises OSError if it cannot be read and ValueError if it is not valid.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = tomllib.loads(text)
    target_dirs = data.get("target_dirs")
    if not isinstance(target_dirs, list) or not all(isinstance(d, str) for d in target_dirs):
        raise ValueError("missing field `target_dirs` or it is not a list of strings")
    return Deployment(target_dirs=list(target_dirs))


def _libraries(out_dir: Path) -> list[Path]:
    return sorted(
        path for path in out_dir.glob(PLUGIN_GLOB) if path.name.endswith(LIBRARY_SUFFIXES)
    )


def deploy(
    out_dir: str | os.PathLike[str], config_path: str | os.PathLike[str] = DEFAULT_CONFIG
) -> list[Path]:
    """Copy every plugin library in out_dir to each target directory.

    Returns the paths that were written; copies that fail are skipped.
    """
    deployment = load_deployment(config_path)
    copied: list[Path] = []
    for target_dir in deployment.target_dirs:
        for source in _libraries(Path(out_dir)):
            target = Path(target_dir) / source.name
            print(f"Copy plugin from {source} to {target}")
            try:
                shutil.copy(source, target)
            except OSError:
                continue
            copied.append(target)
    return copied


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out-dir", default=os.environ.get("CRATE_OUT_DIR"))
    parser.add_argument("--config", default=DEFAULT_CONFIG)
    args = parser.parse_args(argv)

    try:
        load_deployment(args.config)
    except OSError as error:
        print(f"Could not read {args.config}: {error}", file=sys.stderr)
        return 0
    except ValueError as error:
        print(f"Failed to parse {args.config}: {error}", file=sys.stderr)
        return 0

    if args.out_dir is None:
        parser.error("no output directory: pass --out-dir or set CRATE_OUT_DIR")
    deploy(args.out_dir, args.config)
    return 0