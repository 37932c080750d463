#!/usr/bin/env python3
"""Increment the version in a QGIS plugin metadata.txt.

    python scripts/bump_plugin_version.py [major|minor|build|revision] [--metadata <path>]
"""

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from version_up_plugin.property_store import (
    METADATA_VERSION_NAMES,
    MetadataPropertyStore,
    read_version,
    write_version,
)
from version_up_plugin.version_core import BumpTarget, VersionUpError, increment_version


DEFAULT_METADATA_PATH = REPO_ROOT / "version_up_plugin" / "metadata.txt"


def bump_metadata_version(metadata_path=DEFAULT_METADATA_PATH, target=BumpTarget.BUILD, dry_run=False):
    """Bump [general]/version in metadata file and return the BumpResult."""
    store = MetadataPropertyStore(metadata_path)
    _, current = read_version(store, METADATA_VERSION_NAMES)
    result = increment_version(current, target)
    write_version(store, result.new, METADATA_VERSION_NAMES)
    if not dry_run:
        store.save()
    return result


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Increment the plugin version in metadata.txt.")
    parser.add_argument(
        "part",
        nargs="?",
        default="build",
        choices=[target.name.lower() for target in BumpTarget],
        help="Version part to increment; lower parts are reset to 0 (default: build)",
    )
    parser.add_argument(
        "--metadata",
        default=str(DEFAULT_METADATA_PATH),
        help="Path to metadata.txt (default: version_up_plugin/metadata.txt)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the new version without writing the file.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    try:
        result = bump_metadata_version(args.metadata, BumpTarget.from_name(args.part), dry_run=args.dry_run)
    except VersionUpError as err:
        print(f"Version bump FAILED: {err}", file=sys.stderr)
        return 1

    print(result.new)
    if args.dry_run:
        print(f"(dry run) {result.summary}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
