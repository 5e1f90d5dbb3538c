#!/usr/bin/env python3
"""
Basic listing example showing fslistlib's filtering and batch operations.

This example demonstrates:
- Recursive listing filtered by extension
- A recurse predicate that skips hidden directories
- Copying the result with rollback on failure

Usage:
    python basic_listing.py ROOT EXTENSION [DEST]
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from fslistlib import FsListError
from fslistlib.aio import list_files


async def main():
    """List matching files and optionally copy them."""
    if len(sys.argv) < 3:
        print(__doc__)
        return 2

    root, extension = sys.argv[1], sys.argv[2]
    dest = sys.argv[3] if len(sys.argv) > 3 else None

    print(f"Listing *.{extension} under: {root}")
    print("-" * 50)

    try:
        files = await list_files(
            root,
            match=extension,
            types="files",
            result_type="fullPath",
            recurse=lambda entry: not entry.name.startswith('.'),
        )
    except FsListError as e:
        print(f"Listing failed: {e}", file=sys.stderr)
        return 1

    files.log()
    print(f"\n{len(files):,} file(s) found")

    if dest:
        try:
            copied = await files.copy(dest)
        except FsListError as e:
            print(f"Copy failed, partial copies removed: {e}", file=sys.stderr)
            return 1
        print(f"Copied {len(copied):,} file(s) to {dest}")
    return 0


if __name__ == "__main__":
    print("fslistlib - Basic Listing Example")
    print("=" * 50)
    sys.exit(asyncio.run(main()))
