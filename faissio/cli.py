#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# FAISS index persistence: file and buffer codecs
#
# Copyright (C) 2025 Ran Aroussi
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
faissio command line interface.

Commands:
- info: read an index file and print its properties
- verify: check that an index file survives a serialize/deserialize round trip
- version: print the package version
"""

import argparse
import sys

from faissio import __version__
from faissio.config import get_settings
from faissio.errors import PersistenceError
from faissio.io import deserialize, read_index, read_index_with_flags, serialize
from faissio.io_flags import IoFlags
from faissio.logging import configure_logging

METRIC_NAMES = {
    0: "INNER_PRODUCT",
    1: "L2",
}


def info_command(args):
    """Print the properties of an index file"""
    try:
        flags = IoFlags.parse(args.flags)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if args.mmap:
        flags |= IoFlags.MEM_MAP
    if args.read_only:
        flags |= IoFlags.READ_ONLY

    try:
        with read_index_with_flags(args.path, flags) as index:
            print(f"Path: {args.path}")
            print(f"Type: {type(index.native).__name__}")
            print(f"Dimension: {index.d}")
            print(f"Vectors: {index.ntotal}")
            print(f"Trained: {index.is_trained}")
            metric = METRIC_NAMES.get(index.metric_type, str(index.metric_type))
            print(f"Metric: {metric}")
    except PersistenceError as e:
        print(f"Error: {e}")
        return 1
    return 0


def verify_command(args):
    """Check that an index file survives a buffer round trip"""
    try:
        with read_index(args.path) as index:
            data = serialize(index)
            with deserialize(data) as restored:
                expected = (index.d, index.ntotal)
                actual = (restored.d, restored.ntotal)
    except PersistenceError as e:
        print(f"Error: {e}")
        return 1

    if expected != actual:
        print(
            f"Error: round trip mismatch, expected d={expected[0]} ntotal={expected[1]}, "
            f"got d={actual[0]} ntotal={actual[1]}"
        )
        return 1

    print(f"OK: {args.path} ({len(data)} bytes, d={actual[0]}, ntotal={actual[1]})")
    return 0


def version_command(_):
    """Show version information"""
    print(f"faissio v{__version__}")
    return 0


def setup_info_parser(subparsers):
    """Set up the 'info' command parser"""
    parser = subparsers.add_parser("info", help="Show the properties of an index file")
    parser.add_argument("path", help="Path to the index file")
    parser.add_argument("--mmap", action="store_true", help="Memory-map the index file")
    parser.add_argument("--read-only", action="store_true", help="Open the index read-only")
    parser.add_argument(
        "--flags",
        default="",
        help="Comma separated I/O flags (resident, mmap, read-only)",
    )
    parser.set_defaults(func=info_command)


def setup_verify_parser(subparsers):
    """Set up the 'verify' command parser"""
    parser = subparsers.add_parser(
        "verify", help="Check that an index file survives a serialize/deserialize round trip"
    )
    parser.add_argument("path", help="Path to the index file")
    parser.set_defaults(func=verify_command)


def setup_version_parser(subparsers):
    """Set up the 'version' command parser"""
    parser = subparsers.add_parser("version", help="Show version information")
    parser.set_defaults(func=version_command)


def main(argv=None):
    """Main entry point for the CLI"""
    parser = argparse.ArgumentParser(
        description="faissio - read, write and check FAISS index files"
    )
    parser.add_argument(
        "--version", action="store_true", help="Show version information"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to FAISSIO_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    setup_info_parser(subparsers)
    setup_verify_parser(subparsers)
    setup_version_parser(subparsers)

    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    if args.version:
        return version_command(args)

    if hasattr(args, "func"):
        return args.func(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
