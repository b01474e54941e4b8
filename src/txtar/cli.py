#!/usr/bin/env python
"""Utility for managing txtar archives."""
import logging
import os
import sys
from argparse import REMAINDER
from argparse import ArgumentParser

import txtar
from txtar.hashing import hash_algorithms
from txtar.hashing import hash_content
from txtar.reader import ArchiveReader
from txtar.reader import from_file
from txtar.writer import ArchiveWriter

log = logging.getLogger(__name__)


def build_argparser():
    """Build argument parser for the CLI."""
    parser = ArgumentParser('Utility for managing txtar archives')
    create_group = parser.add_argument_group("Create a txtar archive")
    create_group.add_argument("-c", "--create", metavar="ARCHIVE", help="create archive")
    create_group.add_argument("-m", "--comment", dest="comment",
                              help="comment to place before the first file")
    create_group.add_argument("files", nargs=REMAINDER,
                              help="files to add to the archive, or names of "
                              "files to extract or print")

    extract_group = parser.add_argument_group("Extract a txtar archive")
    extract_group.add_argument("-x", "--extract", help="extract archive", metavar="ARCHIVE")

    list_group = parser.add_argument_group("Print information on a txtar archive")
    list_group.add_argument("-t", "--list", help="print out archive contents",
                            metavar="ARCHIVE")
    list_group.add_argument("-T", "--list-detailed", metavar="ARCHIVE",
                            help="print out archive contents including digests")
    list_group.add_argument("-p", "--print", dest="print_", metavar="ARCHIVE",
                            help="print the content of the named files")
    list_group.add_argument("--hash", default="sha256", choices=hash_algorithms,
                            help="digest algorithm for detailed listings")

    parser.add_argument("-C", "--chdir", dest="chdir",
                        help="chdir to this directory before creating or "
                        "extracting; location of the archive isn't affected by "
                        "this option.")
    parser.add_argument("--verbose", dest="loglevel", action="store_const",
                        const=logging.DEBUG, default=logging.WARN,
                        help="increase logging verbosity")
    parser.add_argument('--version', action='version', version='txtar version {}'.format(txtar.version_str))

    return parser


def do_extract(archivefile, destdir, names=None):
    """Extract the archive to the destdir."""
    with open(archivefile, 'rb') as f:
        with ArchiveReader(f) as t:
            return t.extract(str(destdir), names=names or None)


def do_list(archivefile, detailed=False, hash_algo='sha256'):
    """
    List the archive.

    Yields lines of text to output
    """
    archive = from_file(archivefile)
    if detailed:
        yield "Comment size: {}".format(len(archive.comment))
        plural = "" if len(archive) == 1 else "s"
        yield "{} file{} found".format(len(archive), plural)
        yield ""
        yield ("{:7s} {:16s} {}".format("SIZE", hash_algo.upper(), "NAME"))
        for f in archive:
            digest = hash_content(f.content, hash_algo)
            yield ("{:<7d} {:16s} {}".format(len(f.content), digest[:16], f.name))
    else:
        yield ("{:7s} {}".format("SIZE", "NAME"))
        for f in archive:
            yield ("{:<7d} {}".format(len(f.content), f.name))


def do_print(archivefile, names):
    """Print the content of the named files from the archive."""
    archive = from_file(archivefile)
    missing = [name for name in names if name not in archive]
    if missing:
        print("Archive doesn't contain: {}".format(", ".join(missing)), file=sys.stderr)
        sys.exit(1)
    for name in names:
        sys.stdout.write(archive[name].content)


def do_create(archivefile, files, comment=None):
    """Create a new txtar archive."""
    with open(archivefile, 'wb') as f:
        with ArchiveWriter(f, comment=comment) as t:
            for path in files:
                t.add(path)
            return len(t.archive)


def check_args(parser, args):
    """Validate commandline arguments."""
    # Make sure only one action has been specified
    if len([a for a in [args.create, args.extract, args.list,
                        args.list_detailed, args.print_] if a
            is not None]) != 1:
        parser.error("Must specify something to do (one of -c, -x, -t, -T, -p)")

    if args.create and not args.files:
        parser.error("Must specify at least one file to add to the archive")

    if args.print_ and not args.files:
        parser.error("Must specify at least one file name to print")

    if args.comment is not None and not args.create:
        parser.error("--comment can only be used when creating an archive")


def main(argv=None):
    """Run the main CLI entry point."""
    parser = build_argparser()

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.loglevel, format="%(message)s")

    check_args(parser, args)

    if args.extract:
        archivefile = os.path.abspath(args.extract)
        if args.chdir:
            os.chdir(args.chdir)
        written = do_extract(archivefile, os.getcwd(), args.files)
        log.info("Extracted %d files", len(written))

    elif args.list:
        print("\n".join(do_list(args.list)))

    elif args.list_detailed:
        print("\n".join(do_list(args.list_detailed, detailed=True, hash_algo=args.hash)))

    elif args.print_:
        do_print(args.print_, args.files)

    elif args.create:
        archivefile = os.path.abspath(args.create)
        if args.chdir:
            os.chdir(args.chdir)
        count = do_create(archivefile, args.files, comment=args.comment)
        log.info("Added %d files to %s", count, archivefile)

    # sanity check; should never happen
    else:  # pragma: no cover
        parser.error("Unsupported action")
