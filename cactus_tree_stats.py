#!/usr/bin/env python3
"""
Compute the relative entropy of a cactus net tree.

Example:
  ./cactus_tree_stats.py \
      --logLevel INFO \
      --netDisk ./netDisk \
      --netName 0 \
      --outputFile stats.tsv

The tree encoding cost P, the flat baseline cost Q and P - Q are logged and
written to --outputFile as tab-separated text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from cactuslib import relative_entropy
from cactuslib.formats import tree_stats
from cactuslib.nets.json_disk import open_net_disk

LOG_LEVELS = ("INFO", "DEBUG")

logger = logging.getLogger("cactus_treeStats")


@dataclass
class TreeStatsOptions:
    net_disk: str
    net_name: str
    output_file: str
    log_level: Optional[str] = None

    def __post_init__(self) -> None:
        if self.log_level is not None and self.log_level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")

    def logging_level(self) -> int:
        return getattr(logging, self.log_level) if self.log_level else logging.WARNING


class _UsageParser(argparse.ArgumentParser):
    # bad arguments print usage and exit 1
    def error(self, message: str):
        self.print_help(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _UsageParser(
        prog="cactus_treeStats",
        description="Compute the total P, Q and relative entropy of a cactus net tree.",
    )
    p.add_argument("-a", "--logLevel", dest="log_level", choices=LOG_LEVELS, default=None, help="Set the log level.")
    p.add_argument("-c", "--netDisk", dest="net_disk", required=True, help="The location of the net disk.")
    p.add_argument("-d", "--netName", dest="net_name", required=True, help="The name of the net (the key in the net disk).")
    p.add_argument("-e", "--outputFile", dest="output_file", required=True, help="The file to write the stats in.")
    return p


def parse_args(argv) -> TreeStatsOptions:
    ns = build_parser().parse_args(argv)
    return TreeStatsOptions(
        net_disk=ns.net_disk,
        net_name=ns.net_name,
        output_file=ns.output_file,
        log_level=ns.log_level,
    )


def run(opts: TreeStatsOptions, log: logging.Logger = logger) -> tree_stats.TreeStatsRecord:
    log.info(f"Net disk name : {opts.net_disk}")
    log.info(f"Net name : {opts.net_name}")
    log.info(f"Output file : {opts.output_file}")

    with open_net_disk(opts.net_disk) as disk:
        log.info("Set up the net disk")
        net = disk.get_net(opts.net_name)
        log.info("Parsed the top level net of the cactus tree")
        report = relative_entropy(disk, net, logger=log)

    record = tree_stats.TreeStatsRecord.from_report(opts.net_name, report)
    tree_stats.encode([record], sink=opts.output_file)
    return record


def main(argv=None) -> int:
    opts = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=opts.logging_level(), format="%(levelname)s %(name)s: %(message)s")
    try:
        run(opts)
    except KeyError as e:
        print(f"error: net {e.args[0]!r} not found in net disk", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
