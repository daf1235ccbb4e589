#!/usr/bin/env python3
"""
NODECONF CLI
------------
Command line front end for the node configuration readers.

    nodeconf show "node1 node2 node3"
    nodeconf show --file cluster.conf
    nodeconf export --nodes node1 node2 --format yaml -o cluster.yaml

This is the only layer that catches reader errors: it reports them and
exits with status 1.

Author: NodeConf Team
Date: 2026-10-18
"""

import sys
import logging
import argparse
from typing import List, Optional, Tuple

from ruamel.yaml.error import YAMLError

from nodeconf.core.models import NodeConfiguration
from nodeconf.cli.formatter import NodeConfFormatter, console
from nodeconf.export.exporter import NodeConfExporter, FORMATS
from nodeconf.reading.arg_reader import ConfigArgListReader
from nodeconf.reading.file_reader import ConfigFileReader
from nodeconf.reading.string_reader import ConfigStringReader
from nodeconf.reading.yaml_reader import ConfigYamlReader

VERSION = "1.0.0"

logger = logging.getLogger("nodeconf.cli")


class NodeConfCLI:
    """
    CLI wrapper that translates user commands into reader and exporter calls.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="nodeconf",
            description="NodeConf - Cluster node configuration reader",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = NodeConfFormatter()
        self.exporter = NodeConfExporter()
        self._setup_args()

    def _add_source_args(self, sub_parser: argparse.ArgumentParser):
        """Exactly one source: a positional string, a file, a YAML file or a node list."""
        group = sub_parser.add_mutually_exclusive_group()
        group.add_argument("source", nargs="?", help="Whitespace separated node descriptors")
        group.add_argument("--file", help="Plain text file, one or more descriptors per line")
        group.add_argument("--yaml", help="YAML file with a 'nodes' sequence")
        group.add_argument("--nodes", nargs="+", help="Descriptors given as separate arguments")

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"nodeconf v{VERSION}")
        self.parser.add_argument(
            "--log-level", default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Logging verbosity (default: WARNING)"
        )
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'show' subcommand - render the parsed configuration
        show_parser = subparsers.add_parser("show", help="🔍 Display the parsed node configuration")
        self._add_source_args(show_parser)

        # 'export' subcommand - convert to YAML or plain text
        export_parser = subparsers.add_parser("export", help="📦 Export the configuration as YAML or text")
        self._add_source_args(export_parser)
        export_parser.add_argument("--format", dest="fmt", default="yaml", choices=FORMATS,
                                   help="Output format (default: yaml)")
        export_parser.add_argument("-o", "--output", help="Write to this file instead of the terminal")

    def _read_configuration(self, args: argparse.Namespace) -> Tuple[NodeConfiguration, str]:
        """Picks the reader matching the given source flag."""
        if args.file is not None:
            return ConfigFileReader(args.file).read(), args.file
        if args.yaml is not None:
            return ConfigYamlReader(args.yaml).read(), args.yaml
        if args.nodes is not None:
            return ConfigArgListReader(args.nodes).read(), "arguments"
        if args.source is not None:
            return ConfigStringReader(args.source).read(), "string"
        raise ValueError("No node source given (pass a string, --file, --yaml or --nodes)")

    def _run_show(self, args: argparse.Namespace):
        conf, label = self._read_configuration(args)
        self.formatter.print_configuration(conf, label)

    def _run_export(self, args: argparse.Namespace):
        conf, _ = self._read_configuration(args)
        if args.output:
            self.exporter.write(conf, args.output, args.fmt)
            self.formatter.print_written(len(conf), args.output)
        else:
            self.formatter.print_export(self.exporter.export(conf, args.fmt), args.fmt)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.formatter.print_header("Node Configuration Reader", VERSION)
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=getattr(logging, args.log_level))

        commands = {"show": self._run_show, "export": self._run_export}
        handler = commands.get(args.command)
        if handler is None:
            self.parser.print_help()
            return 0

        try:
            handler(args)
        except (ValueError, OSError, YAMLError) as e:
            logger.error(f"nodeconf {args.command} failed: {e}")
            self.formatter.print_error(str(e))
            return 1
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(NodeConfCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
