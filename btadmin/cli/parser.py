"""Command-line argument parser"""

import argparse
from typing import List, Optional

from btadmin import __version__
from btadmin.cli.commands import (
    cmd_run,
    cmd_dev_instance,
    cmd_del_instance,
    cmd_add_cluster,
    cmd_del_cluster,
)

EPILOG = """examples:
  btadmin run --instance [instanceName] --cluster [clusterName]
        Run instance operations
  btadmin dev-instance --instance [instanceName] --cluster [clusterName]
        Create Development Instance
  btadmin del-instance --instance [instanceName]
        Delete the Instance
  btadmin add-cluster --instance [instanceName] --cluster [clusterName]
        Add Cluster
  btadmin del-cluster --instance [instanceName] --cluster [clusterName]
        Delete the Cluster

For more information, see https://cloud.google.com/bigtable/docs
"""


def _common_options() -> argparse.ArgumentParser:
    """Options shared by every subcommand"""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--project", help="Google Cloud project id (default: from config or credentials)")
    common.add_argument("--debug", action="store_true", help="Enable debug logging and tracebacks")
    common.add_argument("--quiet", "-q", action="store_true", help="Suppress progress messages")
    common.add_argument("--log-file", help="Also write a DEBUG log to this file")
    return common


def _add_instance_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--instance", required=True, help="Cloud Bigtable Instance name")


def _add_cluster_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--cluster", required=True, help="Cloud Bigtable Cluster name")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands"""
    parser = argparse.ArgumentParser(
        prog="btadmin",
        description="Manage Cloud Bigtable instances and clusters",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    common = _common_options()

    parser_run = subparsers.add_parser(
        "run",
        parents=[common],
        help="Creates an Instance(type: PRODUCTION) and run basic instance-operations",
    )
    _add_instance_arg(parser_run)
    _add_cluster_arg(parser_run)
    parser_run.set_defaults(func=cmd_run)

    parser_dev = subparsers.add_parser(
        "dev-instance", parents=[common], help="Create Development Instance"
    )
    _add_instance_arg(parser_dev)
    _add_cluster_arg(parser_dev)
    parser_dev.set_defaults(func=cmd_dev_instance)

    parser_del_instance = subparsers.add_parser(
        "del-instance", parents=[common], help="Delete the Instance"
    )
    _add_instance_arg(parser_del_instance)
    parser_del_instance.set_defaults(func=cmd_del_instance)

    parser_add_cluster = subparsers.add_parser(
        "add-cluster", parents=[common], help="Add Cluster"
    )
    _add_instance_arg(parser_add_cluster)
    _add_cluster_arg(parser_add_cluster)
    parser_add_cluster.set_defaults(func=cmd_add_cluster)

    parser_del_cluster = subparsers.add_parser(
        "del-cluster", parents=[common], help="Delete the Cluster"
    )
    _add_instance_arg(parser_del_cluster)
    _add_cluster_arg(parser_del_cluster)
    parser_del_cluster.set_defaults(func=cmd_del_cluster)

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; exits with status 2 on usage errors"""
    return create_parser().parse_args(argv)
