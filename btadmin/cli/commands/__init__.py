"""CLI command handlers

This package organizes CLI commands into logical modules:
- instance_commands: run, dev-instance, del-instance
- cluster_commands: add-cluster, del-cluster
"""

import sys

from .instance_commands import (
    cmd_run,
    cmd_dev_instance,
    cmd_del_instance,
)
from .cluster_commands import (
    cmd_add_cluster,
    cmd_del_cluster,
)
from .base import (
    print_error,
    get_admin_client,
    run_operation,
    report_result,
)


def run_cli(args) -> int:
    """Run CLI command based on args"""
    if hasattr(args, 'func'):
        return args.func(args)
    else:
        print("Error: No command specified", file=sys.stderr)
        return 1


__all__ = [
    # Instance commands
    'cmd_run',
    'cmd_dev_instance',
    'cmd_del_instance',
    # Cluster commands
    'cmd_add_cluster',
    'cmd_del_cluster',
    # Base utilities
    'print_error',
    'get_admin_client',
    'run_operation',
    'report_result',
    # Runner
    'run_cli',
]
