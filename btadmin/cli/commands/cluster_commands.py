"""Cluster lifecycle CLI commands"""

from .base import print_error, report_result, run_operation


def cmd_add_cluster(args) -> int:
    """Add a cluster to an existing instance command"""
    try:
        result = run_operation(
            args, lambda service: service.add_cluster(args.instance, args.cluster)
        )
        if result.ok and result.data is not None:
            print(result.data.cluster_id)
        return report_result(result, args.quiet)
    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_del_cluster(args) -> int:
    """Delete cluster command"""
    try:
        result = run_operation(
            args, lambda service: service.delete_cluster(args.instance, args.cluster)
        )
        return report_result(result, args.quiet)
    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
