"""Instance lifecycle CLI commands"""

import json

from btadmin.models.resources import RunReport

from .base import print_error, report_result, run_operation


def _print_run_report(report: RunReport) -> None:
    """Print what the run operation collected, section by section"""
    if report.created is not None:
        print(f"Created Instance: {report.created.instance_id}")
    if report.instances is not None:
        print("Instances:")
        for instance in report.instances:
            print(f"  {instance.instance_id}")
    if report.instance is not None:
        print(f"Instance Name: {report.instance.instance_id}")
        print(f"Instance Meta: {json.dumps(report.instance.to_dict(), indent=2)}")
    if report.clusters is not None:
        print("Clusters:")
        for cluster in report.clusters:
            print(f"  {cluster.cluster_id}")


def cmd_run(args) -> int:
    """Ensure a PRODUCTION instance exists, then list instances and clusters"""
    try:
        result = run_operation(
            args, lambda service: service.run_instance_operations(args.instance, args.cluster)
        )
        if result.data is not None:
            _print_run_report(result.data)
        return report_result(result, args.quiet)
    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_dev_instance(args) -> int:
    """Create a DEVELOPMENT instance command"""
    try:
        result = run_operation(
            args, lambda service: service.create_dev_instance(args.instance, args.cluster)
        )
        if result.ok:
            print(result.data.instance_id)
        return report_result(result, args.quiet)
    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_del_instance(args) -> int:
    """Delete instance command"""
    try:
        result = run_operation(args, lambda service: service.delete_instance(args.instance))
        return report_result(result, args.quiet)
    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
