"""Base utilities for CLI commands"""

import asyncio
import logging
import sys
import traceback
from typing import Awaitable, Callable, Optional

from btadmin.config.settings import Settings
from btadmin.exceptions import BtadminError
from btadmin.models.resources import OperationResult
from btadmin.services.bigtable_client import BigtableAdminClient
from btadmin.services.instance_service import InstanceAdminService

logger = logging.getLogger("btadmin")


def status(message: str, quiet: bool = False) -> None:
    """Print status message to stderr unless quiet mode is on.

    Args:
        message: Status message to display
        quiet: Whether to suppress the message
    """
    if not quiet:
        print(message, file=sys.stderr)


def print_error(message: str, debug: bool = False, exception: Exception = None) -> None:
    """Print error message to stderr with consistent formatting.

    Args:
        message: Error message to display
        debug: Whether to print full traceback
        exception: Optional exception for traceback
    """
    print(f"Error: {message}", file=sys.stderr)
    if debug and exception:
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def get_admin_client(settings: Settings, project_id: Optional[str] = None) -> BigtableAdminClient:
    """Get admin client with error handling"""
    try:
        return BigtableAdminClient.from_settings(settings, project_id)
    except BtadminError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def run_operation(
    args,
    operation: Callable[[InstanceAdminService], Awaitable[OperationResult]]
) -> OperationResult:
    """
    Run one admin operation on a fresh event loop

    Builds a single admin client for the whole operation and closes it
    afterwards, whatever the outcome.

    Args:
        args: Parsed command-line arguments
        operation: Coroutine function taking the service

    Returns:
        The operation's result
    """
    settings = Settings()
    client = get_admin_client(settings, args.project)

    async def _run() -> OperationResult:
        async with client:
            service = InstanceAdminService.from_settings(client, settings)
            return await operation(service)

    return asyncio.run(_run())


def report_result(result: OperationResult, quiet: bool = False) -> int:
    """Print the outcome of an operation and map it to an exit code"""
    if result.ok:
        status(result.message, quiet)
        return 0
    print_error(result.message)
    logger.debug(f"{result.operation} failed ({result.error_kind.value})")
    return 1
