"""
Apply Datadog environment variables and the current git commit to AWS Lambda functions.
"""
import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lambda_env.command_runner import CommandRunner
from lambda_env.config import DatadogLambdaProps, load_props
from lambda_env.environment import apply_datadog_environment
from lambda_env.function_config import FunctionConfigError, LambdaFunctionStore
from lambda_env.git_metadata import get_git_data
from lambda_env.pretty_log import log_environment, setup_service_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.
    :param argv: Argument list, sys.argv when None.
    :returns: Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Set Datadog environment variables on Lambda functions")
    parser.add_argument("functions", nargs="+", help="Lambda function names or ARNs")
    parser.add_argument("--env", default=None, help="Value for DD_ENV")
    parser.add_argument("--service", default=None, help="Value for DD_SERVICE")
    parser.add_argument("--version", default=None, help="Value for DD_VERSION")
    parser.add_argument("--tags", default=None, help="Value for DD_TAGS, comma separated key:value pairs")
    parser.add_argument("--disable-tracing", action="store_true", help="Set DD_TRACE_ENABLED to false")
    parser.add_argument("--disable-logs", action="store_true", help="Set DD_SERVERLESS_LOGS_ENABLED to false")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory containing aws.env and .env (default: current directory)")
    parser.add_argument("--repo-dir", type=Path, default=None, help="Git checkout to read the commit from")
    parser.add_argument("--region", default=None, help="AWS region")
    parser.add_argument("--dry-run", action="store_true", help="Print the result without updating functions")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_props(args: argparse.Namespace) -> DatadogLambdaProps:
    """
    Merge command line overrides onto the configured props.
    :param args: Parsed arguments.
    :returns: DatadogLambdaProps
    """
    props = load_props(args.config_dir)
    overrides = {
        name: getattr(args, name)
        for name in ("env", "service", "version", "tags")
        if getattr(args, name) is not None
    }
    if args.disable_tracing:
        overrides["enable_datadog_tracing"] = False
    if args.disable_logs:
        overrides["enable_datadog_logs"] = False
    return dataclasses.replace(props, **overrides)


def main(argv: Optional[List[str]] = None, store: Optional[LambdaFunctionStore] = None) -> int:
    """
    Run the update workflow.
    :param argv: Argument list, sys.argv when None.
    :param store: Function store, a boto3 backed one when None.
    :returns: Process exit code.
    """
    args = parse_args(argv)
    logger = setup_service_logger("lambda_env", logging.DEBUG if args.verbose else logging.INFO)

    try:
        props = build_props(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    store = store or LambdaFunctionStore(region=args.region)
    runner = CommandRunner(cwd=args.repo_dir)

    configs = []
    failed = False
    for name in args.functions:
        try:
            configs.append(store.load(name))
        except FunctionConfigError as e:
            logger.error(f"Skipping {name}: {e}")
            failed = True

    git_data = get_git_data(runner)
    if git_data.is_empty:
        logger.info("No git metadata available, commit tag will not be added")
    else:
        logger.info(f"Source code integration: commit={git_data.hash} repository={git_data.repo_url}")

    apply_datadog_environment(configs, props, runner)

    for config in configs:
        log_environment(logger, config.name, config.environment)
        if args.dry_run:
            continue
        try:
            store.save(config)
        except FunctionConfigError as e:
            logger.error(f"Failed to update {config.name}: {e}")
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
