"""
Applies Datadog environment variables and git provenance tags to function configurations.
"""
import logging
from typing import Iterable, Optional

from lambda_env import env_vars
from lambda_env.command_runner import CommandRunner
from lambda_env.config import DatadogLambdaProps
from lambda_env.function_config import FunctionConfig
from lambda_env.git_metadata import get_git_data

logger = logging.getLogger(__name__)


def append_commit_tag(tags: str, sha: str) -> str:
    """
    Append a git.commit.sha segment to a comma separated tag string.
    A tag string that already carries this exact commit is returned as is;
    a segment for a different commit is kept and the new one appended.

    :param tags: Existing DD_TAGS value.
    :param sha: Commit hash.
    :returns: New tag string.
    """
    prefix = f"{env_vars.GIT_COMMIT_SHA_TAG}:"
    segment = f"{prefix}{sha}"
    if any(existing.strip() == segment for existing in tags.split(",")):
        return tags
    return f"{tags},{segment}"


def set_git_environment_variables(
    functions: Iterable[FunctionConfig],
    runner: Optional[CommandRunner] = None,
) -> None:
    """
    Add the current commit hash to the DD_TAGS of every function that has one.

    :param functions: Function configurations to update.
    :param runner: Command runner used for git, default when None.
    :returns: None
    """
    logger.debug("Adding source code integration...")
    git_data = get_git_data(runner)

    if git_data.is_empty:
        return

    for function in functions:
        tags = function.get_environment(env_vars.DD_TAGS)
        if tags is None:
            continue
        updated = append_commit_tag(tags, git_data.hash)
        if updated == tags:
            logger.debug(f"{env_vars.DD_TAGS} already carries commit {git_data.hash}, skipping")
            continue
        function.add_environment(env_vars.DD_TAGS, updated)


def apply_env_variables(function: FunctionConfig, props: DatadogLambdaProps) -> None:
    logger.debug("Setting environment variables...")
    function.add_environment(env_vars.ENABLE_DD_TRACING_ENV_VAR, str(props.enable_datadog_tracing).lower())
    function.add_environment(env_vars.ENABLE_DD_LOGS_ENV_VAR, str(props.enable_datadog_logs).lower())


def set_dd_env_variables(function: FunctionConfig, props: DatadogLambdaProps) -> None:
    # unset props leave the existing entry alone
    if props.env is not None:
        function.add_environment(env_vars.DD_ENV_ENV_VAR, props.env)
    if props.service is not None:
        function.add_environment(env_vars.DD_SERVICE_ENV_VAR, props.service)
    if props.version is not None:
        function.add_environment(env_vars.DD_VERSION_ENV_VAR, props.version)
    if props.tags is not None:
        function.add_environment(env_vars.DD_TAGS, props.tags)


def apply_datadog_environment(
    functions: Iterable[FunctionConfig],
    props: DatadogLambdaProps,
    runner: Optional[CommandRunner] = None,
) -> None:
    """
    Apply base flags, Datadog unified tags and the git commit tag to each function.

    :param functions: Function configurations to update.
    :param props: Datadog properties.
    :param runner: Command runner used for git.
    :returns: None
    """
    functions = list(functions)
    for function in functions:
        apply_env_variables(function, props)
        set_dd_env_variables(function, props)
    set_git_environment_variables(functions, runner)
