"""
Datadog environment variables and git source code integration for Lambda functions.
"""

from lambda_env.config import DatadogLambdaProps
from lambda_env.environment import (
    apply_datadog_environment,
    apply_env_variables,
    set_dd_env_variables,
    set_git_environment_variables,
)
from lambda_env.function_config import EnvironmentFunctionConfig, FunctionConfig
from lambda_env.git_metadata import GitMetadata, get_git_data

__all__ = [
    "DatadogLambdaProps",
    "EnvironmentFunctionConfig",
    "FunctionConfig",
    "GitMetadata",
    "apply_datadog_environment",
    "apply_env_variables",
    "get_git_data",
    "set_dd_env_variables",
    "set_git_environment_variables",
]
