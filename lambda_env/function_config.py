"""
Function configuration objects whose environment variables get mutated.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError


class FunctionConfigError(Exception):
    """Raised when a function configuration cannot be loaded or saved."""


class FunctionConfig(ABC):
    """
    A deployable function's configuration as seen by the environment helpers.
    Owned by the caller; helpers only read and write named entries.
    """

    @abstractmethod
    def get_environment(self, name: str) -> Optional[str]:
        """
        :param name: Environment variable name
        :returns: Current value or None when unset
        """

    @abstractmethod
    def add_environment(self, name: str, value: str) -> None:
        """
        :param name: Environment variable name
        :param value: Value to set, replacing any previous one
        """


class EnvironmentFunctionConfig(FunctionConfig):
    """Function configuration backed by a plain environment dictionary."""

    def __init__(self, name: str, environment: Optional[Dict[str, str]] = None):
        self.name = name
        self.environment: Dict[str, str] = dict(environment or {})

    def get_environment(self, name: str) -> Optional[str]:
        return self.environment.get(name)

    def add_environment(self, name: str, value: str) -> None:
        self.environment[name] = value

    @classmethod
    def from_lambda_configuration(cls, configuration: Dict[str, Any]) -> "EnvironmentFunctionConfig":
        """
        Build from a Lambda GetFunctionConfiguration response.

        :param configuration: Response dictionary.
        :returns: EnvironmentFunctionConfig for the function.
        """
        variables = configuration.get("Environment", {}).get("Variables", {})
        return cls(configuration["FunctionName"], variables)

    def to_update_kwargs(self) -> Dict[str, Any]:
        """
        Convert to UpdateFunctionConfiguration keyword arguments.

        :returns: Keyword arguments dictionary.
        """
        return {
            "FunctionName": self.name,
            "Environment": {"Variables": copy.deepcopy(self.environment)},
        }

    def __repr__(self) -> str:
        return f"EnvironmentFunctionConfig(name={self.name!r}, environment={self.environment!r})"


class LambdaFunctionStore:
    """
    Loads and saves Lambda function environments through boto3.
    """

    def __init__(self, client=None, region: Optional[str] = None):
        """
        :param client: boto3 Lambda client, created when None
        :param region: AWS region for the created client
        """
        if client is None:
            client = boto3.client("lambda", region_name=region) if region else boto3.client("lambda")
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self, function_name: str) -> EnvironmentFunctionConfig:
        """
        Fetch the current environment of a function.

        :param function_name: Function name or ARN.
        :returns: EnvironmentFunctionConfig.
        :raises FunctionConfigError: On AWS errors.
        """
        try:
            response = self.client.get_function_configuration(FunctionName=function_name)
        except ClientError as e:
            raise self._translate(e, f"loading {function_name}") from e
        self.logger.info(f"Loaded configuration for {function_name}")
        return EnvironmentFunctionConfig.from_lambda_configuration(response)

    def save(self, config: EnvironmentFunctionConfig) -> None:
        """
        Write the environment back to the function.

        :param config: Configuration to save.
        :raises FunctionConfigError: On AWS errors.
        """
        try:
            self.client.update_function_configuration(**config.to_update_kwargs())
        except ClientError as e:
            raise self._translate(e, f"updating {config.name}") from e
        self.logger.info(f"Updated environment for {config.name}: {len(config.environment)} variables")

    def _translate(self, error: ClientError, action: str) -> FunctionConfigError:
        error_code = error.response.get("Error", {}).get("Code", "Unknown")
        error_msg = error.response.get("Error", {}).get("Message", str(error))
        self.logger.error(f"Lambda error {action}: {error_code} {error_msg}")
        return FunctionConfigError(f"{action}: {error_code} {error_msg}")
