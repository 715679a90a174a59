import logging
import sys
from typing import Dict


def setup_service_logger(service_name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a standardized logger with enhanced formatting.

    :param service_name: Logger name ex: lambda_env.
    :param level: Logging level default: INFO.
    :returns: Configured logger instance.
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def pretty_log_print(data, indents=0):
    indent_str = "    " * indents
    if isinstance(data, list):
        result = []
        for i, item in enumerate(data):
            result.append(f"{indent_str}{i}. {pretty_log_print(item, indents + 1).lstrip()}")
        return "\n".join(result)
    elif isinstance(data, dict):
        result = []
        for key, value in data.items():
            header = f"{indent_str}{key}:"
            value_str = pretty_log_print(value, indents + 1)
            result.append(f"{header}\n{value_str}")
        return "\n".join(result)
    else:
        return f"{indent_str}{str(data)}"


def log_environment(logger: logging.Logger, function_name: str, environment: Dict[str, str]):
    """
    Log a function environment with one variable per line.

    :param logger: Logger instance.
    :param function_name: Function name for the header.
    :param environment: Environment variables.
    :returns: None.
    """
    logger.info(f"{function_name}\n{pretty_log_print(dict(sorted(environment.items())), 1)}")
