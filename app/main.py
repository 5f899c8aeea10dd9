"""Main module entrypoint for local runtime execution.

This module validates startup configuration, configures logging, and either
launches the FastAPI service or prints the info payload once.
"""

import argparse
import json

import uvicorn

from app.bootstrap import bootstrap_create_application, bootstrap_create_info_provider
from app.config import config_load_settings
from app.environment import logging_configure


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Environment info service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "info"),
        help="Runtime command: `api` starts server, `info` prints the current environment info payload",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    logging_configure(level=settings.log_level)

    if parsed_arguments.command == "info":
        info_provider = bootstrap_create_info_provider()
        print(json.dumps(info_provider.get_info().to_payload()))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
