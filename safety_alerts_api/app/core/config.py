"""
Runtime configuration.

``Settings`` reads every value from an environment variable when this
module is first imported.  The defaults serve the bundled data file on
port 8080; deployments point ``DATA_FILE`` (and usually
``DATA_OUTPUT_FILE``) at their own copy of the dataset.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SafetyNet Alerts API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # JSON document holding persons, fire stations and medical records.
    # Relative paths are resolved against the ``safety_alerts_api``
    # package directory by ``core.datastore``.
    data_file: str = os.getenv("DATA_FILE", "data/data.json")

    # Where mutations are written back.  Leave empty to overwrite
    # ``data_file`` itself; set it to keep the bundled dataset pristine.
    data_output_file: str = os.getenv("DATA_OUTPUT_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
