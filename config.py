"""
Configuration module for environment variable validation and type-safe config.

Values are read from the Lambda environment and validated when the
configuration object is first built.
"""
import os
from dataclasses import dataclass
from typing import Optional

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be a boolean (true/false), got: {raw}"
    )


def _parse_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got: {value}")
    return value


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    log_level: str = "INFO"
    db_credentials_arn: str = ""
    application_secrets_arn: str = ""
    email_notifications: bool = True
    email_sender: Optional[str] = None
    documents_bucket: str = ""
    metrics_namespace: str = "Shiba"
    device_metrics: bool = False
    api_base_path: str = ""
    filenet_upload_url: Optional[str] = None
    filenet_username: Optional[str] = None
    filenet_password: Optional[str] = None
    filenet_timeout_seconds: int = 60
    filenet_ca_bundle: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            aws_region=os.environ.get("AWS_REGION", "us-east-1"),
            log_level=log_level,
            db_credentials_arn=os.environ.get("DB_CREDENTIALS_ARN", ""),
            application_secrets_arn=os.environ.get("APPLICATION_SECRETS_ARN", ""),
            email_notifications=_parse_bool("EMAIL_NOTIFICATIONS", True),
            email_sender=os.environ.get("EMAIL_SENDER") or None,
            documents_bucket=os.environ.get("DOCUMENTS_BUCKET", ""),
            metrics_namespace=os.environ.get("METRICS_NAMESPACE", "Shiba"),
            device_metrics=_parse_bool("DEVICE_METRICS", False),
            api_base_path=os.environ.get("API_BASE_PATH", ""),
            filenet_upload_url=os.environ.get("FILENET_UPLOAD_URL") or None,
            filenet_username=os.environ.get("FILENET_USERNAME") or None,
            filenet_password=os.environ.get("FILENET_PASSWORD") or None,
            filenet_timeout_seconds=_parse_positive_int(
                "FILENET_TIMEOUT_SECONDS", 60
            ),
            filenet_ca_bundle=os.environ.get("FILENET_CA_BUNDLE") or None,
        )


# Built on first access so tests can adjust the environment beforehand
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
