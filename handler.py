"""
Lambda handler functions for the Shiba benefits application.

proxy_request serves API Gateway proxy events through the FastAPI app;
classify_device is a direct-invocation entry point for the device
classifier.
"""
from typing import Dict, Optional

from mangum import Mangum

from config import get_config
from device_detector import DeviceDetector
from logger_config import get_logger
from services.aws_clients import get_aws_clients
from services.metrics_service import MetricsService
from services.secrets_service import SecretsService
from utils.decorators import lambda_handler
from utils.exceptions import ValidationError
from web_app import create_app

logger = get_logger(__name__)

# Built once per container on the first proxied request
_proxy: Optional[Mangum] = None
_application_secrets: Optional[Dict[str, str]] = None

_detector = DeviceDetector()


def load_secrets() -> Dict[str, str]:
    """
    Load database credentials into the environment and return application secrets.

    Raises:
        SecretsLoadError: If a configured secret cannot be read
    """
    config = get_config()
    if not (config.db_credentials_arn or config.application_secrets_arn):
        logger.info('No Secrets Manager ARNs configured, skipping secret loading')
        return {}

    secrets_service = SecretsService(get_aws_clients().secrets_manager)
    secrets_service.load_database_credentials(config.db_credentials_arn)
    return secrets_service.load_application_secrets(config.application_secrets_arn)


def get_application_secrets() -> Dict[str, str]:
    """Application secrets loaded at cold start (empty before initialization)."""
    return dict(_application_secrets or {})


def _build_proxy() -> Mangum:
    global _application_secrets
    config = get_config()

    _application_secrets = load_secrets()

    metrics = None
    if config.device_metrics:
        metrics = MetricsService(
            get_aws_clients().cloudwatch, config.metrics_namespace
        )

    app = create_app(detector=_detector, metrics=metrics)
    logger.info(
        f'Initialized HTTP proxy (base path: {config.api_base_path or "/"})'
    )
    return Mangum(
        app,
        lifespan="off",
        api_gateway_base_path=config.api_base_path or "/",
    )


def get_proxy() -> Mangum:
    """
    Get the container-wide Mangum adapter, initializing it on first use.

    Raises:
        RuntimeError: If the application could not be initialized
    """
    global _proxy
    if _proxy is None:
        try:
            _proxy = _build_proxy()
        except Exception as e:
            logger.error(f'Could not initialize application: {str(e)}', exc_info=True)
            raise RuntimeError('Could not initialize application') from e
    return _proxy


def proxy_request(event, context):
    """API Gateway proxy entry point."""
    return get_proxy()(event, context)


@lambda_handler
def classify_device(event, context):
    """Classify the "user_agent" field of the event."""
    if event is None:
        event = {}
    if not isinstance(event, dict):
        raise ValidationError('Event must be a JSON object', value=event)

    user_agent = event.get('user_agent')
    if user_agent is not None and not isinstance(user_agent, str):
        raise ValidationError(
            'user_agent must be a string',
            field='user_agent',
            value=user_agent,
        )

    return _detector.detect_device(user_agent).to_dict()
