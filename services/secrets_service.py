"""
Secrets Manager service for database credentials and application secrets.
"""
import json
import os
from typing import Any, Dict
from logger_config import get_logger
from utils.exceptions import SecretsLoadError

logger = get_logger(__name__)

# Secret key -> environment variable read by the database layer
DB_CREDENTIAL_ENV_VARS = {
    'host': 'DB_HOST',
    'port': 'DB_PORT',
    'dbname': 'DB_NAME',
    'username': 'DB_USERNAME',
    'password': 'DB_PASSWORD',
}


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    # Containers have no text value
    if isinstance(value, (dict, list)):
        return ''
    return str(value)


class SecretsService:
    """Service for reading JSON secrets from Secrets Manager."""

    def __init__(self, secrets_client) -> None:
        """
        Initialize secrets service.

        Args:
            secrets_client: boto3 Secrets Manager client
        """
        self.client = secrets_client

    def get_secret_json(self, secret_id: str) -> Dict[str, Any]:
        """
        Read a secret and parse its SecretString as a JSON object.

        Args:
            secret_id: Secret name or ARN

        Returns:
            The decoded secret

        Raises:
            SecretsLoadError: If the secret cannot be read or is not a JSON object
        """
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
            secret_data = json.loads(response['SecretString'])
        except Exception as e:
            raise SecretsLoadError(
                f'Failed to load secret {secret_id} from Secrets Manager: {str(e)}',
                secret_id=secret_id,
            ) from e

        if not isinstance(secret_data, dict):
            raise SecretsLoadError(
                f'Secret {secret_id} is not a JSON object',
                secret_id=secret_id,
            )
        return secret_data

    def load_database_credentials(self, secret_id: str) -> Dict[str, str]:
        """
        Export database connection settings from a secret as DB_* env vars.

        Args:
            secret_id: Secret name or ARN; nothing is loaded when empty

        Returns:
            Mapping of exported environment variable names to values

        Raises:
            SecretsLoadError: If the secret is unreadable or a key is missing
        """
        if not secret_id:
            logger.debug('DB_CREDENTIALS_ARN not set, skipping database credentials')
            return {}

        secret_data = self.get_secret_json(secret_id)

        missing = [key for key in DB_CREDENTIAL_ENV_VARS if key not in secret_data]
        if missing:
            raise SecretsLoadError(
                f'Database credentials secret {secret_id} is missing keys: '
                f'{", ".join(missing)}',
                secret_id=secret_id,
            )

        exported = {
            env_var: _as_text(secret_data[key])
            for key, env_var in DB_CREDENTIAL_ENV_VARS.items()
        }
        os.environ.update(exported)
        logger.info(f'Loaded database credentials from Secrets Manager: {secret_id}')
        return exported

    def load_application_secrets(self, secret_id: str) -> Dict[str, str]:
        """
        Load application secrets (API keys, encryption keys, ...) as strings.

        Args:
            secret_id: Secret name or ARN; an empty mapping is returned when empty

        Returns:
            Mapping of secret keys to text values

        Raises:
            SecretsLoadError: If the secret cannot be read or parsed
        """
        if not secret_id:
            logger.debug('APPLICATION_SECRETS_ARN not set, no application secrets')
            return {}

        secret_data = self.get_secret_json(secret_id)
        secrets = {key: _as_text(value) for key, value in secret_data.items()}
        logger.info(
            f'Loaded {len(secrets)} application secrets from Secrets Manager: {secret_id}'
        )
        return secrets
