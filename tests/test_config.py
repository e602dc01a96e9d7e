"""
Unit tests for configuration module.
"""
import pytest
import os
from unittest.mock import patch
from config import Config, get_config


class TestConfig:
    """Tests for Config class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        """Test Config.from_env with nothing set."""
        config = Config.from_env()
        assert config.aws_region == 'us-east-1'
        assert config.log_level == 'INFO'
        assert config.db_credentials_arn == ''
        assert config.application_secrets_arn == ''
        assert config.email_notifications is True
        assert config.email_sender is None
        assert config.documents_bucket == ''
        assert config.metrics_namespace == 'Shiba'
        assert config.device_metrics is False
        assert config.api_base_path == ''
        assert config.filenet_upload_url is None
        assert config.filenet_timeout_seconds == 60

    @patch.dict(os.environ, {
        'AWS_REGION': 'us-west-2',
        'LOG_LEVEL': 'debug',
        'DB_CREDENTIALS_ARN': 'arn:aws:secretsmanager:us-west-2:123:secret:db',
        'APPLICATION_SECRETS_ARN': 'arn:aws:secretsmanager:us-west-2:123:secret:app',
        'EMAIL_NOTIFICATIONS': 'false',
        'EMAIL_SENDER': 'help@example.org',
        'DOCUMENTS_BUCKET': 'shiba-documents',
        'METRICS_NAMESPACE': 'ShibaStaging',
        'DEVICE_METRICS': 'yes',
        'API_BASE_PATH': '/prod',
        'FILENET_UPLOAD_URL': 'https://esb.example.org/filenet',
        'FILENET_USERNAME': 'esb-user',
        'FILENET_PASSWORD': 'esb-pass',
        'FILENET_TIMEOUT_SECONDS': '30',
        'FILENET_CA_BUNDLE': '/etc/ssl/esb.pem',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test Config.from_env with all variables set."""
        config = Config.from_env()
        assert config.aws_region == 'us-west-2'
        assert config.log_level == 'DEBUG'
        assert config.db_credentials_arn.endswith(':db')
        assert config.application_secrets_arn.endswith(':app')
        assert config.email_notifications is False
        assert config.email_sender == 'help@example.org'
        assert config.documents_bucket == 'shiba-documents'
        assert config.metrics_namespace == 'ShibaStaging'
        assert config.device_metrics is True
        assert config.api_base_path == '/prod'
        assert config.filenet_upload_url == 'https://esb.example.org/filenet'
        assert config.filenet_username == 'esb-user'
        assert config.filenet_password == 'esb-pass'
        assert config.filenet_timeout_seconds == 30
        assert config.filenet_ca_bundle == '/etc/ssl/esb.pem'

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'}, clear=True)
    def test_from_env_invalid_log_level(self):
        """Test Config.from_env raises error for invalid log level."""
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config.from_env()

    @patch.dict(os.environ, {'EMAIL_NOTIFICATIONS': 'maybe'}, clear=True)
    def test_from_env_invalid_boolean(self):
        with pytest.raises(ValueError, match="EMAIL_NOTIFICATIONS"):
            Config.from_env()

    @pytest.mark.parametrize('timeout', ['abc', '0', '-5'])
    def test_from_env_invalid_timeout(self, timeout):
        with patch.dict(os.environ, {'FILENET_TIMEOUT_SECONDS': timeout}, clear=True):
            with pytest.raises(ValueError, match="FILENET_TIMEOUT_SECONDS"):
                Config.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
