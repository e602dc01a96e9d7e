"""
Tests for Secrets Manager loading.
"""
import pytest
from moto import mock_aws
from unittest.mock import Mock
import boto3
import os
import json
from services.secrets_service import SecretsService
from utils.exceptions import SecretsLoadError

DB_SECRET = {
    'host': 'db.internal',
    'port': 5432,
    'dbname': 'shiba',
    'username': 'shiba_app',
    'password': 's3cret',
}


@pytest.fixture
def clean_db_env(monkeypatch):
    for name in ('DB_HOST', 'DB_PORT', 'DB_NAME', 'DB_USERNAME', 'DB_PASSWORD'):
        monkeypatch.delenv(name, raising=False)
    yield
    # Values written by os.environ.update are not tracked by monkeypatch
    for name in ('DB_HOST', 'DB_PORT', 'DB_NAME', 'DB_USERNAME', 'DB_PASSWORD'):
        os.environ.pop(name, None)


@pytest.mark.secrets_manager
@mock_aws()
def test_load_database_credentials_exports_env(clean_db_env):
    """Test database credentials are exported as DB_* variables."""
    client = boto3.client('secretsmanager', region_name='us-east-1')
    client.create_secret(Name='shiba-db', SecretString=json.dumps(DB_SECRET))

    exported = SecretsService(client).load_database_credentials('shiba-db')

    assert exported['DB_PORT'] == '5432'
    assert os.environ['DB_HOST'] == 'db.internal'
    assert os.environ['DB_PORT'] == '5432'
    assert os.environ['DB_NAME'] == 'shiba'
    assert os.environ['DB_USERNAME'] == 'shiba_app'
    assert os.environ['DB_PASSWORD'] == 's3cret'


@pytest.mark.secrets_manager
@mock_aws()
def test_load_database_credentials_missing_key(clean_db_env):
    """Test a secret without a password is rejected."""
    client = boto3.client('secretsmanager', region_name='us-east-1')
    secret = {k: v for k, v in DB_SECRET.items() if k != 'password'}
    client.create_secret(Name='shiba-db', SecretString=json.dumps(secret))

    with pytest.raises(SecretsLoadError, match='password') as exc_info:
        SecretsService(client).load_database_credentials('shiba-db')

    assert exc_info.value.secret_id == 'shiba-db'
    assert 'DB_HOST' not in os.environ


@pytest.mark.secrets_manager
def test_load_database_credentials_no_secret_id():
    """Test nothing is read when no ARN is configured."""
    client = Mock()
    assert SecretsService(client).load_database_credentials('') == {}
    client.get_secret_value.assert_not_called()


@pytest.mark.secrets_manager
@mock_aws()
def test_load_application_secrets():
    """Test application secrets are returned as strings."""
    client = boto3.client('secretsmanager', region_name='us-east-1')
    client.create_secret(
        Name='shiba-app',
        SecretString=json.dumps({
            'encryption_key': 'abc123',
            'retries': 3,
            'feature_on': True,
            'nested': {'a': 1},
            'hosts': ['a', 'b'],
            'rotated_at': None,
        })
    )

    secrets = SecretsService(client).load_application_secrets('shiba-app')

    assert secrets == {
        'encryption_key': 'abc123',
        'retries': '3',
        'feature_on': 'true',
        'nested': '',
        'hosts': '',
        'rotated_at': 'null',
    }


@pytest.mark.secrets_manager
def test_load_application_secrets_no_secret_id():
    assert SecretsService(Mock()).load_application_secrets('') == {}


@pytest.mark.secrets_manager
@mock_aws()
def test_get_secret_json_missing_secret():
    """Test an unknown secret raises SecretsLoadError."""
    client = boto3.client('secretsmanager', region_name='us-east-1')

    with pytest.raises(SecretsLoadError) as exc_info:
        SecretsService(client).get_secret_json('does-not-exist')

    assert exc_info.value.secret_id == 'does-not-exist'


@pytest.mark.secrets_manager
@mock_aws()
def test_get_secret_json_not_an_object():
    client = boto3.client('secretsmanager', region_name='us-east-1')
    client.create_secret(Name='list-secret', SecretString='["a", "b"]')

    with pytest.raises(SecretsLoadError, match='not a JSON object'):
        SecretsService(client).get_secret_json('list-secret')


@pytest.mark.secrets_manager
@mock_aws()
def test_get_secret_json_invalid_json():
    client = boto3.client('secretsmanager', region_name='us-east-1')
    client.create_secret(Name='bad-secret', SecretString='not json')

    with pytest.raises(SecretsLoadError):
        SecretsService(client).get_secret_json('bad-secret')
