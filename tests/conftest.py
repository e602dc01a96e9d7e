"""
Shared fixtures: module-level singletons are reset around every test.
"""
import pytest


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    import config
    import handler
    from services import aws_clients

    monkeypatch.setattr(config, '_config', None)
    monkeypatch.setattr(aws_clients, '_aws_clients', None)
    monkeypatch.setattr(handler, '_proxy', None)
    monkeypatch.setattr(handler, '_application_secrets', None)
    yield


@pytest.fixture
def mock_context():
    """Mock Lambda context."""
    class MockContext:
        def __init__(self):
            self.function_name = 'test-function'
            self.memory_limit_in_mb = 512
            self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test'
            self.aws_request_id = 'test-request-id'

    return MockContext()
