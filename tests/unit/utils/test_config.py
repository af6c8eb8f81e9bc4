"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name(), app_prefix() correctly read environment variables.

2. Configuration loading behavior
   - Ensures load_config() correctly returns the active backend section of the AppConfig document.
   - Ensures load_config() raises ClientError when AppConfig calls fail.
   - Ensures missing AppConfig environment variables raise MissingEnvironmentVariableError.
   - Ensures documents without the requested section raise BadConfigurationError.

3. Local AppConfig agent
   - Ensures the local agent is used when running locally and rejected when unsafe.

4. redis_config() mapping
"""

import os
import json
from io import BytesIO
from unittest.mock import MagicMock

import pytest
import botocore

from shortlinker.utils import config
from shortlinker.exceptions import BadConfigurationError, MissingEnvironmentVariableError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Set up environment variables for testing."""
    monkeypatch.setenv('APPCONFIG_APP_ID', 'app123')
    monkeypatch.setenv('APPCONFIG_ENV_ID', 'env123')
    monkeypatch.setenv('APPCONFIG_PROFILE_ID', 'prof123')
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    monkeypatch.delenv('APPCONFIG_AGENT_URL', raising=False)


@pytest.fixture
def appconfig_payload():
    """Provide a default AppConfig payload used by multiple tests."""
    # fmt: off
    return {
        'build': 42,
        'active_backend': 'redis',
        'configs': {
            'test_lambda': {
                'redis': {
                    'host': 'monkey',
                    'port': 659595,
                    'db': 3
                }
            }
        },
    }
    # fmt: on


@pytest.fixture
def mock_appconfig(monkeypatch, appconfig_payload):
    """Mock the AppConfig Data client returned by boto3."""
    client = MagicMock()
    client.start_configuration_session.return_value = {'InitialConfigurationToken': 'monkey_token'}
    client.get_latest_configuration.return_value = {'Configuration': BytesIO(json.dumps(appconfig_payload).encode('utf-8'))}
    monkeypatch.setattr(config.boto3, 'client', lambda service: client)
    return client


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env(monkeypatch):
    """Ensure app_env() returns the correct environment value from APP_ENV"""
    monkeypatch.setitem(os.environ, 'APP_ENV', 'Test')
    assert config.app_env() == 'test'


def test_app_env_default(monkeypatch):
    monkeypatch.delenv('APP_ENV')
    assert config.app_env() == 'local'


def test_app_name(monkeypatch):
    """Ensure app_name() returns the correct environment value from APP_NAME"""
    monkeypatch.setitem(os.environ, 'APP_NAME', 'test-app')
    assert config.app_name() == 'test-app'


def test_app_name_not_set(monkeypatch):
    """Ensure app_name() returns None when APP_NAME is not set"""
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_name() is None


def test_app_prefix(monkeypatch):
    """Ensure app_prefix() joins APP_NAME and APP_ENV"""
    monkeypatch.setitem(os.environ, 'APP_NAME', 'test-app')
    monkeypatch.setitem(os.environ, 'APP_ENV', 'test')
    assert config.app_prefix() == 'test-app:test'


def test_app_prefix_without_app_name(monkeypatch):
    """Ensure keys stay un-prefixed when APP_NAME is not set"""
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_prefix() is None


# -------------------------------
# 2. Configuration loading behavior
# -------------------------------


def test_load_config(mock_appconfig):
    """Ensure load_config() returns the active backend section for the lambda."""
    result = config.load_config('test_lambda')

    assert result == {'redis': {'host': 'monkey', 'port': 659595, 'db': 3}}
    mock_appconfig.start_configuration_session.assert_called_once_with(
        ApplicationIdentifier='app123',
        EnvironmentIdentifier='env123',
        ConfigurationProfileIdentifier='prof123',
    )
    mock_appconfig.get_latest_configuration.assert_called_once_with(
        ConfigurationToken='monkey_token',
    )


def test_missing_appconfig_raises_error(monkeypatch):
    """Ensure load_config() propagates ClientError when AppConfig returns an error."""
    mock_appconfig = MagicMock()
    mock_appconfig.start_configuration_session.side_effect = botocore.exceptions.ClientError(
        {'Error': {'Code': 'ResourceNotFoundException'}}, 'StartConfigurationSession'
    )
    monkeypatch.setattr(config.boto3, 'client', lambda service: mock_appconfig)

    with pytest.raises(botocore.exceptions.ClientError):
        config.load_config('test_lambda')


@pytest.mark.parametrize('name', ['APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID', 'APPCONFIG_PROFILE_ID'])
def test_load_config_missing_environment(monkeypatch, mock_appconfig, name):
    monkeypatch.delenv(name)

    with pytest.raises(MissingEnvironmentVariableError, match=name):
        config.load_config('test_lambda')

    mock_appconfig.start_configuration_session.assert_not_called()


def test_load_config_unknown_lambda(mock_appconfig):
    with pytest.raises(BadConfigurationError, match='other_lambda'):
        config.load_config('other_lambda')


def test_load_config_unknown_backend(mock_appconfig, appconfig_payload):
    appconfig_payload['active_backend'] = 'memcached'
    mock_appconfig.get_latest_configuration.return_value = {'Configuration': BytesIO(json.dumps(appconfig_payload).encode('utf-8'))}

    with pytest.raises(BadConfigurationError):
        config.load_config('test_lambda')


# -------------------------------
# 3. Local AppConfig agent
# -------------------------------


def test_load_config_from_local_agent(monkeypatch, mock_appconfig, appconfig_payload):
    """Ensure the local AppConfig agent is queried instead of AWS when running locally."""
    monkeypatch.setenv('APP_ENV', 'local')
    monkeypatch.setenv('APP_NAME', 'test-app')
    monkeypatch.setenv('APPCONFIG_AGENT_URL', 'http://appconfig-agent:2772')
    urlopen = MagicMock()
    urlopen.return_value.__enter__.return_value = BytesIO(json.dumps(appconfig_payload).encode('utf-8'))
    monkeypatch.setattr(config.urllib.request, 'urlopen', urlopen)

    result = config.load_config('test_lambda')

    assert result == {'redis': {'host': 'monkey', 'port': 659595, 'db': 3}}
    urlopen.assert_called_once_with(
        'http://appconfig-agent:2772/applications/test-app/environments/local/configurations/backend-config',
        timeout=5,
    )
    mock_appconfig.start_configuration_session.assert_not_called()


def test_load_config_locally_without_agent(monkeypatch, mock_appconfig):
    monkeypatch.setenv('APP_ENV', 'local')

    assert config.load_config('test_lambda') == {'redis': {'host': 'monkey', 'port': 659595, 'db': 3}}
    mock_appconfig.start_configuration_session.assert_called_once()


@pytest.mark.parametrize(
    'agent_url',
    [
        'ftp://localhost:2772',
        'http://169.254.169.254:2772',
        'http://localhost:8080',
    ],
)
def test_load_config_rejects_unsafe_agent_url(monkeypatch, mock_appconfig, agent_url):
    monkeypatch.setenv('APP_ENV', 'local')
    monkeypatch.setenv('APPCONFIG_AGENT_URL', agent_url)

    with pytest.raises(BadConfigurationError):
        config.load_config('test_lambda')


# -------------------------------
# 4. redis_config() mapping
# -------------------------------


def test_redis_config():
    app_config = {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0, 'socket_timeout': 1.5}}

    assert config.redis_config(app_config) == {
        'redis_host': 'redis.test',
        'redis_port': 6379,
        'redis_db': 0,
        'redis_socket_timeout': 1.5,
    }


def test_redis_config_missing_section():
    with pytest.raises(BadConfigurationError, match='redis'):
        config.redis_config({'dynamodb': {}})
