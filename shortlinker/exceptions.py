class ShortlinkerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinker_error'
    status = 500


class InvalidInputError(ShortlinkerError):
    """Raised when a URL or expiration is malformed at the service boundary."""

    error_code = 'app:invalid_input_error'
    status = 400


class InvalidTokenError(ShortlinkerError):
    """Raised when a token contains characters outside the base62 alphabet."""

    error_code = 'app:invalid_token_error'
    status = 400


class ConfigurationError(ShortlinkerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
