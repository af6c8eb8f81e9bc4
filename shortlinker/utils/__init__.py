from shortlinker.utils.config import app_env, app_name, app_prefix, load_config, redis_config
from shortlinker.utils.helpers import base_url, get_short_url, require_token, is_routable_token, require_environment, guarantee_500_response
from shortlinker.utils.encoder import encode, decode
from shortlinker.utils.fingerprint import fingerprint
from shortlinker.utils.logging import initialize_logging


__all__ = [
    'encode',
    'decode',
    'fingerprint',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'redis_config',
    'base_url',
    'get_short_url',
    'require_token',
    'is_routable_token',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
