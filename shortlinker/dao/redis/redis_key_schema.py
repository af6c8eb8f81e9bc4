import functools
from collections.abc import Callable

from shortlinker.constants import COUNTER_KEY


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing shortlinks.

    Without a prefix the generated keys are the ones used by existing
    deployments:

        next.url.id                  -> identifier counter
        shortlink:<token>:url        -> original URL
        shortlink:<token>:detail     -> JSON link detail
        urlhash:<fingerprint>:url    -> token (fingerprint cache)

    An optional prefix can be provided to namespace all generated keys,
    e.g. "shortlinker:prod" or "shortlinker:dev".
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def counter_key(self) -> str:
        return COUNTER_KEY

    @prefix_key
    def shortlink_url_key(self, token: str) -> str:
        return f'shortlink:{token}:url'

    @prefix_key
    def shortlink_detail_key(self, token: str) -> str:
        return f'shortlink:{token}:detail'

    @prefix_key
    def url_hash_key(self, url_hash: str) -> str:
        return f'urlhash:{url_hash}:url'
