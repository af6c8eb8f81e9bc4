import functools
import contextlib
from typing import TypeVar, Any
from collections.abc import Callable, Iterator

import redis

from shortlinker.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def _describe(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


@contextlib.contextmanager
def redis_errors(client: redis.Redis, operation: str, key: str | None = None) -> Iterator[None]:
    """Translate Redis errors raised inside the block into DataStoreError

    Args:
        client (redis.Redis):
            Redis client the block talks to (used for the error message).
        operation (str):
            Name of the store operation, e.g. 'GET' or 'shorten'.
        key (str | None):
            Redis key involved in the operation, if any.

    Raises:
        DataStoreError:
            Tagged with the operation and key on any redis.exceptions.RedisError.

    Example:
        >>> with redis_errors(self.redis, 'GET', key):
        ...     value = self.redis.get(key)
    """
    try:
        yield
    except redis.exceptions.ConnectionError as e:
        raise DataStoreError(f"Can't connect to Redis at {_describe(client)}.", operation=operation, key=key) from e
    except redis.exceptions.RedisError as e:
        target = f" on '{key}'" if key is not None else ''
        raise DataStoreError(f'Redis {operation}{target} failed: {e}', operation=operation, key=key) from e


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle store errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError (tagged with the method name)
            on connectivity or command issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... def get_count(self):
        ...     return self.redis.get('count')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with redis_errors(self.redis, method.__name__):
            return method(self, *args, **kwargs)

    return wrapper
