from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.shortlink_redis_dao import ShortlinkRedisDAO
from shortlinker.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortlinkRedisDAO',
    'RedisClientMixin',
]
