"""Data Access Object (DAO) implementation for managing shortlinks in Redis

This module provides a Redis-based implementation of ShortlinkBaseDAO.

Responsibilities:
    - Allocate identifiers from the global counter and encode them into tokens;
    - Deduplicate repeated shorten requests through the URL fingerprint cache;
    - Store the URL, fingerprint cache entry and link detail with one shared TTL;
    - Resolve tokens back to their URL and link detail;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Redis layout (without prefix):
    next.url.id                  INCR counter, never expires
    shortlink:<token>:url        original URL                        EX <expiration>
    urlhash:<sha1(url)>:url      token                               EX <expiration>
    shortlink:<token>:detail     {"url", "created_at", "expiration_in_minutes"}  EX <expiration>

Classes:
    ShortlinkRedisDAO:
        DAO for storing and retrieving shortlinks in a Redis datastore.

Example:
    >>> from shortlinker.dao.redis import ShortlinkRedisDAO

    >>> dao = ShortlinkRedisDAO(prefix="app:dev")

    >>> dao.shorten("https://example.com/page", expiration_in_minutes=60)
    '1'
    >>> dao.shorten("https://example.com/page", expiration_in_minutes=60)
    '1'
    >>> dao.unshorten("1")
    'https://example.com/page'
    >>> dao.info("1").expiration_in_minutes
    60
"""

import logging
from datetime import datetime, UTC

from beartype import beartype

from shortlinker.models import LinkDetail, FingerprintEntry
from shortlinker.dao.base import ShortlinkBaseDAO
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.helpers import handle_redis_connection_error, redis_errors
from shortlinker.dao.exceptions import DataStoreError, ShortlinkNotFoundError
from shortlinker.exceptions import InvalidInputError
from shortlinker.utils.encoder import encode, decode
from shortlinker.utils.fingerprint import fingerprint


logger = logging.getLogger(__name__)


class ShortlinkRedisDAO(RedisClientMixin, ShortlinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing shortlinks

    This class implements the ShortlinkBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        shorten(url: str, expiration_in_minutes: int, **kwargs) -> str:
            Return the live token of an already shortened URL, or allocate a new one.
            Raises InvalidInputError on a negative expiration.
            Raises DataStoreError on Redis issues.

        info(token: str, **kwargs) -> LinkDetail:
            Retrieve the link detail of a shortlink.
            Raises ShortlinkNotFoundError when the token doesn't exist.
            Raises DataStoreError on Redis issues.

        unshorten(token: str, **kwargs) -> str:
            Resolve a shortlink to its original URL.
            Raises ShortlinkNotFoundError when the token doesn't exist.
            Raises DataStoreError on Redis issues.

        lookup_fingerprint(url: str, **kwargs) -> FingerprintEntry:
            Classify the fingerprint cache entry of a URL (absent, expired or live).

        count(increment: bool = False, **kwargs) -> int:
            Retrieve (and optionally increment) the global identifier counter.
            Raises DataStoreError on Redis issues.
    """

    @handle_redis_connection_error
    @beartype
    def shorten(self, url: str, expiration_in_minutes: int, **kwargs) -> str:
        """Create a shortlink for a URL, or return the live one

        A live fingerprint cache entry short-circuits the allocation and its
        TTL is NOT refreshed: shortening the same URL again never extends the
        lifetime of the original shortlink.

        NOTE: Two concurrent calls for the same URL which both miss the
              fingerprint cache each allocate an identifier, which leaves two
              independent live shortlinks for the URL:

              (lambda 1): GET urlhash:<hash>:url  => nil
              (lambda 2): GET urlhash:<hash>:url  => nil
              (lambda 1): INCR next.url.id        => 7
              (lambda 2): INCR next.url.id        => 8
              (lambda 1): MULTI SET ... EXEC       (token '7')
              (lambda 2): MULTI SET ... EXEC       (token '8', overwrites the cache entry)

              Deduplication is best-effort; both shortlinks stay valid.

        Args:
            url (str):
                The original long URL.
            expiration_in_minutes (int):
                Lifetime of the shortlink and its fingerprint cache entry.
                0 means the keys are stored without expiry.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: the shortlink token.

        Raises:
            InvalidInputError:
                If expiration_in_minutes is negative.
            DataStoreError:
                If a Redis issue occurs. An identifier consumed before the
                failure is not reused.

        Example:
            >>> dao.shorten('https://example.com', 60)
            '1'
        """
        if expiration_in_minutes < 0:
            raise InvalidInputError(f'Expiration must be a non-negative number of minutes (given value: {expiration_in_minutes}).')

        entry = self.lookup_fingerprint(url)
        if entry.is_live:
            logger.debug('URL already shortened, reusing token.', extra={'token': entry.token})
            return entry.token

        token = encode(self.count(increment=True))
        url_hash_key = self.keys.url_hash_key(fingerprint(url))
        shortlink_url_key = self.keys.shortlink_url_key(token)
        shortlink_detail_key = self.keys.shortlink_detail_key(token)
        detail = LinkDetail(
            url=url,
            created_at=datetime.now(UTC).isoformat(),
            expiration_in_minutes=expiration_in_minutes,
        )
        ttl = expiration_in_minutes * 60 if expiration_in_minutes > 0 else None

        # NOTE: The three SET commands are executed as an atomic operation
        #       so a reader never observes a shortlink without its detail
        #       or a cache entry pointing at a token which isn't stored yet.
        with redis_errors(self.redis, 'MULTI', shortlink_url_key):
            with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(shortlink_url_key, url, ex=ttl)
                pipe.set(url_hash_key, token, ex=ttl)
                pipe.set(shortlink_detail_key, detail.to_json(), ex=ttl)
                pipe.execute()

        logger.debug('Allocated new shortlink.', extra={'token': token, 'expirationInMinutes': expiration_in_minutes})
        return token

    @handle_redis_connection_error
    @beartype
    def info(self, token: str, **kwargs) -> LinkDetail:
        """Retrieve the link detail stored for a shortlink

        Args:
            token (str):
                The shortlink token.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinkDetail: the parsed shortlink:<token>:detail document.

        Raises:
            InvalidTokenError:
                If the token contains characters outside the base62 alphabet.
            ShortlinkNotFoundError:
                If the shortlink does not exist (never created or expired).
            DataStoreError:
                If Redis connectivity issues occur or the stored document is malformed.

        Example:
            >>> dao.info('1')
            LinkDetail(url='https://example.com', created_at='2025-10-15T00:00:00+00:00', expiration_in_minutes=60)
        """
        decode(token)  # reject tokens outside the alphabet before a round trip
        shortlink_detail_key = self.keys.shortlink_detail_key(token)

        with redis_errors(self.redis, 'GET', shortlink_detail_key):
            document = self.redis.get(shortlink_detail_key)

        if document is None:
            logger.debug('Shortlink detail not found.', extra={'token': token})
            raise ShortlinkNotFoundError(f"Unknown short URL '{token}'.")

        try:
            return LinkDetail.from_json(document)
        except ValueError as e:
            raise DataStoreError(f"Malformed link detail stored at '{shortlink_detail_key}'.", operation='GET', key=shortlink_detail_key) from e

    @handle_redis_connection_error
    @beartype
    def unshorten(self, token: str, **kwargs) -> str:
        """Resolve a shortlink to its original URL

        Raises:
            InvalidTokenError:
                If the token contains characters outside the base62 alphabet.
            ShortlinkNotFoundError:
                If the shortlink does not exist (never created or expired).
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.unshorten('1')
            'https://example.com'
        """
        decode(token)
        shortlink_url_key = self.keys.shortlink_url_key(token)

        with redis_errors(self.redis, 'GET', shortlink_url_key):
            url = self.redis.get(shortlink_url_key)

        if url is None:
            logger.debug('Shortlink not found.', extra={'token': token})
            raise ShortlinkNotFoundError(f"Unknown short URL '{token}'.")

        return url.decode('utf-8') if isinstance(url, bytes) else url

    @handle_redis_connection_error
    @beartype
    def lookup_fingerprint(self, url: str, **kwargs) -> FingerprintEntry:
        """Look up the fingerprint cache entry of a URL without allocating anything

        Example:
            >>> dao.lookup_fingerprint('https://example.com')
            FingerprintEntry(state=<FingerprintState.LIVE: 'live'>, token='1')
        """
        url_hash_key = self.keys.url_hash_key(fingerprint(url))
        with redis_errors(self.redis, 'GET', url_hash_key):
            return FingerprintEntry.from_value(self.redis.get(url_hash_key))

    @handle_redis_connection_error
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve global identifier counter

        INCR returns the post-increment value in the same round trip, so no two
        callers ever observe the same identifier.

        Args:
            increment (bool):
                If True, increments the counter. Otherwise, retrieves its value.
            **kwargs:
                Optional keyword arguments.

        Returns:
            int:
                The updated or current global counter value (0 if never incremented).

        Example:
            >>> dao.count(increment=False)
            123
            >>> dao.count(increment=True)
            124
        """
        counter_key = self.keys.counter_key()
        if increment:
            with redis_errors(self.redis, 'INCR', counter_key):
                return int(self.redis.incr(counter_key))
        else:
            with redis_errors(self.redis, 'GET', counter_key):
                return int(self.redis.get(counter_key) or 0)
