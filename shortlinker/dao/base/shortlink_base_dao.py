"""Abstract base class for shortlink data access objects (DAOs).

This class establishes a consistent contract for all shortlink DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB).

Responsibilities:
    - Provide an interface for shortening URLs and resolving shortlinks.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by Lambda functions.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinker.dao.redis import ShortlinkRedisDAO

        >>> dao = ShortlinkRedisDAO(...)

        >>> token = dao.shorten('https://example.com/blog/article-123', expiration_in_minutes=60)
        >>> token
        '1'

        >>> dao.unshorten('1')
        'https://example.com/blog/article-123'

        >>> dao.info('1').expiration_in_minutes
        60
"""

from abc import ABC, abstractmethod

from shortlinker.models import LinkDetail


class ShortlinkBaseDAO(ABC):
    """Interface for shortlink data access objects (DAOs).

    Methods:
        shorten(url: str, expiration_in_minutes: int, **kwargs) -> str:
            Return a token for the URL, reusing a live one if the URL was already shortened.
            Raises InvalidInputError on a negative expiration.
            Raises DataStoreError on connection or write failure.

        info(token: str, **kwargs) -> LinkDetail:
            Retrieve the metadata of a shortlink.
            Raises ShortlinkNotFoundError if the shortlink does not exist.
            Raises DataStoreError on connection or read failure.

        unshorten(token: str, **kwargs) -> str:
            Resolve a shortlink to its original URL.
            Raises ShortlinkNotFoundError if the shortlink does not exist.
            Raises DataStoreError on connection or read failure.

        count(increment: bool, **kwargs) -> int:
            Return the identifier counter from the data store.
            Optionally increment counter before retrieving.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Shortlinks are expected to expire automatically. The DAO does not
          provide an interface to manually delete entries.
    """

    @abstractmethod
    def shorten(self, url: str, expiration_in_minutes: int, **kwargs) -> str:
        """Create (or reuse) a shortlink for a URL.

        Args:
            url (str):
                The original long URL.

            expiration_in_minutes (int):
                Lifetime of the shortlink. 0 means the shortlink never expires.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: the shortlink token.

        Raises:
            InvalidInputError:
                If expiration_in_minutes is negative.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def info(self, token: str, **kwargs) -> LinkDetail:
        """Retrieve the metadata of a shortlink.

        Raises:
            ShortlinkNotFoundError:
                If no shortlink with the given token exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def unshorten(self, token: str, **kwargs) -> str:
        """Resolve a shortlink to the original URL.

        Raises:
            ShortlinkNotFoundError:
                If no shortlink with the given token exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve the current identifier counter value from the data store.

        Args:
            increment (bool):
                If True, increment the counter by 1 before returning the value.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current counter value.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
