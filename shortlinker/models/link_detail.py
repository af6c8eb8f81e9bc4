import json
from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class LinkDetail:
    """Represent the metadata stored next to a shortlink.

    Attributes:
        url (str):
            The original long URL that the shortlink redirects to.
        created_at (str):
            Creation timestamp. ISO-8601 (UTC) for links created by this service;
            kept as an opaque string for records written by older deployments.
        expiration_in_minutes (int):
            Configured lifetime of the shortlink. 0 means the link never expires.

    Example:
        >>> detail = LinkDetail(
        ...     url='https://example.com',
        ...     created_at='2025-10-15T00:00:00+00:00',
        ...     expiration_in_minutes=60,
        ... )
        >>> detail.to_json()
        '{"url": "https://example.com", "created_at": "2025-10-15T00:00:00+00:00", "expiration_in_minutes": 60}'
        >>> detail.expires_at
        datetime.datetime(2025, 10, 15, 1, 0, tzinfo=datetime.timezone.utc)
    """

    url: str
    created_at: str
    expiration_in_minutes: int

    @property
    def expires_at(self) -> datetime | None:
        if self.expiration_in_minutes == 0:
            return None
        try:
            created_at = datetime.fromisoformat(self.created_at)
        except ValueError:
            return None
        return created_at + timedelta(minutes=self.expiration_in_minutes)

    def to_dict(self) -> dict:
        return {
            'url': self.url,
            'created_at': self.created_at,
            'expiration_in_minutes': self.expiration_in_minutes,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, document: str | bytes) -> 'LinkDetail':
        """Parse a stored shortlink:<token>:detail document.

        Raises:
            ValueError:
                If the document is not a JSON object with a string 'url' field,
                or its expiration is not an integer number of minutes.
        """
        data = json.loads(document)
        if not isinstance(data, dict) or not isinstance(data.get('url'), str):
            raise ValueError(f'Malformed link detail document: {document!r}')
        try:
            expiration_in_minutes = int(data.get('expiration_in_minutes', 0))
        except TypeError as e:
            raise ValueError(f'Malformed expiration in link detail document: {document!r}') from e
        return cls(
            url=data['url'],
            created_at=str(data.get('created_at', '')),
            expiration_in_minutes=expiration_in_minutes,
        )
