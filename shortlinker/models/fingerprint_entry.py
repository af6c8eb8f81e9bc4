from dataclasses import dataclass
from enum import Enum

from shortlinker.constants import EXPIRED_FINGERPRINT_SENTINEL


class FingerprintState(Enum):
    ABSENT = 'absent'  # no urlhash:<hash>:url key
    EXPIRED = 'expired'  # key holds the expiry sentinel (or nothing)
    LIVE = 'live'  # key holds the token of a live shortlink


# fmt: off
@dataclass(frozen=True)
class FingerprintEntry:
    state: FingerprintState     # Outcome of the fingerprint cache lookup
    token: str | None = None    # Cached token, only set for LIVE entries
# fmt: on

    @classmethod
    def from_value(cls, value: str | bytes | None) -> 'FingerprintEntry':
        """Classify a raw urlhash:<hash>:url value.

        Example:
            >>> FingerprintEntry.from_value(None).state
            <FingerprintState.ABSENT: 'absent'>
            >>> FingerprintEntry.from_value('{}').state
            <FingerprintState.EXPIRED: 'expired'>
            >>> FingerprintEntry.from_value('1a')
            FingerprintEntry(state=<FingerprintState.LIVE: 'live'>, token='1a')
        """
        if value is None:
            return cls(FingerprintState.ABSENT)
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        if not value or value == EXPIRED_FINGERPRINT_SENTINEL:
            return cls(FingerprintState.EXPIRED)
        return cls(FingerprintState.LIVE, token=value)

    @property
    def is_live(self) -> bool:
        return self.state is FingerprintState.LIVE
