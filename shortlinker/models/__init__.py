from shortlinker.models.link_detail import LinkDetail
from shortlinker.models.fingerprint_entry import FingerprintEntry, FingerprintState


__all__ = [
    'LinkDetail',
    'FingerprintEntry',
    'FingerprintState',
]
