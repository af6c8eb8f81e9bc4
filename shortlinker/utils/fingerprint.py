"""URL fingerprinting utility

Fingerprints are fixed-length digests of a URL used as the key of the
fingerprint cache (urlhash:<fingerprint>:url). They are an index, not a
security control.
"""

import hashlib


def fingerprint(url: str) -> str:
    """Return the lowercase hex SHA-1 digest of a URL.

    NOTE: SHA-1 is kept for key compatibility with existing
          urlhash:<hash>:url entries.

    Example:
        >>> fingerprint('abc')
        'a9993e364706816aba3e25717850c26c9cd0d89d'
    """
    return hashlib.sha1(url.encode('utf-8'), usedforsecurity=False).hexdigest()
