"""Base62 token encoding utility

This module maps the monotonic link identifier onto the short alphanumeric
token handed out to clients, and back.

Functions:
    encode(identifier) -> str:
        Encode a non-negative integer into a base62 token.
    decode(token) -> int:
        Decode a base62 token back into its integer identifier.

Example:
    >>> from shortlinker.utils import encode, decode
    >>> encode(125)
    '21'
    >>> decode('21')
    125
"""

import string

from shortlinker.exceptions import InvalidTokenError


ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
BASE = len(ALPHABET)  # 10 digits + 26 lowercase + 26 uppercase
_INDEX = {character: value for value, character in enumerate(ALPHABET)}


def encode(identifier: int) -> str:
    """Encode a non-negative integer identifier into a base62 token.

    Tokens grow logarithmically with the identifier and contain only
    URL-safe characters [0-9a-zA-Z]. Zero is encoded as a single '0'.

    Args:
        identifier (int):
            Non-negative integer, typically the value of the global link counter.

    Returns:
        str: base62 token, most significant digit first.

    Raises:
        TypeError: If identifier is not an integer.
        ValueError: If identifier is negative.

    Example:
        >>> encode(0)
        '0'
        >>> encode(61)
        'Z'
        >>> encode(62)
        '10'
    """
    # bool is an int subclass, but True is not a link identifier
    if not isinstance(identifier, int) or isinstance(identifier, bool):
        raise TypeError(f'Identifier must be of type integer (given type: {type(identifier)}).')
    if identifier < 0:
        raise ValueError(f'Identifier must be a non-negative integer (given value: {identifier}).')

    if identifier == 0:
        return ALPHABET[0]

    digits = []
    while identifier > 0:
        identifier, remainder = divmod(identifier, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(reversed(digits))


def decode(token: str) -> int:
    """Decode a base62 token into its integer identifier.

    Args:
        token (str):
            base62 token produced by encode().

    Returns:
        int: the identifier the token encodes.

    Raises:
        InvalidTokenError:
            If the token is empty, not a string, or contains characters
            outside the base62 alphabet.

    Example:
        >>> decode('10')
        62
    """
    if not isinstance(token, str) or not token:
        raise InvalidTokenError(f'Token must be a non-empty string (given value: {token!r}).')

    identifier = 0
    for character in token:
        value = _INDEX.get(character)
        if value is None:
            raise InvalidTokenError(f"Token '{token}' contains invalid character '{character}'.")
        identifier = identifier * BASE + value
    return identifier
