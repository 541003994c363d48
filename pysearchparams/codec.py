from pysearchparams.exceptions import MalformedEscapeError, UnencodableTextError

from urllib.parse import quote, unquote_to_bytes
import logging
import re

log = logging.getLogger(__name__)

# RFC 3986 unreserved characters, `quote` never escapes these
UNRESERVED = frozenset(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    'abcdefghijklmnopqrstuvwxyz'
    '0123456789'
    '-_.~'
)

# `%` not followed by two hex digits
MALFORMED_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def percent_encode(value, encoding='utf-8'):
    """Escapes everything outside the unreserved set.

    Non-ASCII characters are escaped byte-wise after encoding, spaces
    become `%20`.

    :param value: text (or raw bytes) to escape
    :type value: str or bytes

    :param encoding: charset used for non-ASCII characters
    :type encoding: str

    :raises UnencodableTextError: when `value` has characters `encoding` can't
        represent (including lone surrogates)

    :rtype: str
    """
    if isinstance(value, bytes):
        return quote(value, safe='')

    if UNRESERVED.issuperset(value):
        return value

    try:
        return quote(value, safe='', encoding=encoding, errors='strict')
    except UnicodeEncodeError as ex:
        raise UnencodableTextError(
            'Text is not representable in %s' % encoding, value, ex.start,
            desc=ex.reason
        ) from ex


def percent_decode_to_bytes(value, encoding='utf-8'):
    """Unescapes `value` into raw bytes, `+` is read as a space.

    Unescaped characters are kept as their `encoding` bytes.

    :type value: str
    :type encoding: str
    :rtype: bytes
    """
    match = MALFORMED_ESCAPE.search(value)

    if match:
        log.debug('rejecting malformed escape at %s in %r', match.start(), value)

        raise MalformedEscapeError(
            'Malformed percent escape', value, match.start(),
            desc=value[match.start():match.start() + 3]
        )

    try:
        data = value.replace('+', ' ').encode(encoding)
    except UnicodeEncodeError as ex:
        raise MalformedEscapeError(
            'Unescaped text is not representable in %s' % encoding, value, ex.start,
            desc=ex.reason
        ) from ex

    return unquote_to_bytes(data)


def percent_decode(value, encoding='utf-8', errors='replace'):
    """Unescapes `value` into text.

    Decoded bytes are interpreted with `encoding`, invalid sequences are
    handled according to `errors` ('replace' substitutes U+FFFD, 'strict'
    raises `MalformedEscapeError`).

    :type value: str
    :type encoding: str
    :type errors: str

    :rtype: str
    """
    if '%' not in value:
        return value.replace('+', ' ')

    data = percent_decode_to_bytes(value, encoding)

    try:
        return data.decode(encoding, errors)
    except UnicodeDecodeError as ex:
        raise MalformedEscapeError(
            'Escaped bytes are not valid %s' % encoding, value,
            byte_position(value, ex.start, encoding),
            desc=ex.reason
        ) from ex


def byte_position(value, index, encoding='utf-8'):
    """Maps an offset into the decoded bytes back to an offset in `value`."""
    offset = 0
    pos = 0

    while pos < len(value):
        if offset >= index:
            return pos

        if value[pos] == '%':
            pos += 3
            offset += 1
        else:
            offset += len(value[pos].encode(encoding, 'replace'))
            pos += 1

    return pos
