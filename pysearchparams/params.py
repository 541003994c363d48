from pysearchparams.codec import percent_decode, percent_encode
from pysearchparams.exceptions import MalformedEscapeError, UnencodableTextError

import logging

log = logging.getLogger(__name__)

# Parameter name -> value, both decoded
ParamMap = dict


def iter_segments(qs):
    """Yields the non-empty `&`-separated segments of `qs`."""
    for segment in qs.split('&'):
        if not segment:
            log.debug('skipping empty segment')
            continue

        yield segment


def split_pairs(qs):
    """Splits a raw query string into `(key, value)` pairs.

    Empty segments are skipped, pairs without `=` get an empty value. Nothing
    is unescaped here.

    :type qs: str
    :rtype: list of (str, str)
    """
    pairs = []

    for segment in iter_segments(qs):
        key, _, value = segment.partition('=')
        pairs.append((key, value))

    return pairs


def decode(qs, encoding='utf-8', errors='replace', drop_empty_keys=False):
    """Parses a query string into a `ParamMap`.

    `qs` must already be isolated from the url (no leading `?`, no fragment).
    Repeated keys overwrite earlier values.

    :param qs: query string
    :type qs: str

    :param drop_empty_keys: skip pairs with an empty key (e.g. "=value")
    :type drop_empty_keys: bool

    :raises MalformedEscapeError: when a `%` isn't followed by two hex digits,
        or the text can't be decoded in `encoding`

    :rtype: dict
    """
    params = ParamMap()

    if not qs:
        return params

    for segment in iter_segments(qs):
        key, _, value = segment.partition('=')

        if drop_empty_keys and not key:
            log.debug('dropping pair with empty key (value: %r)', value)
            continue

        try:
            name = percent_decode(key, encoding, errors)
            params_value = percent_decode(value, encoding, errors)
        except MalformedEscapeError as ex:
            ex.desc = '%s (in pair %r)' % (ex.desc, segment)
            raise

        if name in params:
            log.debug('overwriting duplicate key %r', name)

        params[name] = params_value

    return params


def encode(params, encoding='utf-8', sort=False):
    """Builds a query string from `params`.

    Keys and values are fully escaped, empty values keep their trailing `=`.

    :param params: parameters
    :type params: dict

    :param sort: order pairs case-insensitively instead of by iteration order
    :type sort: bool

    :raises UnencodableTextError: when a key or value can't be represented in
        `encoding`

    :rtype: str
    """
    if not params:
        return ''

    segments = []

    for key, value in params.items():
        try:
            segments.append(percent_encode(key, encoding) + '=' + percent_encode(value, encoding))
        except UnencodableTextError as ex:
            ex.desc = '%s (for key %r)' % (ex.desc, key)
            raise

    if sort:
        segments.sort(key=lambda segment: segment.lower())

    log.debug('encoded %d parameters', len(segments))
    return '&'.join(segments)
