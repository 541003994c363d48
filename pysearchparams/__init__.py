from pysearchparams.codec import percent_decode, percent_decode_to_bytes, percent_encode
from pysearchparams.exceptions import MalformedEscapeError, SearchParamsError, UnencodableTextError
from pysearchparams.params import ParamMap, decode, encode, split_pairs

__version__ = '1.0.0'

__all__ = [
    'ParamMap',
    'decode',
    'encode',
    'split_pairs',

    'percent_decode',
    'percent_decode_to_bytes',
    'percent_encode',

    'MalformedEscapeError',
    'SearchParamsError',
    'UnencodableTextError'
]
