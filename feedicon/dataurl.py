'''
Decode icons embedded as data:URI, see
  https://developer.mozilla.org/en-US/docs/Web/HTTP/Basics_of_HTTP/Data_URIs#syntax

  data:[<mediatype>][;base64],<data>
'''
import base64
import re
import urllib.parse
from .exceptions import MalformedDataURLError, EmptyContentError
from .models import Icon
from .utilities import make_sha256_hash, truncate

__all__ = [
    'DATA_URL_PREFIX',
    'is_data_url',
    'parse_image_data_url',
]

DATA_URL_PREFIX = 'data:'
MAX_QUOTED_LENGTH = 80  # Chars of the offending value shown in errors

RE_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def is_data_url(value):
    return value.startswith(DATA_URL_PREFIX)


def _quote(value):
    return repr(truncate(value, MAX_QUOTED_LENGTH))


def _unescape(data):
    '''
    Query unescape: plus signs become spaces, %XX become bytes
    '''
    if RE_BAD_ESCAPE.search(data):
        raise ValueError('invalid percent escape')
    return urllib.parse.unquote_to_bytes(data.replace('+', ' '))


def parse_image_data_url(value):
    if not is_data_url(value):
        raise MalformedDataURLError(
            f'invalid data URL (missing data:) {_quote(value)}', value=value)

    rest = value[len(DATA_URL_PREFIX):]
    header, comma, data = rest.partition(',')
    if not comma:
        raise MalformedDataURLError(
            f'invalid data URL (no comma) {_quote(value)}', value=value)

    # A leading semicolon leaves everything in the media type
    semicolon = header.find(';')
    if semicolon > 0:
        media_type, encoding = header[:semicolon], header[semicolon+1:]
    else:
        media_type, encoding = header, ''

    if not media_type.startswith('image/'):
        raise MalformedDataURLError(
            f'invalid media type {media_type!r}', value=value)

    if encoding == 'base64':
        # Line breaks of wrapped payloads are ignored
        data = data.replace('\r', '').replace('\n', '')
        try:
            blob = base64.b64decode(data, validate=True)
        except ValueError as exc:
            raise MalformedDataURLError(
                f'invalid data {_quote(value)} ({exc})', value=value) from exc
    elif encoding == '':
        try:
            blob = _unescape(data)
        except ValueError as exc:
            raise MalformedDataURLError(
                f'unable to decode data URL {_quote(value)}', value=value) from exc
    else:
        raise MalformedDataURLError(
            f'unsupported data URL encoding {encoding!r}', value=value)

    if not blob:
        raise EmptyContentError(f'empty data URL {_quote(value)}', value=value)

    return Icon(hash=make_sha256_hash(blob), mime_type=media_type, content=blob)
