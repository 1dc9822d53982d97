'''
Icon retrieval errors
'''
import enum

__all__ = [
    'ErrorKind',
    'IconError',
    'TransportError',
    'ServerFailure',
    'ReadError',
    'EmptyContentError',
    'MalformedURLError',
    'MalformedDataURLError',
    'ParseError',
]


class ErrorKind(enum.Enum):
    TRANSPORT = 'transport'
    SERVER_FAILURE = 'server-failure'
    READ = 'read'
    EMPTY_CONTENT = 'empty-content'
    MALFORMED_URL = 'malformed-url'
    MALFORMED_DATA_URL = 'malformed-data-url'
    PARSE = 'parse'


class IconError(Exception):
    '''
    Base class for every failure raised while looking for an icon.
      Subclasses set the kind and a default description
    '''
    kind = None
    description = 'unable to retrieve icon'

    def __init__(self, description=None, url=None, status=None, value=None):
        self.description = description or self.description
        self.url = url
        self.status = status
        self.value = value
        super().__init__(self.description)

    def __str__(self):
        return f'icon: {self.description}'


class TransportError(IconError):
    kind = ErrorKind.TRANSPORT
    description = 'unable to reach remote host'


class ServerFailure(IconError):
    kind = ErrorKind.SERVER_FAILURE
    description = 'remote server failed'


class ReadError(IconError):
    kind = ErrorKind.READ
    description = 'unable to read response body'


class EmptyContentError(IconError):
    kind = ErrorKind.EMPTY_CONTENT
    description = 'icon is empty'


class MalformedURLError(IconError):
    kind = ErrorKind.MALFORMED_URL
    description = 'invalid icon URL'


class MalformedDataURLError(IconError):
    kind = ErrorKind.MALFORMED_DATA_URL
    description = 'invalid data URL'


class ParseError(IconError):
    kind = ErrorKind.PARSE
    description = 'unable to read document'
