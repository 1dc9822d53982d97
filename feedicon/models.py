'''
Icon and fetch option values
'''
from collections import namedtuple
from .utilities import make_data_uri

__all__ = [
    'Icon',
    'FetchOptions',
]


class Icon(namedtuple('Icon', ['hash', 'mime_type', 'content'])):
    '''
    A retrieved icon. Hash is the SHA-256 hex digest of content
    '''
    __slots__ = ()

    @property
    def size(self):
        return len(self.content)

    def as_data_uri(self):
        return make_data_uri(self.mime_type, self.content)

    def __repr__(self):
        # Keep binary content out of log lines
        return f'<Icon {self.hash[:12]} {self.mime_type or "?"} {self.size} bytes>'


class FetchOptions(namedtuple('FetchOptions', ['user_agent',
                                               'fetch_via_proxy',
                                               'allow_self_signed_certificates',
                                               'timeout'])):
    '''
    How outbound requests are made, passed by value to every fetch
    '''
    __slots__ = ()

    @classmethod
    def from_config(cls, config, **overrides):
        '''
        Build options from application config settings. Overrides
          set to None are ignored
        '''
        options = cls(
            user_agent=config['USER_AGENT'],
            fetch_via_proxy=config['FETCH_VIA_PROXY'],
            allow_self_signed_certificates=config['ALLOW_SELF_SIGNED_CERTIFICATES'],
            timeout=config['FETCH_TIMEOUT'])
        return options._replace(**{k: v for k, v in overrides.items() if v is not None})
