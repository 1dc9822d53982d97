import posixpath
import urllib.parse
from hashlib import sha256
import base64
from .exceptions import MalformedURLError

# --------------------
# String utilities
# --------------------


def truncate(value, max_length):
    """
    Return a truncated string for value if value length is > max_length
    """
    if len(value) < max_length:
        return value
    return value[:max_length-1] + '…'


def make_data_uri(content_type, data):
    """
    Return data as a data:URI scheme
    """
    return "data:%s;base64,%s" % (content_type,
                                  base64.standard_b64encode(data).decode('utf-8'))


# --------------------
# Hash functions
# --------------------

def make_sha256_hash(data):
    '''
    Hex digest of raw bytes, used as icon identity
    '''
    return sha256(data).hexdigest()

# --------------------
# URL utilities
# --------------------


def _split_url(url):
    try:
        parts = urllib.parse.urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError as exc:
        raise MalformedURLError(f'unable to parse URL {url!r} ({exc})', url=url) from exc
    return parts


def _default_scheme(url):
    # Protocol-relative URL are taken as https
    if url.startswith('//'):
        return 'https:' + url
    return url


def check_absolute_url(url):
    '''
    Return url if it is an absolute http(s) address, raise
      MalformedURLError otherwise
    '''
    parts = _split_url(url)
    if parts.scheme.lower() not in ('http', 'https') or not parts.hostname:
        raise MalformedURLError(f'{url!r} is not an absolute web address', url=url)
    return url


def root_url(url):
    '''
    Return scheme and host of url, e.g. https://example.com/
    '''
    url = _default_scheme(url)
    parts = _split_url(url)
    if not (parts.scheme and parts.hostname):
        raise MalformedURLError(f'unable to find root URL of {url!r}', url=url)
    host = parts.hostname
    if ':' in host:
        host = f'[{host}]'  # IPv6
    if parts.port:
        host = f'{host}:{parts.port}'
    return f'{parts.scheme}://{host}/'


def join_base_url_and_path(base_url, path):
    parts = _split_url(base_url)
    if not (parts.scheme and parts.netloc):
        raise MalformedURLError(
            f'unable to join base URL {base_url!r} and path {path!r}', url=base_url)
    joined_path = posixpath.normpath(posixpath.join(parts.path or '/', path))
    return urllib.parse.urlunsplit(
        (parts.scheme, parts.netloc, joined_path, parts.query, parts.fragment))


def absolute_url(base_url, url):
    '''
    Resolve url against base_url. Absolute URL are returned as they are,
      protocol-relative ones take the base scheme
    '''
    try:
        resolved = urllib.parse.urljoin(_default_scheme(base_url), url)
    except ValueError as exc:
        raise MalformedURLError(
            f'unable to convert {url!r} to absolute URL ({exc})', url=url) from exc
    return check_absolute_url(resolved)


def generate_icon_url(website_url, icon_url):
    '''
    Return the absolute URL of the icon, falling back to the
      site /favicon.ico if icon_url is empty
    '''
    icon_url = icon_url.strip()
    if not icon_url:
        return check_absolute_url(
            join_base_url_and_path(root_url(website_url), 'favicon.ico'))
    return absolute_url(website_url, icon_url)
