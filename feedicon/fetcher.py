'''
The icon fetcher
'''

from flask import current_app as app
import requests
from requests.exceptions import RequestException
from .exceptions import (TransportError, ServerFailure, ReadError, EmptyContentError)
from .models import Icon
from .utilities import make_sha256_hash
from . import __version__

__all__ = [
    'fetch_url',
    'download_icon',
    'fetch_html_document',
    'fetch_document',
]

USER_AGENT = ('Feedicon/%d.%d.%d%s' % __version__)


def has_server_failure(response):
    return response.status_code >= 500


def _get_proxies(url, options):
    if not options.fetch_via_proxy:
        return None
    proxy_url = app.config.get('HTTP_PROXY_URL')
    if not proxy_url:
        app.logger.warning(
            "asked to fetch %s via proxy but no proxy is configured, "
            "using a direct connection" % url)
        return None
    return {'http': proxy_url, 'https': proxy_url}


def fetch_url(url, options):
    '''
    Issue a GET request for url as configured by options. Response body
      is not read yet
    '''

    request_headers = {
        'User-Agent': options.user_agent or USER_AGENT
    }

    app.logger.debug("fetching %s" % url)
    try:
        response = requests.get(url,
                                timeout=options.timeout,
                                headers=request_headers,
                                proxies=_get_proxies(url, options),
                                verify=not options.allow_self_signed_certificates,
                                stream=True)
    except RequestException as exc:
        app.logger.debug(
            "tried to fetch %s but got %s" % (url, exc.__class__.__name__))
        raise TransportError(f'unable to fetch {url} ({exc})', url=url) from exc

    if has_server_failure(response):
        response.close()
        raise ServerFailure(f'unable to fetch {url}: status={response.status_code}',
                            url=url, status=response.status_code)
    return response


def _read(url, response, attribute):
    try:
        return getattr(response, attribute)
    except RequestException as exc:
        raise ReadError(f'unable to read response from {url} ({exc})', url=url) from exc
    finally:
        response.close()


def download_icon(url, options):
    response = fetch_url(url, options)
    body = _read(url, response, 'content')

    if not body:
        raise EmptyContentError(f'downloaded icon is empty, iconURL={url}', url=url)

    icon = Icon(hash=make_sha256_hash(body),
                mime_type=response.headers.get('Content-Type', ''),
                content=body)
    app.logger.debug("downloaded %r from %s" % (icon, url))
    return icon


def fetch_html_document(url, options):
    '''
    Return the page at url as text
    '''
    response = fetch_url(url, options)
    return _read(url, response, 'text')


def fetch_document(url, options):
    '''
    Return the resource at url as raw bytes
    '''
    response = fetch_url(url, options)
    return _read(url, response, 'content')
