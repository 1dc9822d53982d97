'''
Icon fetcher tests
'''
import pytest
import requests
from feedicon import fetcher
from feedicon.exceptions import (ErrorKind, TransportError, ServerFailure,
                                 ReadError, EmptyContentError)
from feedicon.models import FetchOptions
from feedicon.utilities import make_sha256_hash

ICON_URL = 'https://example.com/favicon.ico'


@pytest.fixture()
def options(app):
    return FetchOptions.from_config(app.config)


def test_download_icon(web, options):
    web.add(ICON_URL, b'\x00\x00\x01\x00', content_type='image/x-icon')
    icon = fetcher.download_icon(ICON_URL, options)
    assert icon.content == b'\x00\x00\x01\x00'
    assert icon.mime_type == 'image/x-icon'
    assert icon.hash == make_sha256_hash(b'\x00\x00\x01\x00')
    assert web.pages[ICON_URL].closed


def test_download_icon_without_content_type(web, options):
    web.add(ICON_URL, b'GIF89a')
    assert fetcher.download_icon(ICON_URL, options).mime_type == ''


def test_same_content_same_hash(web, options):
    web.add(ICON_URL, b'icon')
    web.add('https://example.org/favicon.ico', b'icon')
    web.add('https://example.net/favicon.ico', b'other icon')
    a = fetcher.download_icon(ICON_URL, options)
    b = fetcher.download_icon('https://example.org/favicon.ico', options)
    c = fetcher.download_icon('https://example.net/favicon.ico', options)
    assert a.hash == b.hash
    assert a.hash != c.hash


@pytest.mark.parametrize("status", [500, 502, 503])
def test_server_failure(web, options, status):
    web.add(ICON_URL, b'Unavailable', status_code=status)
    with pytest.raises(ServerFailure) as exc_info:
        fetcher.download_icon(ICON_URL, options)
    exc = exc_info.value
    assert exc.kind == ErrorKind.SERVER_FAILURE
    assert exc.status == status
    assert exc.url == ICON_URL
    assert str(status) in str(exc)
    assert web.pages[ICON_URL].closed


@pytest.mark.parametrize("status", [200, 203, 404])
def test_not_a_server_failure(web, options, status):
    web.add(ICON_URL, b'icon', status_code=status)
    assert fetcher.download_icon(ICON_URL, options).content == b'icon'


def test_empty_content(web, options):
    web.add(ICON_URL, b'', content_type='image/x-icon')
    with pytest.raises(EmptyContentError) as exc_info:
        fetcher.download_icon(ICON_URL, options)
    assert exc_info.value.kind == ErrorKind.EMPTY_CONTENT
    assert ICON_URL in str(exc_info.value)


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError('refused'),
    requests.exceptions.Timeout('too slow'),
    requests.exceptions.SSLError('bad certificate'),
])
def test_transport_error(web, options, exc):
    web.fail(ICON_URL, exc)
    with pytest.raises(TransportError) as exc_info:
        fetcher.download_icon(ICON_URL, options)
    assert exc_info.value.kind == ErrorKind.TRANSPORT
    assert exc_info.value.url == ICON_URL
    assert exc_info.value.__cause__ is exc


def test_read_error(web, options):
    response = web.add(ICON_URL, read_error=requests.exceptions.ChunkedEncodingError('broken'))
    with pytest.raises(ReadError) as exc_info:
        fetcher.download_icon(ICON_URL, options)
    assert exc_info.value.kind == ErrorKind.READ
    assert response.closed


def test_request_options(web, options):
    web.add(ICON_URL, b'icon')
    fetcher.download_icon(ICON_URL, options._replace(user_agent='Test/1.0'))
    url, kwargs = web.requests[-1]
    assert url == ICON_URL
    assert kwargs['headers']['User-Agent'] == 'Test/1.0'
    assert kwargs['proxies'] is None
    assert kwargs['verify'] is True
    assert kwargs['timeout'] == options.timeout


def test_default_user_agent(web, options):
    web.add(ICON_URL, b'icon')
    fetcher.download_icon(ICON_URL, options._replace(user_agent=''))
    _, kwargs = web.requests[-1]
    assert kwargs['headers']['User-Agent'] == fetcher.USER_AGENT


def test_via_proxy(app, web, options):
    web.add(ICON_URL, b'icon')
    fetcher.download_icon(ICON_URL, options._replace(fetch_via_proxy=True))
    _, kwargs = web.requests[-1]
    assert kwargs['proxies'] == {'http': app.config['HTTP_PROXY_URL'],
                                 'https': app.config['HTTP_PROXY_URL']}


def test_via_proxy_not_configured(app, web, options):
    app.config['HTTP_PROXY_URL'] = None
    web.add(ICON_URL, b'icon')
    fetcher.download_icon(ICON_URL, options._replace(fetch_via_proxy=True))
    _, kwargs = web.requests[-1]
    assert kwargs['proxies'] is None


def test_allow_self_signed_certificates(web, options):
    web.add(ICON_URL, b'icon')
    fetcher.download_icon(ICON_URL, options._replace(allow_self_signed_certificates=True))
    _, kwargs = web.requests[-1]
    assert kwargs['verify'] is False


def test_fetch_html_document(web, options):
    web.add('https://example.com/', '<html><head></head></html>', content_type='text/html')
    assert fetcher.fetch_html_document('https://example.com/', options) == '<html><head></head></html>'
