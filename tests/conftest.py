'''
Shared fixtures. Network access is replaced by a fake web
  registered with the web fixture
'''
import pytest
import requests
from requests.exceptions import RequestException
from feedicon import create_app, TestingConfig


class FakeResponse(object):

    def __init__(self, content=b'', status_code=200, headers=None, read_error=None):
        self._content = content
        self.status_code = status_code
        self.headers = headers or {}
        self.read_error = read_error
        self.closed = False

    @property
    def content(self):
        if self.read_error:
            raise self.read_error
        return self._content

    @property
    def text(self):
        return self.content.decode('utf-8')

    def close(self):
        self.closed = True


class FakeWeb(object):
    '''
    Map URLs to responses or exceptions and record requests
    '''

    def __init__(self):
        self.pages = {}
        self.requests = []

    def add(self, url, content=b'', status_code=200, content_type=None, **kwargs):
        headers = {'Content-Type': content_type} if content_type else {}
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.pages[url] = FakeResponse(content, status_code, headers, **kwargs)
        return self.pages[url]

    def fail(self, url, exc):
        self.pages[url] = exc

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        try:
            page = self.pages[url]
        except KeyError:
            raise requests.exceptions.ConnectionError(f'no route to {url}')
        if isinstance(page, RequestException):
            raise page
        return page

    @property
    def urls(self):
        return [url for url, _ in self.requests]


@pytest.fixture()
def app():
    app = create_app(config_class=TestingConfig)
    with app.app_context():
        yield app


@pytest.fixture()
def web(monkeypatch):
    web = FakeWeb()
    monkeypatch.setattr(requests, 'get', web.get)
    return web


@pytest.fixture()
def client(app):
    return app.test_client()
