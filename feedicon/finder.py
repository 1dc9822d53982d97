'''
Find the icon of a website
'''

from flask import current_app as app
from .dataurl import is_data_url, parse_image_data_url
from .fetcher import fetch_html_document, download_icon
from .markup import find_icon_url
from .models import FetchOptions
from .utilities import root_url, generate_icon_url

__all__ = [
    'find_icon',
    'find_icon_url_in_page',
]


def find_icon_url_in_page(website_url, options):
    '''
    Scan the site home page for an icon link, '' if none is declared
    '''
    url = root_url(website_url)
    app.logger.debug("looking for icon in web page %s" % url)
    return find_icon_url(fetch_html_document(url, options))


def find_icon(website_url, feed_icon_url='', options=None):
    '''
    Return the Icon for website_url. A feed supplied icon URL
      is preferred over the one declared by the site pages
    '''
    options = options or FetchOptions.from_config(app.config)

    if not feed_icon_url:
        feed_icon_url = find_icon_url_in_page(website_url, options)

    if is_data_url(feed_icon_url):
        return parse_image_data_url(feed_icon_url)

    icon_url = generate_icon_url(website_url, feed_icon_url)
    app.logger.debug("using icon URL %s for %s" % (icon_url, website_url))
    return download_icon(icon_url, options)
