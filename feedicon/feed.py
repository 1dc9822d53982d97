'''
Find the icon of a feed
'''

from flask import current_app as app
import feedparser
from .fetcher import fetch_document
from .finder import find_icon
from .models import FetchOptions

__all__ = [
    'find_feed_icon',
    'get_feed_icon',
    'get_feed_alternate_link',
]


def find_feed_icon(feed_url, options=None):
    '''
    Fetch the feed at feed_url and return the Icon of its site
    '''
    options = options or FetchOptions.from_config(app.config)

    soup = feedparser.parse(fetch_document(feed_url, options))
    # Got parsing error?
    if hasattr(soup, 'bozo') and soup.bozo:
        app.logger.debug(
            "%s caused a parser error (%s), tried to parse it anyway" % (
                feed_url, soup.bozo_exception))

    # Prefer alternate link since feed_url could point
    #   to Feed Burner or similar services
    website_url = get_feed_alternate_link(soup.feed) or feed_url
    return find_icon(website_url, get_feed_icon(soup.feed), options)


def get_feed_alternate_link(feed_dict):
    return feed_dict.get('link', '')


def get_feed_icon(feed_dict):
    try:
        atom_icon = feed_dict['icon']
    except KeyError:
        atom_icon = ''

    try:
        rss_icon = feed_dict['image']['href']
        rss_icon_width = feed_dict['image']['width']
        rss_icon_height = feed_dict['image']['height']
    except KeyError:
        rss_icon = ''
        rss_icon_width = 0
        rss_icon_height = 0

    # Check if square
    if rss_icon and rss_icon_width and rss_icon_height and (rss_icon_width == rss_icon_height):
        return rss_icon

    return atom_icon
