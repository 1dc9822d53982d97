'''
HTML parsers and icon link discovery
'''

from html.parser import HTMLParser
from .exceptions import ParseError

__all__ = [
    'ICON_QUERIES',
    'Element',
    'IconLinkFinder',
    'find_icon_url',
]

# Values of link[rel] to look for, most wanted first. Values
#   are compared verbatim so case variants are listed too
ICON_QUERIES = (
    'shortcut icon',
    'Shortcut Icon',
    'icon shortcut',
    'icon',
)


class Element(object):

    def __init__(self, tag, attrs):
        self.tag = tag
        # Attribute names are already lowercase, first one wins like browsers do
        self.attrs = {}
        for name, value in attrs:
            self.attrs.setdefault(name, value)

    def attribute(self, name):
        '''
        Return attribute value, '' for valueless attributes
          or None if the attribute is missing
        '''
        if name not in self.attrs:
            return None
        return self.attrs[name] or ''

    def __repr__(self):
        return '<Element %s %r>' % (self.tag, self.attrs)


class BaseParser(HTMLParser):

    def handle_starttag(self, tag, attrs):
        handler = getattr(self, 'start_%s' % tag, None)
        if handler:
            handler(attrs)
        else:
            self.unknown_starttag(tag, attrs)

    def unknown_starttag(self, tag, attrs):
        pass


class IconLinkFinder(BaseParser):
    '''
    Collect the link elements of a page in document order
    '''

    def __init__(self):
        BaseParser.__init__(self)
        self.links = []

    def start_link(self, attrs):
        self.links.append(Element('link', attrs))

    def find(self, rel):
        '''
        Return link elements whose rel attribute is exactly rel
        '''
        return [e for e in self.links if e.attribute('rel') == rel]


def _parse(parser, data):
    try:
        parser.feed(data)
        parser.close()
    except AssertionError as exc:
        raise ParseError(f'unable to read document ({exc})') from exc


def find_icon_url(data):
    '''
    Return the icon URL declared by the page or '' if none is found
    '''
    p = IconLinkFinder()
    _parse(p, data)

    icon_url = ''
    for rel in ICON_QUERIES:
        # Last element with an href wins for a given query
        for element in p.find(rel):
            href = element.attribute('href')
            if href is not None:
                icon_url = href.strip()
        if icon_url:
            break

    return icon_url
