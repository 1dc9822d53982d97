import flask
from flask import current_app as app
from . import bp
from ..exceptions import IconError, ErrorKind, MalformedURLError
from ..finder import find_icon
from ..utilities import check_absolute_url

DEFAULT_MIME_TYPE = 'application/octet-stream'

# Errors caused by the request values rather than the origin server
CLIENT_ERROR_KINDS = (ErrorKind.MALFORMED_URL, ErrorKind.MALFORMED_DATA_URL)


def _find_icon_or_abort():
    site = flask.request.args.get('site', '').strip()
    icon_url = flask.request.args.get('icon_url', '').strip()

    try:
        check_absolute_url(site)
    except MalformedURLError:
        flask.abort(400, 'Missing or invalid parameter site=URL')

    try:
        return find_icon(site, icon_url)
    except IconError as exc:
        app.logger.warning("could not find icon for %s (%s)" % (site, exc))
        flask.abort(400 if exc.kind in CLIENT_ERROR_KINDS else 502, str(exc))


@bp.route('/icon')
def icon():
    icon_ = _find_icon_or_abort()
    r = flask.make_response(icon_.content)
    r.headers['Content-Type'] = icon_.mime_type or DEFAULT_MIME_TYPE
    r.set_etag(icon_.hash)
    return r.make_conditional(flask.request)


@bp.route('/icon/info')
def icon_info():
    icon_ = _find_icon_or_abort()
    return flask.jsonify({
        'hash': icon_.hash,
        'mime_type': icon_.mime_type,
        'size': icon_.size,
    })
