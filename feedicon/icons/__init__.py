'''
Icon retrieval blueprint
'''

from flask import Blueprint

bp = Blueprint('icons', __name__)

# Make routes importable directly from the blueprint
from feedicon.icons import routes  # noqa
