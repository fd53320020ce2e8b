"""Web blueprint shared by all route modules."""

from __future__ import annotations

import flask

web_bp = flask.Blueprint('web', __name__)
