"""Web cloud functions."""

from firebase_functions import https_fn, options
from functions import function_utils
from web.app import app


@https_fn.on_request(
  memory=options.MemoryOption.MB_512,
  timeout_sec=120,
)
def web_app(req: https_fn.Request) -> https_fn.Response:
  """Serve the VoxReel page and JSON API."""
  if health_response := function_utils.handle_health_check(req):
    return health_response
  if preflight_response := function_utils.handle_cors_preflight(req):
    return preflight_response

  with app.request_context(req.environ):
    resp = app.full_dispatch_request()
  return function_utils.add_cors_headers(req, resp)
