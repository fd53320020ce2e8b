"""Utility functions for Cloud Functions."""

from common import config, utils
from firebase_functions import https_fn

# CORS constants
_CORS_HEADERS = {
  "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
  "Access-Control-Allow-Headers": "Content-Type",
}


def _allowed_origins() -> frozenset[str]:
  """Return allowed origins based on environment (emulator vs prod)."""
  if utils.is_emulator():
    return config.EMULATOR_ORIGINS
  return config.PROD_ORIGINS


def get_cors_headers(req: https_fn.Request | None) -> dict[str, str]:
  """Return CORS headers only for allowed origins."""
  if not req:
    return {}

  origin = req.headers.get("Origin")
  if origin and origin.rstrip("/") in _allowed_origins():
    return {**_CORS_HEADERS, "Access-Control-Allow-Origin": origin}
  return {}


def handle_cors_preflight(req: https_fn.Request) -> https_fn.Response | None:
  """Handle OPTIONS requests for CORS preflight."""
  if req.method == "OPTIONS":
    cors_headers = get_cors_headers(req) or _CORS_HEADERS
    return https_fn.Response(
      "",
      status=204,
      headers=cors_headers,
    )
  return None


def handle_health_check(req: https_fn.Request) -> https_fn.Response | None:
  """Handle health check requests."""
  if req.path == "/__/health":
    cors_headers = get_cors_headers(req)
    return https_fn.Response("OK", status=200, headers=cors_headers)
  return None


def add_cors_headers(
  req: https_fn.Request,
  resp: https_fn.Response,
) -> https_fn.Response:
  """Copy CORS headers for the request origin onto a response."""
  for name, value in get_cors_headers(req).items():
    resp.headers[name] = value
  return resp
