"""Cloud Functions entry point."""

import logging

from functions import web_fns

# Configure basic logging for the application (primarily for emulator visibility)
logging.basicConfig(level=logging.INFO)

# Export the web functions
web_app = web_fns.web_app
