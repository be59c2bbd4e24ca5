"""
Helix Hub API - Azure Functions entry point.

Registers the HTTP blueprints on a single FunctionApp. All routes
require a function key.
"""

import logging

import azure.functions as func

from helix_hub.config import get_settings
from helix_hub.functions import BLUEPRINTS

settings = get_settings()

# Set logging level
logging.getLogger().setLevel(settings.log_level)
logger = logging.getLogger(__name__)

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

for blueprint in BLUEPRINTS:
    app.register_functions(blueprint)

logger.info(f"Helix Hub API initialized ({settings.environment})")
