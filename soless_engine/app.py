"""
Application factory
"""

# Python Packages
from flask import Flask
from flask_cors import CORS

# Local Imports
from .base import constants
from .config.swagger import build_api
from .config.urls import URLs
from .config.container import AppContainer, build_container, EXTENSION_KEY
from .util.responses import error_response, too_large_error





def create_app(container: AppContainer = None):
    """
    Application Factory

    Args:
        container: pre-built services (tests); built from constants if None.
    """

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV == "development"

    # Uploads over the limit are rejected before they reach a handler
    app.config["MAX_CONTENT_LENGTH"] = constants.MAX_UPLOAD_BYTES + 64 * 1024

    # Services
    app.extensions[EXTENSION_KEY] = container or build_container()

    # Enable CORS
    CORS(app)

    # Initialize Swagger
    api = build_api()
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces(api)

    # Basic health check endpoint
    @app.get("/health")
    def health():
        gateway = app.extensions[EXTENSION_KEY].gateway
        return {"status": "ok", "mode": gateway.mode}, 200

    @app.errorhandler(413)
    def too_large(_error):
        return error_response(too_large_error())

    return app
