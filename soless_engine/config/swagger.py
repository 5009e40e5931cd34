""" Swagger configuration defined here... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





def build_api() -> Api:
    """
    A fresh Api per application, so several apps (tests) can coexist.
    """

    if constants.APP_ENV != "production":
        doc = '/swagger/'
    else:
        doc = False

    # Swagger Configuration
    return Api(
        title = constants.SWAGGER_APP_PROPS['name'],
        version = constants.SWAGGER_APP_PROPS['version'],
        description = constants.SWAGGER_APP_PROPS['description'],
        prefix = '/api',
        doc = doc
    )
