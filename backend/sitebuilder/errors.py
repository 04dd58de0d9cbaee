from flask import jsonify
from werkzeug.exceptions import HTTPException
from sitebuilder.domain.errors import BuilderError


def register_error_handlers(app):
    @app.errorhandler(BuilderError)
    def handle_builder_error(error):
        response = jsonify({
            "success": False,
            "error": error.public_error,
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({
            "success": False,
            "error": error.description,
        })
        response.status_code = error.code or 500
        return response
