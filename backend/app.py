import json
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from backend.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(app):
    # No-op when the root logger already has handlers, e.g. under pytest
    logging.basicConfig(format=LOG_FORMAT)
    app.logger.setLevel(app.config["LOG_LEVEL"])


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Keep the headers werkzeug sets, e.g. Allow on 405
        response = error.get_response()
        response.data = json.dumps({"error": error.name, "message": error.description})
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        body = {"error": "Internal Server Error", "message": "An unexpected error occurred."}
        return jsonify(body), 500


def register_routes(app):
    @app.before_request
    def log_api_request():
        if request.path.startswith("/api/"):
            app.logger.info("%s %s", request.method, request.path)

    @app.route("/")
    def hello_world():
        return "<p>Hello world</p>"

    @app.route("/api/data", methods=["GET"])
    def get_data():
        data = {"message": app.config["DATA_MESSAGE"]}
        return jsonify(data)

    @app.route("/healthz", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})


def create_app(config=None):
    """Build the Flask app.

    Settings are read from the environment through :class:`Settings`;
    ``config`` is an optional mapping applied on top, mainly for tests.
    """
    app = Flask(__name__)
    app.config.from_mapping(Settings().model_dump())
    if config:
        app.config.update(config)

    configure_logging(app)
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    register_routes(app)
    register_error_handlers(app)

    app.logger.debug("App created (CORS origins: %s)", app.config["CORS_ORIGINS"])
    return app


# Gunicorn entrypoint: gunicorn backend.app:app
app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
