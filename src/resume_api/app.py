# src/resume_api/app.py
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from bson import ObjectId
from flask import Flask, jsonify
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config import Config
from .db import get_client, ping_database, resumes_collection
from .errors import register_error_handlers
from .repository.resume_repo import ResumeStore
from .routes.resume_routes import resumes_bp
from .services.resume_service import ResumeHandler, utc_now

# Configure basic logging
logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(threadName)s - %(message)s')
logger = logging.getLogger('RESUME_API')
logging.getLogger('pymongo').setLevel(logging.WARNING)
logging.getLogger('pymongo.server_monitoring').setLevel(logging.WARNING)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a Z suffix, e.g. 2024-05-01T10:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class ResumeJSONProvider(DefaultJSONProvider):
    sort_keys = False

    @staticmethod
    def default(o: Any):
        if isinstance(o, datetime):
            return format_timestamp(o)
        if isinstance(o, ObjectId):
            return str(o)
        return DefaultJSONProvider.default(o)


def apply_security_headers(response):
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


def create_app(
    config_overrides: Optional[Mapping[str, Any]] = None,
    store=None,
    clock: Callable[[], datetime] = utc_now,
) -> Flask:
    """Builds the Flask app.

    `store` defaults to the MongoDB-backed ResumeStore; tests pass their own.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.json = ResumeJSONProvider(app)

    CORS(app, origins=[app.config["FRONTEND_URL"]], supports_credentials=True)
    Limiter(
        get_remote_address,
        app=app,
        application_limits=[f"{app.config['RATE_LIMIT_MAX']} per {app.config['RATE_LIMIT_WINDOW_MINUTES']} minutes"],
        storage_uri=app.config["RATELIMIT_STORAGE_URI"],
    )
    app.after_request(apply_security_headers)
    register_error_handlers(app)

    if store is None:
        client = get_client(app.config["MONGODB_URI"], app.config["MONGO_TIMEOUT_MS"])
        store = ResumeStore(resumes_collection(app.config["DB_NAME"], client))
    app.extensions["resume_handler"] = ResumeHandler(store, clock=clock)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "OK", "timestamp": utc_now()}), 200

    app.register_blueprint(resumes_bp)
    return app


def main():
    app = create_app()
    ping_database(get_client(app.config["MONGODB_URI"], app.config["MONGO_TIMEOUT_MS"]))
    port = app.config["PORT"]
    logger.info("Server running on port %s", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
