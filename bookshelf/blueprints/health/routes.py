from flask import current_app, jsonify

from bookshelf.blueprints.health import health_bp
from bookshelf.errors import StorageUnavailable
from bookshelf.services.storage_health import storage_health


@health_bp.route("/storage", methods=["GET"])
def storage_health_route():
    try:
        result = storage_health()
    except StorageUnavailable as exc:
        current_app.logger.error("Storage health check failed: %s", exc.details or exc)
        return jsonify({"status": "unavailable", "error": exc.message, "details": exc.details}), 503
    return jsonify(result), 200
