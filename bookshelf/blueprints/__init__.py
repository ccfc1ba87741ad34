from flask import current_app, jsonify, request

from bookshelf.errors import BookshelfError, ValidationError


def json_object_body():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body")
    return data


def failure_response(error, exc):
    current_app.logger.error("%s: %s", error, exc)
    if isinstance(exc, BookshelfError):
        details = exc.details or exc.message
    else:
        details = str(exc) or "Unknown error"
    return jsonify({"success": False, "error": error, "details": details}), 500
