from flask import jsonify, request

from bookshelf.blueprints import failure_response, json_object_body
from bookshelf.blueprints.book_tracking import book_tracking_bp
from bookshelf.errors import IdentityRequired, ValidationError
from bookshelf.services.book_tracking_service import BookTrackingService
from bookshelf.services.identity import resolve_user_id


book_tracking_service = BookTrackingService()


@book_tracking_bp.route("", methods=["GET"])
def list_progress():
    try:
        user_id = resolve_user_id()
        records = book_tracking_service.list_progress(user_id, request.args.get("bookId"))
    except IdentityRequired as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to fetch reading progress", exc)
    return jsonify({"success": True, "records": [r.to_dict() for r in records]}), 200


@book_tracking_bp.route("", methods=["POST"])
def record_progress():
    try:
        data = json_object_body()
        user_id = resolve_user_id(data.get("user_id"))
        record = book_tracking_service.record_progress(user_id, data)
    except (ValidationError, IdentityRequired) as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to update reading progress", exc)
    return jsonify({"success": True, "record": record.to_dict() if record else None}), 200
