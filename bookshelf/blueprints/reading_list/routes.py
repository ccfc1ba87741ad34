from flask import jsonify, request

from bookshelf.blueprints import failure_response, json_object_body
from bookshelf.blueprints.reading_list import reading_list_bp
from bookshelf.errors import IdentityRequired, NotFound, ValidationError
from bookshelf.services.identity import resolve_user_id
from bookshelf.services.reading_list_service import ReadingListService


reading_list_service = ReadingListService()

_CLIENT_ERRORS = (ValidationError, IdentityRequired, NotFound)


@reading_list_bp.route("", methods=["GET"])
def list_items():
    try:
        user_id = resolve_user_id()
        entries = reading_list_service.list_items(
            user_id, request.args.get("bookId"), request.args.get("status")
        )
    except IdentityRequired as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to fetch reading list", exc)
    return jsonify({"success": True, "items": [e.to_dict() for e in entries]}), 200


@reading_list_bp.route("", methods=["POST"])
def add_item():
    try:
        data = json_object_body()
        user_id = resolve_user_id(data.get("user_id"))
        entry = reading_list_service.add_item(user_id, data)
    except _CLIENT_ERRORS as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to save reading list item", exc)
    return jsonify({"success": True, "item": entry.to_dict()}), 200


@reading_list_bp.route("", methods=["PATCH"])
def update_item():
    try:
        data = json_object_body()
        user_id = resolve_user_id(data.get("user_id"))
        entry = reading_list_service.change_status(user_id, data)
    except _CLIENT_ERRORS as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to update reading-list item", exc)
    return jsonify({"success": True, "item": entry.to_dict()}), 200


@reading_list_bp.route("", methods=["DELETE"])
def delete_item():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        user_id = resolve_user_id(data.get("user_id"))
        deleted = reading_list_service.remove_item(
            user_id,
            entry_id=request.args.get("id") or data.get("id"),
            book_id=request.args.get("bookId") or data.get("book_id") or data.get("bookId"),
        )
    except _CLIENT_ERRORS as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to delete reading-list item", exc)
    return jsonify({"success": True, "deleted": deleted}), 200


@reading_list_bp.route("/suggestions", methods=["GET"])
def suggestions():
    try:
        user_id = resolve_user_id()
        items = reading_list_service.suggest(user_id)
    except IdentityRequired as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except Exception as exc:
        return failure_response("Failed to load reading suggestions", exc)
    return jsonify({"success": True, "suggestions": items}), 200
