from flask import jsonify, request, session

from bookshelf import db
from bookshelf.blueprints.auth import auth_bp
from bookshelf.models.user import User


def _credentials():
    data = request.get_json(silent=True) or {}
    username = data.get("username") or request.form.get("username")
    password = data.get("password") or request.form.get("password")
    return username, password


def _check_credentials(username, password):
    if not username or not str(username).strip():
        return {"success": False, "error": "username_required"}, 400
    if not password or not str(password).strip():
        return {"success": False, "error": "password_required"}, 400
    return None


@auth_bp.route("/login", methods=["POST"])
def login():
    username, password = _credentials()
    problem = _check_credentials(username, password)
    if problem:
        return jsonify(problem[0]), problem[1]
    existing = User.query.filter_by(username=username.strip()).first()
    if existing is None:
        return jsonify({"success": False, "error": "user_not_found"}), 404
    if not existing.check_password(password):
        return jsonify({"success": False, "error": "invalid_credentials"}), 401
    session["user_id"] = str(existing.id)
    return jsonify({"success": True, "user_id": str(existing.id)}), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    session.pop("user_id", None)
    return jsonify({"success": True}), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    username, password = _credentials()
    problem = _check_credentials(username, password)
    if problem:
        return jsonify(problem[0]), problem[1]
    if len(str(password)) < 6:
        return jsonify({"success": False, "error": "password_too_short"}), 400
    existing = User.query.filter_by(username=username.strip()).first()
    if existing is not None:
        return jsonify({"success": False, "error": "username_taken"}), 409
    u = User(username=username.strip())
    u.set_password(password)
    db.session.add(u)
    db.session.commit()
    session["user_id"] = str(u.id)
    return jsonify({"success": True, "user_id": str(u.id)}), 201


@auth_bp.route("/me", methods=["GET"])
def me():
    user_id = session.get("user_id")
    if not user_id:
        return jsonify({"success": False, "error": "login_required"}), 401
    user = db.session.get(User, int(user_id)) if str(user_id).isdigit() else None
    if user is None:
        session.pop("user_id", None)
        return jsonify({"success": False, "error": "login_required"}), 401
    return jsonify({"success": True, "user": {"id": str(user.id), "username": user.username}}), 200
