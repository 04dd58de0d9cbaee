from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies
from sqlalchemy.exc import IntegrityError
from sitebuilder.auth.identity import issue_token
from sitebuilder.extensions import db
from sitebuilder.models.user import User
from sitebuilder.utils.transaction import transactional

auth_bp = Blueprint("auth", __name__)


def _credentials():
    data = request.get_json(silent=True) if request.is_json else request.form.to_dict()
    data = data if isinstance(data, dict) else {}
    return data.get("email"), data.get("password")


def _token_response(user, status):
    token = issue_token(user)
    response = jsonify({"success": True, "data": {"access_token": token, "user_id": user.id}})
    set_access_cookies(response, token)
    return response, status


@auth_bp.route("/login", methods=["GET"])
def login_form():
    return jsonify({
        "message": "POST email and password to log in",
        "callbackUrl": request.args.get("callbackUrl"),
    })


@auth_bp.route("/login", methods=["POST"])
def login():
    email, password = _credentials()

    if not email or not password:
        return jsonify({"success": False, "error": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"success": False, "error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"success": False, "error": "User account disabled"}), 403

    return _token_response(user, 200)


@auth_bp.route("/signup", methods=["POST"])
def signup():
    email, password = _credentials()

    if not email or not password:
        return jsonify({"success": False, "error": "Email and password required"}), 400

    user = User()
    user.email = email
    user.set_password(password)

    try:
        with transactional():
            db.session.add(user)
    except IntegrityError:
        return jsonify({"success": False, "error": "Email already registered"}), 409

    current_app.logger.info("User %s signed up", user.id)
    return _token_response(user, 201)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response
