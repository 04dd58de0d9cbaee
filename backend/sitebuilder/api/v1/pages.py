from flask import request
from sitebuilder.actions import (
    create_page_action,
    save_page_content_action,
    set_page_published_action,
)
from sitebuilder.auth.identity import get_current_principal
from . import v1_bp
from ._helpers import form_data, respond


@v1_bp.route("/pages", methods=["POST"])
def create_page():
    result = create_page_action(form_data(), get_current_principal())
    return respond(result)


@v1_bp.route("/pages/<page_id>/content", methods=["PUT"])
def save_page_content(page_id):
    data = request.get_json(silent=True)
    content = data.get("content") if isinstance(data, dict) else None

    result = save_page_content_action(page_id, content, get_current_principal())
    return respond(result)


@v1_bp.route("/pages/<page_id>/publish", methods=["POST"])
def publish_page(page_id):
    result = set_page_published_action(page_id, True, get_current_principal())
    return respond(result)


@v1_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
def unpublish_page(page_id):
    result = set_page_published_action(page_id, False, get_current_principal())
    return respond(result)
