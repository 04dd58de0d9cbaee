from sitebuilder.actions import create_site_action
from sitebuilder.auth.identity import get_current_principal
from . import v1_bp
from ._helpers import form_data, respond


@v1_bp.route("/sites", methods=["POST"])
def create_site():
    result = create_site_action(form_data(), get_current_principal())
    return respond(result)
