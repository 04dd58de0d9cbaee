from flask import jsonify, request


def form_data():
    """Submitted fields, from a JSON body or a regular form post."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def respond(result):
    return jsonify(result.to_dict()), result.status_code
