# src/resume_api/routes/resume_routes.py
from flask import Blueprint, current_app, jsonify, request

from ..validators.common_validators import expand_form_input

resumes_bp = Blueprint("resumes", __name__, url_prefix="/api/resumes")


def _handler():
    return current_app.extensions["resume_handler"]


def _request_payload() -> dict:
    """JSON object bodies as-is, url-encoded forms expanded from bracket keys, anything else empty."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    if request.form:
        return expand_form_input(request.form.items(multi=True))
    return {}


@resumes_bp.route("", methods=["POST"])
def create_resume():
    return jsonify(_handler().create(_request_payload())), 201


@resumes_bp.route("", methods=["GET"])
def list_resumes():
    result = _handler().list(request.args.get("page"), request.args.get("limit"))
    return jsonify(result), 200


@resumes_bp.route("/<resume_id>", methods=["GET"])
def get_resume(resume_id):
    return jsonify(_handler().get_one(resume_id)), 200


@resumes_bp.route("/<resume_id>", methods=["PUT"])
def update_resume(resume_id):
    return jsonify(_handler().update(resume_id, _request_payload())), 200


@resumes_bp.route("/<resume_id>", methods=["DELETE"])
def delete_resume(resume_id):
    return jsonify(_handler().delete(resume_id)), 200
