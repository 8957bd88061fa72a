from flask import Blueprint, jsonify

core = Blueprint("core", __name__)


@core.get("/__ping")
def ping():
    return jsonify({"ok": True, "service": "contact-form"})
