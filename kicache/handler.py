"""REST transport for the character service."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from .models import NotFoundError


def _respond(service: Any, name: str):
    try:
        character = service.find_or_create(name)
    except NotFoundError:
        return jsonify(error="character not found"), 404
    except Exception as err:
        return jsonify(error=str(err)), 500
    return jsonify(character.to_dict()), 200


def create_app(service: Any) -> Flask:
    """Return a Flask app exposing the service under ``/characters``."""
    app = Flask(__name__)

    @app.get("/characters/<name>")
    def get_by_name(name: str):
        if not name:
            return jsonify(error="name is required"), 400
        return _respond(service, name)

    @app.post("/characters/")
    def post_by_name():
        payload = request.get_json(force=True, silent=True)
        name = payload.get("name") if isinstance(payload, dict) else None
        if not isinstance(name, str) or not name:
            return jsonify(error="name es requerido"), 400
        return _respond(service, name)

    return app