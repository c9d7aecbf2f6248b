from __future__ import annotations

from functools import wraps

from flask import current_app, jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    try:
        return Role(session.get("role"))
    except ValueError:
        raise AuthorizationError("Ruolo non valido")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Effettua l'accesso per continuare"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Effettua l'accesso per continuare"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"success": False, "message": "Non hai i permessi"}), 403
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Map domain errors to JSON responses; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            current_app.logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Errore di sistema"}), 500

    return wrapper
