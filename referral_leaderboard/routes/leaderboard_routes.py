from flask import Blueprint, request
from referral_leaderboard.services.leaderboard_service import get_leaderboard, increment_referral, add_user
from referral_leaderboard.services.snapshot import get_snapshot
from referral_leaderboard.schemas.leaderboard_schema import entry_schema, entries_schema
from referral_leaderboard.utils.exceptions import FetchError, ServiceError
from referral_leaderboard.utils.response_formatter import success_response, error_response, service_error_response

bp = Blueprint("leaderboard", __name__, url_prefix="/api/v1")


@bp.route("/leaderboard", methods=["GET"])
def leaderboard():
    try:
        lb = get_leaderboard()
    except FetchError as e:
        # hand back what we had so the caller can keep showing it
        details = dict(e.details, leaderboard=entries_schema.dump(get_snapshot().last_known_good()))
        return error_response(e.code, e.message, details=details, status=e.status)
    return success_response({"leaderboard": entries_schema.dump(lb)})


@bp.route("/leaderboard", methods=["POST"])
def create_entry():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        entry, lb = add_user(data.get("userId"))
    except ServiceError as e:
        return service_error_response(e)
    return success_response({
        "entry": entry_schema.dump(entry),
        "leaderboard": entries_schema.dump(lb),
    }, status=201)


@bp.route("/leaderboard/<entry_id>/increment", methods=["POST"])
def increment(entry_id):
    try:
        lb = increment_referral(entry_id)
    except ServiceError as e:
        return service_error_response(e)
    return success_response({"leaderboard": entries_schema.dump(lb)})
