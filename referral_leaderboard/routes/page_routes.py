from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from referral_leaderboard.services.leaderboard_service import get_leaderboard, increment_referral, add_user
from referral_leaderboard.services.ranking import rank_movements
from referral_leaderboard.services.snapshot import get_snapshot
from referral_leaderboard.schemas.leaderboard_schema import rows_schema
from referral_leaderboard.utils.exceptions import FetchError, ServiceError, ValidationError

bp = Blueprint("page", __name__)


@bp.route("/", methods=["GET"])
def index():
    snapshot = get_snapshot()
    try:
        lb = get_leaderboard()
    except FetchError as e:
        flash(e.message, "error")
        lb = snapshot.last_known_good()

    # movement is animated on the first render after a change only
    movements = rank_movements(snapshot.pop_previous(), lb)
    rows = [dict(row, movement=movements.get(row["id"], 0)) for row in lb]
    return render_template("leaderboard.html", rows=rows_schema.dump(rows))


@bp.route("/entries", methods=["POST"])
def create_entry():
    try:
        add_user(request.form.get("userId", ""))
    except ValidationError:
        # blank input is a no-op
        current_app.logger.debug("Ignored blank user id")
    except ServiceError as e:
        current_app.logger.warning("Add user failed: %s", e.message)
        flash(e.message, "error")
    return redirect(url_for("page.index"))


@bp.route("/entries/<entry_id>/increment", methods=["POST"])
def increment(entry_id):
    try:
        increment_referral(entry_id)
    except ServiceError as e:
        current_app.logger.warning("Increment of %s failed: %s", entry_id, e.message)
        flash(e.message, "error")
    return redirect(url_for("page.index"))
