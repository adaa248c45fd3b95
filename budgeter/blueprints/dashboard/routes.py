from flask import Blueprint, current_app, jsonify
from ...extensions import db
from ...services import DashboardComposer

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@dashboard_bp.route("")
def index():
    composer = DashboardComposer(
        db.session,
        upcoming_days=current_app.config["UPCOMING_BILLS_DAYS"],
        recent_limit=current_app.config["RECENT_TRANSACTIONS_LIMIT"],
    )
    return jsonify(composer.summary())
