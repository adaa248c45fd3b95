from flask import Blueprint, current_app, jsonify, make_response, request
from ...extensions import db
from ...services import ReportAggregator
from ...validators import parse_date, parse_int_in_range, require_fields

MAX_TREND_MONTHS = 120

reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.route("/spending")
def spending():
    args = request.args
    require_fields(args, "startDate", "endDate")
    report = ReportAggregator(db.session).spending_by_category(
        parse_date(args["startDate"], "startDate"),
        parse_date(args["endDate"], "endDate"),
    )
    return jsonify(report)


@reports_bp.route("/trends")
def trends():
    months = request.args.get("months")
    if months:
        months = parse_int_in_range(months, "months", 1, MAX_TREND_MONTHS)
    else:
        months = current_app.config["DEFAULT_TREND_MONTHS"]
    return jsonify(ReportAggregator(db.session).monthly_trends(months))


@reports_bp.route("/bills")
def bill_payments():
    return jsonify(ReportAggregator(db.session).bill_payments())


@reports_bp.route("/export.csv")
def export_csv():
    response = make_response(ReportAggregator(db.session).export_csv())
    response.headers["Content-Disposition"] = "attachment; filename=transactions.csv"
    response.headers["Content-Type"] = "text/csv"
    return response
