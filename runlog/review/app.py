from flask import Flask, jsonify, request

from runlog.config import get_recent_count, load_config
from runlog.errors import EmptyTableError, RunlogError
from runlog.pipeline import load_dashboard


def create_app(config=None, path=None):
    app = Flask(__name__)

    if config is None:
        config = load_config()
    app.config["RUNLOG"] = config
    app.config["RUNLOG_PATH"] = path

    # Read fresh on every request; nothing is cached between loads.
    def get_dashboard():
        return load_dashboard(config, path=app.config["RUNLOG_PATH"])

    @app.errorhandler(RunlogError)
    def handle_load_error(e):
        status = 404 if isinstance(e, EmptyTableError) else 500
        return jsonify({"error": str(e)}), status

    @app.route("/api/summary")
    def api_summary():
        summary = get_dashboard().summary
        return jsonify({
            "activity_count": summary.activity_count,
            "total_distance_mi": summary.total_distance_mi,
            "total_elevation_m": summary.total_elevation_m,
            "total_duration_hr": summary.total_duration_hr,
            "avg_hr": summary.avg_hr,
            "avg_pace_min_per_mi": summary.avg_pace_min_per_mi,
            "display": summary.to_display(),
        })

    @app.route("/api/monthly")
    def api_monthly():
        return jsonify([b.to_dict() for b in get_dashboard().monthly])

    @app.route("/api/categories")
    def api_categories():
        dashboard = get_dashboard()
        shares = dashboard.category_shares()
        return jsonify([
            {**c.to_dict(), "share_pct": shares[c.name]} for c in dashboard.categories
        ])

    @app.route("/api/activities")
    def api_activities():
        dashboard = get_dashboard()
        recent = request.args.get("recent")
        if recent is None:
            return jsonify([a.to_dict() for a in dashboard.activities])
        try:
            n = int(recent) if recent else get_recent_count(config)
        except ValueError:
            return jsonify({"error": "recent must be an integer"}), 400
        return jsonify([a.to_dict() for a in dashboard.recent(n)])

    @app.route("/api/hr-pace")
    def api_hr_pace():
        points = get_dashboard().hr_vs_pace()
        return jsonify([{"pace": pace, "heart_rate": hr} for pace, hr in points])

    return app
