import argparse
import sys


def _load_config_or_none():
    from runlog.config import load_config

    try:
        return load_config()
    except FileNotFoundError:
        return None


def _load(args, config):
    from runlog.errors import RunlogError
    from runlog.pipeline import load_dashboard

    try:
        return load_dashboard(config, path=args.path, verbose=getattr(args, "verbose", False))
    except RunlogError as e:
        print(str(e))
        sys.exit(1)


def cmd_summary(args):
    config = _load_config_or_none()
    dashboard = _load(args, config)
    _print_summary(dashboard.summary)


def _print_summary(summary):
    display = summary.to_display()
    print("\nSummary:")
    print(f"  Activities:    {display['activities']}")
    print(f"  Distance:      {display['distance']} mi")
    print(f"  Elevation:     {display['elevation']} m")
    print(f"  Moving time:   {display['duration']} h")
    print(f"  Avg HR:        {display['avg_heart_rate']}")
    print(f"  Avg pace:      {display['avg_pace']} /mi")


def cmd_monthly(args):
    config = _load_config_or_none()
    dashboard = _load(args, config)

    print(f"\n{'Month':<10} {'Runs':>5} {'Miles':>9} {'Elev (m)':>9} {'Minutes':>9}")
    for b in dashboard.monthly:
        print(f"{b.label:<10} {b.count:>5} {b.distance_mi:>9.2f} "
              f"{b.elevation_m:>9.0f} {b.duration_min:>9.0f}")


def cmd_categories(args):
    config = _load_config_or_none()
    dashboard = _load(args, config)
    shares = dashboard.category_shares()

    print(f"\n{'Type':<10} {'Runs':>5} {'Miles':>9} {'Share':>7}")
    for c in dashboard.categories:
        print(f"{c.name:<10} {c.count:>5} {c.distance_mi:>9.2f} {shares[c.name]:>6.1f}%")


def cmd_recent(args):
    from runlog.config import get_recent_count
    from runlog.formatting import format_date, format_pace

    config = _load_config_or_none()
    dashboard = _load(args, config)
    n = args.count if args.count is not None else get_recent_count(config)

    print(f"\n{'Date':<11} {'Name':<30} {'Miles':>6} {'Min':>5} {'Pace':>6} {'HR':>6}")
    for a in dashboard.recent(n):
        hr = f"{a.avg_hr:.1f}" if a.has_heart_rate else "-"
        print(f"{format_date(a.date):<11} {a.name[:30]:<30} {a.distance_mi:>6.2f} "
              f"{a.duration_min:>5.0f} {format_pace(a.pace_min_per_mi):>6} {hr:>6}")


def cmd_review(args):
    from runlog.review.app import create_app

    config = _load_config_or_none() or {}
    review_cfg = config.get("review") or {}
    host = review_cfg.get("host", "127.0.0.1")
    port = args.port or review_cfg.get("port", 5055)

    app = create_app(config, path=args.path)
    print(f"Serving dashboard data on http://{host}:{port}/api/summary")
    app.run(host=host, port=port)


def main():
    parser = argparse.ArgumentParser(prog="runlog", description="Running log dashboard data")
    subparsers = parser.add_subparsers(dest="command")

    def add_source(p):
        p.add_argument("path", nargs="?", help="Activity table (.csv/.xlsx); defaults to paths.activities")
        p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    summary_parser = subparsers.add_parser("summary", help="Show global totals and averages")
    add_source(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    monthly_parser = subparsers.add_parser("monthly", help="Show per-month rollups")
    add_source(monthly_parser)
    monthly_parser.set_defaults(func=cmd_monthly)

    categories_parser = subparsers.add_parser("categories", help="Show per-workout-type rollups")
    add_source(categories_parser)
    categories_parser.set_defaults(func=cmd_categories)

    recent_parser = subparsers.add_parser("recent", help="Show the most recent activities")
    add_source(recent_parser)
    recent_parser.add_argument("-n", "--count", type=int, help="Number of activities (default from config)")
    recent_parser.set_defaults(func=cmd_recent)

    review_parser = subparsers.add_parser("review", help="Serve dashboard data as JSON")
    add_source(review_parser)
    review_parser.add_argument("--port", type=int, help="Port (default from config)")
    review_parser.set_defaults(func=cmd_review)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
