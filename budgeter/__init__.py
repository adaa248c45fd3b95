import click
from flask import Flask, jsonify
from .extensions import db, migrate
from .config import Config
from .errors import register_error_handlers

from .blueprints.categories.routes import categories_bp
from .blueprints.transactions.routes import transactions_bp
from .blueprints.bills.routes import bills_bp
from .blueprints.payments.routes import payments_bp
from .blueprints.budgets.routes import budgets_bp
from .blueprints.reports.routes import reports_bp
from .blueprints.dashboard.routes import dashboard_bp

DEFAULT_CATEGORIES = [
    ("Salary", "income", "#4caf50"),
    ("Freelance", "income", "#8bc34a"),
    ("Groceries", "expense", "#ff9800"),
    ("Rent", "expense", "#f44336"),
    ("Utilities", "expense", "#2196f3"),
    ("Transport", "expense", "#9c27b0"),
    ("Entertainment", "expense", "#e91e63"),
]


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Ensure tables exist for a smooth first run
    with app.app_context():
        db.create_all()

    register_error_handlers(app)

    # Register blueprints
    app.register_blueprint(categories_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(bills_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(budgets_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(dashboard_bp)

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok"})

    @app.cli.command("seed-categories")
    def seed_categories():
        """Add the starter income and expense categories that are missing."""
        from .services import CategoryDirectory

        created = CategoryDirectory(db.session).seed_defaults(DEFAULT_CATEGORIES)
        click.echo(f"Seeded {created} categories")

    app.logger.debug("Application created with %s", getattr(config_object, "__name__", config_object))
    return app
