from flask import Flask, render_template
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()


def register_template_helpers(app):
    """Number filters for result tables and the site name for every page."""
    from calctech.utils.formatting import format_currency, format_number, format_percent
    app.add_template_filter(format_currency, 'currency')
    app.add_template_filter(format_number, 'number')
    app.add_template_filter(format_percent, 'percent')

    @app.context_processor
    def inject_site_name():
        return {'site_name': app.config.get('SITE_NAME', 'Calc-Tech.com')}


def create_app():
    # Validate required environment variables
    required_vars = ['DATABASE_URL', 'SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var):
            raise ValueError(f"Required environment variable {var} is not set")

    app = Flask(__name__)
    app.config.from_object('config')

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Register blueprints
    from calctech.routes.main import main_bp
    from calctech.projects.health.routes import health_bp
    from calctech.projects.conversion.routes import conversion_bp
    from calctech.projects.subnet.routes import subnet_bp
    from calctech.projects.triangle.routes import triangle_bp
    from calctech.projects.statistics.routes import statistics_bp
    from calctech.projects.math_tools.routes import math_tools_bp
    from calctech.projects.polymarket.routes import polymarket_bp
    from calctech.projects.education.routes import education_bp
    from calctech.projects.date_time.routes import date_time_bp
    from calctech.projects.finance.routes import finance_bp
    from calctech.projects.construction.routes import construction_bp
    from calctech.projects.password.routes import password_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(health_bp, url_prefix='/health')
    app.register_blueprint(conversion_bp, url_prefix='/conversion')
    app.register_blueprint(subnet_bp, url_prefix='/subnet')
    app.register_blueprint(triangle_bp, url_prefix='/triangle')
    app.register_blueprint(statistics_bp, url_prefix='/statistics')
    app.register_blueprint(math_tools_bp, url_prefix='/math')
    app.register_blueprint(polymarket_bp, url_prefix='/polymarket')
    app.register_blueprint(education_bp, url_prefix='/education')
    app.register_blueprint(date_time_bp, url_prefix='/date-time')
    app.register_blueprint(finance_bp, url_prefix='/finance')
    app.register_blueprint(construction_bp, url_prefix='/construction')
    app.register_blueprint(password_bp, url_prefix='/password')

    # CLI commands
    from calctech.core.commands import calculators_cli
    app.cli.add_command(calculators_cli)

    # Import models to ensure they're known to Flask-SQLAlchemy
    from calctech.models import LogEntry

    register_template_helpers(app)

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    return app
