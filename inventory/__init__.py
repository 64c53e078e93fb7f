"""Flask application factory."""
from flask import Flask, request, jsonify
from inventory.database import init_db
import os


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize Sentry for error tracking in production
    sentry_dsn = app.config.get('SENTRY_DSN')
    if sentry_dsn and (app.config.get('ENV') == 'production' or os.getenv('FLASK_ENV') == 'production'):
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            environment=os.getenv('FLASK_ENV', 'production'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Initialize database
    init_db(app)

    # Error Handlers
    from inventory.exceptions import InventoryError

    @app.errorhandler(InventoryError)
    def handle_inventory_error(error):
        """Handle custom application exceptions."""
        if error.status_code >= 500:
            app.logger.error(f"InventoryError [{error.status_code}]: {error.message}")
        else:
            app.logger.warning(f"InventoryError [{error.status_code}] {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'status': 'error', 'message': 'Not Found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'status': 'error', 'message': 'Method Not Allowed'}), 405

    @app.errorhandler(500)
    @app.errorhandler(Exception)
    def internal_error(error):
        import traceback
        from werkzeug.exceptions import HTTPException
        if isinstance(error, HTTPException) and error.code < 500:
            return jsonify({'status': 'error', 'message': error.description}), error.code

        app.logger.error(f"Unhandled Exception: {error}")
        app.logger.error(f"Traceback: {traceback.format_exc()}")
        return jsonify({'status': 'error', 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from inventory.blueprints.suppliers import suppliers_bp
    from inventory.blueprints.products import products_bp
    from inventory.blueprints.reports import reports_bp

    app.register_blueprint(suppliers_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(reports_bp)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    # Register CLI commands
    from inventory.cli_commands import init_cli_commands
    init_cli_commands(app)

    return app
