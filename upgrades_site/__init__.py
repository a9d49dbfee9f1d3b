"""
Flask application factory for the Upgrades Offers demo site.

The demo site renders the same DOM contract as the production upgrades
page (selectors, test ids and query parameters) so the UI suite can run
without access to a deployed environment.
"""

import logging

from flask import Flask

from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info(f"Creating demo site with config: {config_class.__name__}")

    # Register blueprints
    from upgrades_site.routes.views import views_bp

    app.register_blueprint(views_bp)

    return app
