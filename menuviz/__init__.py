from flask import Flask
from flask_cors import CORS
from .config.settings import Config
from .services.shared.menu_store import MenuStore


def create_app(config_class=Config, store=None, capability=None, image_resolver=None):
    """Application factory pattern

    `store`, `capability` and `image_resolver` may be injected (tests, alternative
    backends); otherwise a fresh in-memory store is created and the capability and
    resolver are built per request from configuration.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Initialize the app (this will configure logging)
    config_class.init_app(app)

    app.extensions["menuviz.store"] = store if store is not None else MenuStore()
    if capability is not None:
        app.extensions["menuviz.capability"] = capability
    if image_resolver is not None:
        app.extensions["menuviz.image_resolver"] = image_resolver

    # Register blueprints
    from .routes.menu import menu_bp
    from .routes.health import health_bp

    app.register_blueprint(menu_bp)
    app.register_blueprint(health_bp)

    return app
