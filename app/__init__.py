"""
Flask Application Factory

This module provides the Flask application factory for the DOCX compliance corrector.
"""

import logging
from flask import Flask, request, g
from flask_cors import CORS

from app.utils.form_parsing import StrictFormRequest


def create_app(config_name='default'):
    """
    Create and configure Flask application instance.

    Args:
        config_name (str): Configuration environment name

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)
    app.request_class = StrictFormRequest

    if config_name == 'testing':
        app.config.from_object('config.testing.TestingConfig')
    elif config_name == 'production':
        app.config.from_object('config.production.ProductionConfig')
    else:
        app.config.from_object('config.default.DefaultConfig')

    if not app.config.get('SECRET_KEY'):
        error_msg = "FLASK_SECRET_KEY environment variable is required"
        logging.error(error_msg)
        if config_name == 'production':
            raise ValueError(error_msg)
        else:
            logging.warning("Running with insecure default SECRET_KEY for development")

    CORS(app, resources={r"/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024

    configure_logging(app)

    register_trace_id_handler(app)

    from app.services.ai_service import init_ai_service
    init_ai_service(app)

    from app.routes.root import register_root_routes
    register_root_routes(app)

    register_blueprints(app)

    register_error_handlers(app)

    return app


def configure_logging(app):
    """Configure application logging with clean output."""
    logging.basicConfig(
        level=logging.DEBUG if app.debug else logging.INFO,
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler()
        ],
        force=True
    )

    noisy_loggers = [
        'pymongo', 'pymongo.topology', 'pymongo.connection',
        'pymongo.serverSelection', 'pymongo.command',
        'urllib3', 'werkzeug'
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.info("DOCX COMPLIANCE CORRECTOR - STARTUP")
    logging.info(f"Debug Mode: {app.debug}")


def register_trace_id_handler(app):
    """Register before/after request handlers for trace ID management."""
    from app.utils.logging_utils import set_trace_id, clear_trace_id, get_trace_id

    @app.before_request
    def before_request():
        trace_id = request.headers.get('X-Trace-ID') or request.args.get('trace_id')
        set_trace_id(trace_id)
        g.trace_id = get_trace_id()

    @app.after_request
    def after_request(response):
        if hasattr(g, 'trace_id'):
            response.headers['X-Trace-ID'] = g.trace_id
        clear_trace_id()
        return response


def register_error_handlers(app):
    """Register global error handlers answering with the {"error": ...} shape."""
    from flask import jsonify
    from app.utils.logging_utils import get_logger

    logger = get_logger('app.error_handler')

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Recurso no encontrado"}), 404

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({"error": "Error interno del servidor"}), 500


def register_blueprints(app):
    """Register application blueprints."""
    from app.routes import procesar_bp

    app.register_blueprint(procesar_bp)
