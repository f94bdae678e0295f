# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from bloglist.container import container
from bloglist.infrastructure.db import init_db
from bloglist.shared.config import load_config
from bloglist.shared.logging import logger, setup_logging
from bloglist.shared.middleware.error_handler import configure_error_handling
from bloglist.shared.middleware.request_logger import configure_request_logging


def create_app() -> Flask:
    config = load_config()
    setup_logging(
        config.log_level,
        log_file=config.log_file,
        debug_mode=config.debug_logging,
    )
    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(SECRET_KEY=config.secret_key)
    app.json.sort_keys = False

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.blogs_controller.as_blueprint())
    if config.is_testing():
        app.register_blueprint(container.testing_controller.as_blueprint())
        logger.warning("Testing routes enabled (APP_ENV=test)")

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    app = create_app()
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
