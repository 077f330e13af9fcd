from flask import Flask
from .config import DevelopmentConfig, ProductionConfig, TestingConfig
from .extensions import db, migrate, ma
import os

CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}

def create_app(config_name=None):
    app = Flask(__name__, instance_relative_config=False)
    env = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIGS.get(env, DevelopmentConfig))

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # register every model with the metadata
    from essayhub.models import (  # noqa: F401
        reference,
        user,
        order,
        order_file,
        order_payment_detail,
        client_order_posting_step,
        client_payment,
        order_bid,
        writer_order,
        order_revision,
        writer_rating,
        client_writer,
        writer_invitation,
    )

    from essayhub.seed import seed_reference_data

    @app.cli.command("seed-reference-data")
    def seed_reference_data_command():
        """Insert the lookup rows the order workflows resolve by name."""
        created = seed_reference_data(db.session)
        db.session.commit()
        print(f"Seeded {created} reference rows")

    return app
