# contactform/__init__.py
import logging
from flask import Flask

from contactform.routes import contact_bp, core
from contactform.utils.email_sender import send_email
from contactform.utils.markup import register_filters
from contactform.utils.settings import SmtpConfig, load_settings

logger = logging.getLogger(__name__)


def create_app(settings=None, mail_sender=None):
    """
    Build the Flask app. Settings are resolved once here (from .env plus the
    environment unless a mapping is passed) and are read-only afterwards.
    """
    if settings is None:
        settings = load_settings(".env")

    app = Flask(__name__)
    app.url_map.strict_slashes = False

    app.config["CONTACT_SETTINGS"] = dict(settings)
    app.config["SMTP_CONFIG"] = SmtpConfig.from_settings(settings)
    app.config["MAIL_SENDER"] = mail_sender or send_email
    logger.info("Contact form configured: %r", app.config["SMTP_CONFIG"])

    register_filters(app.jinja_env)

    app.register_blueprint(core)
    app.register_blueprint(contact_bp)
    return app
