"""
Tests for .env loading and SMTP settings resolution.
"""

import os

from contactform.utils.settings import (
    DEFAULT_FORM_URL,
    SmtpConfig,
    admin_email,
    form_url,
    load_settings,
)


def test_load_settings_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# SMTP relay\n"
        "\n"
        "SMTP_HOST=mail.example.org\n"
        "SMTP_USERNAME = 'mailer@example.org'\n"
        'MAIL_FROM_NAME="Acme Support"\n'
    )

    settings = load_settings(str(env_file), environ={})

    assert settings == {
        "SMTP_HOST": "mail.example.org",
        "SMTP_USERNAME": "mailer@example.org",
        "MAIL_FROM_NAME": "Acme Support",
    }


def test_environment_wins_over_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SMTP_HOST=from-file\nSMTP_PORT=2525\n")

    settings = load_settings(str(env_file), environ={"SMTP_HOST": "from-env"})

    assert settings["SMTP_HOST"] == "from-env"
    assert settings["SMTP_PORT"] == "2525"


def test_missing_env_file_is_ignored(tmp_path):
    settings = load_settings(str(tmp_path / "nope.env"), environ={"A": "1"})

    assert settings == {"A": "1"}


def test_load_settings_does_not_touch_process_environment(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTACTFORM_TEST_ONLY_KEY=1\n")

    load_settings(str(env_file), environ={})

    assert "CONTACTFORM_TEST_ONLY_KEY" not in os.environ


def test_smtp_config_defaults():
    config = SmtpConfig.from_settings({})

    assert config.host == "smtp.gmail.com"
    assert config.port == 587
    assert config.username == ""
    assert config.password == ""
    assert config.encryption == "tls"
    assert config.from_email == "noreply@example.com"
    assert config.from_name == "Website Contact"
    assert config.timeout == 20.0
    assert not config.has_credentials


def test_smtp_config_from_settings(settings):
    config = SmtpConfig.from_settings(dict(settings, SMTP_ENCRYPTION="SSL", SMTP_TIMEOUT="5"))

    assert config.host == "smtp.test.local"
    assert config.encryption == "ssl"
    assert config.timeout == 5.0
    assert config.has_credentials


def test_blank_and_invalid_values_fall_back():
    config = SmtpConfig.from_settings(
        {"SMTP_HOST": "  ", "SMTP_PORT": "abc", "SMTP_TIMEOUT": "soon"}
    )

    assert config.host == "smtp.gmail.com"
    assert config.port == 587
    assert config.timeout == 20.0


def test_unknown_encryption_means_plaintext():
    assert SmtpConfig.from_settings({"SMTP_ENCRYPTION": "none"}).encryption == ""


def test_repr_hides_password(settings):
    assert "app-password" not in repr(SmtpConfig.from_settings(settings))


def test_admin_email_fallbacks():
    assert admin_email({"CONTACT_TO_EMAIL": "boss@example.com"}) == "boss@example.com"
    assert admin_email({"SMTP_USERNAME": "mailer@example.com"}) == "mailer@example.com"
    assert admin_email({}) == "noreply@example.com"


def test_form_url():
    assert form_url({}) == DEFAULT_FORM_URL
    assert form_url({"CONTACT_FORM_URL": "/contact-us"}) == "/contact-us"


def test_credentials_keep_surrounding_whitespace():
    config = SmtpConfig.from_settings(
        {"SMTP_USERNAME": "mailer@example.com", "SMTP_PASSWORD": " secret "}
    )

    assert config.password == " secret "
    assert config.username == "mailer@example.com"


def test_quoted_env_password_is_preserved(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('SMTP_USERNAME=mailer@example.com\nSMTP_PASSWORD=" secret "\n')

    config = SmtpConfig.from_settings(load_settings(str(env_file), environ={}))

    assert config.password == " secret "


def test_blank_credentials_count_as_missing():
    config = SmtpConfig.from_settings({"SMTP_USERNAME": "   ", "SMTP_PASSWORD": "x"})

    assert not config.has_credentials
