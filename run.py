from contactform import create_app
import logging
import os

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", 5050))
    app.run(host="127.0.0.1", port=port, debug=False, use_reloader=False)

# --- LOCAL ---

# cp .env.example .env   (fill in SMTP_USERNAME / SMTP_PASSWORD)
# PORT=5050 poetry run python run.py
# OR: poetry run flask --app contactform:create_app --debug run

# Manual check against the running server:
# poetry run python scripts/test_api.py --base http://127.0.0.1:5050
