"""
Locust load tests for the contact form handler.

Install: pip install locust
Run: locust -f locustfile.py --host=http://127.0.0.1:5050

For headless: locust -f locustfile.py --host=http://127.0.0.1:5050 \
    --users 10 --spawn-rate 2 --run-time 1m --headless

Valid submissions send real email unless SMTP is pointed at a test relay;
set LOCUST_SEND_VALID=0 to only exercise validation failures.
"""

import os
from locust import HttpUser, task, between


class ContactFormUser(HttpUser):
    wait_time = between(1, 3)

    @task(10)
    def ping(self):
        self.client.get("/__ping")

    @task(5)
    def no_submission(self):
        self.client.get("/contact")

    @task(5)
    def invalid_submission(self):
        self.client.post(
            "/contact",
            data={
                "contact_name": "A",
                "contact_email": "not-an-email",
                "contact_reason": "",
                "comments": "short",
            },
        )

    @task(1)
    def valid_submission(self):
        if os.getenv("LOCUST_SEND_VALID", "0") != "1":
            return
        self.client.post(
            "/contact",
            data={
                "contact_name": "Load Tester",
                "contact_email": os.getenv("LOCUST_CONTACT_EMAIL", "loadtest@example.com"),
                "contact_reason": "Sales",
                "comments": "Interested in pricing details",
            },
        )
