# 📄 File: app/modules/payments/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes payments: the record of who paid, and the PayPal checkout that upgrades an account.
# 🧪 Purpose (Technical Summary):
# Package initialization for the payments module (/payment and /paypal endpoints).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, httpx and tenacity (via the shared PayPal client)
# 🔄 Connected Modules / Calls From:
# app.main (dependency overrides), app.api.v1.router

__module_name__ = "payments"
