"""Default settings. Override any of them with FINANCE_TOOLS_<NAME> env vars."""

# front-end dev servers allowed to call /api/*
CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

# safety cap on simulated debt months (100 years)
DEBT_MAX_MONTHS = 1200

LOG_LEVEL = "INFO"
