# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Put ANTICAPTCHA_API_KEY in .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Credentials / endpoint
    "ANTICAPTCHA_API_KEY": "Anti-Captcha client key (required to solve tasks).",
    "ANTICAPTCHA_BASE_URL": "API base URL (default: https://api.anti-captcha.com/).",
    # Polling
    "ANTICAPTCHA_POLL_INTERVAL_SECONDS": "Seconds between getTaskResult queries (default: 10).",
    "ANTICAPTCHA_MAX_ATTEMPTS": "Max getTaskResult queries per task; 0 = no limit (default: 60).",
    # HTTP transport
    "ANTICAPTCHA_REQUEST_TIMEOUT_SECONDS": "Timeout of one HTTP request (default: 60).",
    "ANTICAPTCHA_PROXY_URL": "Optional proxy for all requests, e.g. http://localhost:8888 for debugging.",
    # Logging
    "ANTICAPTCHA_LOG_LEVEL": "Console logging level (default: INFO).",
    "ANTICAPTCHA_LOG_DIR": "If set, full DEBUG logs are also written to <dir>/anticaptcha.log.",
}
