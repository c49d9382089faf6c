# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name used in log lines (default: astro-schedule).",
    "ASTRO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "ASTRO_LOG_DIR": "Directory for astro.log (default: .local/astro).",
    "ASTRO_LOG_TO_FILE": "Write the log file at all (true/false, default: true).",
    # Console
    "ASTRO_SHOW_BANNER": "Print the banner and command list at start (true/false, default: true).",
}
