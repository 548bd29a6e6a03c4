"""Runtime settings. The authorizer takes no flags or environment variables."""

LOG_LEVEL = "WARNING"

# "console" or "json"
LOG_FORMAT = "console"
