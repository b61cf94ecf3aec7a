import os

SERVERLESS_MARKERS = ("VERCEL", "AWS_LAMBDA_FUNCTION_NAME")


def _flag(name: str, default: str = "0", environ=None) -> bool:
    env = os.environ if environ is None else environ
    return (env.get(name, default) or "").strip().lower() in {"1", "true", "yes"}


def is_serverless_environment(environ=None) -> bool:
    """Detect ephemeral per-request runtimes where local file writes do not persist."""
    env = os.environ if environ is None else environ
    if any(env.get(name) for name in SERVERLESS_MARKERS):
        return True
    return _flag("IS_SERVERLESS", environ=env)


class Config:
    # Managed database: considered configured only when both values are non-empty.
    SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
    SUPABASE_KEY = os.environ.get("SUPABASE_KEY", os.environ.get("SUPABASE_ANON_KEY", ""))

    # Local JSON file backend
    DATA_FILE = os.environ.get("DATA_FILE", "data/attendance.json")

    # File writes are skipped on serverless runtimes (VERCEL / AWS_LAMBDA_FUNCTION_NAME / IS_SERVERLESS).
    SERVERLESS = is_serverless_environment()

    # Reject records where present + absent != conducted
    STRICT_COUNTS = _flag("STRICT_COUNTS")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
