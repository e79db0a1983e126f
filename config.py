import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


# SECURE=true starts the simulator in protected mode
SECURE_MODE = _env_flag("SECURE")

STARTING_BALANCE = _env_int("STARTING_BALANCE", 1000)

# default amounts used by the demo buttons
LEGITIMATE_AMOUNT = _env_int("LEGITIMATE_AMOUNT", 100)
MALICIOUS_AMOUNT = _env_int("MALICIOUS_AMOUNT", 500)

CSRF_TOKEN_PREFIX = os.environ.get("CSRF_TOKEN_PREFIX", "csrf-")

HOST = os.environ.get("HOST", "localhost")
PORT = _env_int("PORT", 5000)
DEBUG = _env_flag("DEBUG")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def print_banner():
    print(f"\n\n {'*'*15}\n")
    print(f"SECURE MODE: {SECURE_MODE}")
    print(f"\n {'*'*15}")
