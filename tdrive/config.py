"""Environment-driven settings for the T-Drive API."""
import os

from dotenv import load_dotenv

load_dotenv()

DATA_FILE = os.getenv("DATA_FILE", "./data/sessions.json")
PORT = int(os.getenv("PORT", "4000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Firebase Admin credentials (server side)
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
FIREBASE_CLIENT_EMAIL = os.getenv("FIREBASE_CLIENT_EMAIL")
FIREBASE_PRIVATE_KEY = os.getenv("FIREBASE_PRIVATE_KEY")

# Firebase web config handed to browser clients
WEB_CONFIG_ENV = {
    "apiKey": "FIREBASE_WEB_API_KEY",
    "authDomain": "FIREBASE_WEB_AUTH_DOMAIN",
    "projectId": "FIREBASE_WEB_PROJECT_ID",
    "storageBucket": "FIREBASE_WEB_STORAGE_BUCKET",
    "messagingSenderId": "FIREBASE_WEB_MESSAGING_SENDER_ID",
    "appId": "FIREBASE_WEB_APP_ID",
}


def identity_provider_configured() -> bool:
    """True when all Firebase Admin credential variables are set."""
    return all([FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL, FIREBASE_PRIVATE_KEY])


def get_public_web_config():
    """
    Read the public Firebase web config from the environment.

    Returns:
        (config, missing) where missing lists the config keys with no value.
    """
    config = {key: os.getenv(env_name) for key, env_name in WEB_CONFIG_ENV.items()}
    missing = [key for key, value in config.items() if not value]
    return config, missing
