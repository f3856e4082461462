"""
ASGI entry point for the listener monitor.

Used by uvicorn (see server.main). `.env` is loaded before the config is
read so SPEAKER_URL, DISTRACTION_POLICY etc. can live in a local file.
"""

from dotenv import load_dotenv

load_dotenv()

# pylint: disable=wrong-import-position
from config import AppConfig
from server.app import create_app

app = create_app(AppConfig.load_from_env())
