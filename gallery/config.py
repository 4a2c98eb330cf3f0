# gallery/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# loading env file
load_dotenv(".env")

BASE_DIR = Path(__file__).resolve().parent.parent

# Configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
ASSETS_DIR = os.getenv("ASSETS_DIR", str(BASE_DIR / "assets"))
PUBLIC_DIR = os.getenv("PUBLIC_DIR", str(BASE_DIR / "public"))
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Fixed at startup, not tunable per request
PAGE_SIZE = 6
SUPPORTED_FORMATS = (".jpg", ".jpeg", ".png")

# Offline renamer only
RETRY_ATTEMPTS = int(os.getenv("RETRY_ATTEMPTS", 3))
RETRY_DELAY = float(os.getenv("RETRY_DELAY", 1))
