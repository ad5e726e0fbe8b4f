from pathlib import Path
import os
from dotenv import load_dotenv
import qtawesome as qta # type: ignore

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "movie_store.env")

MOVIE_STORE_URL = os.getenv(
    "MOVIE_STORE_URL",
    "https://frontend-movie-database-default-rtdb.firebaseio.com",
).rstrip("/")
MOVIE_STORE_TIMEOUT  = float(os.getenv("MOVIE_STORE_TIMEOUT", "10"))
MOVIE_RETRY_DELAY_MS = int(os.getenv("MOVIE_RETRY_DELAY_MS", "5000"))

if not MOVIE_STORE_URL.startswith(("http://", "https://")):
    raise EnvironmentError(f"MOVIE_STORE_URL must be an http(s) URL, got {MOVIE_STORE_URL!r}")
if MOVIE_RETRY_DELAY_MS <= 0:
    raise EnvironmentError("MOVIE_RETRY_DELAY_MS must be positive")

# File paths
LOG_PATH = Path(os.getenv("MOVIE_STORE_LOG", BASE_DIR / "movie_store.log"))

# UI constants
ACCENT_COLOR = "#3b82f6"
ERROR_COLOR  = "#ef4444"
ICON = lambda name: qta.icon(name, color=ACCENT_COLOR)

LOADING_TEXT   = "....LOADING...."
NO_MOVIES_TEXT = "No movies found."
