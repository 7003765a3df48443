import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR))
PUBLIC_DIR = BASE_DIR / "public"

# File di stato
SONGS_PATH = DATA_DIR / "random.tmp.json"
PLAYLIST_PATH = DATA_DIR / "random.bplist"
PLAYLIST_FILENAME = "random.bplist"

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Aggiornamento
UPDATE_INTERVAL = int(os.getenv("UPDATE_INTERVAL", 60 * 60))  # 1 ora
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 10))

# BeatSaver
BEATSAVER_BASE_URL = os.getenv("BEATSAVER_BASE_URL", "https://api.beatsaver.com")
LATEST_PAGES = 10
USER_AGENT = "random-bplist/1.0"

# Metadati della playlist
PLAYLIST_TITLE = "Random BeatSaver Auto Playlist"
PLAYLIST_AUTHOR = "EvanBlokEnder"
PLAYLIST_SYNC_URL = os.getenv(
    "PLAYLIST_SYNC_URL",
    "https://beat-saber-playlist-auto-thing-by.onrender.com/random.bplist",
)
PLAYLIST_IMAGE = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
