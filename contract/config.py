import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("QUICKEX_DATA_DIR", "contract_data"))
STATE_PATH = DATA_DIR / "state.json"

HOST = os.environ.get("QUICKEX_HOST", "127.0.0.1")
PORT = int(os.environ.get("QUICKEX_PORT", "5003"))
DEBUG = os.environ.get("QUICKEX_DEBUG", "") == "1"
