import os
from pathlib import Path

CONTRACT_URL = os.environ.get("QUICKEX_URL", "http://127.0.0.1:5003")

WALLET_DIR = Path(os.environ.get("QUICKEX_WALLET_DIR", "wallet_data"))
SK_PATH = WALLET_DIR / "account_sk.pem"
PK_PATH = WALLET_DIR / "account_pk.pem"

TIMEOUT_S = 5
