from pathlib import Path

from crypto.keys import generate_keypair, load_pk, raw_public_key
from contract.address import Address
from wallet import config

def generate_account(sk_path: Path = config.SK_PATH, pk_path: Path = config.PK_PATH) -> Address:
    sk = generate_keypair(sk_path, pk_path)
    return Address.account(raw_public_key(sk))

def load_account(pk_path: Path = config.PK_PATH) -> Address:
    if not pk_path.exists():
        raise FileNotFoundError("No account key stored. Run python3 -m wallet.keygen")
    return Address.account(raw_public_key(load_pk(pk_path)))

if __name__ == "__main__":
    addr = generate_account()
    print("Account generated.")
    print("address:", addr.strkey)
