import argparse
from typing import Any, Dict, List, Optional

import requests

from crypto.encoding import b64url_decode, b64url_encode
from contract.address import Address
from wallet import config
from wallet.commitments import new_salt
from wallet.keygen import generate_account, load_account

class ContractRejected(Exception):
    """The contract aborted the call (error body with a contract error code)."""

    def __init__(self, code: int, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code

def _check(r: requests.Response) -> Dict[str, Any]:
    if r.status_code == 400:
        body = r.json()
        if "code" in body:
            raise ContractRejected(body["code"], body.get("error", ""))
    r.raise_for_status()
    return r.json()

def _post(path: str, payload: Dict[str, Any], base_url: str) -> Dict[str, Any]:
    r = requests.post(f"{base_url}{path}", json=payload, timeout=config.TIMEOUT_S)
    return _check(r)

def _get(path: str, base_url: str) -> Dict[str, Any]:
    r = requests.get(f"{base_url}{path}", timeout=config.TIMEOUT_S)
    return _check(r)

def create_commitment(owner: Address, amount: int, salt: bytes, base_url: str = config.CONTRACT_URL) -> bytes:
    body = _post("/commitment", {
        "owner": owner.strkey,
        "amount": amount,
        "salt": b64url_encode(salt),
    }, base_url)
    return b64url_decode(body["commitment"])

def verify_commitment(commitment: bytes, owner: Address, amount: int, salt: bytes,
                      base_url: str = config.CONTRACT_URL) -> bool:
    body = _post("/commitment/verify", {
        "commitment": b64url_encode(commitment),
        "owner": owner.strkey,
        "amount": amount,
        "salt": b64url_encode(salt),
    }, base_url)
    return body["valid"]

def enable_privacy(account: Address, level: int, base_url: str = config.CONTRACT_URL) -> bool:
    body = _post("/privacy", {"account": account.strkey, "level": level}, base_url)
    return body["enabled"]

def privacy_status(account: Address, base_url: str = config.CONTRACT_URL) -> Optional[int]:
    return _get(f"/privacy/{account.strkey}", base_url)["level"]

def privacy_history(account: Address, base_url: str = config.CONTRACT_URL) -> List[int]:
    return _get(f"/privacy/{account.strkey}/history", base_url)["history"]

def create_escrow(sender: Address, recipient: Address, amount: int, base_url: str = config.CONTRACT_URL) -> int:
    body = _post("/escrow", {"from": sender.strkey, "to": recipient.strkey, "amount": amount}, base_url)
    return body["escrow_id"]

def health(base_url: str = config.CONTRACT_URL) -> bool:
    return _get("/health", base_url)["ok"]

def hex_bytes(s: str) -> bytes:
    """
    CLI form of commitments and salts. Hex never starts with '-', so
    argparse never reads a value as an option.
    """
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not hex: {s!r}") from e

def strkey(s: str) -> Address:
    try:
        return Address.from_strkey(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e

def main(argv=None):
    p = argparse.ArgumentParser(prog="quickex")
    p.add_argument("--url", default=config.CONTRACT_URL)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("keygen")
    sub.add_parser("health")

    c = sub.add_parser("commit")
    c.add_argument("amount", type=int)
    c.add_argument("--salt", type=hex_bytes, default=None, help="hex salt; random 16 bytes if omitted")

    v = sub.add_parser("verify")
    v.add_argument("commitment", type=hex_bytes)
    v.add_argument("amount", type=int)
    v.add_argument("salt", type=hex_bytes)
    v.add_argument("--owner", type=strkey, default=None, help="strkey; defaults to the wallet account")

    e = sub.add_parser("enable-privacy")
    e.add_argument("level", type=int)

    sub.add_parser("status")
    sub.add_parser("history")

    x = sub.add_parser("escrow")
    x.add_argument("to", type=strkey)
    x.add_argument("amount", type=int)

    args = p.parse_args(argv)
    url = args.url

    if args.cmd == "keygen":
        print("address:", generate_account().strkey)
    elif args.cmd == "health":
        print("healthy:", health(url))
    elif args.cmd == "commit":
        salt = args.salt if args.salt is not None else new_salt()
        digest = create_commitment(load_account(), args.amount, salt, url)
        print("commitment:", digest.hex())
        print("salt:", salt.hex())
    elif args.cmd == "verify":
        owner = args.owner or load_account()
        ok = verify_commitment(args.commitment, owner, args.amount, args.salt, url)
        print("Commitment valid:", ok)
    elif args.cmd == "enable-privacy":
        print("enabled:", enable_privacy(load_account(), args.level, url))
    elif args.cmd == "status":
        print("privacy level:", privacy_status(load_account(), url))
    elif args.cmd == "history":
        print("privacy history:", privacy_history(load_account(), url))
    elif args.cmd == "escrow":
        escrow_id = create_escrow(load_account(), args.to, args.amount, url)
        print("escrow id:", escrow_id)

if __name__ == "__main__":
    main()
