from pathlib import Path
from Crypto.PublicKey import ECC

ED25519_KEY_LEN = 32

def generate_keypair(sk_path: Path, pk_path: Path) -> ECC.EccKey:
    sk_path.parent.mkdir(parents=True, exist_ok=True)

    sk = ECC.generate(curve='Ed25519')
    pk = sk.public_key()

    sk_path.write_text(sk.export_key(format='PEM'), encoding='utf-8')
    pk_path.write_text(pk.export_key(format='PEM'), encoding='utf-8')
    return sk

def load_pk(pk_path: Path) -> ECC.EccKey:
    return ECC.import_key(pk_path.read_text(encoding='utf-8'))

def raw_public_key(key: ECC.EccKey) -> bytes:
    """
    32-byte Ed25519 public key (RFC8032 encoding).
    The SubjectPublicKeyInfo DER ends with exactly these bytes.
    """
    der = key.public_key().export_key(format='DER')
    return der[-ED25519_KEY_LEN:]
