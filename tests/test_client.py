import pytest
import requests

from crypto.encoding import b64url_encode
from contract.address import Address
from wallet import client as wallet_client
from wallet import keygen
from wallet.client import ContractRejected
from wallet.commitments import commit, new_salt

BASE = "http://contract.test"

class FakeResponse:
    """Flask test response seen through the requests.Response surface the client uses."""

    def __init__(self, resp):
        self.status_code = resp.status_code
        self._json = resp.get_json()

    def json(self):
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

@pytest.fixture
def routed(client, monkeypatch):
    """Send the wallet's HTTP calls to the in-process Flask app."""

    def fake_post(url, json=None, timeout=None):
        assert url.startswith(BASE)
        return FakeResponse(client.post(url[len(BASE):], json=json))

    def fake_get(url, timeout=None):
        assert url.startswith(BASE)
        return FakeResponse(client.get(url[len(BASE):]))

    monkeypatch.setattr(requests, "post", fake_post)
    monkeypatch.setattr(requests, "get", fake_get)

def test_health(routed):
    assert wallet_client.health(BASE)

def test_commitment_roundtrip(routed, owner, other_owner):
    salt = new_salt()
    digest = wallet_client.create_commitment(owner, 1_000_000, salt, BASE)

    assert len(digest) == 32
    assert wallet_client.verify_commitment(digest, owner, 1_000_000, salt, BASE)
    assert not wallet_client.verify_commitment(digest, owner, 1_000_001, salt, BASE)
    assert not wallet_client.verify_commitment(digest, other_owner, 1_000_000, salt, BASE)

def test_local_commit_matches_contract(routed, owner):
    salt = bytes([1, 2, 3, 4, 5])
    remote = wallet_client.create_commitment(owner, 42, salt, BASE)
    assert commit(owner, 42, salt) == b64url_encode(remote)

def test_rejection_carries_code(routed, owner):
    with pytest.raises(ContractRejected) as exc:
        wallet_client.create_commitment(owner, -1, b"", BASE)
    assert exc.value.code == 1

def test_privacy_and_escrow(routed):
    account, other = Address.generate(), Address.generate()
    assert wallet_client.privacy_status(account, BASE) is None
    wallet_client.enable_privacy(account, 1, BASE)
    wallet_client.enable_privacy(account, 2, BASE)
    assert wallet_client.privacy_status(account, BASE) == 2
    assert wallet_client.privacy_history(account, BASE) == [2, 1]

    assert wallet_client.create_escrow(account, other, 10, BASE) == 1
    assert wallet_client.create_escrow(account, other, 10, BASE) == 2

def test_new_salt_length():
    assert len(new_salt()) == 16
    assert len(new_salt(32)) == 32
    assert new_salt() != new_salt()

def test_keygen_and_load(tmp_path):
    sk_path, pk_path = tmp_path / "sk.pem", tmp_path / "pk.pem"
    addr = keygen.generate_account(sk_path, pk_path)

    assert addr.strkey.startswith("G")
    assert keygen.load_account(pk_path) == addr

def test_load_account_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        keygen.load_account(tmp_path / "missing.pem")

def test_cli_commit_and_verify(routed, tmp_path, monkeypatch, capsys):
    sk_path, pk_path = tmp_path / "sk.pem", tmp_path / "pk.pem"
    account = keygen.generate_account(sk_path, pk_path)
    monkeypatch.setattr(wallet_client, "load_account", lambda: account)

    wallet_client.main(["--url", BASE, "commit", "500", "--salt", "090909"])
    out = capsys.readouterr().out
    digest = out.split("commitment:")[1].split()[0]
    assert bytes.fromhex(digest) == wallet_client.create_commitment(account, 500, bytes([9, 9, 9]), BASE)

    wallet_client.main(["--url", BASE, "verify", digest, "500", "090909"])
    assert "Commitment valid: True" in capsys.readouterr().out

    wallet_client.main(["--url", BASE, "verify", digest, "501", "090909"])
    assert "Commitment valid: False" in capsys.readouterr().out

def test_cli_verify_with_explicit_owner(routed, owner, capsys):
    digest = wallet_client.create_commitment(owner, 7, b"", BASE)
    wallet_client.main(["--url", BASE, "verify", digest.hex(), "7", "", "--owner", owner.strkey])
    assert "Commitment valid: True" in capsys.readouterr().out

@pytest.mark.parametrize("argv", [
    ["verify", "zz", "1", "00"],
    ["verify", "-AbC_", "1", "00"],
    ["verify", "00" * 32, "1", "not-hex"],
    ["commit", "5", "--salt", "xyz"],
    ["escrow", "GNOTASTRKEY", "10"],
])
def test_cli_bad_values_are_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        wallet_client.main(["--url", BASE] + argv)
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err
