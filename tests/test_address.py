import pytest

from crypto.encoding import strkey_decode, strkey_encode
from contract.address import Address, AddressKind

ZERO_ACCOUNT = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"

def test_zero_account_strkey():
    assert Address.account(bytes(32)).strkey == ZERO_ACCOUNT
    assert Address.from_strkey(ZERO_ACCOUNT) == Address.account(bytes(32))

def test_strkey_prefixes():
    assert Address.generate().strkey.startswith("G")
    assert Address.contract(b"\x01" * 32).strkey.startswith("C")

def test_from_strkey_preserves_kind_and_payload():
    for addr in (Address.generate(), Address.contract(bytes(range(32)))):
        parsed = Address.from_strkey(addr.strkey)
        assert parsed == addr
        assert parsed.kind is addr.kind

def test_bad_checksum_rejected():
    s = Address.generate().strkey
    # flip one character in the payload region
    tampered = s[:10] + ("A" if s[10] != "A" else "B") + s[11:]
    with pytest.raises(ValueError):
        Address.from_strkey(tampered)

def test_unknown_version_rejected():
    with pytest.raises(ValueError):
        Address.from_strkey(strkey_encode(18 << 3, bytes(32)))

def test_garbage_rejected():
    with pytest.raises(ValueError):
        Address.from_strkey("not-a-strkey!")

def test_payload_length_enforced():
    with pytest.raises(ValueError):
        Address.account(bytes(31))

def test_account_xdr():
    key = bytes(range(32))
    xdr = Address.account(key).to_xdr()
    assert xdr == bytes.fromhex("00000012" "00000000" "00000000") + key

def test_contract_xdr():
    h = b"\xab" * 32
    xdr = Address.contract(h).to_xdr()
    assert xdr == bytes.fromhex("00000012" "00000001") + h

def test_strkey_roundtrip_helpers():
    version, payload = strkey_decode(ZERO_ACCOUNT)
    assert version == 6 << 3
    assert payload == bytes(32)

def test_generated_addresses_differ():
    assert Address.generate() != Address.generate()
    assert Address.generate().kind is AddressKind.ACCOUNT
