import pytest

from contract.address import Address
from contract.contract import QuickexContract
from contract.service import create_app
from contract.storage import MemoryStorage

@pytest.fixture
def storage():
    return MemoryStorage()

@pytest.fixture
def contract(storage):
    return QuickexContract(storage)

@pytest.fixture
def client(contract):
    app = create_app(contract)
    app.config["TESTING"] = True
    return app.test_client()

@pytest.fixture
def owner():
    return Address.account(bytes(range(32)))

@pytest.fixture
def other_owner():
    return Address.account(bytes(range(1, 33)))
