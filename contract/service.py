import binascii
import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from crypto.encoding import b64url_decode, b64url_encode
from contract import config
from contract.address import Address
from contract.contract import QuickexContract
from contract.errors import ContractError, InvalidArgument
from contract.storage import JsonFileStorage

logger = logging.getLogger(__name__)

def parse_address(field: str, value: Any) -> Address:
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"Invalid or missing {field}")
    try:
        return Address.from_strkey(value)
    except ValueError as e:
        raise InvalidArgument(f"Invalid {field}: {e}") from e

def parse_b64(field: str, value: Any) -> bytes:
    if not isinstance(value, str):
        raise InvalidArgument(f"Invalid or missing {field}")
    try:
        return b64url_decode(value)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgument(f"Invalid {field}: not base64url") from e

def json_body() -> Dict[str, Any]:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data

def create_app(contract: QuickexContract) -> Flask:
    app = Flask(__name__)

    @app.errorhandler(ContractError)
    def contract_error(e: ContractError):
        return jsonify({"error": str(e), "code": e.code}), 400

    @app.get("/health")
    def health():
        return {"ok": contract.health_check()}, 200

    @app.post("/commitment")
    def create_commitment():
        """
        Request JSON:
        {
            "owner": "G... strkey",
            "amount": int (i128, >= 0),
            "salt": "base64url(...)" (<= 256 bytes)
        }
        """
        data = json_body()
        owner = parse_address("owner", data.get("owner"))
        salt = parse_b64("salt", data.get("salt", ""))

        digest = contract.create_amount_commitment(owner, data.get("amount"), salt)
        return jsonify({"commitment": b64url_encode(digest)}), 200

    @app.post("/commitment/verify")
    def verify_commitment():
        data = json_body()
        digest = parse_b64("commitment", data.get("commitment"))
        owner = parse_address("owner", data.get("owner"))
        salt = parse_b64("salt", data.get("salt", ""))

        valid = contract.verify_amount_commitment(digest, owner, data.get("amount"), salt)
        return jsonify({"valid": valid}), 200

    @app.post("/privacy")
    def enable_privacy():
        data = json_body()
        account = parse_address("account", data.get("account"))
        enabled = contract.enable_privacy(account, data.get("level"))
        return jsonify({"enabled": enabled}), 200

    @app.get("/privacy/<account>")
    def privacy_status(account: str):
        addr = parse_address("account", account)
        return jsonify({"account": addr.strkey, "level": contract.privacy_status(addr)}), 200

    @app.get("/privacy/<account>/history")
    def privacy_history(account: str):
        addr = parse_address("account", account)
        return jsonify({"account": addr.strkey, "history": contract.privacy_history(addr)}), 200

    @app.post("/escrow")
    def create_escrow():
        data = json_body()
        sender = parse_address("from", data.get("from"))
        recipient = parse_address("to", data.get("to"))
        escrow_id = contract.create_escrow(sender, recipient, data.get("amount"))
        return jsonify({"escrow_id": escrow_id}), 200

    @app.get("/escrow/<int:escrow_id>")
    def escrow_details(escrow_id: int):
        pair = contract.escrow_details(escrow_id)
        if pair is None:
            return jsonify({"error": f"Unknown escrow {escrow_id}"}), 404
        sender, recipient = pair
        return jsonify({"escrow_id": escrow_id, "from": sender.strkey, "to": recipient.strkey}), 200

    return app

def main():
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    storage = JsonFileStorage(config.STATE_PATH)
    logger.info("contract state at %s", config.STATE_PATH)
    app = create_app(QuickexContract(storage))
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)

if __name__ == '__main__':
    main()
