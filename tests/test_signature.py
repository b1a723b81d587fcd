import json

from nacl.signing import SigningKey

from conftest import TIMESTAMP
from rank_bot.discord_service import DiscordService

PING = {"id": "interaction-1", "type": 1}


def test_missing_signature_header_is_rejected(client, discord_env) -> None:
    response = client.post(
        "/",
        data=json.dumps(PING),
        headers={"X-Signature-Timestamp": TIMESTAMP},
    )

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid Request Signature"


def test_missing_timestamp_header_is_rejected(client, discord_env, signing_key: SigningKey) -> None:
    body = json.dumps(PING).encode()
    signature = signing_key.sign(TIMESTAMP.encode() + body).signature.hex()

    response = client.post("/", data=body, headers={"X-Signature-Ed25519": signature})

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid Request Signature"


def test_signature_from_another_key_is_rejected(client, discord_env) -> None:
    body = json.dumps(PING).encode()
    signature = SigningKey.generate().sign(TIMESTAMP.encode() + body).signature.hex()

    response = client.post(
        "/",
        data=body,
        headers={"X-Signature-Ed25519": signature, "X-Signature-Timestamp": TIMESTAMP},
    )

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid Request Signature"


def test_tampered_body_is_rejected(client, discord_env, signing_key: SigningKey) -> None:
    signature = signing_key.sign(TIMESTAMP.encode() + json.dumps(PING).encode()).signature.hex()

    response = client.post(
        "/",
        data=json.dumps({"id": "interaction-1", "type": 2}),
        headers={"X-Signature-Ed25519": signature, "X-Signature-Timestamp": TIMESTAMP},
    )

    assert response.status_code == 400


def test_verify_signature_accepts_valid_signature(signing_key: SigningKey) -> None:
    body = b'{"type":1}'
    signature = signing_key.sign(TIMESTAMP.encode() + body).signature.hex()
    public_key = signing_key.verify_key.encode().hex()

    assert DiscordService.verify_signature(signature, TIMESTAMP, body, public_key) is True


def test_verify_signature_rejects_other_timestamp(signing_key: SigningKey) -> None:
    body = b'{"type":1}'
    signature = signing_key.sign(TIMESTAMP.encode() + body).signature.hex()
    public_key = signing_key.verify_key.encode().hex()

    assert DiscordService.verify_signature(signature, "1700000001", body, public_key) is False


def test_verify_signature_fails_closed_on_malformed_hex(signing_key: SigningKey) -> None:
    public_key = signing_key.verify_key.encode().hex()

    assert DiscordService.verify_signature("not-hex", TIMESTAMP, b"{}", public_key) is False
    assert DiscordService.verify_signature("00" * 64, TIMESTAMP, b"{}", "zz") is False
    assert DiscordService.verify_signature(None, TIMESTAMP, b"{}", public_key) is False
