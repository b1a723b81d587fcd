import json
import os

os.environ.setdefault("LOCAL_DEV", "1")

import pytest  # noqa: E402
from flask import Flask, request  # noqa: E402
from nacl.signing import SigningKey  # noqa: E402

from rank_bot.main import rank_interactions  # noqa: E402

BOT_TOKEN = "bot-token"
APPLICATION_ID = "123456789012345678"
TIMESTAMP = "1700000000"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200, text: str | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@pytest.fixture
def signing_key() -> SigningKey:
    return SigningKey.generate()


@pytest.fixture
def discord_env(monkeypatch: pytest.MonkeyPatch, signing_key: SigningKey) -> dict[str, str]:
    env = {
        "DISCORD_BOT_TOKEN": BOT_TOKEN,
        "DISCORD_APPLICATION_ID": APPLICATION_ID,
        "DISCORD_PUBLIC_KEY": signing_key.verify_key.encode().hex(),
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("HTTP_TIMEOUT_SECONDS", raising=False)
    return env


@pytest.fixture
def client():
    app = Flask("rank-bot-test")
    app.add_url_rule(
        "/",
        "rank_interactions",
        lambda: rank_interactions(request),
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    )
    return app.test_client()


@pytest.fixture
def signed_post(client, signing_key: SigningKey):
    """POST a body signed with the test key."""

    def _post(payload, *, timestamp: str = TIMESTAMP):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        signature = signing_key.sign(timestamp.encode() + body).signature.hex()
        return client.post(
            "/",
            data=body,
            headers={
                "X-Signature-Ed25519": signature,
                "X-Signature-Timestamp": timestamp,
                "Content-Type": "application/json",
            },
        )

    return _post


def rank_command(value, *, option_type: int = 3, option_name: str = "riotid") -> dict:
    return {
        "id": "interaction-1",
        "type": 2,
        "data": {
            "id": "command-1",
            "name": "rank",
            "type": 1,
            "options": [{"name": option_name, "type": option_type, "value": value}],
        },
    }


def account_payload(latest_tier) -> dict:
    return {
        "data": {
            "riotAccount": {
                "gameName": "PlayerName",
                "tagLine": "Tag1",
                "puuid": "puuid-1",
                "valorantProfile": {
                    "internalUuid": "uuid-1",
                    "region": "na",
                    "level": 120,
                    "xp": 3000,
                    "lastPlayedAt": "2024-01-01T00:00:00Z",
                    "latestTier": latest_tier,
                    "latestRankedRating": 42,
                },
            }
        }
    }
