import requests

from autoorder import discord


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


def test_no_webhook_is_not_an_error(monkeypatch):
    monkeypatch.delenv("DISCORD_ALERTS_URL", raising=False)
    monkeypatch.delenv("DISCORD_HEALTH_WEBHOOK_URL", raising=False)
    assert discord.send_discord_message("hello") is False


def test_posts_content(monkeypatch):
    calls = []
    monkeypatch.setenv("DISCORD_ALERTS_URL", "https://discord.example/hook")
    monkeypatch.setattr(
        discord.requests,
        "post",
        lambda url, json=None, timeout=None: calls.append((url, json)) or FakeResponse(204),
    )

    assert discord.send_discord_message("created 3 batch(es)") is True
    assert calls == [
        ("https://discord.example/hook", {"content": "created 3 batch(es)", "username": "GMaps AutoOrder"})
    ]


def test_failures_are_swallowed(monkeypatch):
    monkeypatch.setenv("DISCORD_ALERTS_URL", "https://discord.example/hook")

    def boom(*args, **kwargs):
        raise requests.exceptions.ConnectionError("down")

    monkeypatch.setattr(discord.requests, "post", boom)
    assert discord.send_discord_message("x") is False

    monkeypatch.setattr(discord.requests, "post", lambda *a, **kw: FakeResponse(429, "rate limited"))
    assert discord.send_discord_message("x") is False
