"""Tests for the event replay command."""

import json

import pytest

import replay_events


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Replay against the default configuration."""
    for name in ("VLYBY_CONFIG_PATH", "VLYBY_ANALYTICS_ENDPOINT", "VLYBY_BLOCKING_SEND"):
        monkeypatch.delenv(name, raising=False)


def printed_payloads(out):
    """Indented telemetry bodies; single-line log records are skipped."""
    text = "\n".join(
        line for line in out.splitlines()
        if not (line.startswith("{") and line.endswith("}"))
    ).strip()
    decoder = json.JSONDecoder()
    payloads = []
    index = 0
    while index < len(text):
        payload, index = decoder.raw_decode(text, index)
        payloads.append(payload)
        while index < len(text) and text[index].isspace():
            index += 1
    return payloads


def write_events(tmp_path, events):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(events))
    return str(path)


class TestReplayEvents:
    """Test suite for the replay_events dry run."""

    def test_dry_run_prints_won_payload(self, tmp_path, capsys):
        """Enable options flow into the printed telemetry."""
        path = write_events(tmp_path, [
            {"enable": {"pubId": "pub-1", "siteId": "site-1"}},
            {"eventType": "bidWon", "args": {"bidder": "vlyby", "cpm": 1.25}},
        ])

        replay_events.main([path])

        payloads = printed_payloads(capsys.readouterr().out)

        assert len(payloads) == 1
        payload = payloads[0]
        assert payload["pubId"] == "pub-1"
        assert payload["siteId"] == "site-1"
        assert payload["events"][0]["status"] == "bidWon"
        assert payload["events"][0]["bids"][0]["price"] == "1.25"

    def test_non_object_entries_are_skipped(self, tmp_path, capsys):
        path = write_events(tmp_path, ["junk", {"eventType": "noBid", "args": {"bidder": "a"}}])

        replay_events.main([path])

        assert printed_payloads(capsys.readouterr().out) == []

    def test_unreadable_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            replay_events.main([str(tmp_path / "missing.json")])

        assert exc_info.value.code == 1
        assert "cannot read" in capsys.readouterr().out
