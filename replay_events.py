#!/usr/bin/env python3
"""
Replay recorded auction events through the analytics aggregator.

The input file holds a JSON list of ``{"eventType": ..., "args": ...}``
objects, in delivery order. The first object may instead be
``{"enable": {...options...}}`` to set enable-time options.

Usage:
    python replay_events.py events.json
    python replay_events.py events.json --send
"""

import argparse
import json
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replay auction events")
    parser.add_argument("path", help="JSON file with recorded events")
    parser.add_argument(
        "--send",
        action="store_true",
        help="POST telemetry to the analytics endpoint instead of printing it",
    )
    args = parser.parse_args(argv)

    from src.vlyby.analytics import EventAggregator, HttpTransport, InMemoryTransport

    try:
        with open(args.path) as f:
            events = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {args.path}: {e}")
        sys.exit(1)

    transport = HttpTransport(blocking=True) if args.send else InMemoryTransport()
    aggregator = EventAggregator(transport=transport)

    for entry in events:
        if not isinstance(entry, dict):
            continue
        if "enable" in entry:
            aggregator.enable(entry["enable"])
            continue
        aggregator.track(entry.get("eventType"), entry.get("args"))

    if isinstance(transport, InMemoryTransport):
        for sent in transport.sent:
            print(json.dumps(json.loads(sent.body), indent=2))


if __name__ == "__main__":
    main()
