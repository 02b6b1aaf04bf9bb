"""Shuttle transfer bot: next departures between the office and the metro."""
