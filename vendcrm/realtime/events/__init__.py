"""Payload builders and store queries for realtime events.

These modules read from the database and shape payloads only. They must not
hold connections or talk to a socket server.
"""
