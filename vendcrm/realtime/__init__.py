"""Realtime activity feed.

A single relay object polls the activity table and fans each new row out to
every open connection, whether it arrived over the raw ``/ws`` WebSocket or
the Socket.IO mount used by the frontend.
"""
