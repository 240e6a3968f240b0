"""Realtime infrastructure (Socket.IO).

Viewers and hosts share one Socket.IO server; each presentation set is a room.
"""
