"""Notification service package.

Layers follow the usual split: ``domain`` entities, ``application`` use
cases, ``infrastructure`` persistence and live delivery, ``interfaces`` for
the HTTP API and the reconnecting client.
"""
