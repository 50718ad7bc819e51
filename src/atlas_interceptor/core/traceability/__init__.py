# src/atlas_interceptor/core/traceability/__init__.py
"""Rastreabilidade de invocações: Event Log e persistência JSON."""

from .event_log import EventLog, load_event_log, save_event_log

__all__ = ["EventLog", "load_event_log", "save_event_log"]
