"""Adapters translating external payloads into domain records."""
