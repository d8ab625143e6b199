"""Monitoring plugin that counts a substring in the tail of a log file."""
