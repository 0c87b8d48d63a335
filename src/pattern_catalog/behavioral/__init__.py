"""Behavioral patterns: how objects communicate and share responsibility."""
