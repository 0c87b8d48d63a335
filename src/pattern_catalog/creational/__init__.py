"""Creational patterns: how objects get created."""
