"""Structural patterns: how classes and objects are composed."""
