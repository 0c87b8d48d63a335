"""SOLID principles, each shown as a before/after pair."""
