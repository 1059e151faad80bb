"""Behavioral patterns - object interaction and responsibility distribution."""
