"""Structural patterns - object composition."""
