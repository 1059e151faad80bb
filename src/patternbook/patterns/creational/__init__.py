"""Creational patterns - object creation."""
