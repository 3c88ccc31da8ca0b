"""Procedural full-screen background shading."""
