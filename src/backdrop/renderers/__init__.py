from backdrop.renderers.background import BackgroundRenderer, to_rgba8

__all__ = ["BackgroundRenderer", "to_rgba8"]
