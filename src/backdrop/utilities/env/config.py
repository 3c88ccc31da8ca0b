from backdrop.utilities.env.rendering import RenderingConfiguration


class Configuration(RenderingConfiguration):
    """Aggregate environment configuration helpers."""
