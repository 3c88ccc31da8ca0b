"""Environment configuration helpers."""

from backdrop.utilities.env.config import Configuration as Configuration
from backdrop.utilities.env.enums import ColorMapping as ColorMapping
