"""Text transformers and their factory."""

from lingform.transform.factory import TextTransformerFactory, default_factory, get_transformer
from lingform.transform.transformer import TextTransformer, TransformerState

__all__ = [
    "TextTransformer",
    "TextTransformerFactory",
    "TransformerState",
    "default_factory",
    "get_transformer",
]
