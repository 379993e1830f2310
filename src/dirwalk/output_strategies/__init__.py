"""Output strategies for rendering walk results."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy
from .tree_strategy import TreeOutputStrategy

__all__ = ["OutputStrategy", "JSONOutputStrategy", "TextOutputStrategy", "TreeOutputStrategy", "create_strategy"]

_STRATEGIES = {
    "text": TextOutputStrategy,
    "json": JSONOutputStrategy,
    "tree": TreeOutputStrategy,
}


def create_strategy(output_format: str, root_path: str) -> OutputStrategy:
    """Create the output strategy registered under output_format.

    Raises:
        ValueError: If output_format is not a known format.
    """
    try:
        strategy_class = _STRATEGIES[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}")
    return strategy_class(root_path)
