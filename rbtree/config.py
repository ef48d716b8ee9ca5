"""
Configuration for the red-black tree container.
"""

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TreeConfig:
    """
    Tunables for a RedBlackTree instance.

    Attributes:
        validate_on_mutation: Run the full invariant check after every
            add/remove. O(N) per mutation, meant for debugging and tests.
        channel_queue_size: Depth of the handoff between a channel producer
            and its consumer. 0 is an unbuffered rendezvous.
    """

    validate_on_mutation: bool = False
    channel_queue_size: int = 0

    def __post_init__(self) -> None:
        if self.channel_queue_size < 0:
            raise ValueError(
                f"channel_queue_size must be >= 0, got {self.channel_queue_size}"
            )

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """Build a config from RBTREE_VALIDATE and RBTREE_CHANNEL_QUEUE_SIZE."""
        validate = os.environ.get("RBTREE_VALIDATE", "").strip().lower() in _TRUTHY
        raw_size = os.environ.get("RBTREE_CHANNEL_QUEUE_SIZE", "0").strip() or "0"
        try:
            queue_size = int(raw_size)
        except ValueError:
            raise ValueError(
                f"RBTREE_CHANNEL_QUEUE_SIZE must be an integer, got {raw_size!r}"
            ) from None
        return cls(validate_on_mutation=validate, channel_queue_size=queue_size)


def configure_logging(level: str | None = None) -> None:
    """Set up root logging, taking the level from LOG_LEVEL when not given."""
    logging.basicConfig(
        level=(level or os.environ.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
