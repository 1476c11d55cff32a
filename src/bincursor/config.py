"""Configuration for the growable writer buffer.

The defaults reproduce the standard growth policy: start at 256 bytes, double
while the buffer is smaller than 2 KiB, then grow in 2 KiB steps.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INITIAL_CAPACITY = 256
DEFAULT_GROWTH_THRESHOLD = 2048
DEFAULT_GROWTH_STEP = 2048


class WriterConfig(BaseModel):
    """Buffer sizing parameters for BinaryWriter.

    Attributes:
        initial_capacity: Bytes allocated at construction (default 256).
            A good estimate of the final output size avoids reallocations.
        growth_threshold: Capacity at which growth switches from doubling
            to fixed steps (default 2048).
        growth_step: Bytes added per growth once the threshold is reached
            (default 2048).

    Examples:
        ```python
        from bincursor import BinaryWriter, WriterConfig

        # Large records: skip the doubling phase entirely
        config = WriterConfig(initial_capacity=4096, growth_step=16384)
        writer = BinaryWriter(config=config)
        ```
    """

    model_config = ConfigDict(frozen=True)

    initial_capacity: int = Field(default=DEFAULT_INITIAL_CAPACITY, ge=0)
    growth_threshold: int = Field(default=DEFAULT_GROWTH_THRESHOLD, ge=0)
    growth_step: int = Field(default=DEFAULT_GROWTH_STEP, gt=0)

    def next_capacity(self, capacity: int, required: int) -> int:
        """Compute the capacity to grow to so that `required` bytes fit.

        Args:
            capacity: Current capacity in bytes
            required: Minimum capacity needed by the pending write

        Returns:
            New capacity (always >= required)
        """
        if capacity >= self.growth_threshold:
            candidate = capacity + self.growth_step
        else:
            candidate = capacity * 2

        # Doubling may not be enough (large writes, capacity 0, seek ahead)
        return max(candidate, required)
