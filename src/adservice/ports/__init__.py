"""Port interfaces (Protocols).

Application services depend only on these, never on concrete sources of
randomness.
"""

from .sampler import AdSampler, RandomAdSampler

__all__ = [
    "AdSampler",
    "RandomAdSampler",
]
