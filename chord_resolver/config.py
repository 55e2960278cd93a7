"""Resolver configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from chord_resolver.voicing.models import GeneratorConstraints


@dataclass(frozen=True)
class ResolverConfig:
    """Tunable limits of the lookup pipeline.

    Parameters
    ----------
    max_name_length : int
        Longer chord names (after trimming) resolve as unknown.
    max_suggestions : int
        Maximum number of did-you-mean suggestions.
    max_suggestion_distance : int
        Largest edit distance between suffixes for a suggestion.
    max_chord_tones : int
        Tone cap for generated chords; larger chords become partial.
    max_voicings : int
        Number of voicings generated per chord.
    cache_size : int
        Size of the lookup memo; 0 disables it.
    constraints : GeneratorConstraints
        Voicing search limits.

    Examples
    --------
    >>> config = ResolverConfig().replace(max_suggestions=5)
    >>> config.max_suggestions, config.max_chord_tones
    (5, 5)
    """

    max_name_length: int = 50
    max_suggestions: int = 3
    max_suggestion_distance: int = 2
    max_chord_tones: int = 5
    max_voicings: int = 5
    cache_size: int = 256
    constraints: GeneratorConstraints = field(default_factory=GeneratorConstraints)

    def __post_init__(self) -> None:
        for name in ("max_name_length", "max_chord_tones"):
            if getattr(self, name) < 1:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ValueError(msg)
        for name in ("max_suggestions", "max_suggestion_distance", "max_voicings", "cache_size"):
            if getattr(self, name) < 0:
                msg = f"{name} must not be negative, got {getattr(self, name)}"
                raise ValueError(msg)

    def replace(self, **changes: object) -> ResolverConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
