"""Tiered chord lookup.

Resolves any chord-name string to a ``LookupResult``. The first tier that
succeeds wins:

1. ``found``: the normalized name is in the curated dictionary.
2. ``generated``: the quality has a formula; notes and voicings are derived.
3. ``partial``: as generated, but tones were dropped for playability.
4. ``similar``: the root is valid but the quality is not; the result
   carries did-you-mean suggestions with the same root.
5. ``unknown``: nothing could be made of the input.

Lookup never raises for bad input.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

import numpy as np

from chord_resolver.config import ResolverConfig
from chord_resolver.dictionary import GUITAR_CHORDS
from chord_resolver.formulas import CHORD_FORMULAS
from chord_resolver.models import LookupResult, ResolvedChord
from chord_resolver.normalizer import parse_chord_name
from chord_resolver.notes import generate_notes
from chord_resolver.pitch_class import index_of
from chord_resolver.voicing import build_voicings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from chord_resolver.models import ChordEntry, GeneratedChord, ParsedChord, Voicing

logger = logging.getLogger(__name__)

# Tone caps tried when no voicing sounds the generated chord
VOICING_TONE_CAPS: tuple[int, ...] = (4, 3)


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings.

    Examples
    --------
    >>> levenshtein("mz", "m")
    1
    >>> levenshtein("maj7", "m7")
    2
    """
    n = len(a)
    m = len(b)
    matrix = np.zeros((n + 1, m + 1), dtype=np.int64)
    matrix[:, 0] = np.arange(n + 1)
    matrix[0, :] = np.arange(m + 1)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i, j] = min(
                matrix[i - 1, j] + 1,
                matrix[i, j - 1] + 1,
                matrix[i - 1, j - 1] + cost,
            )

    return int(matrix[n, m])


def _omission_warning(omitted: tuple[str, ...]) -> str:
    return f"Simplified chord: omitted the {', '.join(omitted)} for playability"


class ChordResolver:
    """Resolve chord names against a curated dictionary.

    Parameters
    ----------
    dictionary : Mapping[str, ChordEntry]
        Curated entries keyed by canonical name.
    config : ResolverConfig | None
        Pipeline limits; the defaults when None.

    Examples
    --------
    >>> resolver = ChordResolver()
    >>> resolver.lookup("Am").status
    'found'
    >>> resolver.lookup("Am9").status
    'generated'
    >>> resolver.lookup("Amz").suggestions[0]
    'Am'
    """

    def __init__(
        self,
        dictionary: Mapping[str, ChordEntry] = GUITAR_CHORDS,
        config: ResolverConfig | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.config = config if config is not None else ResolverConfig()

        # (root pitch class, suffix) -> dictionary key, so "Bb" finds "A#"
        self._by_pitch: dict[tuple[int, str], str] = {}
        for key in dictionary:
            parsed = parse_chord_name(key)
            if parsed is not None:
                self._by_pitch.setdefault((index_of(parsed.root), parsed.suffix), key)

        if self.config.cache_size > 0:
            self._lookup = functools.lru_cache(maxsize=self.config.cache_size)(self._resolve)
        else:
            self._lookup = self._resolve

    def lookup(self, name: str) -> LookupResult:
        """Resolve one chord name.

        Parameters
        ----------
        name : str
            Chord name in any common spelling.

        Returns
        -------
        LookupResult
            The outcome; ``display_name`` is always set.
        """
        if not isinstance(name, str):
            return LookupResult(status="unknown", display_name="")
        text = name.strip()
        if not text or len(text) > self.config.max_name_length:
            return LookupResult(status="unknown", display_name=text)
        return self._lookup(text)

    def lookup_many(self, names: Iterable[str]) -> list[LookupResult]:
        """Resolve chord names, one result per name, in order."""
        return [self.lookup(name) for name in names]

    def can_generate(self, name: str) -> bool:
        """True if the chord's notes can be derived from the formula table."""
        parsed = parse_chord_name(name, self.config.max_name_length)
        return parsed is not None and generate_notes(parsed.root, parsed.suffix) is not None

    def _find_entry(self, parsed: ParsedChord) -> ChordEntry | None:
        entry = self.dictionary.get(parsed.canonical)
        if entry is not None:
            return entry
        key = self._by_pitch.get((index_of(parsed.root), parsed.suffix))
        return self.dictionary[key] if key is not None else None

    def _resolve(self, text: str) -> LookupResult:
        parsed = parse_chord_name(text, self.config.max_name_length)
        if parsed is None:
            logger.debug("Unknown chord %r: no valid root", text)
            return LookupResult(status="unknown", display_name=text)

        entry = self._find_entry(parsed)
        if entry is not None:
            logger.debug("Found %r as dictionary entry %r", text, entry.canonical)
            generated = generate_notes(parsed.root, parsed.suffix)
            chord = ResolvedChord(
                canonical=parsed.canonical,
                display=parsed.display,
                root=parsed.root,
                quality=entry.quality,
                extensions=entry.extensions,
                notes=generated.notes if generated is not None else (),
                voicings=entry.voicings,
            )
            return LookupResult(status="found", display_name=parsed.display, chord=chord)

        result = self._generate(parsed)
        if result is not None:
            return result

        suggestions = self.suggest(parsed)
        if suggestions:
            logger.debug("No formula for %r, suggesting %s", text, suggestions)
            return LookupResult(status="similar", display_name=parsed.display, suggestions=suggestions)

        logger.debug("Unknown chord %r", text)
        return LookupResult(status="unknown", display_name=parsed.display)

    def _generate(self, parsed: ParsedChord) -> LookupResult | None:
        generated = generate_notes(parsed.root, parsed.suffix, max_tones=self.config.max_chord_tones)
        if generated is None:
            return None

        voicings = self._voicings(parsed.root, generated)
        if not voicings and self.config.max_voicings > 0:
            for cap in VOICING_TONE_CAPS:
                if cap >= len(generated.notes):
                    continue
                reduced = generate_notes(parsed.root, parsed.suffix, max_tones=cap)
                if reduced is None or reduced.omitted == generated.omitted:
                    continue
                voicings = self._voicings(parsed.root, reduced)
                if voicings:
                    logger.debug("Reduced %r to %d tones to find a voicing", parsed.canonical, cap)
                    generated = reduced
                    break

        chord = ResolvedChord(
            canonical=parsed.canonical,
            display=parsed.display,
            root=parsed.root,
            quality=parsed.quality,
            extensions=parsed.extensions,
            notes=generated.notes,
            voicings=voicings,
            omitted=generated.omitted,
        )
        if generated.is_partial:
            logger.debug("Generated %r as partial, omitted %s", parsed.canonical, generated.omitted)
            return LookupResult(
                status="partial",
                display_name=parsed.display,
                chord=chord,
                warning=_omission_warning(generated.omitted),
                is_generated=True,
            )
        logger.debug("Generated %r from formula %r", parsed.canonical, parsed.suffix)
        return LookupResult(status="generated", display_name=parsed.display, chord=chord, is_generated=True)

    def _voicings(self, root: str, generated: GeneratedChord) -> tuple[Voicing, ...]:
        return build_voicings(generated.notes, root, self.config.constraints, self.config.max_voicings)

    def suggest(self, parsed: ParsedChord) -> tuple[str, ...]:
        """Rank known chord names with the same root as ``parsed``.

        Known names are the dictionary keys plus the root combined with every
        formula key. Candidates are ranked by edit distance between suffixes
        (case-insensitive), then dictionary names first, then by name. If none
        is close enough, the longest known suffix that starts the input's
        suffix is offered instead.

        Parameters
        ----------
        parsed : ParsedChord
            The chord that failed to resolve.

        Returns
        -------
        tuple[str, ...]
            At most ``config.max_suggestions`` names.
        """
        limit = self.config.max_suggestions
        if limit <= 0:
            return ()

        root_pc = index_of(parsed.root)
        known: dict[str, tuple[str, bool]] = {}
        for (pc, suffix), key in self._by_pitch.items():
            if pc == root_pc:
                known[key] = (suffix, True)
        for suffix in CHORD_FORMULAS:
            known.setdefault(parsed.root + suffix, (suffix, False))

        target = parsed.suffix.lower()
        ranked = []
        for name, (suffix, curated) in known.items():
            distance = levenshtein(target, suffix.lower())
            if 0 < distance <= self.config.max_suggestion_distance:
                ranked.append((distance, not curated, name))
        if ranked:
            ranked.sort()
            return tuple(name for _, _, name in ranked[:limit])

        prefixes = [
            (len(suffix), curated, name)
            for name, (suffix, curated) in known.items()
            if suffix and target.startswith(suffix.lower())
        ]
        if prefixes:
            return (max(prefixes)[2],)
        return ()

    def cache_clear(self) -> None:
        """Drop memoized lookups."""
        if hasattr(self._lookup, "cache_clear"):
            self._lookup.cache_clear()


@functools.lru_cache(maxsize=1)
def get_default_resolver() -> ChordResolver:
    """Shared resolver over the bundled guitar dictionary."""
    return ChordResolver()


def lookup_chord(name: str) -> LookupResult:
    """Resolve a chord name with the default resolver.

    Examples
    --------
    >>> result = lookup_chord("G7")
    >>> result.status, result.notes
    ('found', ('G', 'B', 'D', 'F'))
    >>> lookup_chord("").status
    'unknown'
    """
    return get_default_resolver().lookup(name)


def lookup_chords(names: Iterable[str]) -> list[LookupResult]:
    """Resolve chord names with the default resolver, preserving order."""
    return get_default_resolver().lookup_many(names)


def default_voicing(chord: ResolvedChord | LookupResult | None, index: int = 0) -> Voicing | None:
    """Return a voicing of a resolved chord, or None if there is none at ``index``."""
    if isinstance(chord, LookupResult):
        chord = chord.chord
    if chord is None:
        return None
    return chord.voicing(index)


def has_any_diagrams(names: Iterable[str]) -> bool:
    """True if at least one chord name resolves to something renderable."""
    return any(result.status in ("found", "generated", "partial") for result in lookup_chords(names))
