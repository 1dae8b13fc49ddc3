"""Exceptions raised by DeckMorph."""


class DeckMorphError(Exception):
    """Base class for every DeckMorph error."""


class InvalidDeckError(DeckMorphError, ValueError):
    """The slide deck handed in by the caller failed validation."""


class TransitionSynthesisError(DeckMorphError):
    """An internal invariant of transition synthesis was violated.

    These indicate a defect in the engine, not bad input, and are never
    recovered from.
    """


class SharedElementTypeError(TransitionSynthesisError):
    """A morph link resolved to a shape that is not a rect."""


class MissingSharedElementError(TransitionSynthesisError):
    """A shared-identity link points at a shape that does not exist."""


class ConfigurationError(DeckMorphError, ValueError):
    """An unknown preset or an invalid transition setting was requested."""
