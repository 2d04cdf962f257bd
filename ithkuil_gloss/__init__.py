"""
ithkuil_gloss: Ithkuil IV Morphological Decoder
Decodes written Ithkuil words into interlinear glosses.
"""

from typing import Iterable, Optional

__version__ = "0.1.0"


def decode(
    raw_word: str,
    precision: int = 1,
    ignore_defaults: bool = True,
    lexicon=None,
):
    """
    Decode one word (or hyphen-joined concatenation chain).

    Failures are returned, never raised.

    Args:
        raw_word: The word as written, punctuation allowed around it.
        precision: 0 for bare abbreviations, 1 for abbreviations with
            dictionary meanings, 2 or more for full names.
        ignore_defaults: Hide category values that are the default.
        lexicon: Root and affix lexicon. If None, uses the default one.

    Returns:
        A Gloss, whose ``str()`` renders at the given settings, or an Error.

    Example:
        >>> import ithkuil_gloss
        >>> str(ithkuil_gloss.decode("khe"))
        'Obv/DET-ABS'
        >>> str(ithkuil_gloss.decode("khe", precision=2))
        'obviative/detrimental-absolutive'
    """
    from ithkuil_gloss.glosses import Gloss
    from ithkuil_gloss.parsing import parse_word

    outcome = parse_word(raw_word, lexicon)
    if isinstance(outcome, Gloss):
        return outcome.rendered_with(precision, ignore_defaults)
    return outcome


def gloss(
    raw_word: str,
    precision: int = 1,
    ignore_defaults: bool = True,
    lexicon=None,
):
    """
    Decode one word into a GlossResult model.

    Example:
        >>> import ithkuil_gloss
        >>> ithkuil_gloss.gloss("ëha").error
        'Unknown VnCn: ëh'
    """
    from ithkuil_gloss.models import GlossResult

    outcome = decode(raw_word, precision, ignore_defaults, lexicon)
    return GlossResult.from_outcome(raw_word, outcome, precision, ignore_defaults)


def gloss_many(
    raw_words: Iterable[str],
    precision: int = 1,
    ignore_defaults: bool = True,
    lexicon: Optional[object] = None,
):
    """
    Decode several words independently into a BatchResult.

    A word that fails to decode does not affect the others.

    Example:
        >>> import ithkuil_gloss
        >>> batch = ithkuil_gloss.gloss_many(["khe", "ëha"])
        >>> [r.ok for r in batch.results]
        [True, False]
    """
    from ithkuil_gloss.lexicon import get_default_lexicon
    from ithkuil_gloss.models import BatchResult

    if lexicon is None:
        lexicon = get_default_lexicon()

    results = [gloss(w, precision, ignore_defaults, lexicon) for w in raw_words]
    return BatchResult(results=results, precision=precision, ignore_defaults=ignore_defaults)
