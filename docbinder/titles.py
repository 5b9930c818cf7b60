"""Strip the documentation site label from page titles for the contents page.

Rendered pages report titles such as ``"NextUI Docs — Usage"`` or
``"Customizing — Next UI Docs"``. The contents page only needs the section
name, so :func:`clean_toc_title` removes the site label together with its
separator.

Examples
--------
>>> clean_toc_title("NextUI Docs — Usage")
'Usage'
>>> clean_toc_title("Customizing | next ui docs")
'Customizing'
>>> clean_toc_title("  FAQ ")
'FAQ'
"""

from __future__ import annotations

import functools
import re

from ._constants import DEFAULT_TITLE_AFFIX

SEPARATOR_CLASS = r"[-–—:|]"


@functools.lru_cache(maxsize=16)
def _affix_patterns(affix: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    label = rf"(?:{affix})"
    prefix = re.compile(rf"^(?:\s*{label}\s*{SEPARATOR_CLASS}\s*)+", re.IGNORECASE)
    suffix = re.compile(rf"(?:\s*{SEPARATOR_CLASS}\s*{label})+\s*$", re.IGNORECASE)
    return prefix, suffix


def clean_toc_title(raw_title: str, affix: str = DEFAULT_TITLE_AFFIX) -> str:
    """Return ``raw_title`` without the site label prefix or suffix.

    Parameters
    ----------
    raw_title : str
        Title reported by the browser for the rendered page.
    affix : str, optional
        Regular-expression fragment matching the site label. Defaults to
        ``DEFAULT_TITLE_AFFIX``.

    Returns
    -------
    str
        The trimmed title with leading ``<label><sep>`` and trailing
        ``<sep><label>`` runs removed, so a label repeated at either end is
        stripped in one pass. When nothing would remain, the trimmed original
        is returned instead.
    """
    prefix, suffix = _affix_patterns(affix)
    cleaned = prefix.sub("", raw_title, count=1)
    cleaned = suffix.sub("", cleaned, count=1).strip()
    return cleaned or raw_title.strip()


__all__ = ["SEPARATOR_CLASS", "clean_toc_title"]
