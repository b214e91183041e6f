"""
langtables.py.

Grandfathered tags from RFC 5646, section 2.2.8.  Irregular tags do not
match the tag grammar at all; regular tags do match it, but their subtags
don't mean what the grammar says they mean, so they're also treated as
one opaque literal.
"""
from types import MappingProxyType

# https://www.iana.org/assignments/language-subtag-registry
REGULAR = frozenset([
    'art-lojban',
    'cel-gaulish',
    'no-bok',
    'no-nyn',
    'zh-guoyu',
    'zh-hakka',
    'zh-min',
    'zh-min-nan',
    'zh-xiang',
])

# lower-cased legacy tag -> preferred value (None if there is no
# replacement)
NORMALIZE = MappingProxyType({
    'en-gb-oed': 'en-GB-oxendict',
    'i-ami': 'ami',
    'i-bnn': 'bnn',
    'i-default': None,
    'i-enochian': None,
    'i-hak': 'hak',
    'i-klingon': 'tlh',
    'i-lux': 'lb',
    'i-mingo': None,
    'i-navajo': 'nv',
    'i-pwn': 'pwn',
    'i-tao': 'tao',
    'i-tay': 'tay',
    'i-tsu': 'tsu',
    'sgn-be-fr': 'sfb',
    'sgn-be-nl': 'vgt',
    'sgn-ch-de': 'sgg',
    'art-lojban': 'jbo',
    'cel-gaulish': None,
    'no-bok': 'nb',
    'no-nyn': 'nn',
    'zh-guoyu': 'cmn',
    'zh-hakka': 'hak',
    'zh-min': None,
    'zh-min-nan': 'nan',
    'zh-xiang': 'hsn',
})

IRREGULAR = frozenset(tag for tag in NORMALIZE if tag not in REGULAR)


def lookup_legacy(lowered):
    """
    Classify a lower-cased tag against the grandfathered tables.

    Return a (kind, replacement) pair, where kind is 'regular',
    'irregular' or None (not a grandfathered tag at all).
    """
    if lowered not in NORMALIZE:
        return None, None
    kind = 'regular' if lowered in REGULAR else 'irregular'
    return kind, NORMALIZE[lowered]
