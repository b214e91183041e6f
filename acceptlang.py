"""
Build and pick apart Accept-Language header values (RFC 7231, 5.3.5).

Each language range is run through the tag parser, so entries whose tag
isn't well-formed are dropped rather than passed along.
"""
from bcp47 import parse

WILDCARD = '*'


def _parse_q(params):
    q = 1.0
    for param in params:
        key, _, value = param.partition('=')
        if key.strip().lower() != 'q':
            continue
        q = float(value.strip())
        if not 0.0 <= q <= 1.0:
            raise ValueError("q value {} out of range".format(q))
    return q


def parse_accept_language(header, warning=None):
    """
    Split an Accept-Language value into (tag, q, schema) tuples.

    Result is ordered by descending q; entries with equal q keep header
    order.  schema is None for the '*' wildcard.  Entries with a bad q
    value or a malformed tag are skipped; if warning is given it is
    called as warning(entry, reason) for each one.
    """
    entries = []
    if not header:
        return entries

    for item in header.split(','):
        item = item.strip()
        if not item:
            continue
        fields = item.split(';')
        tag = fields[0].strip()

        try:
            q = _parse_q(fields[1:])
        except ValueError as e:
            if warning is not None:
                warning(item, str(e))
            continue

        if tag == WILDCARD:
            entries.append((tag, q, None))
            continue

        failures = []
        schema = parse(tag, normalize=False,
                       warning=lambda msg, code, offset: failures.append(msg))
        if failures or schema.is_empty():
            if warning is not None:
                warning(item, failures[0] if failures else 'Empty tag')
            continue
        entries.append((tag, q, schema))

    return sorted(entries, key=lambda e: -e[1])


def make_accept_language(tags):
    """Make an Accept-Language value with evenly spread, decreasing q values."""
    if not tags:
        return ''
    qspread = 1 / len(tags)
    return ', '.join("{};q={:.1f}".format(tag, (len(tags) - i) * qspread)
                     for i, tag in enumerate(tags))
