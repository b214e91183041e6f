"""
bcp47.py.

Parse and stringify BCP 47 language tags:

    >>> schema = parse('hy-Latn-IT-arevela')
    >>> schema.language, schema.script, schema.region, schema.variants
    ('hy', 'Latn', 'IT', ('arevela',))
    >>> stringify(schema)
    'hy-Latn-IT-arevela'
"""
from langparse import (ERR_EMPTY_EXTENSION, ERR_EXTENSION_TOO_LONG,
                       ERR_EXTRA_CONTENT, ERR_PRIVATE_USE_TOO_LONG,
                       ERR_TOO_MANY_SUBTAGS, ERR_VARIANT_TOO_LONG, MESSAGES,
                       ParseFailure, parse)
from langschema import Extension, Schema
from langstringify import stringify

__all__ = [
    'parse', 'stringify', 'Schema', 'Extension', 'ParseFailure', 'MESSAGES',
    'ERR_VARIANT_TOO_LONG', 'ERR_EXTENSION_TOO_LONG', 'ERR_TOO_MANY_SUBTAGS',
    'ERR_EMPTY_EXTENSION', 'ERR_PRIVATE_USE_TOO_LONG', 'ERR_EXTRA_CONTENT',
]
