"""Compile a Schema (or a dict shaped like Schema.to_dict()) back to a language tag."""
from langschema import Schema


def _get(schema, name):
    if isinstance(schema, Schema):
        return getattr(schema, name)
    return schema.get(name, None)


def _ext_parts(ext):
    if isinstance(ext, dict):
        return ext.get('singleton', None), ext.get('extensions', None)
    if not ext:
        return None, None
    return ext[0], ext[1]


def stringify(schema=None):
    """
    Compile schema to a BCP 47 language tag.

    Never fails: a missing or empty schema gives ''.  Grandfathered tags
    are returned verbatim; subtags other than private use are dropped when
    there is no language, as are extensions with no content.
    """
    if not schema:
        return ''

    grandfathered = _get(schema, 'irregular') or _get(schema, 'regular')
    if grandfathered:
        return grandfathered

    result = []
    language = _get(schema, 'language')
    if language:
        result.append(language)
        result.extend(_get(schema, 'extended_language_subtags') or [])
        for name in ('script', 'region'):
            value = _get(schema, name)
            if value:
                result.append(value)
        result.extend(_get(schema, 'variants') or [])

        for ext in _get(schema, 'extensions') or []:
            singleton, extensions = _ext_parts(ext)
            if singleton and extensions:
                result.append(singleton)
                result.extend(extensions)

    privateuse = _get(schema, 'privateuse')
    if privateuse:
        result.append('x')
        result.extend(privateuse)

    return '-'.join(result)
