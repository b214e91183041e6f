from collections import namedtuple


class Extension(namedtuple('Extension', ['singleton', 'extensions'])):
    """One extension: a singleton (never 'x') and its 2-8 char subtags."""
    __slots__ = ()

    def to_dict(self):
        return {'singleton': self.singleton,
                'extensions': list(self.extensions)}


class Schema(object):
    """
    The parsed form of one language tag.

    Values keep the casing of the tag they were sliced from.  Sequence
    fields are tuples and there are no setters; a Schema is built once by
    the parser and handed around as-is.
    """
    _FIELDS = ('language', 'extended_language_subtags', 'script', 'region',
               'variants', 'extensions', 'privateuse', 'irregular',
               'regular')

    def __init__(self, language=None, extended_language_subtags=(),
                 script=None, region=None, variants=(), extensions=(),
                 privateuse=(), irregular=None, regular=None):
        self._language = language
        self._extended_language_subtags = tuple(extended_language_subtags)
        self._script = script
        self._region = region
        self._variants = tuple(variants)
        self._extensions = tuple(_as_extension(e) for e in extensions)
        self._privateuse = tuple(privateuse)
        self._irregular = irregular
        self._regular = regular

    @property
    def language(self):
        return self._language

    @property
    def extended_language_subtags(self):
        return self._extended_language_subtags

    @property
    def script(self):
        return self._script

    @property
    def region(self):
        return self._region

    @property
    def variants(self):
        return self._variants

    @property
    def extensions(self):
        return self._extensions

    @property
    def privateuse(self):
        return self._privateuse

    @property
    def irregular(self):
        return self._irregular

    @property
    def regular(self):
        return self._regular

    def is_empty(self):
        """True if nothing usable was parsed (no language, grandfathered tag or private use)."""
        return not (self._language or self._irregular or self._regular or
                    self._privateuse)

    def to_dict(self):
        return {
            'language': self._language,
            'extended_language_subtags': list(self._extended_language_subtags),
            'script': self._script,
            'region': self._region,
            'variants': list(self._variants),
            'extensions': [e.to_dict() for e in self._extensions],
            'privateuse': list(self._privateuse),
            'irregular': self._irregular,
            'regular': self._regular,
        }

    @staticmethod
    def from_dict(d):
        """Build a Schema from a (possibly partial) dict like the one to_dict returns."""
        kwargs = {}
        for name in Schema._FIELDS:
            value = d.get(name, None)
            if value is not None:
                kwargs[name] = value
        return Schema(**kwargs)

    def __eq__(self, other):
        if not isinstance(other, Schema):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f)
                   for f in Schema._FIELDS)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        fields = ', '.join("{}={!r}".format(f, getattr(self, f))
                           for f in Schema._FIELDS if getattr(self, f))
        return "Schema({})".format(fields)


def _as_extension(value):
    if isinstance(value, Extension):
        return value
    if isinstance(value, dict):
        return Extension(value.get('singleton'),
                         tuple(value.get('extensions') or ()))
    singleton, extensions = value
    return Extension(singleton, tuple(extensions))
