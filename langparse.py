"""
langparse.py.

Parse a BCP 47 (https://tools.ietf.org/html/bcp47) language tag into a
Schema.  Only the shape of each subtag is checked (length, letters vs.
digits, position), not whether the subtag is in the registry.

The grammar is applied in one left-to-right pass over a lower-cased copy
of the tag; values are sliced from the original string so their case is
preserved.  A malformed tag is not an exception: the optional warning
callback is told why and where parsing stopped, and either an empty
Schema or everything parsed up to that point is returned.
"""
from charclass import (EOF, ascii_lower, is_alnum, is_alpha, is_dash,
                       is_digit, is_x)
from langschema import Extension, Schema
from langtables import lookup_legacy

MAX_SUBTAG = 8
MAX_ISO_639 = 3
MIN_ISO_639 = 2
MAX_EXTENDED_LANGUAGE_SUBTAG_COUNT = 3
MAX_VARIANT = 8
MIN_ALPHANUMERIC_VARIANT = 5
MIN_VARIANT = 4
MAX_EXTENSION = 8
MAX_PRIVATE_USE = 8

ERR_VARIANT_TOO_LONG = 1
ERR_EXTENSION_TOO_LONG = 2
ERR_TOO_MANY_SUBTAGS = 3
ERR_EMPTY_EXTENSION = 4
ERR_PRIVATE_USE_TOO_LONG = 5
ERR_EXTRA_CONTENT = 6

MESSAGES = {
    ERR_VARIANT_TOO_LONG:
        'Too long variant, expected at most 8 characters',
    ERR_EXTENSION_TOO_LONG:
        'Too long extension, expected at most 8 characters',
    ERR_TOO_MANY_SUBTAGS:
        'Too many extended language subtags, expected at most 3 subtags',
    ERR_EMPTY_EXTENSION:
        'Empty extension, extensions must have at least 2 characters '
        'of content',
    ERR_PRIVATE_USE_TOO_LONG:
        'Too long private-use area, expected at most 8 characters',
    ERR_EXTRA_CONTENT:
        'Found superfluous content after tag',
}


class ParseFailure(object):
    """Why (code) and where (offset) a grammar step gave up."""
    def __init__(self, code, offset):
        self._code = code
        self._offset = offset

    @property
    def code(self):
        return self._code

    @property
    def offset(self):
        return self._offset

    @property
    def message(self):
        return MESSAGES[self._code]

    def __repr__(self):
        return "ParseFailure({}, {})".format(self._code, self._offset)


class Cursor(object):
    """Position in the lower-cased tag, with character-code lookahead."""
    def __init__(self, text):
        self._text = text
        self.index = 0

    def code(self, pos):
        """Character code at absolute position pos, or EOF."""
        if 0 <= pos < len(self._text):
            return ord(self._text[pos])
        return EOF

    def peek(self, k=0):
        return self.code(self.index + k)

    def matches(self, *predicates):
        """Check that the codes starting at the cursor satisfy predicates in order."""
        return all(pred(self.peek(k)) for k, pred in enumerate(predicates))

    def run(self, predicate, start, limit):
        """Count consecutive codes from absolute position start matching predicate, stopping at limit."""
        count = 0
        while count < limit and predicate(self.code(start + count)):
            count += 1
        return count

    def advance(self, n):
        self.index += n

    def at_end(self):
        return self.index == len(self._text)


class _TagParser(object):
    def __init__(self, source, lowered):
        self._source = source
        self._cursor = Cursor(lowered)
        self._language = None
        self._extlangs = []
        self._script = None
        self._region = None
        self._variants = []
        self._extensions = []
        self._privateuse = []

    def _schema(self):
        return Schema(language=self._language,
                      extended_language_subtags=self._extlangs,
                      script=self._script,
                      region=self._region,
                      variants=self._variants,
                      extensions=self._extensions,
                      privateuse=self._privateuse)

    def _slice(self, start, length):
        return self._source[start:start + length]

    def parse(self, forgiving=False, warning=None):
        failure = None
        if self._language_subtag():
            for step in (self._extended_language_subtags, self._script_subtag,
                         self._region_subtag, self._variant_subtags,
                         self._extension_subtags):
                failure = step()
                if failure is not None:
                    break

        if failure is None:
            failure = self._privateuse_subtags()
        if failure is None and not self._cursor.at_end():
            failure = ParseFailure(ERR_EXTRA_CONTENT, self._cursor.index)

        if failure is None:
            return self._schema()

        if warning is not None:
            warning(failure.message, failure.code, failure.offset)
        return self._schema() if forgiving else Schema()

    def _language_subtag(self):
        cur = self._cursor
        # one past the longest language so 9+ letters can be told apart
        length = cur.run(is_alpha, 0, MAX_SUBTAG + 1)
        if length < MIN_ISO_639 or length > MAX_SUBTAG:
            return False
        self._language = self._slice(0, length)
        cur.advance(length)
        return True

    def _extended_language_subtags(self):
        # only ISO 639 (2-3 letter) languages take extlangs
        if len(self._language) > MAX_ISO_639:
            return None
        cur = self._cursor
        while (cur.matches(is_dash, is_alpha, is_alpha, is_alpha) and
               not is_alpha(cur.peek(4))):
            if len(self._extlangs) >= MAX_EXTENDED_LANGUAGE_SUBTAG_COUNT:
                return ParseFailure(ERR_TOO_MANY_SUBTAGS, cur.index)
            self._extlangs.append(self._slice(cur.index + 1, 3))
            cur.advance(4)
        return None

    def _script_subtag(self):
        cur = self._cursor
        if (cur.matches(is_dash, is_alpha, is_alpha, is_alpha, is_alpha) and
                not is_alpha(cur.peek(5))):
            # ISO 15924
            self._script = self._slice(cur.index + 1, 4)
            cur.advance(5)
        return None

    def _region_subtag(self):
        cur = self._cursor
        if cur.matches(is_dash, is_alpha, is_alpha) and \
                not is_alpha(cur.peek(3)):
            # ISO 3166-1
            self._region = self._slice(cur.index + 1, 2)
            cur.advance(3)
        elif cur.matches(is_dash, is_digit, is_digit, is_digit) and \
                not is_digit(cur.peek(4)):
            # UN M49
            self._region = self._slice(cur.index + 1, 3)
            cur.advance(4)
        return None

    def _variant_subtags(self):
        cur = self._cursor
        while is_dash(cur.peek()):
            start = cur.index + 1
            length = cur.run(is_alnum, start, MAX_VARIANT + 1)
            if length > MAX_VARIANT:
                return ParseFailure(ERR_VARIANT_TOO_LONG, start + MAX_VARIANT)

            if length >= MIN_ALPHANUMERIC_VARIANT or \
                    (length >= MIN_VARIANT and is_digit(cur.peek(1))):
                self._variants.append(self._slice(start, length))
                cur.advance(length + 1)
            else:
                break
        return None

    def _extension_subtags(self):
        cur = self._cursor
        while is_dash(cur.peek()):
            if is_x(cur.peek(1)) or \
                    not cur.matches(is_dash, is_alnum, is_dash, is_alnum):
                break

            offset = cur.index + 2
            groups = []
            while (is_dash(cur.code(offset)) and
                   is_alnum(cur.code(offset + 1)) and
                   is_alnum(cur.code(offset + 2))):
                length = cur.run(is_alnum, offset + 1, MAX_EXTENSION + 1)
                if length > MAX_EXTENSION:
                    return ParseFailure(ERR_EXTENSION_TOO_LONG,
                                        offset + 1 + MAX_EXTENSION)
                groups.append(self._slice(offset + 1, length))
                offset += length + 1

            if not groups:
                return ParseFailure(ERR_EMPTY_EXTENSION, offset)

            self._extensions.append(
                Extension(self._slice(cur.index + 1, 1), tuple(groups)))
            cur.index = offset
        return None

    def _privateuse_subtags(self):
        cur = self._cursor
        index = cur.index
        if index == 0 and is_x(cur.code(0)):
            # whole tag is private use: x-...
            cur.index = 1
        elif index != 1 and cur.matches(is_dash, is_x):
            cur.advance(2)
        else:
            return None

        while cur.matches(is_dash, is_alnum):
            start = cur.index + 1
            length = cur.run(is_alnum, start, MAX_PRIVATE_USE + 1)
            if length > MAX_PRIVATE_USE:
                return ParseFailure(ERR_PRIVATE_USE_TOO_LONG,
                                    start + MAX_PRIVATE_USE)
            self._privateuse.append(self._slice(start, length))
            cur.advance(length + 1)
        return None


def parse(tag, normalize=True, forgiving=False, warning=None):
    """
    Parse a BCP 47 language tag.

    tag is coerced with str(); None raises TypeError.  With normalize
    (the default), grandfathered tags that have a preferred value are
    parsed as that value instead.  warning, if given, is called as
    warning(message, code, offset) when the tag is malformed; the result
    is then an empty Schema, or with forgiving=True the subtags parsed
    before the failure.
    """
    if tag is None:
        raise TypeError("Expected string, got `{}`".format(tag))
    if normalize is None:
        normalize = True

    source = str(tag)
    lowered = ascii_lower(source)

    kind, replacement = lookup_legacy(lowered)
    if kind is not None:
        if normalize and replacement:
            return parse(replacement, normalize=normalize,
                         forgiving=forgiving, warning=warning)
        return Schema(**{kind: source})

    return _TagParser(source, lowered).parse(forgiving, warning)
