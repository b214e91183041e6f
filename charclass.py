"""Single-character predicates used for lookahead by the tag parser."""

# returned for positions past either end of the input; matches nothing
EOF = -1

_DASH = ord('-')
_X = ord('x')
_A = ord('a')
_Z = ord('z')
_ZERO = ord('0')
_NINE = ord('9')

_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ',
                             'abcdefghijklmnopqrstuvwxyz')


def ascii_lower(s):
    """
    Lower-case A-Z only.

    str.lower() can change the length of some non-ASCII strings, which
    would throw the offsets between the scanned copy and the original off.
    """
    return s.translate(_ASCII_LOWER)


def is_alpha(code):
    return _A <= code <= _Z


def is_digit(code):
    return _ZERO <= code <= _NINE


def is_alnum(code):
    return is_alpha(code) or is_digit(code)


def is_dash(code):
    return code == _DASH


def is_x(code):
    return code == _X
