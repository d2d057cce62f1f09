# Punycode: bootstring with the RFC 3492 parameters. These are the
# entry points an IDNA layer calls, one label at a time. Adding and
# removing the "xn--" prefix, and checking the label length, are the
# caller's business.

from .bootstring import bootstring_decode, bootstring_encode
from .params import rfc3492

# Encode a label (a str, or a sequence of integer code points) as
# Punycode, returning ASCII bytes. If trace is given it's called with
# a transition tuple for each non-basic code point, in the order
# they're coded.
def encode(code_points, trace=None):
    return bootstring_encode(rfc3492, code_points, trace)

# Decode Punycode (bytes or str) to a list of code points.
def decode(ascii, trace=None):
    return bootstring_decode(rfc3492, ascii, trace)

def to_punycode(text):
    return encode(text).decode("ascii")

def from_punycode(text):
    return "".join([chr(c) for c in decode(text)])
