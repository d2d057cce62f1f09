# Punycode (RFC 3492) encoding and decoding of single DNS labels.

from .bootstring import transition
from .errors import DecodeError, EncodeError, InsertionIndexOutOfRange, \
     InvalidBasicCodePoint, InvalidCodePoint, InvalidDigit, Overflow, \
     PunycodeError, UnexpectedEnd
from .params import label_length_limit, maxint, rfc3492
from .punycode import decode, encode, from_punycode, to_punycode
