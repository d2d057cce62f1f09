# Exceptions raised by the codec.
#
# Everything derives from ValueError, so a caller who just wants to
# know `was that a valid label?' can catch that, the same as with the
# standard library's codecs.

class PunycodeError(ValueError):
    def __init__(self, msg, position=None):
        ValueError.__init__(self, msg)
        self.msg = msg
        self.position = position
    def __str__(self):
        if self.position is None:
            return self.msg
        return "%s at position %d" % (self.msg, self.position)

class EncodeError(PunycodeError):
    pass

class DecodeError(PunycodeError):
    pass

class Overflow(EncodeError, DecodeError):
    "Some quantity has outgrown a 32-bit unsigned integer."

class InvalidCodePoint(EncodeError, DecodeError):
    "Not a Unicode scalar value (out of range, or a surrogate)."

class InvalidDigit(DecodeError):
    pass

class InvalidBasicCodePoint(DecodeError):
    pass

class UnexpectedEnd(DecodeError):
    pass

class InsertionIndexOutOfRange(DecodeError):
    pass
