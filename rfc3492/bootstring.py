# Implementation of the RFC 3492 bootstring algorithm.
#
# The encoded form of a string is in two parts. First come all the
# basic code points of the input, in their original order, followed
# by a delimiter if there were any. Then comes a sequence of
# variable-length integers, one for each non-basic code point, which
# tell the decoder where to insert each one.
#
# The trick is in how the insertions are described. The decoder keeps
# a state (n, i), where n is a code point and i is a position in the
# output string it's built so far, and each integer is a `delta' by
# which to advance that state. Advancing i past the end of the string
# wraps it back to the start and bumps n by one. So the encoder
# inserts the non-basic code points in increasing order of code
# point, and within that in order of position, which means every
# delta is non-negative and mostly small.
#
# The integers are written in a little-endian variable-length base-36
# notation where each digit also says whether it's the last: a digit
# less than a threshold t ends the number. The thresholds depend on a
# `bias' which is re-estimated after every code point from the size
# of the delta just coded, so that typical deltas come out short.

import collections

from .errors import InsertionIndexOutOfRange, InvalidBasicCodePoint, \
     InvalidCodePoint, InvalidDigit, Overflow, UnexpectedEnd
from .params import maxint

# One step of the coding: the bias the integer was written with, the
# code point it inserted, and the delta itself. Encoding a string and
# decoding the result produce the same sequence of these.
transition = collections.namedtuple("transition", "bias n delta")

def bootstring_threshold(params,j,bias):
    # Threshold for the j-th digit (counting from 0) of an integer.
    t = params.base * (j+1) - bias
    if t < params.tmin:
        t = params.tmin
    if t > params.tmax:
        t = params.tmax
    return t

def bootstring_bias_adapt(params,delta,points,first):
    # Scale down the delta. The first one is damped a lot harder,
    # since it's usually huge (it has to get n up from initial_n to
    # wherever the string's alphabet lives) and says nothing about
    # the deltas to come.
    if first:
        delta = delta // params.damp
    else:
        delta = delta // 2
    # Later deltas will be spread over a longer string.
    delta = delta + (delta // points)
    # Work out roughly how many digits a delta this size would need,
    # and pick a bias that makes that many digits cheap.
    ndiv = 0
    while delta > ((params.base - params.tmin) * params.tmax) // 2:
        delta = delta // (params.base - params.tmin)
        ndiv = ndiv + 1
    bias = (params.base * ndiv) + \
    (((params.base - params.tmin + 1) * delta) // (delta + params.skew))
    return bias

def bootstring_encode_integer(params,q,bias):
    digits = ""
    j = 0
    while 1:
        t = bootstring_threshold(params, j, bias)
        if q < t:
            return digits + params.encode_digit(q)
        digits = digits + params.encode_digit(t + ((q - t) % (params.base - t)))
        q = (q - t) // (params.base - t)
        j = j + 1

def check_code_point(c, position):
    # bool is an int subclass, but True isn't a code point.
    if not isinstance(c, int) or isinstance(c, bool) or \
       c < 0 or c > 0x10FFFF or \
       (c >= 0xD800 and c <= 0xDFFF):
        raise InvalidCodePoint("%r is not a Unicode scalar value" % (c,),
                               position)

def bootstring_encode(params, invals, trace=None):
    if isinstance(invals, str):
        invals = [ord(c) for c in invals]
    else:
        invals = list(invals)
    for pos in range(len(invals)):
        check_code_point(invals[pos], pos)

    # Basic code points go first, verbatim.
    output = []
    for c in invals:
        if c < params.initial_n:
            output.append(chr(c))
    b = len(output)
    if b > 0:
        output.append(params.delimiter)

    n = params.initial_n
    delta = 0
    bias = params.initial_bias
    handled = b
    while handled < len(invals):
        # The next code point to insert is the smallest one we
        # haven't got to yet. Everything already handled is below n,
        # so there's no need to track which ones those were.
        m = min([c for c in invals if c >= n])

        # Skip the decoder's state over every (n, i) pair in between:
        # handled+1 positions for each code point value.
        if m - n > (maxint - delta) // (handled + 1):
            raise Overflow("delta too large encoding U+%04X" % m)
        delta = delta + (m - n) * (handled + 1)
        n = m

        for c in invals:
            if c < n:
                # Already in the decoder's string, so one more
                # position to step past.
                delta = delta + 1
                if delta > maxint:
                    raise Overflow("delta too large encoding U+%04X" % n)
            elif c == n:
                if trace is not None:
                    trace(transition(bias, n, delta))
                output.append(bootstring_encode_integer(params, delta, bias))
                bias = bootstring_bias_adapt(params, delta, handled+1,
                                             handled == b)
                delta = 0
                handled = handled + 1

        delta = delta + 1
        n = n + 1

    return "".join(output).encode("ascii")

def bootstring_decode(params, s, trace=None):
    if isinstance(s, (bytes, bytearray)):
        # latin-1 maps every byte to the code point of the same value,
        # so stray top-bit-set bytes survive to be complained about.
        s = bytes(s).decode("latin-1")

    # Separate the initial string of basic code points from the
    # encoded deltas. The basic part may itself contain delimiters,
    # so it's the last one that counts.
    output = []
    delpos = s.rfind(params.delimiter)
    if delpos == -1:
        pos = 0
    else:
        for j in range(delpos):
            if ord(s[j]) >= params.initial_n:
                raise InvalidBasicCodePoint(
                    "non-basic character %r before delimiter" % s[j], j)
            output.append(ord(s[j]))
        pos = delpos + 1

    n = params.initial_n
    bias = params.initial_bias
    i = 0
    first = 1
    while pos < len(s):
        # Decode one integer, adding it straight into i.
        oldi = i
        w = 1
        j = 0
        while 1:
            if pos >= len(s):
                raise UnexpectedEnd("input ends in the middle of a delta", pos)
            d = params.decode_digit(s[pos])
            if d < 0:
                raise InvalidDigit("invalid digit %r" % s[pos], pos)
            if d > (maxint - i) // w:
                raise Overflow("delta too large", pos)
            i = i + d * w
            pos = pos + 1
            t = bootstring_threshold(params, j, bias)
            if d < t:
                break
            if w > maxint // (params.base - t):
                raise Overflow("delta too large", pos)
            w = w * (params.base - t)
            j = j + 1
        delta = i - oldi

        # i has been counting through every (n, position) pair, so
        # wrap it round the string to find both.
        olen = len(output) + 1
        if i // olen > maxint - n:
            raise Overflow("code point too large", pos)
        n = n + i // olen
        i = i % olen
        if n > 0x10FFFF or (n >= 0xD800 and n <= 0xDFFF):
            raise InvalidCodePoint("decoded U+%04X is not a Unicode scalar "
                                   "value" % n, pos)
        # Defensive: i < olen always holds after the modulo above, so
        # this only fires if that arithmetic is ever broken.
        if i > len(output):
            raise InsertionIndexOutOfRange(
                "insertion at %d in a string of length %d" % (i, len(output)),
                pos)

        if trace is not None:
            trace(transition(bias, n, delta))
        output.insert(i, n)
        bias = bootstring_bias_adapt(params, delta, len(output), first)
        first = 0
        i = i + 1 # step past the code point we just inserted

    return output
