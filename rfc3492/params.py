# Bootstring parameter sets.
#
# Bootstring (RFC 3492 section 3) is a general scheme for encoding a
# string of arbitrary code points as a string of code points from a
# smaller `basic' set. It's parametrised by a handful of constants,
# and Punycode is just one particular choice of them, suited to DNS
# labels: the basic set is ASCII and the digits are letters and
# numbers. The algorithm in bootstring.py takes one of these objects
# as its first argument and doesn't know anything else about Punycode.

# Bootstring as specified works on 32-bit unsigned integers. Python
# will happily go further than that, but then we'd accept labels that
# every other implementation rejects, so we check against this bound
# by hand wherever something can grow.
maxint = 0xFFFFFFFF

# DNS won't take a label longer than this. We don't enforce it; it's
# here for the benefit of callers who prepend "xn--" and need to check.
label_length_limit = 63

class bootstring_params:
    pass

def punycode_encode_digit(d):
    return "abcdefghijklmnopqrstuvwxyz0123456789"[d]

def punycode_decode_digit(c):
    # Returns -1 for anything that isn't a digit. Upper and lower case
    # letters are the same digit.
    return \
    ("a" <= c <= "z") * (ord(c)-ord("a")+1) + \
    ("A" <= c <= "Z") * (ord(c)-ord("A")+1) + \
    ("0" <= c <= "9") * (ord(c)-ord("0")+26+1) - 1

rfc3492 = bootstring_params()
rfc3492.delimiter = "-"
rfc3492.base = 36
rfc3492.tmin = 1
rfc3492.tmax = 26
rfc3492.skew = 38
rfc3492.damp = 700
rfc3492.initial_bias = 72
rfc3492.initial_n = 0x80
rfc3492.encode_digit = punycode_encode_digit
rfc3492.decode_digit = punycode_decode_digit
