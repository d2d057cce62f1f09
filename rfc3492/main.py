# Command line front end.
#
#   punycode                  run the RFC 3492 self-test
#   punycode U+00FC U+0062    encode code points
#   punycode -t bücher        encode a string
#   punycode bcher-kva        decode, printing code points
#
# -v logs every delta to standard error as it's coded.

import sys

from . import cmdline
from . import log
from .errors import PunycodeError
from .punycode import decode, encode
from .samples import samples

class config:
    def __init__(self):
        self.verbose = 0

def selftest(out):
    fails = passes = 0
    for label, u, p in samples:
        try:
            decoded = decode(p)
        except PunycodeError as e:
            decoded = e
        if decoded != u:
            out.write("FAIL: %s %s %s\n" % (label, p, decoded))
            fails = fails + 1
        else:
            passes = passes + 1
    out.write("Decoding: passed %d failed %d\n" % (passes, fails))
    total = fails

    fails = passes = 0
    for label, u, p in samples:
        try:
            encoded = encode(u).decode("ascii")
        except PunycodeError as e:
            encoded = e
        if encoded != p:
            out.write("FAIL: %s %s %s\n" % (label, p, encoded))
            fails = fails + 1
        else:
            passes = passes + 1
    out.write("Encoding: passed %d failed %d\n" % (passes, fails))
    return total + fails

def error(msg):
    sys.stderr.write("punycode: %s\n" % msg)
    return 1

def main(args=None):
    if args is None:
        args = sys.argv[1:]
    cfg = config()
    inval = []
    instr = None
    for opt, val in cmdline.parse_cmdline(args, "t"):
        if opt is None:
            if val[:2].lower() == "u+":
                try:
                    inval.append(int(val[2:], 16))
                except ValueError:
                    return error("bad code point '%s'" % val)
            else:
                instr = val
        elif opt == "-v":
            cfg.verbose = 1
        elif opt in ("-t", "--text"):
            if val is None:
                return error("option '%s' expects a value" % opt)
            inval.extend([ord(c) for c in val])
        else:
            return error("unrecognised command-line option '%s'" % opt)

    if len(args) == 0:
        if selftest(sys.stdout):
            return 1
        return 0

    log.init(sys.stderr, cfg)
    if len(inval) > 0 and instr is not None:
        return error("please supply either Unicode or Punycode, not both")
    try:
        if len(inval) > 0:
            log.loginput(" ".join(["U+%04x" % v for v in inval]))
            out = encode(inval, log.logtransition).decode("ascii")
        elif instr is not None:
            log.loginput(instr)
            out = " ".join(["U+%04x" % v
                            for v in decode(instr, log.logtransition)])
        else:
            return error("please supply either Unicode (U+xxxx U+xxxx) "
                         "or Punycode")
    except PunycodeError as e:
        return error(str(e))
    log.logoutput(out)
    sys.stdout.write(out + "\n")
    return 0
