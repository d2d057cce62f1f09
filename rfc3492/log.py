# Logging module for the punycode command line tool.
#
# The codec itself never logs; the tool hands it a trace function
# which comes here.

logfp = None
logcfg = None

def init(fp, cfg):
    global logfp
    global logcfg
    logfp = fp
    logcfg = cfg

def internal_log(msg):
    if logfp is None or not logcfg.verbose:
        return
    logfp.write(msg + "\n")
    logfp.flush()

def logmsg(s):
    internal_log("* " + s)

def loginput(s):
    internal_log("> " + s)

def logoutput(s):
    internal_log("| " + s)

def logtransition(tr):
    logmsg("delta %d for U+%04x (bias %d)" % (tr.delta, tr.n, tr.bias))
