# Parse a command line for options and arguments in a basically
# Unixy way.
#
# Returns a list of (option, value) pairs. Plain arguments come back
# as (None, argument). An option which takes a value but hasn't got
# one comes back with a value of None, and it's up to the caller to
# complain.

def parse_cmdline(args, short_opts_taking_values):
    doing_opts = 1
    ret = []
    args = list(args)
    while len(args) > 0:
        arg = args.pop(0)

        if not doing_opts or arg[:1] != "-" or arg == "-":
            ret.append((None, arg))
        elif arg == "--":
            doing_opts = 0
        elif arg[:2] == "--":
            # GNUish long option. A value is attached with "=".
            opt, eq, val = arg.partition("=")
            ret.append((opt, val if eq else None))
        else:
            # A cluster of single-letter options. The first one which
            # wants a value takes the rest of this word, or failing
            # that the whole of the next.
            letters = arg[1:]
            while len(letters) > 0:
                opt = "-" + letters[0]
                letters = letters[1:]
                if opt[1] not in short_opts_taking_values:
                    ret.append((opt, None))
                elif len(letters) > 0:
                    ret.append((opt, letters))
                    break
                elif len(args) > 0:
                    ret.append((opt, args.pop(0)))
                    break
                else:
                    ret.append((opt, None))

    return ret
