"""
Tool to downsize a dictionary to only words of a certain length.

Usage: redict <input_file> <output_file> <word_length>

Reads the input word list one line at a time, and writes every line whose
length in bytes (not counting \\n / \\r) is exactly word_length to the output
file, always ending it with a single \\n.
"""
import logging
import sys

from tqdm import tqdm

from errors import ExitCode, RedictError, InputReadError, OutputWriteError
from filt import ExactLength, FilterSet
from handles import openPair
from validate import validateArgs, parseWordLen, MAX_WORDLEN

log = logging.getLogger(__name__)

# Each read takes at most this many bytes: the longest word + "\r\n".
# Longer lines get split over several reads, and each piece is checked on
# its own.
READ_LIMIT = MAX_WORDLEN + 2
USAGE = "Usage: <input_file> <output_file> <word_length>"
LOG_FORMAT = '[%(asctime)s | %(name)s | %(levelname)s]: %(message)s'
# The command line takes exactly 3 arguments, so there is no flag for this,
# change it here (or pass logLevel to main) to see the debug records
LOG_LEVEL = 'WARNING'


############################################################
# Line filtering
############################################################

def readLines(fp, limit=READ_LIMIT, path=None):
    """
    Lazily yield the lines of fp (terminators included), reading at most
    limit bytes at a time. Stops at end of file, a failed read raises
    InputReadError rather than looking like the end of the file.
    """
    while True:
        try:
            line = fp.readline(limit)
        except OSError as e:
            raise InputReadError(path or getattr(fp, 'name', '?')) from e
        if not line:
            return
        if len(line) == limit and not line.endswith(b'\n'):
            log.debug(f"Line longer than {limit} bytes, splitting it")
        yield line


def writeNewDictionary(pair, wordLen, verbose=False):
    """
    Go through each line of pair's input file, and write the ones that are
    wordLen bytes long (after stripping \\n / \\r) to pair's output file.
    Returns how many lines got written.
    """
    fs = FilterSet([ExactLength(wordLen)])
    lines = readLines(pair.fpIn, path=pair.inPath)
    if verbose:
        lines = tqdm(lines, unit=' lines', desc=f"Length {wordLen}")

    writtenLines = 0
    for word in fs.applyAll(lines):
        try:
            pair.fpOut.write(word + b'\n')
        except OSError as e:
            raise OutputWriteError(pair.outPath) from e
        writtenLines += 1

    try:
        pair.fpOut.flush()
    except OSError as e:
        raise OutputWriteError(pair.outPath) from e
    return writtenLines


############################################################
# The Machinery for actually running
############################################################

def printHelp():
    """ Print usage instructions to stdout """
    print(USAGE)


def report(err):
    """ Print the diagnostic for err (and the usage line if it needs one) """
    if err.message:
        print(err.message, file=sys.stderr)
    if err.showUsage:
        printHelp()


def run(argv, verbose=False):
    """
    Validate argv, filter the dictionary and print the summary, returning
    the number of words written. Raises a RedictError on any failure.
    """
    args = validateArgs(argv)
    wordLen = parseWordLen(args.wordLenStr)

    with openPair(args.inPath, args.outPath) as pair:
        count = writeNewDictionary(pair, wordLen, verbose=verbose)

    log.info(f"{args.inPath} -> {args.outPath}: {count} words of length {wordLen}")
    print(f"Wrote {count} words of length {wordLen}")
    return count


def main(argv=None, logLevel=None):
    """
    Run redict on argv (sys.argv by default) and return the exit status.
    logLevel is any logging level name, e.g. 'DEBUG' (LOG_LEVEL if not given).
    """
    if argv is None:
        argv = sys.argv
    if logLevel is None:
        logLevel = LOG_LEVEL
    logging.basicConfig(level=getattr(logging, logLevel),
                        format=LOG_FORMAT)

    try:
        run(argv, verbose=sys.stderr.isatty())
    except RedictError as e:
        log.debug(f"{type(e).__name__}: {e}")
        report(e)
        return ExitCode.FAILURE.value
    return ExitCode.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
