"""
Argument validation for redict.

validateArgs checks the raw argv (program name included) for the right shape,
parseWordLen turns the word length argument into an int. Both raise one of
the errors from errors.py on the first problem found, and never print
anything themselves.
"""
import logging
import re
from collections import namedtuple

from errors import (ArgCountError, EmptyPathError, SamePathError,
                    EmptyLengthError, InvalidLengthError, LengthRangeError)

__all__ = ['Invocation', 'validateArgs', 'parseWordLen',
           'NUM_REQ_ARGS', 'MAX_WORDLEN']

log = logging.getLogger(__name__)

ARG_INPATH = 1
ARG_OUTPATH = 2
ARG_WORDLEN = 3

NUM_REQ_ARGS = 4    # program name + 3
MAX_WORDLEN = 255

DIGITS = re.compile(r'[0-9]+')

Invocation = namedtuple('Invocation', ['inPath', 'outPath', 'wordLenStr'])


def validateArgs(argv):
    """
    Check argv has an input path, an output path and a word length, in that
    order, and return them as an Invocation. The word length is left as a
    string, use parseWordLen on it.
    """
    if len(argv) != NUM_REQ_ARGS:
        raise ArgCountError(len(argv) - 1)

    inPath, outPath, wordLenStr = argv[ARG_INPATH], argv[ARG_OUTPATH], argv[ARG_WORDLEN]
    if not inPath:
        raise EmptyPathError("Input file path cannot be empty")
    if not outPath:
        raise EmptyPathError("Output file path cannot be empty")
    if inPath == outPath:
        raise SamePathError(inPath)
    if not wordLenStr:
        raise EmptyLengthError(wordLenStr)

    log.debug(f"Arguments ok: in={inPath!r} out={outPath!r} len={wordLenStr!r}")
    return Invocation(inPath, outPath, wordLenStr)


def parseWordLen(wordLenStr, maxLen=MAX_WORDLEN):
    """ Parse a base 10 word length, which must be in 1..maxLen """
    if not wordLenStr:
        raise EmptyLengthError(wordLenStr)
    # only ascii digits: no sign, no whitespace, nothing trailing
    if not DIGITS.fullmatch(wordLenStr):
        raise InvalidLengthError(wordLenStr)

    # anything with more significant digits than maxLen is out of range,
    # and too long to hand to int()
    digits = wordLenStr.lstrip('0') or '0'
    if len(digits) > len(str(maxLen)):
        raise LengthRangeError(wordLenStr)

    wordLen = int(digits, 10)
    if not 1 <= wordLen <= maxLen:
        raise LengthRangeError(wordLenStr)
    return wordLen
