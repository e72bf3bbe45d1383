"""
Opening / closing the input and output files of a run as a single unit.

A FilePair either holds both an open input and an open output file or
nothing at all: if the output can't be opened, the input that was already
opened is closed again before the error goes up. Use it as a context manager
so the files are released on every way out of the with block.
"""
import logging

from errors import InputOpenError, OutputOpenError, OutputWriteError

__all__ = ['FilePair', 'openPair']

log = logging.getLogger(__name__)


class FilePair:
    """
    An open-for-read input file and an open-for-write (truncated) output
    file, both in binary mode.
    """

    def __init__(self, fpIn, fpOut, inPath=None, outPath=None):
        self.fpIn = fpIn
        self.fpOut = fpOut
        self.inPath = inPath
        self.outPath = outPath

    @classmethod
    def open(cls, inPath, outPath):
        """
        Open inPath for reading and outPath for writing, raising
        InputOpenError / OutputOpenError if either can't be opened
        """
        try:
            fpIn = open(inPath, 'rb')
        except OSError as e:
            log.debug(f"Opening {inPath} for reading failed: {e}")
            raise InputOpenError(inPath) from e

        try:
            fpOut = open(outPath, 'wb')
        except OSError as e:
            log.debug(f"Opening {outPath} for writing failed: {e}")
            fpIn.close()
            raise OutputOpenError(outPath) from e

        log.debug(f"Opened {inPath} -> {outPath}")
        return cls(fpIn, fpOut, inPath, outPath)

    @property
    def closed(self):
        return self.fpIn is None and self.fpOut is None

    def close(self):
        """ Close whichever files are still open, fine to call more than once """
        fpIn, fpOut = self.fpIn, self.fpOut
        self.fpIn = self.fpOut = None
        try:
            if fpIn is not None:
                fpIn.close()
                log.debug(f"Closed {self.inPath}")
        finally:
            if fpOut is not None:
                # closing flushes whatever is still buffered
                try:
                    fpOut.close()
                except OSError as e:
                    raise OutputWriteError(self.outPath) from e
                log.debug(f"Closed {self.outPath}")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def __repr__(self):
        return type(self).__name__ + f"({self.inPath}, {self.outPath})"


def openPair(inPath, outPath):
    """ Shorthand for FilePair.open, the caller owns (and must close) the pair """
    return FilePair.open(inPath, outPath)
