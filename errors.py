"""
A module defining the ways a redict run can fail.

Every failure is a subclass of RedictError, raised where it is detected
(argument parsing, opening files, reading / writing lines) and only caught
by redict.main, which turns it into a diagnostic and an ExitCode. Errors that
came from bad arguments set showUsage, so main knows to print the usage line
as well.
"""
from enum import Enum

__all__ = ['ExitCode', 'RedictError', 'ArgCountError', 'EmptyPathError',
           'SamePathError', 'EmptyLengthError', 'InvalidLengthError',
           'LengthRangeError', 'FileError', 'InputOpenError',
           'OutputOpenError', 'InputReadError', 'OutputWriteError']


class ExitCode(Enum):
    """ Process exit statuses, main returns the value of one of these """
    SUCCESS = 0
    FAILURE = 1


class RedictError(Exception):
    """
    Superclass for all redict errors. message is the one line diagnostic
    printed to stderr (None means nothing but the usage line gets printed).
    """
    showUsage = False

    def __init__(self, message=None):
        super().__init__(message)
        self.message = message


class ArgCountError(RedictError):
    showUsage = True

    def __init__(self, count):
        super().__init__()
        self.count = count

    def __str__(self):
        return f"Expected 3 arguments, got {self.count}"


class EmptyPathError(RedictError):
    showUsage = True


class SamePathError(RedictError):
    showUsage = True

    def __init__(self, path):
        super().__init__("Input and output files cannot be the same")
        self.path = path


class _WordLenError(RedictError):
    def __init__(self, value):
        super().__init__(f"Invalid word length '{value}'")
        self.value = value


class EmptyLengthError(_WordLenError):
    showUsage = True

    def __init__(self, value=''):
        super().__init__(value)


class InvalidLengthError(_WordLenError):
    """ Word length isn't a plain base 10 number """


class LengthRangeError(_WordLenError):
    """ Word length parsed fine but is outside of 1..MAX_WORDLEN """


class FileError(RedictError):
    """ A failure tied to a specific file, path is the offending path """
    verb = 'open'

    def __init__(self, path):
        super().__init__(f"Couldn't {self.verb} file: {path}")
        self.path = path


class InputOpenError(FileError):
    pass


class OutputOpenError(FileError):
    pass


class InputReadError(FileError):
    verb = 'read'


class OutputWriteError(FileError):
    verb = 'write'
