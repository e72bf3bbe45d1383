"""
A module defining the filtering logic for redict.

This module has instances of a Filter class that each represent one condition
a dictionary line must meet to be kept, e.g. ExactLength(5) only keeps lines
that are 5 bytes long once their line terminators are stripped.

There is also a FilterSet class, a subclass of pythons builtin set, with
handy methods for checking a line against all the filters in the set /
applying all of them to a stream of lines.

Lines are bytes throughout, so length means byte count, not character count.
"""

# All the filters / the filtersets redict uses
__all__ = ['stripTerminators', 'ExactLength', 'FilterSet']

TERMINATORS = b'\r\n'


def stripTerminators(line):
    """ Remove every trailing \\n and \\r from a line (handles LF and CRLF) """
    return line.rstrip(TERMINATORS)


class Filter:
    """
    Superclass for filters, all subclasses must implement the call method
    """
    def __call__(self, line):
        """
        Take a line (bytes, terminators already stripped), return
        whether the line meets the filter
        """
        raise NotImplementedError
    def __init__(self, num):
        """
        num is the count the filter compares against
        """
        assert (isinstance(num, int))
        self.num = num
    def __eq__(self, other):
        return type(self) == type(other) and self.num == other.num
    def __hash__(self):
        return hash((type(self).__name__, self.num))
    def __repr__(self):
        return type(self).__name__ + f"({self.num})"

class ExactLength(Filter):
    """ A filter specifying a line is exactly a number (self.num) of bytes long """
    def __call__(self, line):
        return len(line) == self.num

class FilterSet(set):
    """
    A subclass of set that defines a set of filters. Can be constructed /
    modified in the same way as a set.
    """

    def accepts(self, line):
        """ Whether a line meets every filter in this filter set """
        return all(filt(line) for filt in self)

    def applyAll(self, lines):
        """
        Lazily strip the terminators off of each line in lines and yield the
        ones that meet all the criteria
        """
        for line in lines:
            line = stripTerminators(line)
            if self.accepts(line):
                yield line
