#!/usr/bin/python3
# Copyright © 2014 Karl Ramm
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
# 1. Redistributions of source code must retain the above copyright
# notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above
# copyright notice, this list of conditions and the following
# disclaimer in the documentation and/or other materials provided
# with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND
# CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES,
# INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS
# BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL,
# EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED
# TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
# DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON
# ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR
# TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF
# THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF
# SUCH DAMAGE.

"""Knuth-Morris-Pratt exact matching, in batch or one symbol at a time.

Patterns and texts are any indexable sequences whose items compare with
``==``: bytes, str, lists of tokens.  Every occurrence is reported,
overlapping ones included.

    >>> match(b'aaaaaa', b'aaa')
    [0, 1, 2, 3]
    >>> state = build(b'abab')
    >>> [state.feed(c, j) for j, c in enumerate(b'ababab')]
    [None, None, None, 3, None, 5]
"""

import sys

import logging

log = logging.getLogger(__name__)


DEBUG = 1<<1


class AllocationError(MemoryError):
    pass


def freeze(pattern):
    """Return an immutable copy of pattern that the caller can't mutate."""
    if isinstance(pattern, (str, bytes)):
        return pattern
    if isinstance(pattern, bytearray):
        return bytes(pattern)
    # bytes() would flatten wider items into their raw encoding
    if isinstance(pattern, memoryview) and pattern.format == 'B':
        return bytes(pattern)
    return tuple(pattern)


def failure(P):
    m = len(P)
    table = [-1] * m
    i = -1
    for j in range(1, m):
        while i > -1 and P[i + 1] != P[j]:
            i = table[i]
        if P[i + 1] == P[j]:
            i += 1
        table[j] = i
    return table


def finditer(T, P, table=None):
    m = len(P)
    if m == 0 or m > len(T):
        return
    if table is None:
        table = failure(P)
    i = -1
    for j, c in enumerate(T):
        while i > -1 and P[i + 1] != c:
            i = table[i]
        if P[i + 1] == c:
            i += 1
        if i == m - 1:
            yield j - m + 1
            i = table[i]


def match(T, P, table=None):
    """Return the start offset of every occurrence of P in T, in order.

    table may be a failure table already computed for P.
    """
    try:
        return list(finditer(T, P, table))
    except MemoryError as e:
        raise AllocationError('no room to match a pattern of length %d against'
                              ' a text of length %d' % (len(P), len(T))) from e


class KMPPattern:
    __slots__ = ['pattern', 'failure', 'flags', '__weakref__']

    def __init__(self, pattern, flags = 0):
        try:
            self.pattern = freeze(pattern)
            self.failure = tuple(failure(self.pattern))
        except MemoryError as e:
            raise AllocationError(
                'no room for a pattern of length %d' % len(pattern)) from e
        self.flags = flags
        if flags & DEBUG:
            log.debug('%r failure table %r', self.pattern, self.failure)

    def __len__(self):
        return len(self.pattern)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.pattern)

    def finditer(self, text):
        return finditer(text, self.pattern, self.failure)

    def match(self, text):
        return match(text, self.pattern, self.failure)

    def stream(self):
        return KMPState(self)


def compile(pattern, flags = 0):
    return KMPPattern(pattern, flags)


class KMPState:
    """Progress of one pattern through one stream of symbols.

    i is the length of the longest prefix of the pattern ending at the last
    symbol fed, minus one.  A state must not be fed after free().
    """
    __slots__ = ['compiled', 'pattern', 'failure', 'm', 'i']

    def __init__(self, compiled):
        self.compiled = compiled
        self.pattern = compiled.pattern
        self.failure = compiled.failure
        self.m = len(compiled.pattern)
        self.i = -1

    def __repr__(self):
        return '<%s %r i=%d>' % (
            self.__class__.__name__, self.pattern, self.i)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.free()

    def feed(self, c, j):
        """Advance over symbol c, found at index j of the text.

        Returns j if the pattern now ends at j (it starts at j - m + 1),
        otherwise None.
        """
        P, failure = self.pattern, self.failure
        i = self.i
        result = None
        if self.m == 0:
            return result
        while i > -1 and P[i + 1] != c:
            i = failure[i]
        if P[i + 1] == c:
            i += 1
        if i == self.m - 1:
            result = j
            i = failure[i]
            if self.compiled.flags & DEBUG:
                log.debug('%r ends at %d', P, j)
        self.i = i
        return result

    def scan(self, chunk, j = 0):
        """Feed chunk, whose first symbol is at index j of the text.

        Yields the start offset of each occurrence completed in chunk.
        """
        m = self.m
        for k, c in enumerate(chunk, j):
            if self.feed(c, k) is not None:
                yield k - m + 1

    def reset(self):
        self.i = -1

    def size(self):
        return (sys.getsizeof(self)
                + sys.getsizeof(self.pattern)
                + sys.getsizeof(self.failure))

    def free(self):
        self.compiled = self.pattern = self.failure = None


def build(pattern, flags = 0):
    """Start a stream for pattern, compiling it unless it already is.

    A compiled pattern keeps the flags it was compiled with.
    """
    if isinstance(pattern, KMPPattern):
        if flags and flags != pattern.flags:
            raise ValueError('flags are fixed when %r is compiled' % pattern)
    else:
        pattern = KMPPattern(pattern, flags)
    return KMPState(pattern)


def stream(state, c, j):
    return state.feed(c, j)


def size(state):
    return state.size()


def free(state):
    state.free()


debugging = False
def dprint(*args, **kw):
    if debugging:
        return print(*args, **kw)

def nprint(*args, **kw):
    if not debugging:
        return print(*args, **kw)


def tryfailure(pattern, expected):
    try:
        sys.stdout.write('.')
        sys.stdout.flush()
        dprint('Failure table of', repr(pattern), end=': ')
        r = failure(pattern)
        if r == expected:
            dprint('Got', r)
        else:
            nprint('Failure table of', repr(pattern), end=': ')
            print('Got', r, 'expected', expected)
    except Exception:
        print('while building the failure table of', repr(pattern))
        raise


def trymatch(text, pattern, expected):
    try:
        sys.stdout.write('.')
        sys.stdout.flush()
        dprint('Trying', repr(text), 'against', repr(pattern), end=': ')
        batch = match(text, pattern)
        state = build(pattern)
        streamed = list(state.scan(text))
        state.free()
        if batch == streamed == expected:
            dprint('Got', batch)
        else:
            nprint('Trying', repr(text), 'against', repr(pattern), end=': ')
            print('Got', batch, 'streamed', streamed, 'expected', expected)
    except Exception:
        print('while trying', repr(text), 'against', repr(pattern))
        raise


if __name__ == '__main__':
    print()
    print('failure tables:', end='')
    for (pattern, expected) in [
            (b'', []),
            (b'a', [-1]),
            (b'aaaa', [-1, 0, 1, 2]),
            (b'abcd', [-1, -1, -1, -1]),
            (b'abab', [-1, -1, 0, 1]),
            (b'ababaca', [-1, -1, 0, 1, 2, -1, 0]),
            (b'abcabd', [-1, -1, -1, 0, 1, -1]),
            (b'aabaaab', [-1, 0, -1, 0, 1, 1, 2]),
            ]:
        tryfailure(pattern, expected)
    print()

    print('matches:', end='')
    for (text, pattern, expected) in [
            (b'aaaaaa', b'aaa', [0, 1, 2, 3]),
            (b'abababab', b'abab', [0, 2, 4]),
            (b'ababcababa', b'aba', [0, 5, 7]),
            (b'ababcabcababd', b'ababd', [8]),
            (b'abcdef', b'gh', []),
            (b'abc', b'abcd', []),
            (b'', b'a', []),
            (b'abc', b'', []),
            (b'pattern', b'pattern', [0]),
            ('the cat sat on the mat', 'at', [5, 9, 20]),
            ([1, 2, 1, 2, 1], [1, 2, 1], [0, 2]),
            ]:
        trymatch(text, pattern, expected)
    print()
