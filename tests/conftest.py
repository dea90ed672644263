import itertools

import pytest


def brute_failure(pattern):
    """Failure table computed straight from its definition."""
    table = []
    for i in range(len(pattern)):
        prefix = pattern[:i + 1]
        best = 0
        for k in range(1, i + 1):
            if prefix[:k] == prefix[-k:]:
                best = k
        table.append(best - 1)
    return table


def brute_match(text, pattern):
    """Every offset o with text[o:o+m] == pattern, the slow way."""
    m = len(pattern)
    if m == 0:
        return []
    return [o for o in range(len(text) - m + 1) if text[o:o + m] == pattern]


def words(alphabet, max_length):
    for n in range(max_length + 1):
        for w in itertools.product(alphabet, repeat=n):
            yield bytes(w)


def chunkings(text):
    """Every way of cutting text into consecutive nonempty chunks."""
    n = len(text)
    for cuts in itertools.product([False, True], repeat=max(n - 1, 0)):
        chunks, start = [], 0
        for k, cut in enumerate(cuts, 1):
            if cut:
                chunks.append(text[start:k])
                start = k
        chunks.append(text[start:])
        yield chunks


@pytest.fixture
def sample_text():
    """Fixture that provides a sample text for testing."""
    return b'abracadabra, abracadabra, abracadabracadabra'


@pytest.fixture
def search_patterns():
    """Fixture that provides patterns with and without self-overlap."""
    return [b'a', b'abra', b'cadabra', b'abracadabra', b'bracadabrac', b'zzz']
