import pytest

import kmp
from conftest import brute_match, words


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        (b'aaaaaa', b'aaa', [0, 1, 2, 3]),
        (b'abababab', b'abab', [0, 2, 4]),
        (b'aaaa', b'aa', [0, 1, 2]),
        (b'ababcababa', b'aba', [0, 5, 7]),
        (b'ababcabcababd', b'ababd', [8]),
        (b'pattern', b'pattern', [0]),
        (b'abcdef', b'gh', []),
    ]
)
def test_match(text, pattern, expected):
    assert kmp.match(text, pattern) == expected


def test_empty_pattern():
    assert kmp.match(b'some text', b'') == []
    assert kmp.match(b'', b'') == []


def test_empty_text():
    assert kmp.match(b'', b'a') == []


def test_pattern_longer_than_text():
    assert kmp.match(b'abc', b'abcd') == []


def test_str_and_token_sequences():
    assert kmp.match('the cat sat on the mat', 'at') == [5, 9, 20]
    assert kmp.match([1, 2, 1, 2, 1], [1, 2, 1]) == [0, 2]
    assert kmp.match(memoryview(b'xyxyx'), b'xyx') == [0, 2]


def test_precomputed_table():
    table = kmp.failure(b'abra')
    assert kmp.match(b'abracadabra', b'abra', table) == [0, 7]


def test_matches_brute_force():
    patterns = list(words(b'ab', 4))
    for text in words(b'ab', 9):
        for pattern in patterns:
            assert kmp.match(text, pattern) == brute_match(text, pattern)


def test_no_false_positives(sample_text, search_patterns):
    for pattern in search_patterns:
        m = len(pattern)
        offsets = kmp.match(sample_text, pattern)
        assert offsets == sorted(set(offsets))
        assert len(offsets) <= max(0, len(sample_text) - m + 1)
        for o in offsets:
            assert sample_text[o:o + m] == pattern


def test_deterministic(sample_text, search_patterns):
    for pattern in search_patterns:
        first = kmp.match(sample_text, pattern)
        assert kmp.match(sample_text, pattern) == first
        assert kmp.compile(pattern).match(sample_text) == first


def test_finditer_is_lazy():
    it = kmp.compile(b'aa').finditer(b'aaaa')
    assert next(it) == 0
    assert next(it) == 1
    it.close()
    assert list(kmp.finditer(b'aaaa', b'aa')) == [0, 1, 2]
