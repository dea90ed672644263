#!/usr/bin/python3


import contextlib
import time
import re

import kmp

COUNT=100


def find_all(text, pattern):
    r = []
    i = text.find(pattern)
    while i != -1:
        r.append(i)
        i = text.find(pattern, i + 1)
    return r


def lookahead(text, pattern):
    return [m.start() for m in re.finditer(b'(?=' + re.escape(pattern) + b')', text)]


@contextlib.contextmanager
def timer():
    t0 = time.perf_counter()
    yield
    print('duration', time.perf_counter() - t0, 'seconds')


def main():
    for i in range(1, 20):
        pattern = b'a' * (i * 8) + b'b'
        text = b'a' * (i * 1000) + b'b'
        print()
        print(i, 'pattern of', len(pattern), 'against text of', len(text))

        print('find ', end='')
        with timer():
            for _ in range(COUNT):
                find_all(text, pattern)

        print('re   ', end='')
        with timer():
            for _ in range(COUNT):
                lookahead(text, pattern)

        print('kmp  ', end='')
        c = kmp.compile(pattern)
        with timer():
            for _ in range(COUNT):
                c.match(text)

        print('feed ', end='')
        with timer():
            for _ in range(COUNT):
                with kmp.build(c) as state:
                    for j, t in enumerate(text):
                        state.feed(t, j)


if __name__ == '__main__':
    main()
