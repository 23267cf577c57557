from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    # Keep the shorter word on the inner loop; the rows only need len(b) + 1 cells.
    if len(b) > len(a):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]


distance = levenshtein


def within_length_band(typed_length: int, word_length: int, threshold: int) -> bool:
    """Return True if a word of ``word_length`` can be within ``threshold`` edits.

    Edit distance is never smaller than the difference in length, so words
    outside this band are skipped without scoring them.
    """
    return abs(word_length - typed_length) <= threshold
