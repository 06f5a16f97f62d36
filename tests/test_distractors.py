import math
import re

from distractors import generate_distractors, top_up
from percent import format_percent

_PCT_RE = re.compile(r"^(\d+)(?:\\frac\{(\d+)\}\{(\d+)\})?\\%$")


def _assert_valid_percent(s):
    m = _PCT_RE.fullmatch(s)
    assert m, s
    if m.group(2) is not None:
        r, q = int(m.group(2)), int(m.group(3))
        assert math.gcd(r, q) == 1 and 0 < r < q, s


def test_three_distinct_wrong_answers_everywhere():
    for d in range(2, 41):
        for n in range(1, d + 5):
            correct = format_percent(n, d)
            ds = generate_distractors(n, d, correct)
            assert len(ds) == 3
            assert correct not in ds
            assert len(set(ds)) == 3
            for s in ds:
                _assert_valid_percent(s)


def test_inexact_prefers_same_denominator():
    correct = format_percent(7, 13)  # 53 11/13
    ds = generate_distractors(7, 13, correct)
    assert ds == [r"53\frac{10}{13}\%", r"53\frac{12}{13}\%", r"53\frac{2}{13}\%"]


def test_exact_percent_uses_whole_variants():
    correct = format_percent(1, 2)  # 50%
    ds = generate_distractors(1, 2, correct)
    assert ds == [r"49\%", r"51\%", r"52\%"]


def test_zero_percent_tops_up():
    correct = format_percent(0, 5)
    ds = generate_distractors(0, 5, correct)
    assert len(ds) == 3 and correct not in ds
    assert len(set(ds)) == 3


def test_top_up_is_deterministic_and_alternates():
    assert top_up([], r"50\%", 50) == [r"51\%", r"49\%", r"52\%"]
    assert top_up([], r"50\%", 50) == top_up([], r"50\%", 50)


def test_top_up_skips_existing_and_clamps():
    out = top_up([r"2\%"], r"1\%", 1)
    assert out == [r"2\%", r"3\%", r"4\%"]
