from hypothesis import given, strategies as st

from algokit.text import (
    are_sentences_similar,
    custom_sort_string,
    digit_count,
    min_distance,
    num_different_integers,
    num_matching_subseq,
)

short_words = st.text(alphabet="abc", min_size=1, max_size=3)
word_lists = st.lists(short_words, max_size=5)


def test_num_different_integers_example():
    assert num_different_integers("a123bc34d8ef34") == 3


def test_num_different_integers_ignores_leading_zeros():
    assert num_different_integers("x1y01z001") == num_different_integers("1")
    assert num_different_integers("0") == num_different_integers("00")


def test_num_different_integers_no_digits():
    assert num_different_integers("abcdef") == 0


@given(st.lists(st.integers(1, 10**6), min_size=1, max_size=10))
def test_num_different_integers_counts_distinct_values(numbers):
    word = "x".join(str(n) for n in numbers)
    assert num_different_integers(word) == len(set(numbers))


def test_are_sentences_similar_example():
    assert are_sentences_similar("My name is Haley", "My Haley") is True


@given(word_lists)
def test_are_sentences_similar_to_itself(words):
    sentence = " ".join(words)
    assert are_sentences_similar(sentence, sentence) is True


@given(word_lists, word_lists, word_lists)
def test_are_sentences_similar_insertion(prefix, middle, suffix):
    full = " ".join(prefix + middle + suffix)
    trimmed = " ".join(prefix + suffix)
    assert are_sentences_similar(full, trimmed) is True
    assert are_sentences_similar(trimmed, full) is True


@given(short_words, short_words)
def test_are_sentences_similar_single_words(a, b):
    assert are_sentences_similar(a, b) is (a == b)


@given(word_lists, word_lists)
def test_are_sentences_similar_symmetric(a, b):
    first, second = " ".join(a), " ".join(b)
    assert are_sentences_similar(first, second) == are_sentences_similar(second, first)


def test_digit_count_self_describing():
    assert digit_count("1210") is True


@given(st.text(alphabet="0123456789", max_size=9))
def test_digit_count_leading_zero_is_contradiction(rest):
    assert digit_count("0" + rest) is False


@given(st.text(alphabet="ab", max_size=6))
def test_min_distance_to_itself(word):
    assert min_distance(word, word) == 0
    assert min_distance(word, "") == len(word)
    assert min_distance("", word) == len(word)


@given(st.text(alphabet="ab", max_size=6), st.text(alphabet="ab", max_size=6))
def test_min_distance_symmetric_and_bounded(a, b):
    result = min_distance(a, b)
    assert result == min_distance(b, a)
    assert abs(len(a) - len(b)) <= result <= max(len(a), len(b))


@given(
    st.text(alphabet="ab", max_size=5),
    st.text(alphabet="ab", max_size=5),
    st.text(alphabet="ab", max_size=5),
)
def test_min_distance_triangle(a, b, c):
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)


@given(st.text(alphabet="abc", min_size=1, max_size=6), st.data())
def test_min_distance_one_substitution(word, data):
    index = data.draw(st.integers(0, len(word) - 1))
    changed = word[:index] + "z" + word[index + 1 :]
    assert min_distance(word, changed) == 1


@given(
    st.lists(st.sampled_from("abcdef"), unique=True).map("".join),
    st.text(alphabet="abcdefgh", max_size=15),
)
def test_custom_sort_string_layout(order, s):
    result = custom_sort_string(order, s)
    assert sorted(result) == sorted(s)
    in_order = sum(ch in order for ch in s)
    head, tail = result[:in_order], result[in_order:]
    assert all(ch in order for ch in head)
    assert list(dict.fromkeys(head)) == [ch for ch in order if ch in s]
    assert list(tail) == sorted(tail)


@given(st.text(alphabet="abc", min_size=1, max_size=10), st.data())
def test_num_matching_subseq_all_subsequences(s, data):
    masks = data.draw(
        st.lists(st.lists(st.booleans(), min_size=len(s), max_size=len(s)), max_size=6)
    )
    words = ["".join(ch for ch, keep in zip(s, mask) if keep) for mask in masks]
    assert num_matching_subseq(s, words) == len(words)
    assert num_matching_subseq(s, [word + "z" for word in words]) == 0


@given(st.text(alphabet="abc", min_size=1, max_size=10))
def test_num_matching_subseq_whole_and_longer(s):
    assert num_matching_subseq(s, [s, s + s[-1]]) == 1