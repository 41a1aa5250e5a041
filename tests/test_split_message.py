import re

import pytest

from moneyflow_bot.bot.utils import split_message, utf16_len
from moneyflow_bot.lessons import load_lesson


def normalize(text: str) -> str:
    return re.sub(r"\s+", "", text)


class TestShortMessages:
    def test_short_message_returns_single_chunk(self):
        text = "Hello, World!"
        assert split_message(text, max_len=100) == [text]

    def test_message_of_exact_limit_is_untouched(self):
        text = "  padded  " + "x" * 90
        assert split_message(text, max_len=len(text)) == [text]

    def test_hundred_chars_with_default_limit(self):
        text = "a" * 100
        assert split_message(text, max_len=3500) == [text]

    def test_empty_string(self):
        assert split_message("", max_len=10) == [""]

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError):
            split_message("text", max_len=0)


class TestParagraphs:
    def test_splits_on_paragraph_boundary(self):
        text = "First paragraph.\n\nSecond paragraph."
        result = split_message(text, max_len=20)

        assert result == ["First paragraph.", "Second paragraph."]

    def test_two_large_paragraphs(self):
        para1 = "A" * 2000
        para2 = "B" * 2000
        result = split_message(f"{para1}\n\n{para2}", max_len=3500)

        assert result == [para1, para2]

    def test_small_paragraphs_are_packed_together(self):
        text = "one\n\ntwo\n\nthree\n\nfour"
        result = split_message(text, max_len=12)

        assert result == ["one\n\ntwo", "three\n\nfour"]

    def test_blank_paragraphs_are_not_emitted(self):
        text = "alpha" + "\n\n" * 10 + "beta"
        result = split_message(text, max_len=8)

        assert result == ["alpha", "beta"]

    def test_chunks_are_trimmed(self):
        text = "  first  \n\n  second  "
        result = split_message(text, max_len=12)

        assert result == ["first", "second"]


class TestSentences:
    def test_long_paragraph_splits_on_sentences(self):
        sentence = "This sentence is exactly fifty characters long ok. "
        paragraph = (sentence * 200).strip()
        assert len(paragraph) > 9000

        result = split_message(paragraph, max_len=3500)

        assert len(result) > 1
        assert all(len(chunk) <= 3500 for chunk in result)
        assert all(chunk.endswith(".") for chunk in result)
        assert normalize("".join(result)) == normalize(paragraph)

    def test_all_sentence_terminators(self):
        text = "Is it? Yes! Done."
        result = split_message(text, max_len=7)

        assert result == ["Is it?", "Yes!", "Done."]

    def test_paragraph_after_split_paragraph_starts_fresh(self):
        text = "Aaaa. Bbbb. Cccc.\n\nDd"
        result = split_message(text, max_len=11)

        assert result == ["Aaaa. Bbbb.", "Cccc.", "Dd"]


class TestWords:
    def test_splits_on_space_when_no_sentence_end(self):
        text = "word1 word2 word3 word4"
        result = split_message(text, max_len=12)

        assert result == ["word1 word2", "word3 word4"]

    def test_word_tail_keeps_accumulating_sentences(self):
        text = "aaa bbb ccc ddd. ee."
        result = split_message(text, max_len=12)

        assert result == ["aaa bbb ccc", "ddd. ee."]


class TestHardSplit:
    def test_single_long_word(self):
        text = "A" * 5000
        result = split_message(text, max_len=3500)

        assert [len(chunk) for chunk in result] == [3500, 1500]
        assert "".join(result) == text

    def test_word_longer_than_twice_the_limit(self):
        text = "B" * 10000
        result = split_message(text, max_len=4000)

        assert [len(chunk) for chunk in result] == [4000, 4000, 2000]

    def test_long_word_after_short_words(self):
        text = "tiny " + "Z" * 25
        result = split_message(text, max_len=10)

        assert result == ["tiny", "Z" * 10, "Z" * 10, "Z" * 5]

    def test_remainder_accumulates_following_words(self):
        text = "Q" * 12 + " end"
        result = split_message(text, max_len=10)

        assert result == ["Q" * 10, "QQ end"]


class TestProperties:
    @pytest.mark.parametrize("limit", [5, 17, 64, 200, 1000])
    def test_all_chunks_within_limit(self, limit):
        text = load_lesson(2) * 3

        result = split_message(text, max_len=limit)

        assert all(0 < len(chunk) <= limit for chunk in result)

    @pytest.mark.parametrize("limit", [17, 64, 500])
    def test_no_characters_lost_or_duplicated(self, limit):
        text = load_lesson(1)

        result = split_message(text, max_len=limit)

        assert normalize("".join(result)) == normalize(text)

    def test_chunks_follow_source_order(self):
        words = [f"w{i:04d}" for i in range(2000)]
        text = " ".join(words)

        result = split_message(text, max_len=300)

        assert " ".join(result).split(" ") == words

    def test_deterministic(self):
        text = load_lesson(1) + "\n\n" + load_lesson(2)

        assert split_message(text, max_len=700) == split_message(text, max_len=700)

    def test_khmer_text_is_split_on_code_points(self):
        text = "ស្វាគមន៍" * 600
        result = split_message(text, max_len=1000)

        assert all(len(chunk) <= 1000 for chunk in result)
        assert "".join(result) == text
        for chunk in result:
            chunk.encode("utf-8")


class TestUtf16Length:
    def test_astral_characters_count_double(self):
        assert utf16_len("abc") == 3
        assert utf16_len("ស្វាគមន៍") == len("ស្វាគមន៍")
        assert utf16_len("🎯") == 2

    def test_emoji_text_fits_telegram_units(self):
        text = "🎯 " * 2000
        assert len(text) <= 4096 < utf16_len(text)

        result = split_message(text, max_len=3500)

        assert len(result) > 1
        assert all(utf16_len(chunk) <= 3500 for chunk in result)
        assert "".join(result).count("🎯") == 2000

    def test_hard_cut_never_splits_an_emoji(self):
        result = split_message("😀" * 10, max_len=5)

        assert result == ["😀😀"] * 5

    def test_emoji_wider_than_limit_still_progresses(self):
        assert split_message("😀😀", max_len=1) == ["😀", "😀"]
