"""Utility functions for Telegram bot."""

import re

from moneyflow_bot.config import MESSAGE_CHUNK_SIZE

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def utf16_len(text: str) -> int:
    """Length of ``text`` as Telegram counts it, in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


def _utf16_prefix(text: str, limit: int) -> str:
    """Longest code-point prefix of ``text`` within ``limit`` UTF-16 units.

    Always at least one code point, so a caller cutting in a loop makes progress.
    """
    units = 0
    for idx, char in enumerate(text):
        units += 2 if ord(char) > 0xFFFF else 1
        if units > limit:
            return text[: max(idx, 1)]
    return text


def split_message(text: str, max_len: int = MESSAGE_CHUNK_SIZE) -> list[str]:
    """Split text into chunks of at most ``max_len`` UTF-16 units.

    Priority: paragraph breaks > sentence ends > spaces > hard split.
    Paragraphs are packed greedily and rejoined with a blank line; a paragraph
    that cannot fit on its own is broken into sentences, a sentence into
    words, and a word longer than ``max_len`` is cut at ``max_len``.
    Every chunk is stripped and empty chunks are dropped.

    Lengths are counted the way Telegram counts them (UTF-16 units), but cuts
    are made between code points, so an emoji or Khmer character is never
    broken in half.
    """
    if max_len <= 0:
        raise ValueError(f"max_len must be positive, got {max_len}")

    if utf16_len(text) <= max_len:
        return [text]

    chunks: list[str] = []
    current = ""

    for paragraph in text.split(PARAGRAPH_SEPARATOR):
        if utf16_len(current) + utf16_len(paragraph) + len(PARAGRAPH_SEPARATOR) > max_len:
            if current.strip():
                chunks.append(current.strip())
            current = ""

            if utf16_len(paragraph) > max_len:
                chunks.extend(_split_paragraph(paragraph, max_len))
            else:
                current = paragraph
        elif current:
            current += PARAGRAPH_SEPARATOR + paragraph
        else:
            current = paragraph

    if current.strip():
        chunks.append(current.strip())

    return chunks


def _split_paragraph(paragraph: str, max_len: int) -> list[str]:
    chunks: list[str] = []
    current = ""

    for sentence in SENTENCE_BOUNDARY.split(paragraph):
        if utf16_len(current) + utf16_len(sentence) + 1 > max_len:
            if current.strip():
                chunks.append(current.strip())
            current = ""

            if utf16_len(sentence) > max_len:
                word_chunks, current = _split_sentence(sentence, max_len)
                chunks.extend(word_chunks)
            else:
                current = sentence
        elif current:
            current += " " + sentence
        else:
            current = sentence

    if current.strip():
        chunks.append(current.strip())

    return chunks


def _split_sentence(sentence: str, max_len: int) -> tuple[list[str], str]:
    """Pack words greedily.

    Returns the finished chunks and the unfinished tail, which the caller
    keeps accumulating into.
    """
    chunks: list[str] = []
    current = ""

    for word in sentence.split(" "):
        if utf16_len(current) + utf16_len(word) + 1 > max_len:
            if current.strip():
                chunks.append(current.strip())
            current = ""

            # No break point left: hard cut, the remainder is treated as a new word
            while utf16_len(word) > max_len:
                head = _utf16_prefix(word, max_len)
                word = word[len(head):]
                if head.strip():
                    chunks.append(head.strip())
            current = word
        elif current:
            current += " " + word
        else:
            current = word

    return chunks, current
