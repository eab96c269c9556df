"""Multi-script sentence counting."""

from milo.utils.constants import Constants


def count_sentences(text: str) -> int:
    """Count sentences by scanning for sentence-ending marks.

    A run of marks and whitespace (``"!!!"``, ``"... "``, ``"。 "``) closes a
    single sentence. Non-empty text without any terminal mark is one sentence.

    Args:
        text: Text in any mix of space-delimited and CJK scripts

    Returns:
        Number of sentences, 0 for empty or whitespace-only text
    """
    if not text or not text.strip():
        return 0

    endings = Constants.SENTENCE_ENDINGS
    count = 0
    i = 0
    length = len(text)
    while i < length:
        if text[i] in endings:
            count += 1
            i += 1
            while i < length and (text[i].isspace() or text[i] in endings):
                i += 1
        else:
            i += 1

    return count or 1
