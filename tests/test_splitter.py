import string

import pytest

from travel_tools import Document, RecursiveCharacterTextSplitter


def _separator_free_text(length: int) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(alphabet[i % len(alphabet)] for i in range(length))


def test_chunks_respect_size_and_exact_overlap_without_separators():
    text = _separator_free_text(2500)
    splitter = RecursiveCharacterTextSplitter(chunk_size=1000, chunk_overlap=200)

    chunks = splitter.split_text(text)

    assert len(chunks) == 3
    assert all(len(chunk) <= 1000 for chunk in chunks)
    for previous, current in zip(chunks, chunks[1:]):
        assert previous[-200:] == current[:200]
    assert chunks[0] == text[:1000]
    assert chunks[-1] == text[1600:]


def test_word_text_chunks_stay_bounded_and_carry_a_tail():
    text = " ".join(f"word{i:04d}" for i in range(600))
    splitter = RecursiveCharacterTextSplitter(chunk_size=1000, chunk_overlap=200)

    chunks = splitter.split_text(text)

    assert len(chunks) > 1
    assert all(len(chunk) <= 1000 for chunk in chunks)
    for previous, current in zip(chunks, chunks[1:]):
        overlaps = [k for k in range(1, 201) if previous.endswith(current[:k])]
        assert overlaps and max(overlaps) > 150
    assert chunks[0].startswith("word0000")
    assert chunks[-1].endswith("word0599")


def test_paragraphs_are_preferred_boundaries():
    first = "Vienna " * 50
    second = "Salzburg " * 50
    splitter = RecursiveCharacterTextSplitter(chunk_size=500, chunk_overlap=50)

    chunks = splitter.split_text(f"{first.strip()}\n\n{second.strip()}")

    assert chunks == [first.strip(), second.strip()]


def test_short_text_is_a_single_chunk_and_blank_text_none():
    splitter = RecursiveCharacterTextSplitter()

    assert splitter.split_text("  Vienna is the capital of Austria.  ") == ["Vienna is the capital of Austria."]
    assert splitter.split_text("   \n\n  ") == []


def test_split_documents_tags_source_and_offsets():
    text = _separator_free_text(1800)
    document = Document(doc_id="page", content=text, metadata={"source": "https://example.com/austria"})
    splitter = RecursiveCharacterTextSplitter(chunk_size=1000, chunk_overlap=200)

    chunks = splitter.split_documents([document])

    assert [chunk.doc_id for chunk in chunks] == [
        "https://example.com/austria#0",
        "https://example.com/austria#1",
    ]
    assert [chunk.metadata["start_index"] for chunk in chunks] == [0, 800]
    assert [chunk.metadata["chunk_index"] for chunk in chunks] == [0, 1]
    assert all(chunk.source == "https://example.com/austria" for chunk in chunks)
    for chunk in chunks:
        start = chunk.metadata["start_index"]
        assert text[start : start + len(chunk.content)] == chunk.content


@pytest.mark.parametrize("size, overlap", [(100, 100), (100, 150), (0, 0), (100, -1)])
def test_invalid_sizes_are_rejected(size, overlap):
    with pytest.raises(ValueError):
        RecursiveCharacterTextSplitter(chunk_size=size, chunk_overlap=overlap)
