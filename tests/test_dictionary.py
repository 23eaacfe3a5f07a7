"""Test dictionary loading and the Dictionary collection."""

import pytest

from weaver.verifiers import Dictionary, DictionaryLoadError, InvalidArgumentError, load_dictionary


class TestLoadDictionary:
    """Test cases for reading word lists."""

    def test_bundled_list(self):
        """The bundled list loads 4-letter uppercase words."""
        dictionary = load_dictionary()
        assert len(dictionary) > 100
        assert dictionary.word_length == 4
        assert all(len(w) == 4 and w.isupper() for w in dictionary)
        for word in ("EAST", "WAST", "WEST", "PORE", "RUDE"):
            assert word in dictionary

    def test_filters_and_normalizes(self, tmp_path):
        """Wrong lengths, non-letters and duplicates are dropped; order kept."""
        path = tmp_path / "words.txt"
        path.write_text("east\nCat\nWEST\n  wast  \nmodal\nwe5t\nEAST\n\n")

        dictionary = load_dictionary(path)

        assert dictionary.words == ("EAST", "WEST", "WAST")

    def test_other_word_length(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\nbird\n")
        dictionary = load_dictionary(path, word_length=3)
        assert list(dictionary) == ["CAT", "DOG"]
        assert dictionary.word_length == 3

    def test_too_few_words(self, tmp_path):
        """Fewer than two qualifying words is fatal."""
        path = tmp_path / "words.txt"
        path.write_text("east\ncat\n")
        with pytest.raises(DictionaryLoadError, match="at least 2"):
            load_dictionary(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dictionary(tmp_path / "missing.txt")


class TestDictionary:
    """Test cases for the in-memory collection."""

    def test_membership_is_case_insensitive(self, dictionary):
        assert "west" in dictionary
        assert "WEST" in dictionary
        assert "ZZZZ" not in dictionary
        assert None not in dictionary

    def test_sequence_access(self, dictionary):
        assert dictionary[0] == "EAST"
        assert dictionary.words[:3] == ("EAST", "WAST", "WEST")

    def test_deduplicates(self):
        dictionary = Dictionary(["east", "EAST", "west"])
        assert len(dictionary) == 2

    def test_words_is_immutable(self, dictionary):
        assert isinstance(dictionary.words, tuple)

    def test_rejects_mixed_lengths(self):
        with pytest.raises(InvalidArgumentError, match="MODAL"):
            Dictionary(["east", "modal"])

    def test_rejects_words_of_another_length(self):
        with pytest.raises(InvalidArgumentError):
            Dictionary(["cat", "dog"], word_length=4)
