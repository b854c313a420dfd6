"""
Tests for the command tokenizer.

Run with: python -m pytest tests/test_tokenizer.py -v
"""

from minidb.protocol.tokenizer import tokenize


class TestTokenizeBasic:
    """Test splitting on unquoted spaces."""

    def test_bare_tokens(self):
        assert tokenize("STORE age 25") == ["STORE", "age", "25"]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_only_spaces(self):
        assert tokenize("   ") == []

    def test_repeated_spaces_collapse(self):
        assert tokenize("GET    key") == ["GET", "key"]

    def test_leading_and_trailing_spaces(self):
        assert tokenize("  GET key  ") == ["GET", "key"]

    def test_tab_is_not_a_separator(self):
        """Only the space character splits tokens."""
        assert tokenize("GET\tkey") == ["GET\tkey"]


class TestTokenizeQuotes:
    """Test double-quoted spans."""

    def test_quoted_value_with_space(self):
        """Test the canonical quoted STORE command."""
        assert tokenize('STORE name "John Doe"') == ["STORE", "name", "John Doe"]

    def test_quoted_key_and_value(self):
        assert tokenize('STORE "full name" "Jane Smith"') == [
            "STORE", "full name", "Jane Smith"
        ]

    def test_quoted_preserves_inner_spaces(self):
        assert tokenize('"  padded  "') == ["  padded  "]

    def test_empty_quotes_produce_no_token(self):
        assert tokenize('STORE key ""') == ["STORE", "key"]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize('STORE name "John Doe') == ["STORE", "name", "John Doe"]

    def test_closing_quote_flushes_before_trailing_text(self):
        """Text glued after a closing quote becomes its own token."""
        assert tokenize('"ab"cd') == ["ab", "cd"]

    def test_opening_quote_does_not_flush(self):
        """Text glued before an opening quote merges with the quoted span."""
        assert tokenize('ab"cd ef"') == ["abcd ef"]

    def test_adjacent_quoted_spans(self):
        assert tokenize('"a b""c d"') == ["a b", "c d"]

    def test_quotes_are_not_part_of_tokens(self):
        tokens = tokenize('GET "key"')
        assert all('"' not in token for token in tokens)
