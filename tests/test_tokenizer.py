from sexpr.tokenizer import Tokenizer, tokenize

TEST_1 = "(+ (* 2 3) (- 5 4))"


def test_tokenize_nested():
    assert tokenize(TEST_1) == ["(", "+", "(", "*", "2", "3", ")", "(", "-", "5", "4", ")", ")"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize(" \t\n ") == []


def test_delimiters_split_without_whitespace():
    assert tokenize("(a(b)c)") == ["(", "a", "(", "b", ")", "c", ")"]


def test_symbols_are_lowercased():
    assert tokenize("(Define FOO Bar)") == ["(", "define", "foo", "bar", ")"]


def test_unicode_whitespace_separates():
    assert tokenize("a\u00a0b\u2003c") == ["a", "b", "c"]


def test_information_separators_do_not_split():
    assert tokenize("a\x1cb\x1fc") == ["a\x1cb\x1fc"]
    assert tokenize("(X\x1dY \x1e)") == ["(", "x\x1dy", "\x1e", ")"]


def test_custom_symbol_set():
    t = Tokenizer("[]{}")
    assert t.tokenize("[A{b}]") == ["[", "a", "{", "b", "}", "]"]
    # Parens are ordinary characters once they are not delimiters.
    assert t.tokenize("(x)") == ["(x)"]


def test_delimiters_are_not_case_folded():
    assert tokenize("XaYbX", symbols="XY") == ["X", "a", "Y", "b", "X"]


def test_tokenizer_reusable():
    t = Tokenizer()
    assert t.tokenize("(a b") == ["(", "a", "b"]
    assert t.tokenize("c)") == ["c", ")"]
