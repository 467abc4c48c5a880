from responder.keywords import KeywordTable, split_keywords


def test_split_keywords_trims_tokens():
    assert split_keywords(" foo ,bar") == ["foo", "bar"]
    assert split_keywords("hello, hi") == ["hello", "hi"]


def test_exact_match_only():
    table = KeywordTable({"hello, hi": "Hi there!\n"})

    assert table.match("hello").response == "Hi there!\n"
    assert table.match("hi").raw_key == "hello, hi"
    assert table.match("Hello") is None
    assert table.match("hell") is None
    assert table.match("hello, hi") is None


def test_whitespace_around_keywords():
    table = KeywordTable({" foo ,bar": "matched\n"})

    assert table.match("foo").response == "matched\n"
    assert table.match("bar").response == "matched\n"
    assert table.match(" foo") is None


def test_first_loaded_entry_wins_for_shared_keyword():
    table = KeywordTable({"mac, apple": "first\n", "apple": "second\n"})

    assert table.match("apple").response == "first\n"


def test_entries_returns_copy():
    table = KeywordTable({"a": "A\n"})

    table.entries()["b"] = "B\n"

    assert len(table) == 1
    assert table.match("b") is None
