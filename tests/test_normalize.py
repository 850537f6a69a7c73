from twinsies.normalize import basic_clean, escape_html, prepare_query, to_search_key


def test_basic_clean_collapses_whitespace():
    assert basic_clean("  Meridian \t  Capital\n") == "Meridian Capital"
    assert basic_clean(None) == ""
    assert basic_clean(42) == "42"


def test_search_key_is_lower_cased_name():
    assert to_search_key("Thames CAPITAL") == "thames capital"


def test_prepare_query_trims_lowers_and_splits():
    assert prepare_query("  Meridan   CAPTAL ") == ("meridan   captal", ["meridan", "captal"])
    assert prepare_query("") == ("", [])
    assert prepare_query(None) == ("", [])


def test_escape_html_escapes_markup_but_not_quotes():
    assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == "&lt;a href=\"x\"&gt;Tom &amp; Jerry's&lt;/a&gt;"
    assert escape_html(None) == ""
