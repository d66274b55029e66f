from inkwell.utils.cache_keys import ALL_KEY, hot_tags_key, normalize_key, page_slug_key, post_slug_key


def test_slug_keys_are_lower_cased() -> None:
    assert page_slug_key("About") == page_slug_key("about") == "about"
    assert post_slug_key(" Hello-World ") == "hello-world"


def test_normalize_key() -> None:
    assert normalize_key("  MiXeD ") == "mixed"


def test_hot_tags_key() -> None:
    assert hot_tags_key(10) == "hot-10"
    assert ALL_KEY == "all"
