import itertools

from flagstream.parser import Dispatch, TokenKind, TokenStream, classify_token


def test_classify_long_flag():
    assert classify_token("--output") == Dispatch(TokenKind.LONG, "--output", "output")


def test_classify_long_flag_splits_at_first_equals():
    dispatch = classify_token("--define=key=value")
    assert dispatch.kind is TokenKind.LONG
    assert dispatch.name == "define"
    assert dispatch.inline_value == "key=value"


def test_classify_double_dash_is_long():
    dispatch = classify_token("--")
    assert dispatch.kind is TokenKind.LONG
    assert dispatch.name == ""
    assert dispatch.inline_value is None


def test_classify_empty_long_name_with_value():
    dispatch = classify_token("--=x")
    assert dispatch.name == ""
    assert dispatch.inline_value == "x"


def test_classify_short_cluster():
    dispatch = classify_token("-abc")
    assert dispatch.kind is TokenKind.SHORT
    assert dispatch.name == "abc"
    assert dispatch.inline_value is None


def test_classify_short_cluster_with_value():
    dispatch = classify_token("-ab=x")
    assert dispatch.kind is TokenKind.SHORT
    assert dispatch.name == "ab"
    assert dispatch.inline_value == "x"


def test_classify_empty_inline_value():
    assert classify_token("-a=").inline_value == ""


def test_classify_single_dash_is_positional():
    assert classify_token("-").kind is TokenKind.POSITIONAL


def test_classify_positional():
    dispatch = classify_token("file.txt")
    assert dispatch.kind is TokenKind.POSITIONAL
    assert dispatch.name == "file.txt"
    assert dispatch.inline_value is None


def test_token_kind_str():
    assert str(TokenKind.SHORT) == "short"


def test_stream_peek_does_not_consume():
    stream = TokenStream(["a", "b"])
    assert stream.peek() == "a"
    assert stream.peek() == "a"
    assert stream.position == 0
    assert stream.next() == "a"
    assert stream.next() == "b"
    assert stream.position == 2
    assert stream.next() is None
    assert stream.peek() is None
    assert stream.is_empty()


def test_stream_remaining_yields_lookahead_first():
    stream = TokenStream(["a", "b", "c"])
    stream.next()
    assert stream.peek() == "b"
    assert list(stream.remaining()) == ["b", "c"]
    assert stream.is_empty()


def test_stream_holds_one_token_of_lookahead():
    pulled = []

    def source():
        for n in itertools.count():
            pulled.append(n)
            yield str(n)

    stream = TokenStream(source())
    assert stream.peek() == "0"
    assert pulled == [0]
    stream.next()
    assert pulled == [0]
    assert list(itertools.islice(stream, 2)) == ["1", "2"]
    assert pulled == [0, 1, 2]
