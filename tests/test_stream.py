import io
import queue
from datetime import datetime, timezone

import pytest

from tweetapi.raw import TweetRaw
from tweetapi.stream import (
    StreamError,
    StreamErrorType,
    SystemMessage,
    SystemMessageType,
    TweetMessage,
    TweetSampleStreamOpts,
    TweetSearchStreamOpts,
    start_tweet_stream,
    stream_separator,
)
from tweetapi.tweet import Tweet
from tweetapi.fields import Expansion

MSG1 = "Forced Disconnect: Too many connections. (Allowed Connections = 2)"
MSG2 = (
    "Invalid date format for query parameter 'fromDate'. Expected format is "
    "'yyyyMMddHHmm'. For example, '201701012315' for January 1st, 11:15 pm 2017 UTC.\n\n"
)
MSG3 = (
    "Force closing connection to because it reached the maximum allowed backup "
    "(buffer size is )."
)

SYS1 = (
    '{"error":{"message":"Forced Disconnect: Too many connections. '
    '(Allowed Connections = 2)","sent":"2017-01-11T18:12:52+00:00"}}'
)
SYS2 = (
    '{"error":{"message":"Invalid date format for query parameter \'fromDate\'. '
    "Expected format is 'yyyyMMddHHmm'. For example, '201701012315' for January 1st, "
    '11:15 pm 2017 UTC.\\n\\n","sent":"2017-01-11T17:04:13+00:00"}}'
)
SYS3 = (
    '{"error":{"message":"Force closing connection to because it reached the maximum '
    'allowed backup (buffer size is ).","sent":"2017-01-11T17:04:13+00:00"}}'
)
T1 = '{"data":{"id":"1","text":"hello"}}'
T2 = '{"data":{"id":"2","text":"world"}}'
T3 = '{"data":{"id":"3","text":"!!"}}'


def _tweet_msg(id_, text):
    return TweetMessage(raw=TweetRaw(tweets=[Tweet(id=id_, text=text)]))


WANT_TWEETS = [_tweet_msg("1", "hello"), _tweet_msg("2", "world"), _tweet_msg("3", "!!")]
WANT_SYSTEM = [
    {
        SystemMessageType.ERROR: SystemMessage(
            message=MSG1, sent=datetime(2017, 1, 11, 18, 12, 52, tzinfo=timezone.utc)
        )
    },
    {
        SystemMessageType.ERROR: SystemMessage(
            message=MSG2, sent=datetime(2017, 1, 11, 17, 4, 13, tzinfo=timezone.utc)
        )
    },
    {
        SystemMessageType.ERROR: SystemMessage(
            message=MSG3, sent=datetime(2017, 1, 11, 17, 4, 13, tzinfo=timezone.utc)
        )
    },
]


def _drain(q, count):
    return [q.get(timeout=5) for _ in range(count)]


def _body(*parts):
    return io.BytesIO("\r\n".join(parts).encode())


def test_tweet_stream_messages():
    with start_tweet_stream(_body(T1, T2, T3)) as stream:
        got = _drain(stream.tweets(), 3)
        assert got == WANT_TWEETS
        assert stream.errors().empty()


def test_tweet_stream_system():
    with start_tweet_stream(_body(SYS1, SYS2, SYS3)) as stream:
        got = _drain(stream.system_messages(), 3)
        assert got == WANT_SYSTEM
        assert stream.errors().empty()


def test_tweet_stream_mixed():
    body = _body(T1, SYS1, T2, "", "", "", T3, SYS2, SYS3)
    with start_tweet_stream(body) as stream:
        tweets = _drain(stream.tweets(), 3)
        system = _drain(stream.system_messages(), 3)
        assert tweets == WANT_TWEETS
        assert system == WANT_SYSTEM
        assert stream.errors().empty()


def test_tweet_stream_invalid_json_reports_error():
    with start_tweet_stream(_body("not json", T1)) as stream:
        err = stream.errors().get(timeout=5)
        assert isinstance(err, ValueError)
        assert str(err).startswith("stream error: unmarshal error")
        assert _drain(stream.tweets(), 1) == [_tweet_msg("1", "hello")]


def test_tweet_stream_bad_tweet_reports_tweet_error():
    with start_tweet_stream(_body('{"data":"oops"}')) as stream:
        err = stream.errors().get(timeout=5)
        assert isinstance(err, StreamError)
        assert err.type == StreamErrorType.TWEET


def test_tweet_stream_bad_system_reports_system_error():
    with start_tweet_stream(_body('{"error":"oops"}')) as stream:
        err = stream.errors().get(timeout=5)
        assert isinstance(err, StreamError)
        assert err.type == StreamErrorType.SYSTEM


def test_tweet_stream_connection_alive_after_start():
    with start_tweet_stream(_body(T1)) as stream:
        _drain(stream.tweets(), 1)
        assert stream.connection() is True


def test_close_is_idempotent():
    stream = start_tweet_stream(_body(T1))
    assert _drain(stream.tweets(), 1) == [_tweet_msg("1", "hello")]
    stream.close()
    stream.close()
    with pytest.raises(queue.Empty):
        stream.tweets().get_nowait()


def test_stream_separator_separated():
    data = (T1 + "\r\n" + T2 + "\r\n" + T3).encode()
    advance, token = stream_separator(data, False)
    assert advance == len(T1) + 2
    assert token == T1.encode()


def test_stream_separator_needs_more_data():
    assert stream_separator(T1.encode(), False) == (0, None)


def test_stream_separator_at_eof():
    assert stream_separator(T1.encode(), True) == (len(T1), T1.encode())
    assert stream_separator(b"", True) == (0, None)


@pytest.mark.parametrize(
    "err, want",
    [
        (ValueError("wow"), "tweet: test message wow"),
        (None, "tweet: test message"),
    ],
)
def test_stream_error_str(err, want):
    assert str(StreamError(StreamErrorType.TWEET, "test message", err)) == want


def test_stream_error_matches_same_type():
    e = StreamError(StreamErrorType.TWEET)
    assert e.matches(StreamError(StreamErrorType.TWEET)) is True


def test_stream_error_matches_wrapped():
    e = StreamError(StreamErrorType.TWEET)
    try:
        try:
            raise StreamError(StreamErrorType.TWEET)
        except StreamError as inner:
            raise RuntimeError("some error") from inner
    except RuntimeError as outer:
        wrapped = outer
    assert e.matches(wrapped) is True


def test_stream_error_matches_other_type():
    e = StreamError(StreamErrorType.TWEET)
    assert e.matches(StreamError(StreamErrorType.SYSTEM)) is False


def test_stream_error_wraps_cause():
    werr = ValueError("wow")
    e = StreamError(err=werr)
    assert e.__cause__ is werr
    assert e.err is werr


def test_sample_stream_opts_params():
    opts = TweetSampleStreamOpts(backfill_minutes=3, expansions=[Expansion.AUTHOR_ID])
    assert opts.query_params() == {"expansions": "author_id", "backfill_minutes": "3"}


def test_search_stream_opts_params_empty():
    assert TweetSearchStreamOpts().query_params() == {}
    assert "backfill_minutes" not in TweetSearchStreamOpts(backfill_minutes=0).query_params()