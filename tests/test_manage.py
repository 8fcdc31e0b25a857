import pytest

from tweetapi.errors import ParameterError
from tweetapi.manage import (
    CreateTweetData,
    CreateTweetGeo,
    CreateTweetMedia,
    CreateTweetPoll,
    CreateTweetReply,
    CreateTweetRequest,
    CreateTweetResponse,
    DeleteTweetResponse,
)


@pytest.mark.parametrize(
    "reply, want_err",
    [
        (CreateTweetReply(["6253282"], "1455953449422516226"), False),
        (CreateTweetReply(in_reply_to_tweet_id="1455953449422516226"), False),
        (CreateTweetReply(exclude_reply_user_ids=["6253282"]), True),
    ],
)
def test_create_tweet_reply_validate(reply, want_err):
    if want_err:
        with pytest.raises(ParameterError):
            reply.validate()
    else:
        assert reply.validate() is None


@pytest.mark.parametrize(
    "poll, want_err",
    [
        (CreateTweetPoll(options=["yes", "maybe", "no"], duration_minutes=120), False),
        (CreateTweetPoll(options=["yes", "maybe", "no"]), True),
    ],
)
def test_create_tweet_poll_validate(poll, want_err):
    if want_err:
        with pytest.raises(ParameterError):
            poll.validate()
    else:
        assert poll.validate() is None


@pytest.mark.parametrize(
    "media, want_err",
    [
        (CreateTweetMedia(["1455952740635586573"], ["2244994945", "6253282"]), False),
        (CreateTweetMedia(ids=["1455952740635586573"]), False),
        (CreateTweetMedia(tagged_user_ids=["2244994945", "6253282"]), True),
    ],
)
def test_create_tweet_media_validate(media, want_err):
    if want_err:
        with pytest.raises(ParameterError):
            media.validate()
    else:
        assert media.validate() is None


def _request(text="", media_ids=None):
    return CreateTweetRequest(
        text=text,
        geo=CreateTweetGeo(),
        media=CreateTweetMedia(ids=media_ids or []),
        poll=CreateTweetPoll(),
        reply=CreateTweetReply(),
    )


@pytest.mark.parametrize(
    "request_, want_err",
    [
        (_request(text="Hello World", media_ids=["12345"]), False),
        (_request(media_ids=["12345"]), False),
        (_request(text="Hello World"), False),
        (_request(), True),
    ],
)
def test_create_tweet_request_validate(request_, want_err):
    if want_err:
        with pytest.raises(ParameterError):
            request_.validate()
    else:
        assert request_.validate() is None


def test_create_tweet_request_wraps_part_errors():
    req = CreateTweetRequest(text="hi", poll=CreateTweetPoll(options=["a", "b"]))
    with pytest.raises(ParameterError, match="^create tweet error"):
        req.validate()


def test_create_tweet_request_to_dict_omits_empty():
    req = CreateTweetRequest(
        text="Hello World",
        media=CreateTweetMedia(ids=["12345"]),
        reply=CreateTweetReply(in_reply_to_tweet_id="1455953449422516226"),
    )
    assert req.to_dict() == {
        "text": "Hello World",
        "media": {"media_ids": ["12345"]},
        "reply": {"in_reply_to_tweet_id": "1455953449422516226"},
    }


def test_create_tweet_request_to_dict_keeps_present_empty_parts():
    req = CreateTweetRequest(text="x", geo=CreateTweetGeo(), for_super_followers_only=True)
    assert req.to_dict() == {"text": "x", "for_super_followers_only": True, "geo": {}}


def test_create_tweet_response_from_dict():
    resp = CreateTweetResponse.from_dict({"data": {"id": "1445880548472328192", "text": "Hello"}})
    assert resp.tweet == CreateTweetData(id="1445880548472328192", text="Hello")


def test_delete_tweet_response_from_dict():
    assert DeleteTweetResponse.from_dict({"data": {"deleted": True}}).tweet.deleted is True
    assert DeleteTweetResponse.from_dict({}).tweet is None