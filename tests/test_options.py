from datetime import datetime, timedelta, timezone

from tweetapi.fields import Exclude, Expansion
from tweetapi.media import MediaField
from tweetapi.options import TweetLookupOpts, UserMentionTimelineOpts, UserTweetTimelineOpts
from tweetapi.place import PlaceField
from tweetapi.poll import PollField
from tweetapi.tweet import TweetField
from tweetapi.user import UserField


def test_lookup_empty():
    assert TweetLookupOpts().query_params() == {}


def test_lookup_fields():
    opts = TweetLookupOpts(
        expansions=[Expansion.AUTHOR_ID, Expansion.GEO_PLACE_ID],
        media_fields=[MediaField.URL],
        place_fields=[PlaceField.COUNTRY],
        poll_fields=[PollField.OPTIONS],
        tweet_fields=[TweetField.CREATED_AT, TweetField.LANGUAGE],
        user_fields=[UserField.USER_NAME],
    )
    params = opts.query_params()
    assert params["expansions"].split(",") == ["author_id", "geo.place_id"]
    assert params["media.fields"] == "url"
    assert params["place.fields"] == "country"
    assert params["poll.fields"] == "options"
    assert params["tweet.fields"].split(",") == ["created_at", "lang"]
    assert params["user.fields"] == "username"


def test_timeline_params():
    start = datetime(2021, 5, 1, 12, 30, tzinfo=timezone.utc)
    end = datetime(2021, 5, 2, 8, 0, tzinfo=timezone(timedelta(hours=2)))
    opts = UserTweetTimelineOpts(
        excludes=[Exclude.RETWEETS, Exclude.REPLIES],
        start_time=start,
        end_time=end,
        max_results=10,
        pagination_token="next",
        since_id="100",
        until_id="200",
    )
    params = opts.query_params()
    assert params["exclude"].split(",") == ["retweets", "replies"]
    assert params["start_time"] == "2021-05-01T12:30:00Z"
    assert datetime.fromisoformat(params["end_time"]) == end
    assert params["max_results"] == "10"
    assert params["pagination_token"] == "next"
    assert params["since_id"] == "100"
    assert params["until_id"] == "200"


def test_timeline_zero_values_left_out():
    assert UserTweetTimelineOpts(max_results=0).query_params() == {}


def test_mention_timeline_params():
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    opts = UserMentionTimelineOpts(
        tweet_fields=[TweetField.AUTHOR_ID], start_time=start, max_results=5
    )
    params = opts.query_params()
    assert params["tweet.fields"] == "author_id"
    assert datetime.fromisoformat(params["start_time"]) == start
    assert params["max_results"] == "5"
    assert "exclude" not in params
    assert "end_time" not in params


def test_naive_time_taken_as_utc():
    naive = datetime(2022, 3, 4, 5, 6, 7)
    params = UserMentionTimelineOpts(start_time=naive).query_params()
    assert params["start_time"].endswith("Z")
    assert datetime.fromisoformat(params["start_time"]) == naive.replace(tzinfo=timezone.utc)