from tweetapi.common import Entities, EntityMention
from tweetapi.tweet import (
    Tweet,
    TweetAttachments,
    TweetContext,
    TweetContextAnnotation,
    TweetGeo,
    TweetGeoCoordinates,
    TweetMetrics,
    TweetReferencedTweet,
)


def test_tweet_from_dict_minimal():
    tweet = Tweet.from_dict({"id": "1", "text": "hello"})
    assert tweet == Tweet(id="1", text="hello")
    assert tweet.attachments is None
    assert tweet.geo is None
    assert tweet.referenced_tweets == []


def test_tweet_from_dict_nested_objects():
    data = {
        "id": "1261326399320715264",
        "text": "Tune in to the @MongoDB stream",
        "author_id": "2244994945",
        "in_reply_to_user_id": "783214",
        "lang": "en",
        "attachments": {
            "poll_ids": ["1199786642468413448"],
            "media_keys": ["13_1263145212760805376"],
        },
        "geo": {
            "place_id": "01a9a39529b27f36",
            "coordinates": {"type": "Point", "coordinates": [-74.5, 40.5]},
        },
        "entities": {"mentions": [{"start": 15, "end": 23, "username": "MongoDB"}]},
        "referenced_tweets": [{"type": "quoted", "id": "1261091720801980419"}],
        "context_annotations": [
            {"domain": {"id": "46", "name": "Brand"}, "entity": {"id": "781", "name": "Dev"}}
        ],
        "public_metrics": {"like_count": 5, "retweet_count": 6, "reply_count": 7, "quote_count": 8},
    }
    tweet = Tweet.from_dict(data)
    assert tweet.language == "en"
    assert tweet.attachments == TweetAttachments(
        media_keys=["13_1263145212760805376"], poll_ids=["1199786642468413448"]
    )
    assert tweet.geo == TweetGeo(
        place_id="01a9a39529b27f36",
        coordinates=TweetGeoCoordinates(type="Point", coordinates=[-74.5, 40.5]),
    )
    assert tweet.entities == Entities(
        mentions=[EntityMention(start=15, end=23, username="MongoDB")]
    )
    assert tweet.referenced_tweets == [
        TweetReferencedTweet(type="quoted", id="1261091720801980419")
    ]
    assert tweet.context_annotations == [
        TweetContextAnnotation(
            domain=TweetContext(id="46", name="Brand"),
            entity=TweetContext(id="781", name="Dev"),
        )
    ]
    assert tweet.public_metrics == TweetMetrics(likes=5, retweets=6, replies=7, quotes=8)


def test_tweet_geo_without_coordinates_gets_empty_coordinates():
    geo = TweetGeo.from_dict({"place_id": "abc"})
    assert geo == TweetGeo(place_id="abc", coordinates=TweetGeoCoordinates())


def test_tweet_metrics_reads_click_counts():
    metrics = TweetMetrics.from_dict(
        {"impression_count": 3, "url_link_clicks": 4, "user_profile_clicks": 9}
    )
    assert metrics == TweetMetrics(impressions=3, url_link_clicks=4, user_profile_clicks=9)