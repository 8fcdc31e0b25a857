# tweetapi

Data models, request options and stream handling for the Twitter v2 API.

`tweetapi` gives you dataclasses for tweets, users, media, polls, places and
lists. It builds endpoint URLs and query parameters for v2 requests, decodes
JSON responses into objects, and reads the streaming feed into tweets and
system messages. It has no runtime dependencies.

## What it does not do

The package sends no HTTP requests. There is no client object and no
authentication. You make the calls with the HTTP library of your choice, use
`tweetapi` to build the URL, query parameters and JSON body, and hand the
decoded response (or, for streams, the binary response body) back to it.

## Installation

```
pip install tweetapi
```

## Modules

| Module | Contents |
| --- | --- |
| `tweetapi.endpoints` | `Endpoint`, the relative paths of the v2 endpoints |
| `tweetapi.fields` | `Expansion`, `Exclude`, `join_values` |
| `tweetapi.tweet`, `user`, `media`, `place`, `poll`, `common` | object models and their `*Field` enums |
| `tweetapi.raw` | `TweetRaw`, `TweetRawIncludes`, tweet dictionaries, timeline responses |
| `tweetapi.options` | `TweetLookupOpts`, `UserTweetTimelineOpts`, `UserMentionTimelineOpts` |
| `tweetapi.search` | recent search options and response, search stream rules |
| `tweetapi.counts` | recent tweet counts options and response |
| `tweetapi.lists` | list objects, lookup options, list create/update/delete |
| `tweetapi.likes` | like/unlike responses, liked tweets lookup |
| `tweetapi.manage` | `CreateTweetRequest` and the create/delete tweet responses |
| `tweetapi.stream` | stream options, `TweetStream`, `StreamError` |
| `tweetapi.errors` | `ParameterError`, `HTTPError`, `ErrorResponse`, `ErrorObj` |

## Building endpoint URLs

```python
from tweetapi.endpoints import Endpoint

Endpoint.TWEET_LOOKUP.url("https://api.example.com")
# 'https://api.example.com/2/tweets'
Endpoint.USER_FOLLOWING.url_id("https://api.example.com", "12345")
# 'https://api.example.com/2/users/12345/following'
```

## Request options

Each options class has a `query_params()` method that returns a dictionary of
query parameters. Empty or unset fields are left out; list values are joined
with commas, and times are written in RFC 3339 form (naive times are taken as
UTC).

```python
from tweetapi.fields import Expansion
from tweetapi.options import TweetLookupOpts
from tweetapi.tweet import TweetField

opts = TweetLookupOpts(
    expansions=[Expansion.AUTHOR_ID],
    tweet_fields=[TweetField.CREATED_AT, TweetField.LANGUAGE],
)
opts.query_params()
# {'expansions': 'author_id', 'tweet.fields': 'created_at,lang'}
```

## Decoding responses and building dictionaries

`TweetRaw.from_dict` decodes a response whose `data` is a list of tweets;
`TweetRaw.from_single` decodes one whose `data` is a single tweet. A tweet
dictionary links each tweet to the objects in the response's `includes`: its
author, the user it replies to, mentioned users, polls, media, its place and
referenced tweets (each with a dictionary of its own).

```python
import json
from tweetapi.raw import TweetRaw

response_json = json.loads(body)
raw = TweetRaw.from_dict(response_json)
for tweet_id, dictionary in raw.tweet_dictionaries().items():
    author = dictionary.author.username if dictionary.author else None
    print(tweet_id, author, dictionary.tweet.text)
```

`create_tweet_dictionary(tweet, includes)` builds a single dictionary.

## Creating tweets

`CreateTweetRequest.validate()` raises `ParameterError` if the request cannot
be sent: text is needed when there are no media ids, tagged users need media
ids, poll options need a duration, and excluded reply users need a tweet to
reply to. `to_dict()` gives the JSON body without empty values.

```python
from tweetapi.manage import CreateTweetRequest, CreateTweetPoll

request = CreateTweetRequest(
    text="Which do you prefer?",
    poll=CreateTweetPoll(options=["tea", "coffee"], duration_minutes=60),
)
request.validate()
body = request.to_dict()
```

## Search stream rules

```python
from tweetapi.search import TweetSearchStreamRule, validate_rules

rules = [TweetSearchStreamRule(value="cat has:images", tag="cats")]
validate_rules(rules)
payload = {"add": [rule.to_dict() for rule in rules]}
```

`validate_rule_ids` checks a list of rule ids the same way.

## Streaming

`start_tweet_stream` (or `TweetStream(stream)`) reads a binary, file-like
stream of CRLF-separated JSON messages in a background thread. Tweets, system
messages and decoding errors are put on three separate queues of ten items
each; when a queue is full, new items are dropped.

```python
from tweetapi.stream import start_tweet_stream

with start_tweet_stream(response_body) as stream:
    message = stream.tweets().get(timeout=5)
    print(message.raw.tweets[0].text)
```

- `stream.system_messages()` yields maps of `SystemMessageType` to
  `SystemMessage`.
- `stream.errors()` yields `StreamError` and JSON decoding errors.
- `stream.connection()` is true while data has arrived within the last
  11 seconds.
- `stream.close()` stops the reader and closes the underlying stream.

`TweetSampleStreamOpts` and `TweetSearchStreamOpts` build the stream query
parameters, including `backfill_minutes`.

## Errors

- `ParameterError` (a `ValueError`) is raised when an input parameter is
  invalid.
- `ErrorResponse` is an exception built with `ErrorResponse.from_dict` from the
  JSON error body of a failed call.
- `HTTPError` is an exception for a failed call without a JSON body.
- `StreamError` reports a stream message that could not be decoded;
  `matches(other)` tells whether `other`, or an error it was raised from, is a
  stream error of the same type.
- `ErrorObj` holds a partial error reported inside a successful response.