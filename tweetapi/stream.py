"""Real-time tweet streams: options, messages and the stream reader."""

from __future__ import annotations

import json
import queue
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import IO, Any

from tweetapi.fields import Expansion
from tweetapi.media import MediaField
from tweetapi.options import _field_params
from tweetapi.place import PlaceField
from tweetapi.poll import PollField
from tweetapi.raw import TweetRaw
from tweetapi.tweet import TweetField
from tweetapi.user import UserField

TWEET_START = "data"
KEEP_ALIVE_TIMEOUT = 11.0
QUEUE_SIZE = 10
_SEPARATOR = b"\r\n"
_CHUNK = 4096
_DECODE_ERRORS = (AttributeError, TypeError, ValueError, KeyError)


class SystemMessageType(StrEnum):
    """Kinds of system messages on a stream."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class StreamErrorType(StrEnum):
    """Kinds of stream errors."""

    TWEET = "tweet"
    SYSTEM = "system"


def _stream_params(opts: Any) -> dict[str, str]:
    params = _field_params(opts)
    if opts.backfill_minutes > 0:
        params["backfill_minutes"] = str(opts.backfill_minutes)
    return params


@dataclass
class TweetSampleStreamOpts:
    """Options of the sample stream."""

    backfill_minutes: int = 0
    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _stream_params(self)


@dataclass
class TweetSearchStreamOpts:
    """Options of the search stream."""

    backfill_minutes: int = 0
    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _stream_params(self)


class StreamError(Exception):
    """An error met while decoding a stream message."""

    def __init__(
        self,
        type: StreamErrorType | str = "",
        msg: str = "",
        err: BaseException | None = None,
    ) -> None:
        super().__init__(type, msg, err)
        self.type = type
        self.msg = msg
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        text = f"{self.type}: {self.msg}"
        return text if self.err is None else f"{text} {self.err}"

    def matches(self, other: BaseException | None) -> bool:
        """True if ``other`` or an error it was raised from is a stream error of this type."""
        seen: set[int] = set()
        while other is not None and id(other) not in seen:
            seen.add(id(other))
            if isinstance(other, StreamError) and other.type == self.type:
                return True
            other = other.__cause__ or other.__context__
        return False


@dataclass
class TweetMessage:
    """A tweet received on a stream."""

    raw: TweetRaw


@dataclass
class SystemMessage:
    """A system message received on a stream."""

    message: str = ""
    sent: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SystemMessage:
        sent = data.get("sent")
        return cls(
            message=data.get("message", ""),
            sent=datetime.fromisoformat(sent) if sent else None,
        )


def _message_type(key: str) -> SystemMessageType | str:
    try:
        return SystemMessageType(key)
    except ValueError:
        return key


def stream_separator(data: bytes, at_eof: bool) -> tuple[int, bytes | None]:
    """Split stream data on CRLF: the bytes to advance and the token found, if any."""
    if at_eof and not data:
        return 0, None
    idx = data.find(_SEPARATOR)
    if idx != -1:
        return idx + len(_SEPARATOR), data[:idx]
    if at_eof:
        return len(data), data
    return 0, None


class TweetStream:
    """Reads a stream in the background and hands out tweets, system messages and errors."""

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._tweets: queue.Queue[TweetMessage] = queue.Queue(QUEUE_SIZE)
        self._system: queue.Queue[dict[SystemMessageType | str, SystemMessage]] = queue.Queue(
            QUEUE_SIZE
        )
        self._errors: queue.Queue[Exception] = queue.Queue(QUEUE_SIZE)
        self._closed = threading.Event()
        self._last_beat = time.monotonic()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def __enter__(self) -> TweetStream:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def connection(self) -> bool:
        """True while data has arrived within the keep-alive time."""
        return time.monotonic() - self._last_beat < KEEP_ALIVE_TIMEOUT

    def tweets(self) -> queue.Queue[TweetMessage]:
        """Queue of tweet messages."""
        return self._tweets

    def system_messages(self) -> queue.Queue[dict[SystemMessageType | str, SystemMessage]]:
        """Queue of system messages, each a map of message type to message."""
        return self._system

    def errors(self) -> queue.Queue[Exception]:
        """Queue of errors met while decoding messages."""
        return self._errors

    def close(self) -> None:
        """Stop reading and close the underlying stream."""
        if self._closed.is_set():
            return
        self._closed.set()
        self._close_stream()
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout=1.0)

    def _close_stream(self) -> None:
        try:
            self._stream.close()
        except Exception:
            pass

    @staticmethod
    def _offer(target: queue.Queue[Any], item: Any) -> None:
        try:
            target.put_nowait(item)
        except queue.Full:
            pass

    def _run(self) -> None:
        read = getattr(self._stream, "read1", None) or self._stream.read
        buffer = b""
        eof = False
        try:
            while not self._closed.is_set():
                if not eof:
                    try:
                        chunk = read(_CHUNK)
                    except (OSError, ValueError):
                        break
                    if isinstance(chunk, str):
                        chunk = chunk.encode()
                    if chunk:
                        buffer += chunk
                    else:
                        eof = True
                while True:
                    advance, token = stream_separator(buffer, eof)
                    if token is None:
                        break
                    buffer = buffer[advance:]
                    self._last_beat = time.monotonic()
                    self._handle(token)
                if eof:
                    self._closed.wait()
                    break
        finally:
            self._close_stream()

    def _handle(self, msg: bytes) -> None:
        if not msg:
            return
        try:
            decoded = json.loads(msg)
            if not isinstance(decoded, dict):
                raise ValueError("stream message is not a JSON object")
        except ValueError as err:
            error = ValueError(f"stream error: unmarshal error {err}")
            error.__cause__ = err
            self._offer(self._errors, error)
            return

        if TWEET_START in decoded:
            try:
                raw = TweetRaw.from_single(decoded)
            except _DECODE_ERRORS as err:
                self._offer(
                    self._errors,
                    StreamError(StreamErrorType.TWEET, "unmarshal tweet stream", err),
                )
                return
            self._offer(self._tweets, TweetMessage(raw=raw))
            return

        try:
            system = {
                _message_type(key): SystemMessage.from_dict(value)
                for key, value in decoded.items()
            }
        except _DECODE_ERRORS as err:
            self._offer(
                self._errors,
                StreamError(StreamErrorType.SYSTEM, "unmarshal system stream", err),
            )
            return
        self._offer(self._system, system)


def start_tweet_stream(stream: IO[bytes]) -> TweetStream:
    """Start reading tweets from a stream."""
    return TweetStream(stream)