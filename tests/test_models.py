import dataclasses
from datetime import timedelta

import pytest

from podvtt.models import Caption, Payload, Timestamp, TranscriptConfig


def test_payload_requires_a_line():
    with pytest.raises(ValueError):
        Payload([])


def test_payload_behaves_like_tuple():
    payload = Payload(["a", "b", "c"])
    assert payload == ("a", "b", "c")
    assert payload.head == "a"
    assert payload.tail == ("b", "c")
    assert len(payload) == 3
    assert repr(payload) == "Payload(('a', 'b', 'c'))"


def test_payload_from_generator():
    assert Payload(line for line in ["x"]) == ("x",)


def test_timestamp_components_and_format():
    timestamp = Timestamp.from_components(1, 2, 3, 4)
    assert timestamp.total_milliseconds == 3723004
    assert (timestamp.hours, timestamp.minutes, timestamp.seconds, timestamp.milliseconds) == (1, 2, 3, 4)
    assert str(timestamp) == "01:02:03.004"
    assert timestamp.to_timedelta() == timedelta(hours=1, minutes=2, seconds=3, milliseconds=4)
    assert timestamp.total_seconds() == pytest.approx(3723.004)


def test_timestamp_ordering():
    assert Timestamp(1) < Timestamp(2)
    assert Timestamp(5) == Timestamp(5)
    assert max(Timestamp(3), Timestamp(9), Timestamp(1)) == Timestamp(9)


def test_timestamp_rejects_negative():
    with pytest.raises(ValueError):
        Timestamp(-1)


def test_caption_requires_start_before_end():
    with pytest.raises(ValueError):
        Caption(identifier=1, start=Timestamp(10), end=Timestamp(10), payload=Payload(["x"]))
    with pytest.raises(ValueError):
        Caption(identifier=1, start=Timestamp(11), end=Timestamp(10), payload=Payload(["x"]))


def test_caption_rejects_negative_identifier():
    with pytest.raises(ValueError):
        Caption(identifier=-1, start=Timestamp(0), end=Timestamp(1), payload=Payload(["x"]))


def test_caption_rejects_empty_payload():
    with pytest.raises(ValueError):
        Caption(identifier=1, start=Timestamp(0), end=Timestamp(1), payload=[])


def test_caption_coerces_payload_and_is_immutable():
    caption = Caption(identifier=1, start=Timestamp(0), end=Timestamp(1500), payload=["a", "b"])
    assert isinstance(caption.payload, Payload)
    assert caption.text == "a\nb"
    assert caption.duration == timedelta(milliseconds=1500)
    with pytest.raises(dataclasses.FrozenInstanceError):
        caption.identifier = 2
    assert hash(caption) == hash(Caption(1, Timestamp(0), Timestamp(1500), Payload(["a", "b"])))


def test_transcript_config_defaults():
    config = TranscriptConfig(source="episode.vtt")
    assert config.output_file is None
    assert config.timeout == 30
    assert config.verify_ssl is True
    assert config.encoding == "utf-8"
