"""Shared fixtures for the podvtt test suite."""

import pytest


SAMPLE_VTT = (
    "WEBVTT\n"
    "\n"
    "1\n"
    "00:00:00.000 --> 00:00:02.500\n"
    ">> We've been sent\n"
    "good weather.\n"
    "\n"
    "2\n"
    "00:00:02.500 --> 00:00:04.000\n"
    ">> Praise be.\n"
)

SAMPLE_TRANSCRIPT = [
    ">> We've been sent good weather.",
    ">> Praise be.",
]


@pytest.fixture
def sample_vtt():
    return SAMPLE_VTT


@pytest.fixture
def sample_transcript():
    return list(SAMPLE_TRANSCRIPT)


@pytest.fixture
def sample_vtt_file(tmp_path):
    path = tmp_path / "episode-1.vtt"
    path.write_bytes(SAMPLE_VTT.encode("utf-8"))
    return str(path)
