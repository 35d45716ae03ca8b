from pathlib import Path

import pytest

from nfo_kit.parsers.models import ParsedDocument
from nfo_kit.parsers.nfo_parser import NfoParser

SAMPLE_NFO = """\
War of the Posers: Bad Guys Series, Book 4
Generated by inAudible

General Information
===================
 Title:                  War of the Posers: Bad Guys Series, Book 4
 Author:                 Eric Ugland
 Read By:                Luke Daniels
 Copyright:              2020 Eric Ugland
 Audiobook Copyright:    2020 Podium Publishing
 Genre:                  Audiobook
 Publisher:              Podium Audio
 Duration:               12 hours 4 minutes 51 seconds
 Chapters:               47
 Unabridged:             Yes

Media Information
=================
 Source Format:          Audible AAX
 Source Sample Rate:     44100 Hz
 Source Channels:        2
 Source Bitrate:         125 kbits

 Lossless Encode:        Yes
 Encoded Codec:          AAC / M4B
 Encoded Sample Rate:    44100 Hz
 Encoded Channels:       2
 Encoded Bitrate:        125 kbits

 Ripper:                 inAudible 1.97

Book Description
================
Sometimes the good guys need a bad guy.

Book 4 of the Bad Guys series.
"""

MALFORMED_NFO = """\
General Information
-------------------
 Title:      First Title
 Title:      Second Title
 Duration:   xx hours 30 minutes 15 seconds
 Chapters:   unknown
 Unabridged: Perhaps
 Read Aloud: Not A Narrator

Media Information
-----------------
 Source Channels:     stereo
 Encoded Sample Rate: 44100 Hz
 Encoded Sample Rate: 22050 Hz
 Lossless:            No
 Chapter Adjust:      none needed
 Mystery Label:       ignored
"""


def _create_latin1_nfo(path: Path) -> None:
    """Mixes a line that is not valid UTF-8 into an otherwise valid file."""
    path.write_bytes(
        b"General Information\n"
        b"===================\n"
        b"Title: Les Mis\xe9rables\n"
        b"Author: Victor Hugo\n"
    )


@pytest.fixture(scope="module")
def nfo_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test NFO files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("nfos")

    (dir_path / "sample.nfo").write_text(SAMPLE_NFO, encoding="utf-8")
    (dir_path / "malformed.nfo").write_text(MALFORMED_NFO, encoding="utf-8")
    (dir_path / "windows.nfo").write_bytes(
        SAMPLE_NFO.replace("\n", "\r\n").encode("utf-8")
    )
    (dir_path / "empty.nfo").write_text("", encoding="utf-8")
    _create_latin1_nfo(dir_path / "latin1.nfo")

    return dir_path


@pytest.fixture(scope="module")
def parsed_sample(nfo_dir: Path) -> ParsedDocument:
    """Parse sample NFO once, reuse across tests."""
    doc = NfoParser().parse_file(nfo_dir / "sample.nfo")
    assert doc is not None
    return doc


@pytest.fixture(scope="module")
def parsed_malformed(nfo_dir: Path) -> ParsedDocument:
    """Parse malformed NFO once, reuse across tests."""
    doc = NfoParser().parse_file(nfo_dir / "malformed.nfo")
    assert doc is not None
    return doc
