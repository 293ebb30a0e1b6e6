import logging

import pytest

from smparser.parser.base import DiagnosticSink
from smparser.parser.sm import SMParser

RADAR = "0.5,0.6,0.1,0.2,0.3,10,2,1,0,0,0"

SAMPLE_SM = """\
// Generated by an editor
#TITLE:Example Song;
#SUBTITLE:(Extended Mix);
#ARTIST:Example Artist;
#TITLETRANSLIT:;
#GENRE:Eurobeat;
#CREDIT:Charter;
#BANNER:banner.png;
#BACKGROUND:bg.png;
#MUSIC:song.ogg;
#OFFSET:-0.040;
#SAMPLESTART:1:02.5;
#SAMPLELENGTH:12.000;
#SELECTABLE:YES;
#DISPLAYBPM:120:180;
#BPMS:0.000=120.000,4.000=180.000;
#STOPS:2.000=0.500;
#MUSICBYTES:123456;

//---------------dance-single - Hard----------------
#NOTES:
     dance-single:
     Charter:
     Hard:
     9:
     0.5,0.6,0.1,0.2,0.3,10,2,1,0,0,0:
0000
1000
0100
0010
,  // measure 2
0001
0000
2000
3000
:
;
"""


def notes_tag_text(
    steps_type: str = "dance-single",
    description: str = "Charter",
    difficulty: str = "Hard",
    meter: str = "9",
    radar: str = RADAR,
    notes: str = "0000\n1000\n",
) -> str:
    return f"#NOTES:{steps_type}:{description}:{difficulty}:{meter}:{radar}:\n{notes}:\n;\n"


@pytest.fixture
def sample_sm() -> str:
    return SAMPLE_SM


@pytest.fixture
def sm_parser() -> SMParser:
    return SMParser()


@pytest.fixture
def sink() -> DiagnosticSink:
    return DiagnosticSink(logging.getLogger("smparser.tests"))
