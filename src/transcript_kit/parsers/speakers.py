import re
from typing import NamedTuple

# <v Speaker Name>utterance, anchored at line start
_VOICE_TAG_RE = re.compile(r"<v\s+(?P<speaker>[^<>]+)>(?P<text>.+)")
_VOICE_CLOSE = "</v>"


class VoiceTag(NamedTuple):
    speaker: str
    text: str


def extract_voice_tag(line: str) -> VoiceTag | None:
    """Split a ``<v Name>text`` cue line into speaker and utterance.

    Returns None when the line does not start with a well-formed voice tag.
    """
    match = _VOICE_TAG_RE.match(line)
    if match is None:
        return None

    speaker = match.group("speaker").strip()
    if not speaker:
        return None

    text = match.group("text").strip()
    if text.endswith(_VOICE_CLOSE):
        text = text[: -len(_VOICE_CLOSE)].rstrip()
    return VoiceTag(speaker=speaker, text=text)
