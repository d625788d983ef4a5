from transcript_kit.parsers.speakers import VoiceTag, extract_voice_tag


def test_extracts_speaker_and_text() -> None:
    assert extract_voice_tag("<v Sarah Chen>Good morning everyone.") == VoiceTag(
        speaker="Sarah Chen", text="Good morning everyone."
    )


def test_trims_speaker_and_text() -> None:
    tag = extract_voice_tag("<v   Mike Rodriguez  >   Thanks for joining.  ")
    assert tag == VoiceTag(speaker="Mike Rodriguez", text="Thanks for joining.")


def test_strips_closing_voice_tag() -> None:
    tag = extract_voice_tag("<v Ann>Hello there</v>")
    assert tag is not None
    assert tag.text == "Hello there"


def test_line_without_tag_does_not_match() -> None:
    assert extract_voice_tag("Just some subtitle text.") is None


def test_tag_must_be_at_line_start() -> None:
    assert extract_voice_tag("Intro <v Ann>Hello") is None


def test_tag_without_utterance_does_not_match() -> None:
    assert extract_voice_tag("<v Ann>") is None


def test_tag_without_name_does_not_match() -> None:
    assert extract_voice_tag("<v >Hello") is None


def test_other_tags_do_not_match() -> None:
    assert extract_voice_tag("<b>Bold</b> text") is None


def test_nested_brackets_in_name_do_not_match() -> None:
    assert extract_voice_tag("<v Ann<b>>Hello") is None
