from app.services.file_intake import (
    AUDIO_EXTENSIONS,
    Accepted,
    FileIntake,
    PickedFile,
    Rejected,
    describe_size,
    display_name,
    is_allowed,
    validate,
)

SONG = PickedFile(uri="file:///song.mp3", name="song.mp3", size=2048, declared_type="audio/mpeg")
IMAGE = PickedFile(uri="file:///image.png", name="image.png", size=100, declared_type="image/png")
FLAC_NO_MIME = PickedFile(uri="file:///take.flac", name="take.FLAC", declared_type=None)


def test_keeps_audio_and_drops_image():
    result = validate([SONG, IMAGE], {"audio/mpeg"}, {"mp3", "mp4", "m4a", "flac"})
    assert result == Accepted((SONG,))


def test_extension_only_match_is_accepted():
    result = validate([FLAC_NO_MIME], {"audio/mpeg"}, {".flac"})
    assert result == Accepted((FLAC_NO_MIME,))


def test_mime_only_match_is_accepted():
    renamed = PickedFile(uri="content://media/42", name="recording", declared_type="Audio/X-M4A")
    assert isinstance(validate([renamed]), Accepted)


def test_nothing_matches_is_rejected():
    result = validate([IMAGE, PickedFile(uri="x", name=None, declared_type=None)])

    assert isinstance(result, Rejected)
    assert result.message == "Only mp3, mp4, m4a, flac audio files can be selected."


def test_empty_input_is_rejected():
    assert isinstance(validate([]), Rejected)


def test_picker_order_is_preserved():
    other = PickedFile(uri="b", name="b.m4a")
    result = validate([other, IMAGE, SONG])
    assert result == Accepted((other, SONG))


def test_extension_must_be_a_suffix():
    sneaky = PickedFile(uri="x", name="mp3.png", declared_type="image/png")
    assert not is_allowed(sneaky)
    assert not is_allowed(PickedFile(uri="y", name="foomp3"), (), ("mp3",))


def test_default_extensions_are_dotted():
    assert all(ext.startswith(".") for ext in AUDIO_EXTENSIONS)


def test_submit_replaces_previous_batch():
    intake = FileIntake()
    second = PickedFile(uri="b", name="b.flac")

    intake.submit([SONG])
    intake.submit([second])

    assert intake.batch == (second,)


def test_rejected_submit_keeps_previous_batch():
    intake = FileIntake()
    intake.submit([SONG])

    result = intake.submit([IMAGE])

    assert isinstance(result, Rejected)
    assert intake.batch == (SONG,)


def test_clear_empties_batch():
    intake = FileIntake()
    intake.submit([SONG])
    intake.clear()
    assert intake.batch == ()


def test_review_formatting():
    assert display_name(SONG) == "song.mp3"
    assert display_name(PickedFile(uri="x")) == "Untitled"
    assert describe_size(2048) == "2.0 KB"
    assert describe_size(1536) == "1.5 KB"
    assert describe_size(None) == "Size unknown"
