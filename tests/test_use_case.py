from pathlib import Path

import pytest

from conftest import RecordingOutputDirectory, RecordingRunner, StaticConfirmation
from exceptions.exceptions import EmptySetError, UnsupportedLanguageError, UserCancelled
from subtitle_muxing.application.dispatcher import JobDispatcher
from subtitle_muxing.application.use_case import AddSubtitlesRequest, AddSubtitlesUseCase
from subtitle_muxing.domain.model import BatchStatus
from subtitle_muxing.infrastructure.filesystem import FilesystemFileSetSource, FilesystemOutputDirectory


class RecordingFileSource:
    def __init__(self):
        self.scans = []

    def scan(self, **kwargs):
        self.scans.append(kwargs)
        return FilesystemFileSetSource().scan(**kwargs)


def _use_case(runner, confirmation, output_directory=None, file_source=None):
    dispatcher = JobDispatcher(
        runner=runner,
        output_directory=output_directory or FilesystemOutputDirectory(),
        max_workers=2,
    )
    return AddSubtitlesUseCase(
        file_source=file_source or FilesystemFileSetSource(),
        confirmation=confirmation,
        dispatcher=dispatcher,
    )


def test_end_to_end_pairs_and_commands(media_dir):
    runner = RecordingRunner()
    confirmation = StaticConfirmation(True)
    use_case = _use_case(runner, confirmation)

    result = use_case.run(AddSubtitlesRequest(media_dir, "mkv", "srt", "jpn"))

    assert [(p.primary.name, p.secondary.name) for p in confirmation.seen] == [
        ("a.mkv", "a.srt"), ("b.mkv", "b.srt"),
    ]
    assert result.status is BatchStatus.ALL_SUCCEEDED
    assert len(result.outcomes) == 2
    outputs = sorted(cmd[2] for cmd in runner.commands)
    assert outputs == [str(media_dir / "output" / "a.mkv"), str(media_dir / "output" / "b.mkv")]
    assert all("0:Japanese" in cmd for cmd in runner.commands)
    assert (media_dir / "output").is_dir()


def test_unsupported_language_fails_before_scan(media_dir):
    source = RecordingFileSource()
    runner = RecordingRunner()
    use_case = _use_case(runner, StaticConfirmation(True), file_source=source)

    with pytest.raises(UnsupportedLanguageError):
        use_case.run(AddSubtitlesRequest(media_dir, "mkv", "srt", "xyz"))
    assert source.scans == []
    assert runner.commands == []


def test_rejection_mutates_nothing(media_dir):
    runner = RecordingRunner()
    outdir = RecordingOutputDirectory()
    use_case = _use_case(runner, StaticConfirmation(False), output_directory=outdir)

    with pytest.raises(UserCancelled):
        use_case.run(AddSubtitlesRequest(media_dir, "mkv", "srt", "jpn"))
    assert outdir.ensured == []
    assert runner.commands == []
    assert not (media_dir / "output").exists()


def test_partial_failure_reports_failed_pairs(media_dir):
    runner = RecordingRunner(returncodes={"b.mkv": 2})
    use_case = _use_case(runner, StaticConfirmation(True))

    result = use_case.run(AddSubtitlesRequest(media_dir, "mkv", "srt", "jpn"))

    assert result.status is BatchStatus.PARTIAL_FAILURE
    assert [(f.pair.primary.name, f.returncode) for f in result.failures] == [("b.mkv", 2)]


def test_no_subtitles_found(tmp_path):
    (tmp_path / "a.mkv").write_text("x")
    confirmation = StaticConfirmation(True)
    use_case = _use_case(RecordingRunner(), confirmation)

    with pytest.raises(EmptySetError):
        use_case.run(AddSubtitlesRequest(tmp_path, "mkv", "srt", "jpn"))
    assert confirmation.seen == []


def test_custom_output_dir_name(media_dir):
    use_case = _use_case(RecordingRunner(), StaticConfirmation(True))
    request = AddSubtitlesRequest(media_dir, "mkv", "srt", "eng", output_dir_name="muxed")

    use_case.run(request)

    assert request.output_directory == Path(media_dir) / "muxed"
    assert request.output_directory.is_dir()
