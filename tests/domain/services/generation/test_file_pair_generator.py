"""Tests for FilePairGenerator."""

from pathlib import Path

import pytest

from genpair.domain.errors import ExitCode, FileCreateError, TargetExistsError
from genpair.domain.models import GenerationRequest, Style
from genpair.domain.services.generation import (
    FilePairGenerator,
    render_header,
    render_source,
)


class TestFilePairGenerator:
    """Test suite for FilePairGenerator functionality."""

    @pytest.fixture
    def generator(self, tmp_path: Path) -> FilePairGenerator:
        """Generator writing into a temporary directory."""
        return FilePairGenerator(tmp_path)

    @pytest.mark.unit
    def test_target_paths(self, generator: FilePairGenerator, tmp_path: Path) -> None:
        request = GenerationRequest("ns", "Widget", Style.CXX)
        assert generator.target_paths(request) == (
            tmp_path / "Widget.hxx",
            tmp_path / "Widget.cxx",
        )

    @pytest.mark.unit
    def test_default_output_dir_is_cwd(self) -> None:
        assert FilePairGenerator().output_dir == Path(".")

    @pytest.mark.integration
    def test_generate_writes_both_files(
        self, generator: FilePairGenerator, foo_bar_request: GenerationRequest, tmp_path: Path
    ) -> None:
        header_path, source_path = generator.generate(foo_bar_request)

        assert header_path == tmp_path / "Bar.hpp"
        assert source_path == tmp_path / "Bar.cpp"
        assert header_path.read_text(encoding="utf-8") == render_header(foo_bar_request)
        assert source_path.read_text(encoding="utf-8") == render_source(foo_bar_request)

    @pytest.mark.integration
    def test_files_use_unix_line_endings(
        self, generator: FilePairGenerator, foo_bar_request: GenerationRequest
    ) -> None:
        header_path, source_path = generator.generate(foo_bar_request)

        assert b"\r\n" not in header_path.read_bytes()
        assert b"\r\n" not in source_path.read_bytes()

    @pytest.mark.integration
    def test_second_run_fails_with_existing_files(
        self, generator: FilePairGenerator, foo_bar_request: GenerationRequest
    ) -> None:
        """Files from the first run block the second one."""
        generator.generate(foo_bar_request)

        with pytest.raises(TargetExistsError) as exc_info:
            generator.generate(foo_bar_request)

        assert exc_info.value.exit_code == ExitCode.FAILURE_FILE_EXISTS
        assert len(exc_info.value.paths) == 2

    @pytest.mark.integration
    def test_existing_source_blocks_generation(
        self, generator: FilePairGenerator, foo_bar_request: GenerationRequest, tmp_path: Path
    ) -> None:
        existing = tmp_path / "Bar.cpp"
        existing.write_text("keep me", encoding="utf-8")

        with pytest.raises(TargetExistsError) as exc_info:
            generator.generate(foo_bar_request)

        assert exc_info.value.paths == [existing]
        assert existing.read_text(encoding="utf-8") == "keep me"
        assert not (tmp_path / "Bar.hpp").exists()

    @pytest.mark.integration
    def test_existing_file_of_other_style_does_not_block(
        self, generator: FilePairGenerator, tmp_path: Path
    ) -> None:
        (tmp_path / "Bar.hpp").write_text("", encoding="utf-8")

        generator.generate(GenerationRequest("foo", "Bar", Style.CC))

        assert (tmp_path / "Bar.h").exists()
        assert (tmp_path / "Bar.cc").exists()

    @pytest.mark.integration
    def test_missing_output_dir_raises_create_error(
        self, foo_bar_request: GenerationRequest, tmp_path: Path
    ) -> None:
        generator = FilePairGenerator(tmp_path / "missing")

        with pytest.raises(FileCreateError) as exc_info:
            generator.generate(foo_bar_request)

        assert exc_info.value.exit_code == ExitCode.FAILURE_CREATE_FILE
        assert exc_info.value.path == tmp_path / "missing" / "Bar.hpp"
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.integration
    def test_header_kept_when_source_write_fails(
        self,
        generator: FilePairGenerator,
        foo_bar_request: GenerationRequest,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A failing source write leaves the already written header in place."""
        real_open = open

        def failing_open(path, *args, **kwargs):
            if Path(path).name == "Bar.cpp":
                raise PermissionError(13, "Permission denied")
            return real_open(path, *args, **kwargs)

        monkeypatch.setattr("builtins.open", failing_open)

        with pytest.raises(FileCreateError) as exc_info:
            generator.generate(foo_bar_request)

        assert exc_info.value.path == tmp_path / "Bar.cpp"
        assert exc_info.value.reason == "Permission denied"
        assert (tmp_path / "Bar.hpp").exists()
        assert not (tmp_path / "Bar.cpp").exists()
