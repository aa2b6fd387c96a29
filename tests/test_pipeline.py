"""Tests for stage sequencing and file utilities."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image
from pptx import Presentation


class TestRunPipeline:
    def test_stage_order(self, tmp_path):
        from html2slide.pipeline import run_pipeline

        calls = MagicMock()
        calls.resolve.return_value = "file:///deck/index.html"

        result = run_pipeline(
            "index.html",
            tmp_path / "s.pptx",
            tmp_path / "s.png",
            {"selector": ".slide", "width": 1024},
            resolve=calls.resolve,
            render=calls.render,
            package=calls.package,
        )

        assert [c[0] for c in calls.mock_calls] == ["resolve", "render", "package"]
        capture = calls.render.call_args.args[0]
        assert capture.page_url == "file:///deck/index.html"
        assert capture.selector == ".slide"
        assert capture.width == 1024
        assert result.pptx_path == tmp_path / "s.pptx"
        assert result.png_path == tmp_path / "s.png"

    def test_capture_failure_skips_packaging(self, tmp_path):
        from html2slide.errors import SelectorNotFoundError
        from html2slide.pipeline import run_pipeline

        package = MagicMock()
        render = MagicMock(side_effect=SelectorNotFoundError(".missing"))

        with pytest.raises(SelectorNotFoundError):
            run_pipeline(
                "https://example.com", tmp_path / "s.pptx", tmp_path / "s.png",
                render=render, package=package,
            )
        package.assert_not_called()

    def test_real_packaging(self, tmp_path):
        """Capture is faked by writing a PNG; packaging runs for real."""
        from html2slide.pipeline import run_pipeline

        def fake_render(request):
            Image.new("RGB", (request.width * 2, request.height * 2), "white").save(request.png_path)

        result = run_pipeline(
            "https://example.com", tmp_path / "slide.pptx", tmp_path / "slide.png",
            render=fake_render,
        )

        assert result.png_path.exists()
        assert len(Presentation(str(result.pptx_path)).slides) == 1


class TestFileUtils:
    @pytest.mark.parametrize("pptx,png", [
        ("slide.pptx", "slide.png"),
        ("out/Deck.PPTX", "out/Deck.png"),
        ("notes", "notes.png"),
        ("deck.key", "deck.key.png"),
    ])
    def test_derive_png_path(self, pptx, png):
        from html2slide.utils.file_utils import derive_png_path

        assert derive_png_path(pptx) == Path(png)

    def test_ensure_directory(self, tmp_path):
        from html2slide.utils.file_utils import ensure_directory

        target = ensure_directory(tmp_path / "a" / "b")
        assert target.is_dir()

    def test_load_yaml_missing(self, tmp_path):
        from html2slide.utils.file_utils import load_yaml

        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "nope.yaml")
