"""Tests for the Facade examples."""

from design_patterns.patterns.structural.facade import conceptual, real_world


class TestFacadeConceptual:
    """Test the facade over two subsystems."""

    def test_operation_orders_subsystems(self):
        """Test the facade's combined result."""
        assert conceptual.Facade().operation() == (
            "Facade initializes subsystems:\n"
            "Subsystem1: Ready!\n"
            "Subsystem2: Get ready!\n"
            "Facade orders subsystems to perform the action:\n"
            "Subsystem1: Go!\n"
            "Subsystem2: Fire!"
        )

    def test_main_output(self, capsys):
        """Test the facade result is printed."""
        conceptual.main()

        assert capsys.readouterr().out.splitlines()[0] == "Facade initializes subsystems:"


class TestYouTubeDownloader:
    """Test the video download facade."""

    def test_download_video_runs_conversion_steps(self, capsys):
        """Test the facade drives the conversion library."""
        video = real_world.YouTubeDownloader("KEY").download_video("https://example.com/v")

        assert video.path == "video.mpg"
        assert video.operations == [
            "filters", "resize", "synchronize", "frame:10", "save:screen.jpg",
            "save:video.mp4", "save:video.wmv", "save:video.webm",
        ]
        assert capsys.readouterr().out.splitlines()[-1] == "Done!"

    def test_main_output(self, capsys):
        """Test the download narration."""
        real_world.main()

        assert capsys.readouterr().out.splitlines() == [
            "Fetching video metadata from youtube...",
            "Saving video file to a temporary file...",
            "Processing source video...",
            "Normalizing and resizing the video to smaller dimensions...",
            "Capturing preview image...",
            "Saving video in target formats...",
            "Done!",
        ]
