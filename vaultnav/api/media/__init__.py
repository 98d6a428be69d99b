"""Media API module: file search, image viewing and audio playback."""

from .AudioPlayer import AudioPlayer
from .FileSearch import FileSearch
from .ImageViewer import ImageViewer
from .MediaConfig import MediaConfig

__all__ = ["AudioPlayer", "FileSearch", "ImageViewer", "MediaConfig"]
